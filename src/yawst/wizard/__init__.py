"""Interactive wizard system for yawst.

Scenarios are ordered step lists run by a shared engine that supports going
back one step at a time.
"""

from yawst.wizard.base import BaseWizard
from yawst.wizard.engine import WizardEngine
from yawst.wizard.menu import run_menu
from yawst.wizard.scenarios import ScrapeTableWizard, ScrapeTextWizard
from yawst.wizard.types import Advance, Retreat, StepKind, UrlAnswer
from yawst.wizard.views import QuestionaryView

__all__ = [
    "Advance",
    "BaseWizard",
    "QuestionaryView",
    "Retreat",
    "ScrapeTableWizard",
    "ScrapeTextWizard",
    "StepKind",
    "UrlAnswer",
    "WizardEngine",
    "run_menu",
]
