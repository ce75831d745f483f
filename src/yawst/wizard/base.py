"""Base wizard class for all scraping scenarios."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from yawst.config import ScraperConfig
from yawst.errors import ExtractionError, OutputError
from yawst.scraping.fetch import fetch_page
from yawst.wizard.engine import WizardEngine
from yawst.wizard.steps import Fetcher, build_step
from yawst.wizard.types import ScenarioConfig
from yawst.wizard.views import View


class BaseWizard(ABC):
    """Base class for scenario wizards.

    Provides common functionality:
    - Building step handlers from the scenario's step kinds
    - Running them through the wizard engine
    - Reporting extraction and write errors
    - Summary generation

    Subclasses define ``scenario`` and the terminal action in ``execute``.
    """

    scenario: ScenarioConfig

    def __init__(
        self,
        view: View,
        config: ScraperConfig,
        fetcher: Fetcher = fetch_page,
    ) -> None:
        """Initialize the wizard.

        Args:
            view: View used for every prompt and message.
            config: Run configuration.
            fetcher: Function fetching page content for the URL step.
        """
        self.view = view
        self.config = config
        self.fetcher = fetcher
        self.answers: list[Any] = []

    def run(self) -> bool:
        """Collect all answers, then run the terminal action.

        Returns:
            True if the output file was written, False if the user backed
            out of the first step, extraction failed or the write failed.
        """
        steps = [
            build_step(kind, self.view, self.config, self.fetcher)
            for kind in self.scenario.steps
        ]
        answers = WizardEngine(steps).run()
        if answers is None:
            return False

        self.answers = answers

        try:
            self.execute(answers)
        except ExtractionError as e:
            self.view.show_error("Extraction failed", str(e))
            return False
        except OutputError as e:
            self.view.show_error("Write failed", str(e))
            return False

        return True

    @abstractmethod
    def execute(self, answers: list[Any]) -> None:
        """Run the terminal action with the answers in step order.

        Raises:
            ExtractionError: If a selector cannot be evaluated.
            OutputError: If the output file cannot be written.
        """

    def get_summary(self) -> str:
        """Get summary of the collected answers.

        Returns:
            Human-readable summary of answers, one per step.
        """
        if not self.answers:
            return "[dim]No answers collected yet[/dim]"

        lines = [f"[bold]{self.scenario.name}:[/bold]"]
        for kind, value in zip(self.scenario.steps, self.answers):
            lines.append(f"  {kind.value}: {value}")
        return "\n".join(lines)
