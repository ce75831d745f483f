"""Type definitions for wizard system."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, Union


class StepKind(Enum):
    """Kinds of input a wizard step can collect."""

    URL = "url"
    SELECTOR = "selector"
    TABLE_ROOT_SELECTOR = "table_root_selector"
    HEADER_SELECTOR = "header_selector"
    ROW_SELECTOR = "row_selector"
    OUTPUT_FILE = "output_file"


@dataclass(frozen=True)
class Advance:
    """Step finished with a valid value; move to the next step."""

    value: Any


@dataclass(frozen=True)
class Retreat:
    """User asked to go back to the previous step."""


StepResult = Union[Advance, Retreat]


@dataclass(frozen=True)
class UrlAnswer:
    """Answer of the URL step: the address and the page fetched from it."""

    url: str
    content: str

    def __str__(self) -> str:
        return self.url


@dataclass(frozen=True)
class ScenarioConfig:
    """Named, ordered list of steps run before a scenario's terminal action."""

    name: str
    steps: tuple[StepKind, ...]


class WizardStep(Protocol):
    """Protocol for wizard step implementations."""

    def handle(self, prior: Any = None) -> StepResult:
        """Collect one valid value from the user.

        Args:
            prior: Answer captured the last time this step advanced, used to
                pre-fill the prompt. None on first visit.

        Returns:
            Advance with the value, or Retreat if the user cancelled.
        """
        ...
