"""Step handlers: one prompt with validation and re-prompt on error."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from yawst.config import ScraperConfig
from yawst.constants import (
    ENTER_CELL_SELECTOR_QUERY,
    ENTER_HEADER_SELECTOR_QUERY,
    ENTER_SELECTOR_QUERY,
    ENTER_SELECTOR_QUERY_ERROR,
    ENTER_TABLE_SELECTOR_QUERY,
    ENTER_URL,
    ENTER_URL_ERROR,
    FETCH_CANCELLED_ERROR,
    FETCH_URL_ERROR,
    SELECT_OUTPUT_FILE,
    SELECT_OUTPUT_FILE_ERROR,
)
from yawst.scraping.fetch import fetch_page
from yawst.validation import is_valid_selector, is_valid_url, is_writable_file
from yawst.wizard.types import Advance, Retreat, StepKind, StepResult, UrlAnswer
from yawst.wizard.views import View

# (title, message) shown when a value is rejected
StepError = tuple[str, str]

Fetcher = Callable[[str], str]


class PromptStep(ABC):
    """Base class for steps that prompt until the input is valid.

    The user leaves the loop either with a valid value or by cancelling
    the prompt. There is no attempt limit.
    """

    def __init__(self, view: View, title: str) -> None:
        self.view = view
        self.title = title

    def handle(self, prior: Any = None) -> StepResult:
        default = self.default_for(prior)

        while True:
            value = self.prompt(default)
            if value is None:
                return Retreat()

            answer, error = self.evaluate(value)
            if error is None:
                return Advance(answer)

            self.view.show_error(*error)
            default = value

    def default_for(self, prior: Any) -> str:
        """Get the pre-filled text for a previously captured answer."""
        return "" if prior is None else str(prior)

    def prompt(self, default: str) -> str | None:
        return self.view.prompt_text(self.title, default)

    @abstractmethod
    def evaluate(self, value: str) -> tuple[Any, StepError | None]:
        """Check an entered value.

        Returns:
            (answer, None) when valid, or (None, (title, message)) to reject.
        """


class UrlStep(PromptStep):
    """Collect a URL and fetch it.

    The page must be reachable for the step to advance, and the fetched
    content is returned with the URL so it is not downloaded twice.
    """

    def __init__(self, view: View, fetcher: Fetcher = fetch_page) -> None:
        super().__init__(view, ENTER_URL)
        self.fetcher = fetcher

    def default_for(self, prior: Any) -> str:
        if isinstance(prior, UrlAnswer):
            return prior.url
        return super().default_for(prior)

    def evaluate(self, value: str) -> tuple[Any, StepError | None]:
        if not is_valid_url(value):
            return None, ENTER_URL_ERROR

        # Ctrl-C during the fetch returns to the URL prompt
        try:
            with self.view.status(f"Fetching {value}"):
                content = self.fetcher(value)
        except KeyboardInterrupt:
            return None, FETCH_CANCELLED_ERROR

        if not content:
            return None, FETCH_URL_ERROR

        return UrlAnswer(url=value, content=content), None


class SelectorStep(PromptStep):
    """Collect a CSS selector query."""

    def evaluate(self, value: str) -> tuple[Any, StepError | None]:
        if not is_valid_selector(value):
            return None, ENTER_SELECTOR_QUERY_ERROR
        return value, None


class OutputFileStep(PromptStep):
    """Collect a writable output file, creating it if needed."""

    def __init__(self, view: View, default_dir: str) -> None:
        super().__init__(view, SELECT_OUTPUT_FILE)
        self.default_dir = default_dir

    def default_for(self, prior: Any) -> str:
        return str(prior) if prior else self.default_dir

    def prompt(self, default: str) -> str | None:
        return self.view.prompt_path(self.title, default)

    def evaluate(self, value: str) -> tuple[Any, StepError | None]:
        if not is_writable_file(value):
            return None, SELECT_OUTPUT_FILE_ERROR
        return value, None


SELECTOR_TITLES: dict[StepKind, str] = {
    StepKind.SELECTOR: ENTER_SELECTOR_QUERY,
    StepKind.TABLE_ROOT_SELECTOR: ENTER_TABLE_SELECTOR_QUERY,
    StepKind.HEADER_SELECTOR: ENTER_HEADER_SELECTOR_QUERY,
    StepKind.ROW_SELECTOR: ENTER_CELL_SELECTOR_QUERY,
}


def build_step(
    kind: StepKind,
    view: View,
    config: ScraperConfig,
    fetcher: Fetcher = fetch_page,
) -> PromptStep:
    """Create the handler for a step kind.

    Args:
        kind: Which input to collect.
        view: View the step prompts through.
        config: Run configuration (output file default directory).
        fetcher: Function fetching page content for the URL step.

    Returns:
        Step handler ready to be run by the wizard engine.
    """
    if kind is StepKind.URL:
        return UrlStep(view, fetcher)
    if kind is StepKind.OUTPUT_FILE:
        return OutputFileStep(view, config.file_input_default)
    return SelectorStep(view, SELECTOR_TITLES[kind])
