"""Terminal views used by the wizard.

Every prompt returns the entered string, or None when the user cancels
it with Ctrl-C. The wizard treats None as a request to go back.
"""

from __future__ import annotations

from collections.abc import Sequence
from contextlib import AbstractContextManager
from typing import Any, Protocol, cast

import questionary
from rich.console import Console

from yawst.cli.formatting import format_error, format_success, format_warning

console = Console()


class View(Protocol):
    """Rendering boundary between the wizard and the terminal."""

    def prompt_text(self, title: str, default: str = "") -> str | None: ...

    def prompt_path(self, title: str, default: str = "") -> str | None: ...

    def choose(self, title: str, choices: Sequence[tuple[str, str]]) -> str | None: ...

    def show_error(self, title: str, message: str) -> None: ...

    def show_warning(self, title: str, message: str) -> None: ...

    def show_success(self, title: str, message: str) -> None: ...

    def status(self, message: str) -> AbstractContextManager[Any]: ...


class QuestionaryView:
    """View built on questionary prompts and rich panels."""

    def __init__(self, console: Console = console) -> None:
        self.console = console

    def prompt_text(self, title: str, default: str = "") -> str | None:
        result = questionary.text(f"{title}:", default=default).ask()
        return cast("str | None", result)

    def prompt_path(self, title: str, default: str = "") -> str | None:
        result = questionary.path(f"{title}:", default=default).ask()
        return cast("str | None", result)

    def choose(self, title: str, choices: Sequence[tuple[str, str]]) -> str | None:
        """Show a menu.

        Args:
            title: Question shown above the menu.
            choices: (value, label) pairs.

        Returns:
            Value of the selected choice, or None if cancelled.
        """
        result = questionary.select(
            title,
            choices=[questionary.Choice(title=label, value=value) for value, label in choices],
        ).ask()
        return cast("str | None", result)

    def show_error(self, title: str, message: str) -> None:
        self.console.print(format_error(title, context=message))

    def show_warning(self, title: str, message: str) -> None:
        self.console.print(format_warning(title, context=message))

    def show_success(self, title: str, message: str) -> None:
        self.console.print(format_success(title, details=message))

    def status(self, message: str) -> AbstractContextManager[Any]:
        """Show a spinner while a blocking call runs."""
        return self.console.status(message)
