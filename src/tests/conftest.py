"""Shared fixtures for yawst tests."""

from __future__ import annotations

from collections.abc import Sequence
from contextlib import nullcontext
from pathlib import Path
from typing import Any, Callable

import pytest

from yawst.config import ScraperConfig


class ScriptedView:
    """View that answers prompts from a script and records what it showed.

    ``responses`` answer text and path prompts in order; None stands for a
    cancelled prompt. ``menu`` answers menu prompts; once it runs out the
    menu is cancelled.
    """

    def __init__(
        self,
        responses: Sequence[str | None] = (),
        menu: Sequence[str | None] = (),
    ) -> None:
        self.responses = list(responses)
        self.menu_responses = list(menu)
        self.prompts: list[tuple[str, str, str]] = []
        self.errors: list[tuple[str, str]] = []
        self.warnings: list[tuple[str, str]] = []
        self.successes: list[tuple[str, str]] = []
        self.menus = 0

    def _next(self, kind: str, title: str, default: str) -> str | None:
        self.prompts.append((kind, title, default))
        if not self.responses:
            raise AssertionError(f"Unscripted prompt: {title}")
        return self.responses.pop(0)

    def prompt_text(self, title: str, default: str = "") -> str | None:
        return self._next("text", title, default)

    def prompt_path(self, title: str, default: str = "") -> str | None:
        return self._next("path", title, default)

    def choose(self, title: str, choices: Sequence[tuple[str, str]]) -> str | None:
        self.menus += 1
        return self.menu_responses.pop(0) if self.menu_responses else None

    def show_error(self, title: str, message: str) -> None:
        self.errors.append((title, message))

    def show_warning(self, title: str, message: str) -> None:
        self.warnings.append((title, message))

    def show_success(self, title: str, message: str) -> None:
        self.successes.append((title, message))

    def status(self, message: str) -> Any:
        return nullcontext()

    @property
    def defaults(self) -> list[str]:
        """Pre-filled value of every prompt shown so far."""
        return [default for _, _, default in self.prompts]


class FakeFetcher:
    """Fetcher returning canned pages and recording requested URLs."""

    def __init__(self, pages: dict[str, str] | None = None) -> None:
        self.pages = pages or {}
        self.calls: list[str] = []

    def __call__(self, url: str) -> str:
        self.calls.append(url)
        return self.pages.get(url, "")


@pytest.fixture
def make_view() -> Callable[..., ScriptedView]:
    """Factory for scripted views."""
    return ScriptedView


@pytest.fixture
def make_fetcher() -> Callable[..., FakeFetcher]:
    """Factory for fake fetchers."""
    return FakeFetcher


@pytest.fixture
def config(tmp_path: Path) -> ScraperConfig:
    """Default configuration with output prompts starting in tmp_path."""
    return ScraperConfig(file_input_default=str(tmp_path) + "/")


@pytest.fixture
def config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point YAWST_CONFIG at a not yet existing file in tmp_path."""
    path = tmp_path / "yawstrc"
    monkeypatch.setenv("YAWST_CONFIG", str(path))
    return path


TEXT_PAGE = """\
<html>
  <head><title>Example</title></head>
  <body>
    <h1>First heading</h1>
    <p class="intro">Some <b>bold</b> text</p>
    <h1>  Second heading </h1>
  </body>
</html>
"""

TABLE_PAGE = """\
<html>
  <body>
    <table id="data">
      <tr><th>A</th><th>B</th><th>C</th></tr>
      <tr><td>1</td><td>2</td><td>3</td></tr>
      <tr><td>4</td><td>5</td><td>6</td></tr>
    </table>
    <table id="other">
      <tr><th>X</th></tr>
      <tr><td>9</td></tr>
    </table>
  </body>
</html>
"""


@pytest.fixture
def text_page() -> str:
    return TEXT_PAGE


@pytest.fixture
def table_page() -> str:
    return TABLE_PAGE
