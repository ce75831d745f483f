"""Command-line interface for yawst."""

from __future__ import annotations

import click
from rich.console import Console

from yawst import __author__, __version__
from yawst.cli.formatting import format_error
from yawst.cli.help_formatter import RichCommand
from yawst.config import load_config
from yawst.constants import TITLE
from yawst.errors import ConfigError
from yawst.wizard.menu import run_menu
from yawst.wizard.views import QuestionaryView

console = Console()

VERSION_MESSAGE = f"%(prog)s %(version)s - {TITLE}\nAuthor: {__author__}"


@click.command(
    "yawst", cls=RichCommand, context_settings={"help_option_names": ["-h", "--help"]}
)
@click.version_option(
    __version__,
    "-v",
    "--version",
    prog_name="yawst",
    message=VERSION_MESSAGE,
)
def cli() -> None:
    """Fetch a web page and save data picked out with CSS selectors.

    \b
    Capabilities:
      1. Scrape Text   Write the text of every element matched by a
                       selector to a file, one per line.
      2. Scrape Table  Build a delimited table from a table selector,
                       a header cell selector and a row cell selector.

    Each scrape is a short series of prompts. Invalid input is reported
    and asked for again; press Ctrl-C in any prompt to go back one step,
    or in the first prompt to return to the menu.
    """
    try:
        config = load_config()
    except ConfigError as e:
        console.print(format_error("Configuration error", context=str(e)))
        raise click.ClickException(str(e))

    console.print(f"\n[bold cyan]{TITLE}[/bold cyan]")
    console.print("[dim]Press Ctrl-C in a prompt to go back[/dim]\n")

    run_menu(QuestionaryView(console), config)


if __name__ == "__main__":
    cli()
