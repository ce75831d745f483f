"""Custom Click help formatter with Rich integration.

The help screen lists the configuration file options in a Rich table
after the usual Click usage and description.
"""

from __future__ import annotations

from io import StringIO
from typing import Any

import click
from rich.console import Console

from yawst.cli.formatting import create_config_table
from yawst.config import CONFIG_OPTIONS, default_config_values, get_config_path


class RichHelpFormatter(click.HelpFormatter):
    """Help formatter that appends Rich components to Click's output."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize formatter with Rich support."""
        super().__init__(*args, **kwargs)
        self.config_options: list[tuple[str, str, str]] = []
        self.config_path: str = ""

    def add_config_table(self, options: list[tuple[str, str, str]], path: str) -> None:
        """Add configuration options table to help output.

        Args:
            options: List of (key, default, effect) tuples
            path: Location of the configuration file
        """
        self.config_options = options
        self.config_path = path

    def getvalue(self) -> str:
        """Get formatted help text with Rich components.

        Returns:
            Formatted help text string
        """
        base_output = super().getvalue()

        output_buffer = StringIO()
        console = Console(file=output_buffer, width=80, force_terminal=True)

        console.print(base_output, soft_wrap=True, markup=False, highlight=False)

        if self.config_options:
            console.print(create_config_table(self.config_options))
            console.print(f"[dim]Options are read from {self.config_path}[/dim]")

        return output_buffer.getvalue()


class RichCommand(click.Command):
    """Click command with Rich help and exit status 1 on usage errors."""

    def get_help(self, ctx: click.Context) -> str:
        """Get help text for command.

        Args:
            ctx: Click context

        Returns:
            Formatted help text
        """
        formatter = RichHelpFormatter(width=80)
        self.format_help(ctx, formatter)
        return formatter.getvalue()

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Format help text including the configuration options."""
        super().format_help(ctx, formatter)

        if isinstance(formatter, RichHelpFormatter):
            defaults = default_config_values()
            options = [
                (key, defaults[key], effect) for key, effect in CONFIG_OPTIONS
            ]
            formatter.add_config_table(options, str(get_config_path()))

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        """Parse arguments, reporting unknown flags with exit status 1."""
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise
