"""Rich formatting utilities for CLI output.

Reusable Rich components for the help screen and for the error, warning
and success messages shown while the wizard runs.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.panel import Panel
from rich.table import Table


def create_config_table(options: Sequence[tuple[str, str, str]]) -> Table:
    """Create table describing configuration options.

    Args:
        options: Sequence of (key, default, effect) tuples

    Returns:
        Table with formatted options
    """
    table = Table(
        title="Configuration",
        border_style="blue",
        width=78,
        show_header=True,
    )

    table.add_column("Option", style="cyan", width=20)
    table.add_column("Default", width=14)
    table.add_column("Effect", width=30)

    for key, default, effect in options:
        table.add_row(key, default or "[dim]-[/dim]", effect)

    return table


def _message_panel(title: str, color: str, message: str, extra: str | None) -> Panel:
    content = f"[bold {color}]{message}[/bold {color}]"
    if extra:
        content += f"\n\n[dim]{extra}[/dim]"

    return Panel(
        content,
        title=f"[bold {color}]{title}[/bold {color}]",
        border_style=color,
        width=78,
        expand=False,
    )


def format_error(message: str, context: str | None = None) -> Panel:
    """Create formatted error panel.

    Args:
        message: Error message
        context: Optional context hint for resolution

    Returns:
        Panel with error formatting
    """
    return _message_panel("Error", "red", message, context)


def format_warning(message: str, context: str | None = None) -> Panel:
    """Create formatted warning panel."""
    return _message_panel("Warning", "yellow", message, context)


def format_success(message: str, details: str | None = None) -> Panel:
    """Create formatted success panel.

    Args:
        message: Success message
        details: Optional details about the result
    """
    return _message_panel("Success", "green", f"✓ {message}", details)
