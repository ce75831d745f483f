"""CLI utilities for yawst.

Rich-based formatting for the help screen and for wizard messages.
"""

from yawst.cli.formatting import (
    create_config_table,
    format_error,
    format_success,
    format_warning,
)
from yawst.cli.help_formatter import RichCommand, RichHelpFormatter

__all__ = [
    "RichCommand",
    "RichHelpFormatter",
    "create_config_table",
    "format_error",
    "format_success",
    "format_warning",
]
