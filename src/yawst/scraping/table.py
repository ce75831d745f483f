"""Delimited table output.

Cells are joined with the configured separator and rows end with a newline.
Separators or newlines inside cell text are written as-is; output is not
escaped or quoted.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from yawst.errors import OutputError


def reshape_cells(cells: Sequence[str], column_count: int) -> list[list[str]]:
    """Wrap a flat cell sequence into rows of column_count cells.

    A trailing row with fewer cells is kept as it is.

    Raises:
        ValueError: If column_count is not positive.
    """
    if column_count < 1:
        raise ValueError(f"column_count must be positive, got {column_count}")

    return [
        list(cells[start : start + column_count])
        for start in range(0, len(cells), column_count)
    ]


def render_rows(rows: Sequence[Sequence[str]], separator: str) -> str:
    """Render rows as newline-terminated, separator-joined lines."""
    return "".join(separator.join(row) + "\n" for row in rows)


def format_table(
    headers: Sequence[str],
    cells: Sequence[str],
    column_count: int,
    separator: str = ";",
    omit_headers: bool = False,
) -> str:
    """Build delimited table text from flat header and cell sequences.

    Args:
        headers: Header cell texts.
        cells: Body cell texts in reading order.
        column_count: Number of cells per row.
        separator: Text placed between cells.
        omit_headers: Leave the header row out.

    Returns:
        Table text, e.g. ``"A;B;C\\n1;2;3\\n"``.
    """
    rows: list[list[str]] = []
    if not omit_headers:
        rows.extend(reshape_cells(headers, column_count))
    rows.extend(reshape_cells(cells, column_count))
    return render_rows(rows, separator)


def format_lines(lines: Sequence[str]) -> str:
    """Render extracted matches one per line."""
    return "".join(line + "\n" for line in lines)


def write_output(path: str | Path, text: str) -> int:
    """Write text to the output file, replacing its contents.

    Returns:
        Number of lines written.

    Raises:
        OutputError: If the file cannot be written.
    """
    try:
        Path(path).expanduser().write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputError(f"Could not write {path}: {e}", path) from e
    return text.count("\n")
