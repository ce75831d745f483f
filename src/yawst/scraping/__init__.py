"""Page fetching, selector extraction and table output."""

from yawst.scraping.extract import count_matches, extract_matches
from yawst.scraping.fetch import fetch_page
from yawst.scraping.table import (
    format_lines,
    format_table,
    reshape_cells,
    write_output,
)

__all__ = [
    "count_matches",
    "extract_matches",
    "fetch_page",
    "format_lines",
    "format_table",
    "reshape_cells",
    "write_output",
]
