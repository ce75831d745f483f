"""Scrape Text and Scrape Table scenarios."""

from __future__ import annotations

from typing import Any

from yawst.constants import SCRAPE_TABLE, SCRAPE_TEXT
from yawst.errors import ExtractionError
from yawst.scraping.extract import count_matches, extract_matches
from yawst.scraping.table import format_lines, format_table, write_output
from yawst.wizard.base import BaseWizard
from yawst.wizard.types import ScenarioConfig, StepKind, UrlAnswer

SCRAPE_TEXT_SCENARIO = ScenarioConfig(
    name=SCRAPE_TEXT,
    steps=(StepKind.URL, StepKind.SELECTOR, StepKind.OUTPUT_FILE),
)

SCRAPE_TABLE_SCENARIO = ScenarioConfig(
    name=SCRAPE_TABLE,
    steps=(
        StepKind.URL,
        StepKind.TABLE_ROOT_SELECTOR,
        StepKind.HEADER_SELECTOR,
        StepKind.ROW_SELECTOR,
        StepKind.OUTPUT_FILE,
    ),
)


class ScrapeTextWizard(BaseWizard):
    """Write every element matched by one selector, one per line."""

    scenario = SCRAPE_TEXT_SCENARIO

    def execute(self, answers: list[Any]) -> None:
        page: UrlAnswer
        page, selector, output_file = answers

        matches = extract_matches(
            page.content, selector, whole_elements=self.config.whole_elements
        )
        line_count = write_output(output_file, format_lines(matches))

        if not matches:
            self.view.show_warning(
                "No elements matched", f"'{selector}' matched nothing on {page.url}"
            )
        self.view.show_success(
            f"{self.scenario.name} finished", f"Wrote {line_count} lines to {output_file}"
        )


class ScrapeTableWizard(BaseWizard):
    """Write a delimited table built from header and row cell selectors.

    Both selectors are scoped to the table root selector. The number of
    header cells sets the number of columns.
    """

    scenario = SCRAPE_TABLE_SCENARIO

    def execute(self, answers: list[Any]) -> None:
        page: UrlAnswer
        page, root, header, row, output_file = answers

        header_query = f"{root} {header}"
        row_query = f"{root} {row}"

        headers = extract_matches(page.content, header_query)
        column_count = count_matches(page.content, header_query)
        cells = extract_matches(page.content, row_query)

        if column_count == 0:
            raise ExtractionError(
                f"Header selector '{header_query}' matched no elements, "
                "so the number of columns is unknown",
                header_query,
            )

        table = format_table(
            headers,
            cells,
            column_count,
            separator=self.config.table_separator,
            omit_headers=self.config.omit_table_headers,
        )
        line_count = write_output(output_file, table)

        if len(cells) % column_count:
            self.view.show_warning(
                "Incomplete last row",
                f"{len(cells)} cells do not divide into {column_count} columns",
            )
        self.view.show_success(
            f"{self.scenario.name} finished", f"Wrote {line_count} lines to {output_file}"
        )


SCENARIO_WIZARDS: dict[str, type[BaseWizard]] = {
    "1": ScrapeTextWizard,
    "2": ScrapeTableWizard,
}
