"""Main menu loop."""

from __future__ import annotations

from collections.abc import Mapping

from yawst.config import ScraperConfig
from yawst.constants import CHOOSE_OPTION, EXIT, MAIN_MENU, SCRAPE_TABLE, SCRAPE_TEXT
from yawst.scraping.fetch import fetch_page
from yawst.wizard.base import BaseWizard
from yawst.wizard.scenarios import SCENARIO_WIZARDS
from yawst.wizard.steps import Fetcher
from yawst.wizard.views import View

EXIT_CHOICE = "3"

MENU_CHOICES: list[tuple[str, str]] = [
    ("1", SCRAPE_TEXT),
    ("2", SCRAPE_TABLE),
    (EXIT_CHOICE, EXIT),
]


def run_menu(
    view: View,
    config: ScraperConfig,
    fetcher: Fetcher = fetch_page,
    wizards: Mapping[str, type[BaseWizard]] = SCENARIO_WIZARDS,
) -> int:
    """Show the main menu and run the selected scenarios.

    With AUTOCLOSE set the loop ends after the first scenario, whether it
    wrote its output or the user backed out of it.

    Args:
        view: View used for the menu and the scenarios.
        config: Run configuration.
        fetcher: Function fetching page content.
        wizards: Scenario wizard class for each menu value.

    Returns:
        Number of scenarios started.
    """
    runs = 0

    while True:
        choice = view.choose(f"{MAIN_MENU}: {CHOOSE_OPTION}", MENU_CHOICES)
        wizard_class = wizards.get(choice) if choice is not None else None
        if wizard_class is None:
            return runs

        wizard_class(view, config, fetcher).run()
        runs += 1

        if config.autoclose:
            return runs
