"""Prompt strings, messages and input patterns used by the wizard.

All user-facing text lives here so views and step handlers stay free of
string literals.
"""

import re

# =============================================================================
# Titles
# =============================================================================

TITLE = "Yet Another Web Scraping Tool"
MAIN_MENU = "Main Menu"
CHOOSE_OPTION = "Choose an option"
SCRAPE_TEXT = "Scrape Text"
SCRAPE_TABLE = "Scrape Table"
EXIT = "Exit"

# =============================================================================
# Prompts
# =============================================================================

ENTER_URL = "Enter URL"
ENTER_SELECTOR_QUERY = "Enter Selector Query"
ENTER_TABLE_SELECTOR_QUERY = "Enter Table Selector Query"
ENTER_HEADER_SELECTOR_QUERY = "Enter Header Selector Query"
ENTER_CELL_SELECTOR_QUERY = "Enter Cell Selector Query"
SELECT_OUTPUT_FILE = "Select Output File"

# =============================================================================
# Error titles and messages (title, message)
# =============================================================================

ENTER_URL_ERROR = ("Invalid URL", "Please enter a valid URL")
FETCH_URL_ERROR = ("Unable to fetch URL", "Please enter URL to existing resource")
FETCH_CANCELLED_ERROR = (
    "Fetch cancelled",
    "Edit the URL, or press Ctrl-C again to go back",
)
ENTER_SELECTOR_QUERY_ERROR = (
    "Invalid Selector Query",
    "Please enter a valid Selector Query",
)
SELECT_OUTPUT_FILE_ERROR = (
    "Invalid Output File",
    "Please enter a valid Output File with write permissions",
)

# =============================================================================
# Input patterns (matched against the whole input)
# =============================================================================

URL_PATTERN = re.compile(
    r"https?://[-A-Za-z0-9+&@#/%?=~_|!:,.;]*[-A-Za-z0-9+&@#/%=~_|]"
)
SELECTOR_PATTERN = re.compile(r"[A-Za-z0-9\s.#:-]+")
