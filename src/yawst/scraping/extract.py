"""CSS selector extraction over fetched HTML."""

from __future__ import annotations

from cssselect import SelectorError
from lxml import etree
from lxml import html as lxml_html
from lxml.html import HtmlElement

from yawst.errors import ExtractionError


def _parse(content: str) -> HtmlElement:
    # Parse from bytes with a fixed encoding so a charset declared in the page
    # cannot conflict with the already-decoded text.
    parser = lxml_html.HTMLParser(encoding="utf-8")
    return lxml_html.document_fromstring(content.encode("utf-8"), parser=parser)


def _select(content: str, selector: str) -> list[HtmlElement]:
    """Run a CSS selector against the page.

    Raises:
        ExtractionError: If the page has no elements or the selector engine
            rejects the query.
    """
    try:
        tree = _parse(content)
    except etree.ParserError as e:
        raise ExtractionError(f"Page could not be parsed: {e}", selector) from e

    try:
        return list(tree.cssselect(selector))
    except SelectorError as e:
        raise ExtractionError(
            f"Selector '{selector}' could not be evaluated: {e}", selector
        ) from e


def element_text(element: HtmlElement) -> str:
    """Get the text content of an element with surrounding whitespace removed."""
    return element.text_content().strip()


def element_markup(element: HtmlElement) -> str:
    """Get the full markup of an element, without its tail text."""
    return lxml_html.tostring(element, encoding="unicode", with_tail=False).strip()


def extract_matches(content: str, selector: str, whole_elements: bool = False) -> list[str]:
    """Extract every element matched by selector.

    Args:
        content: Page HTML.
        selector: CSS selector query.
        whole_elements: Return element markup instead of its text.

    Returns:
        One string per matched element, in document order.

    Raises:
        ExtractionError: If the selector engine rejects the query.
    """
    render = element_markup if whole_elements else element_text
    return [render(element) for element in _select(content, selector)]


def count_matches(content: str, selector: str) -> int:
    """Count the elements matched by selector.

    Raises:
        ExtractionError: If the selector engine rejects the query.
    """
    return len(_select(content, selector))
