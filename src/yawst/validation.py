"""Input validators for wizard steps.

Each validator is a predicate over the raw string typed by the user. URL and
selector checks are pure; the file check creates a missing output file, which
is the only way to learn whether it can be written.
"""

from __future__ import annotations

import os
from pathlib import Path

from yawst.constants import SELECTOR_PATTERN, URL_PATTERN


def is_valid_url(text: str) -> bool:
    """Check that text is an http(s) URL.

    The whole string must match: scheme, ``://``, then URL characters, and
    it may not end on a separator such as ``?``, ``.`` or ``,``.

    Examples:
        >>> is_valid_url("https://example.com/a?b=c")
        True
        >>> is_valid_url("http://")
        False
    """
    return URL_PATTERN.fullmatch(text) is not None


def is_valid_selector(text: str) -> bool:
    """Check that text only uses letters, digits, whitespace and ``. # : -``.

    Attribute selectors, combinators such as ``>`` and quotes are rejected.
    """
    return SELECTOR_PATTERN.fullmatch(text) is not None


def is_writable_file(text: str) -> bool:
    """Check that text names a regular file that can be written.

    A missing file is created first. Parent directories are not created.
    """
    if not text.strip():
        return False

    path = Path(text).expanduser()

    if not path.exists():
        try:
            path.touch()
        except OSError:
            return False

    return path.is_file() and os.access(path, os.W_OK)
