"""Exceptions raised by yawst."""

from __future__ import annotations


class YawstError(Exception):
    """Base class for yawst errors."""


class ConfigError(YawstError):
    """Configuration file could not be created, read or validated."""

    def __init__(self, message: str, path: object | None = None) -> None:
        super().__init__(message)
        self.path = path


class ExtractionError(YawstError):
    """Selector query could not be evaluated against the fetched page."""

    def __init__(self, message: str, selector: str | None = None) -> None:
        super().__init__(message)
        self.selector = selector


class OutputError(YawstError):
    """Output file could not be written."""

    def __init__(self, message: str, path: object | None = None) -> None:
        super().__init__(message)
        self.path = path
