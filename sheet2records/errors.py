"""
Error types

Every failure raised by sheet2records derives from Sheet2RecordsError.
"""
from typing import Optional


class Sheet2RecordsError(Exception):
    """Base class for all sheet2records errors."""


class FetchError(Sheet2RecordsError):
    """Spreadsheet metadata or sheet values could not be retrieved."""


class ConversionError(Sheet2RecordsError):
    """A sheet's header row is not a set of unique, non-empty strings."""

    def __init__(self, message: str, sheet: Optional[str] = None):
        super().__init__(message)
        self.sheet = sheet


class GetError(Sheet2RecordsError):
    """Raised by Sheet2Records.get when fetching or converting fails."""
