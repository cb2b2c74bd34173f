"""
Core conversion layer

Provides sheet fetching and header-driven record conversion.
"""
from .converter import RecordConverter, convert, parse_value, validate_headers
from .fetcher import SheetFetcher, SheetsAccess

__all__ = [
    'RecordConverter',
    'SheetFetcher',
    'SheetsAccess',
    'convert',
    'parse_value',
    'validate_headers',
]
