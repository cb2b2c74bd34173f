"""
sheet2records

Fetch every sheet of a Google Spreadsheet as lists of records keyed by the
header row.

Usage:
    from sheet2records import Sheet2Records

    records = Sheet2Records(access_token).get(spreadsheet_id)
"""
from .client import Sheet2Records
from .core import RecordConverter, SheetFetcher, SheetsAccess, convert, parse_value
from .errors import ConversionError, FetchError, GetError, Sheet2RecordsError

__all__ = [
    'Sheet2Records',
    'RecordConverter',
    'SheetFetcher',
    'SheetsAccess',
    'convert',
    'parse_value',
    'Sheet2RecordsError',
    'FetchError',
    'ConversionError',
    'GetError',
]
