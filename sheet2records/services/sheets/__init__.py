"""
Google Sheets Service Module

Provides the Google Sheets API implementation of SheetsAccess.
"""
from .client import SheetsClient, quote_sheet_name

__all__ = ['SheetsClient', 'quote_sheet_name']
