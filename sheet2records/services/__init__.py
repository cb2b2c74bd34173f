"""
External Service Integrations

Usage:
    from sheet2records.services.sheets import SheetsClient
"""
from .sheets import SheetsClient

__all__ = [
    'SheetsClient',
]
