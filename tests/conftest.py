from __future__ import annotations

import sys
import threading
from pathlib import Path

import pytest

# Ensure project root is on sys.path for absolute imports
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))


class FakeSheetsAccess:
    """In-memory SheetsAccess; values may be grids, None, or exceptions to raise."""

    def __init__(self, sheets: dict, list_error: Exception | None = None):
        self.sheets = sheets
        self.list_error = list_error
        self.requested = []
        self._lock = threading.Lock()

    def list_sheet_names(self, spreadsheet_id: str):
        if self.list_error is not None:
            raise self.list_error
        return list(self.sheets)

    def get_sheet_values(self, spreadsheet_id: str, sheet_name: str):
        with self._lock:
            self.requested.append((spreadsheet_id, sheet_name))
        value = self.sheets[sheet_name]
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture
def fake_sheets():
    return FakeSheetsAccess
