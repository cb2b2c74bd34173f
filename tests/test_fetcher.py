from __future__ import annotations

import threading
import time

import pytest

from sheet2records.core.fetcher import SheetFetcher
from sheet2records.errors import FetchError


def test_fetch_returns_grid_per_sheet(fake_sheets) -> None:
    sheets = fake_sheets({"Sheet1": [["A"], ["1"]], "Sheet2": [["B"]]})

    result = SheetFetcher(sheets).fetch("doc-1")

    assert result == {"Sheet1": [["A"], ["1"]], "Sheet2": [["B"]]}
    assert sorted(sheets.requested) == [("doc-1", "Sheet1"), ("doc-1", "Sheet2")]


def test_fetch_normalises_missing_values_to_empty_grid(fake_sheets) -> None:
    sheets = fake_sheets({"Blank": None, "AlsoBlank": []})

    assert SheetFetcher(sheets).fetch("doc") == {"Blank": [], "AlsoBlank": []}


def test_fetch_spreadsheet_without_sheets(fake_sheets) -> None:
    assert SheetFetcher(fake_sheets({})).fetch("doc") == {}


def test_fetch_wraps_metadata_failure(fake_sheets) -> None:
    sheets = fake_sheets({}, list_error=PermissionError("The caller does not have permission"))

    with pytest.raises(FetchError) as excinfo:
        SheetFetcher(sheets).fetch("doc")

    assert str(excinfo.value) == "Failed to get spreadsheet data: The caller does not have permission"
    assert isinstance(excinfo.value.__cause__, PermissionError)


def test_fetch_fails_when_any_sheet_fails(fake_sheets) -> None:
    sheets = fake_sheets({"Sheet1": [["A"], ["1"]], "Sheet2": RuntimeError("boom")})

    with pytest.raises(FetchError, match="boom"):
        SheetFetcher(sheets).fetch("doc")


def test_fetch_requests_run_concurrently() -> None:
    barrier = threading.Barrier(3, timeout=5)

    class BarrierSheets:
        def list_sheet_names(self, spreadsheet_id):
            return ["a", "b", "c"]

        def get_sheet_values(self, spreadsheet_id, sheet_name):
            # Deadlocks (and times out) unless all three requests are in flight together
            barrier.wait()
            return [[sheet_name]]

    result = SheetFetcher(BarrierSheets()).fetch("doc")

    assert result == {"a": [["a"]], "b": [["b"]], "c": [["c"]]}


def test_fetch_honours_max_workers() -> None:
    active = []
    peak = []
    lock = threading.Lock()

    class CountingSheets:
        def list_sheet_names(self, spreadsheet_id):
            return [f"s{i}" for i in range(6)]

        def get_sheet_values(self, spreadsheet_id, sheet_name):
            with lock:
                active.append(sheet_name)
                peak.append(len(active))
            time.sleep(0.01)
            with lock:
                active.remove(sheet_name)
            return []

    SheetFetcher(CountingSheets(), max_workers=1).fetch("doc")

    assert max(peak) == 1


@pytest.mark.parametrize("max_workers", [0, -1, "many"])
def test_fetcher_rejects_invalid_max_workers(fake_sheets, max_workers) -> None:
    with pytest.raises(ValueError):
        SheetFetcher(fake_sheets({"S": []}), max_workers=max_workers)


def test_fetcher_accepts_numeric_string_max_workers(fake_sheets) -> None:
    fetcher = SheetFetcher(fake_sheets({"S": [["A"]]}), max_workers="2")

    assert fetcher.max_workers == 2
    assert fetcher.fetch("doc") == {"S": [["A"]]}
