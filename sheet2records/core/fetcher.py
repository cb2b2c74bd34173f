"""
Sheet Fetcher

Retrieves every sheet of a spreadsheet as a raw grid, one request per sheet
running in parallel.
"""
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Optional, Protocol

from ..config_manager import parse_max_workers
from ..errors import FetchError
from .converter import Grid, SheetSet

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 32


class SheetsAccess(Protocol):
    """Read access to a spreadsheet service."""

    def list_sheet_names(self, spreadsheet_id: str) -> List[str]:
        """Return the sheet titles of a spreadsheet, in tab order."""
        ...

    def get_sheet_values(self, spreadsheet_id: str, sheet_name: str) -> Optional[Grid]:
        """Return the cell grid of one sheet; empty or None when it has no data."""
        ...


class SheetFetcher:
    """
    Fetches all sheets of a spreadsheet.

    Sheet values are requested concurrently. The first failure aborts the
    whole fetch: queued requests are cancelled and requests already in
    flight are abandoned.
    """

    def __init__(self, sheets: SheetsAccess, max_workers: Optional[int] = None):
        """
        Initialize fetcher.

        Args:
            sheets: Spreadsheet access collaborator
            max_workers: Thread pool size (default: one thread per sheet, up to 32)
        """
        self.sheets = sheets
        if max_workers is not None:
            max_workers = parse_max_workers(max_workers)
        self.max_workers = max_workers

    def fetch(self, spreadsheet_id: str) -> SheetSet:
        """
        Fetch every sheet of a spreadsheet.

        Args:
            spreadsheet_id: Google Sheets spreadsheet ID

        Returns:
            Mapping of sheet name to grid

        Raises:
            FetchError: If the metadata or any sheet's values cannot be retrieved
        """
        try:
            sheet_names = self.sheets.list_sheet_names(spreadsheet_id)
        except Exception as e:
            logger.error(f"Failed to list sheets of {spreadsheet_id}: {e}")
            raise FetchError(f"Failed to get spreadsheet data: {e}") from e

        if not sheet_names:
            logger.info(f"Spreadsheet {spreadsheet_id} has no sheets")
            return {}

        workers = self.max_workers or min(DEFAULT_MAX_WORKERS, len(sheet_names))
        logger.info(f"Fetching {len(sheet_names)} sheets from {spreadsheet_id} with {workers} workers")

        grids: SheetSet = {}
        executor = ThreadPoolExecutor(max_workers=workers)
        try:
            futures = {
                executor.submit(self.sheets.get_sheet_values, spreadsheet_id, name): name
                for name in sheet_names
            }
            for future in as_completed(futures):
                name = futures[future]
                try:
                    values = future.result()
                except Exception as e:
                    logger.error(f"Failed to fetch sheet '{name}' of {spreadsheet_id}: {e}")
                    raise FetchError(f"Failed to get spreadsheet data: {e}") from e
                grids[name] = values or []
                logger.debug(f"Fetched sheet '{name}': {len(grids[name])} rows")
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        return grids
