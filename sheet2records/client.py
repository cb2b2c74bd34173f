"""
Sheet2Records

High-level entry point: fetch a spreadsheet and convert it to records.
"""
import logging
from typing import Optional

from .config_manager import EnvConfig
from .core.converter import RecordConverter, RecordSet
from .core.fetcher import SheetFetcher, SheetsAccess
from .errors import GetError
from .services.sheets.client import SheetsClient

logger = logging.getLogger(__name__)


class Sheet2Records:
    """
    Fetch a Google Spreadsheet as records.

    Orchestrates:
    - Sheet title lookup
    - Parallel per-sheet value retrieval
    - Header-driven record conversion
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        sheets: Optional[SheetsAccess] = None,
        max_workers: Optional[int] = None,
        value_render_option: Optional[str] = None
    ):
        """
        Initialize Sheet2Records.

        Args:
            access_token: OAuth2 bearer token, used for every request
            sheets: Optional SheetsAccess; defaults to a SheetsClient built from access_token
            max_workers: Optional thread pool size for per-sheet fetches
            value_render_option: Optional valueRenderOption for the default SheetsClient
        """
        if sheets is None:
            sheets = SheetsClient(access_token, value_render_option=value_render_option)
        self.fetcher = SheetFetcher(sheets, max_workers=max_workers)
        self.converter = RecordConverter()

    @classmethod
    def from_env(cls) -> "Sheet2Records":
        """Build an instance from SHEETS_* environment variables."""
        return cls(
            access_token=EnvConfig.get_access_token(),
            max_workers=EnvConfig.get_max_workers(),
            value_render_option=EnvConfig.get_value_render_option()
        )

    def get(self, spreadsheet_id: str) -> RecordSet:
        """
        Fetch every sheet of a spreadsheet and convert it to records.

        Args:
            spreadsheet_id: Google Sheets spreadsheet ID

        Returns:
            Mapping of sheet name to list of records

        Raises:
            GetError: If fetching or converting fails; no partial result is returned
        """
        logger.info(f"Getting records for spreadsheet {spreadsheet_id}")
        try:
            sheet_set = self.fetcher.fetch(spreadsheet_id)
            return self.converter.convert(sheet_set)
        except Exception as e:
            raise GetError(f"Failed to get JSON data: {e}") from e
