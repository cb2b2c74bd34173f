"""
Google Sheets Client

Read-only client for the Google Sheets API v4, authenticated with a static
OAuth2 access token.
"""
import logging
import threading
from typing import List, Optional

from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build

from ...config_manager import DEFAULT_VALUE_RENDER_OPTION, parse_value_render_option

logger = logging.getLogger(__name__)


def quote_sheet_name(sheet_name: str) -> str:
    """
    Quote a sheet title as an A1 range covering the whole sheet.

    Single quotes inside the title are doubled, so "Q1 '24" becomes
    "'Q1 ''24'".
    """
    return "'" + sheet_name.replace("'", "''") + "'"


class SheetsClient:
    """
    Google Sheets client backed by googleapiclient.

    Features:
    - Bearer token authentication (no refresh)
    - Lazily built API service, one per thread
    - Sheet title listing and whole-sheet value reads
    """

    def __init__(
        self,
        access_token: str,
        value_render_option: Optional[str] = None
    ):
        """
        Initialize Google Sheets client.

        Args:
            access_token: OAuth2 access token with a Sheets read scope
            value_render_option: FORMATTED_VALUE (default), UNFORMATTED_VALUE or FORMULA
        """
        if not access_token:
            raise ValueError("An access token is required")
        self.credentials = Credentials(token=access_token)
        self.value_render_option = parse_value_render_option(
            value_render_option or DEFAULT_VALUE_RENDER_OPTION
        )
        # httplib2 transports are not thread-safe
        self._local = threading.local()

    @property
    def sheets_service(self):
        """Lazy-load Google Sheets API service for the current thread."""
        service = getattr(self._local, "service", None)
        if service is None:
            service = build('sheets', 'v4', credentials=self.credentials, cache_discovery=False)
            self._local.service = service
        return service

    def list_sheet_names(self, spreadsheet_id: str) -> List[str]:
        """
        List sheet titles in tab order.

        Args:
            spreadsheet_id: Google Sheets spreadsheet ID

        Returns:
            List of sheet titles
        """
        logger.info(f"Opening spreadsheet: {spreadsheet_id}")
        metadata = self.sheets_service.spreadsheets().get(
            spreadsheetId=spreadsheet_id,
            fields='sheets.properties.title'
        ).execute()

        names = []
        for sheet in metadata.get('sheets', []):
            title = sheet.get('properties', {}).get('title')
            if title is None:
                logger.warning(f"Skipping sheet without a title in {spreadsheet_id}")
                continue
            names.append(title)
        return names

    def get_sheet_values(self, spreadsheet_id: str, sheet_name: str) -> List[list]:
        """
        Read every cell of a sheet.

        Args:
            spreadsheet_id: Google Sheets spreadsheet ID
            sheet_name: Sheet title

        Returns:
            2D list of values; empty when the sheet has no data
        """
        logger.debug(f"Reading sheet '{sheet_name}' of {spreadsheet_id}")
        response = self.sheets_service.spreadsheets().values().get(
            spreadsheetId=spreadsheet_id,
            range=quote_sheet_name(sheet_name),
            valueRenderOption=self.value_render_option
        ).execute()
        return response.get('values') or []
