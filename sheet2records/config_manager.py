"""
Configuration for sheet2records

Reads settings from environment variables (and a local .env file, if any).
"""
import os
import logging
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()

VALUE_RENDER_OPTIONS = ("FORMATTED_VALUE", "UNFORMATTED_VALUE", "FORMULA")
DEFAULT_VALUE_RENDER_OPTION = "FORMATTED_VALUE"


class EnvConfig:
    """Manages environment variables."""

    @staticmethod
    def get_access_token() -> str:
        """Get the OAuth2 bearer token used for the Sheets API."""
        token = os.getenv("SHEETS_ACCESS_TOKEN")
        if not token:
            raise ValueError("SHEETS_ACCESS_TOKEN must be set")
        return token

    @staticmethod
    def get_max_workers() -> Optional[int]:
        """Get the thread pool size for per-sheet fetches, or None for the default."""
        raw = os.getenv("SHEETS_MAX_WORKERS")
        if raw is None or raw.strip() == "":
            return None
        return parse_max_workers(raw)

    @staticmethod
    def get_value_render_option() -> str:
        """Get the valueRenderOption passed to the values endpoint."""
        raw = os.getenv("SHEETS_VALUE_RENDER_OPTION")
        if not raw:
            return DEFAULT_VALUE_RENDER_OPTION
        return parse_value_render_option(raw)


def parse_max_workers(raw) -> int:
    """Validate a worker count coming from config or a caller."""
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"SHEETS_MAX_WORKERS must be an integer, got {raw!r}")
    if value < 1:
        raise ValueError(f"SHEETS_MAX_WORKERS must be at least 1, got {value}")
    return value


def parse_value_render_option(raw: str) -> str:
    option = raw.strip().upper()
    if option not in VALUE_RENDER_OPTIONS:
        raise ValueError(
            f"Unknown value render option {raw!r}; expected one of {', '.join(VALUE_RENDER_OPTIONS)}"
        )
    return option
