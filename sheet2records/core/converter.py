"""
Record Converter

Turns raw sheet grids into lists of records keyed by the sheet's header row.
"""
import re
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from ..errors import ConversionError

logger = logging.getLogger(__name__)

Cell = Optional[Union[str, int, float, bool]]
Grid = List[List[Cell]]
SheetSet = Dict[str, Grid]
Record = Dict[str, Cell]
RecordSet = Dict[str, List[Record]]

# ASCII digits only: signs, exponents and separators stay text
_INT_PATTERN = re.compile(r"[0-9]+")
_FLOAT_PATTERN = re.compile(r"[0-9]*\.[0-9]+")


def parse_value(value: Any) -> Cell:
    """
    Infer the type of a single cell value.

    Strings of digits become int, strings like "3.14" or ".5" become float,
    "true"/"false" in any case become bool. Everything else is returned
    unchanged, including values the API already typed.

    Args:
        value: Raw cell value

    Returns:
        Parsed cell value
    """
    if value is None:
        return None

    if isinstance(value, str):
        if _INT_PATTERN.fullmatch(value):
            try:
                return int(value, 10)
            except ValueError:
                # over the interpreter's int string conversion limit
                return value
        if _FLOAT_PATTERN.fullmatch(value):
            return float(value)
        lowered = value.lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False

    return value


def validate_headers(headers: Any) -> bool:
    """
    Check that a header row is a sequence of unique, non-blank strings.

    Uniqueness compares the raw values, so "Name" and "Name " are distinct.
    """
    if not isinstance(headers, (list, tuple)):
        return False

    seen = set()
    for header in headers:
        if not isinstance(header, str) or header.strip() == "":
            return False
        if header in seen:
            return False
        seen.add(header)

    return True


class RecordConverter:
    """
    Converts a SheetSet into a RecordSet.

    The first row of every sheet is the header row. A sheet with no data
    rows converts to an empty list; a sheet with an invalid header row
    fails the whole conversion.
    """

    def convert(self, sheet_set: Any) -> RecordSet:
        """
        Convert every sheet in sheet_set to records.

        Args:
            sheet_set: Mapping of sheet name to grid

        Returns:
            Mapping of sheet name to list of records

        Raises:
            ConversionError: If any sheet has invalid or duplicate headers
        """
        if not isinstance(sheet_set, Mapping) or len(sheet_set) == 0:
            return {}

        result: RecordSet = {}
        for sheet, grid in sheet_set.items():
            result[sheet] = self.convert_sheet(sheet, grid)

        logger.info(
            f"Converted {sum(len(records) for records in result.values())} rows "
            f"from {len(result)} sheets"
        )
        return result

    def convert_sheet(self, sheet: str, grid: Any) -> List[Record]:
        """Convert a single sheet's grid; see convert."""
        if not isinstance(grid, (list, tuple)) or len(grid) < 2:
            logger.debug(f"Sheet '{sheet}' has no data rows")
            return []

        headers, rows = grid[0], grid[1:]

        if not validate_headers(headers):
            logger.error(f"Invalid headers in sheet '{sheet}': {headers!r}")
            raise ConversionError(f"Invalid or duplicate headers in sheet: {sheet}", sheet=sheet)

        return [self._row_to_record(headers, row) for row in rows]

    @staticmethod
    def _row_to_record(headers: Sequence[Cell], row: Any) -> Record:
        if not isinstance(row, (list, tuple)):
            row = []
        record: Record = {}
        for index, header in enumerate(headers):
            if index >= len(row):
                break
            if isinstance(header, str):
                record[header] = parse_value(row[index])
        return record


_default_converter = RecordConverter()


def convert(sheet_set: Any) -> RecordSet:
    """Convert a SheetSet with the shared RecordConverter."""
    return _default_converter.convert(sheet_set)
