"""Spreadsheet loading utilities for vehicle records."""

import io
from datetime import date, datetime
from typing import Any, Dict, List, Union

import pandas as pd

from logger import get_logger

from .document_kind import REGISTRATION_COLUMN, DocumentKind
from .errors import DecodeError
from .vehicle_record import ExpiryValue, VehicleRecord

logger = get_logger(__name__)


def _is_blank(value: Any) -> bool:
    """True for None, NaN/NaT and empty strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _cell_to_expiry(value: Any) -> ExpiryValue:
    """Convert a raw cell into a date, text, or None."""
    if _is_blank(value):
        return None
    # pd.Timestamp is a datetime subclass
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return str(value).strip()


def _cell_to_text(value: Any) -> str:
    if _is_blank(value):
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _parse_row(row: Dict[str, Any]) -> VehicleRecord:
    """Build a VehicleRecord from a header-keyed row dict."""
    expiries = {
        kind.value: _cell_to_expiry(row.get(kind.column)) for kind in DocumentKind
    }
    return VehicleRecord(
        registration_number=_cell_to_text(row.get(REGISTRATION_COLUMN)),
        **expiries,
    )


def read_vehicle_records(data: Union[bytes, bytearray]) -> List[VehicleRecord]:
    """
    Decode a workbook buffer into vehicle records.

    Reads the first sheet by position, using its first row as headers.
    Raises DecodeError if the buffer is not a workbook or has no sheets.
    """
    try:
        xls = pd.ExcelFile(io.BytesIO(bytes(data)))
    except Exception as e:
        raise DecodeError(f"Could not open workbook: {e}") from e

    if not xls.sheet_names:
        raise DecodeError("Workbook has no sheets")

    sheet_name = xls.sheet_names[0]
    try:
        df = xls.parse(sheet_name, dtype=object)
    except Exception as e:
        raise DecodeError(f"Could not read sheet '{sheet_name}': {e}") from e

    missing = [
        col
        for col in [REGISTRATION_COLUMN] + [k.column for k in DocumentKind]
        if col not in df.columns
    ]
    if missing:
        logger.warning(f"Sheet '{sheet_name}' is missing columns: {missing}")

    records = [_parse_row(row) for row in df.to_dict(orient="records")]
    logger.info(f"Read {len(records)} vehicle record(s) from sheet '{sheet_name}'")
    return records
