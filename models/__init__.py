"""
Vehicle document expiry models.

This package provides the data models and filtering for expiry reports:
- DocumentKind: The five tracked regulatory documents
- VehicleRecord: One row of the uploaded vehicle sheet
- ExpiryWindow: Inclusive calendar month being reported on
- ExpiryCount / ExpiringVehicle / ExpiryResult: Filter output
- read_vehicle_records: Spreadsheet reader
- filter_expiring: Expiry filter
"""

from .document_kind import DocumentKind, REGISTRATION_COLUMN
from .vehicle_record import VehicleRecord
from .expiry_window import ExpiryWindow
from .expiry_result import ExpiryCount, ExpiringVehicle, ExpiryResult
from .calculations import parse_expiry_date, is_expiring
from .expiry_filter import filter_expiring
from .errors import (
    ExpiryReportError,
    ValidationError,
    DecodeError,
    SendError,
    ProcessingError,
    ConfigError,
)
from .loader import read_vehicle_records

__all__ = [
    "DocumentKind",
    "REGISTRATION_COLUMN",
    "VehicleRecord",
    "ExpiryWindow",
    "ExpiryCount",
    "ExpiringVehicle",
    "ExpiryResult",
    "parse_expiry_date",
    "is_expiring",
    "filter_expiring",
    "ExpiryReportError",
    "ValidationError",
    "DecodeError",
    "SendError",
    "ProcessingError",
    "ConfigError",
    "read_vehicle_records",
]
