"""VehicleRecord dataclass - one row of the uploaded vehicle sheet."""

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from .document_kind import DocumentKind

# A cell is either a real spreadsheet date, text we may or may not be able to
# parse later, or absent.
ExpiryValue = Optional[Union[date, str]]


@dataclass(frozen=True)
class VehicleRecord:
    """Registration number plus the raw expiry value for each document."""

    registration_number: str
    fitness: ExpiryValue = None
    insurance: ExpiryValue = None
    pollution: ExpiryValue = None
    permit: ExpiryValue = None
    national: ExpiryValue = None

    def expiry_value(self, kind: DocumentKind) -> ExpiryValue:
        """Raw expiry value for a document kind."""
        return getattr(self, kind.value)

    def display_value(self, kind: DocumentKind) -> str:
        """Expiry value as report text."""
        value = self.expiry_value(kind)
        if value is None:
            return ""
        if isinstance(value, date):
            return value.isoformat()
        return value
