"""DocumentKind enum for the regulatory documents tracked per vehicle."""

from enum import Enum


class DocumentKind(Enum):
    """Tracked document types. Definition order is report order."""

    FITNESS = "fitness"
    INSURANCE = "insurance"
    POLLUTION = "pollution"
    PERMIT = "permit"
    NATIONAL = "national"

    @property
    def column(self) -> str:
        """Spreadsheet header holding this document's expiry date."""
        return _COLUMNS[self]

    @property
    def document_name(self) -> str:
        """Human-readable document name (e.g. 'Fitness Certificate')."""
        return _NAMES[self]

    @property
    def summary_label(self) -> str:
        """Label used in the report summary list."""
        return _SUMMARY_LABELS[self]


REGISTRATION_COLUMN = "Registration Number"

_COLUMNS = {
    DocumentKind.FITNESS: "Fitness Expiry Date",
    DocumentKind.INSURANCE: "Insurance Expiry Date",
    DocumentKind.POLLUTION: "Pollution Expiry Date",
    DocumentKind.PERMIT: "Permit Expiry Date",
    DocumentKind.NATIONAL: "National Expiry Date",
}

_NAMES = {
    DocumentKind.FITNESS: "Fitness Certificate",
    DocumentKind.INSURANCE: "Insurance",
    DocumentKind.POLLUTION: "Pollution Certificate",
    DocumentKind.PERMIT: "Permit",
    DocumentKind.NATIONAL: "National Permit",
}

_SUMMARY_LABELS = {
    DocumentKind.FITNESS: "Fitness Certificates Expiring",
    DocumentKind.INSURANCE: "Insurance Policies Expiring",
    DocumentKind.POLLUTION: "Pollution Certificates Expiring",
    DocumentKind.PERMIT: "Permits Expiring",
    DocumentKind.NATIONAL: "National Permits Expiring",
}
