"""Dataclasses describing what the expiry filter found."""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .document_kind import DocumentKind
from .expiry_window import ExpiryWindow
from .vehicle_record import VehicleRecord


@dataclass(frozen=True)
class ExpiryCount:
    """Number of records expiring inside the window, per document kind."""

    fitness: int = 0
    insurance: int = 0
    pollution: int = 0
    permit: int = 0
    national: int = 0

    def __getitem__(self, kind: DocumentKind) -> int:
        return getattr(self, kind.value)

    @property
    def total(self) -> int:
        return sum(self[kind] for kind in DocumentKind)

    def as_dict(self) -> Dict[str, int]:
        return {kind.value: self[kind] for kind in DocumentKind}


@dataclass(frozen=True)
class ExpiringVehicle:
    """A record with at least one document expiring in the window."""

    record: VehicleRecord
    kinds: Tuple[DocumentKind, ...]

    @property
    def registration_number(self) -> str:
        return self.record.registration_number


@dataclass
class ExpiryResult:
    """Everything the filter produced for one window."""

    window: ExpiryWindow
    counts: ExpiryCount
    expiring: List[ExpiringVehicle] = field(default_factory=list)
    records_by_kind: Dict[DocumentKind, List[VehicleRecord]] = field(
        default_factory=dict
    )

    @property
    def expiring_records(self) -> List[VehicleRecord]:
        return [ev.record for ev in self.expiring]

    def records_for(self, kind: DocumentKind) -> List[VehicleRecord]:
        return self.records_by_kind.get(kind, [])
