"""Expiry filter - finds the documents that expire inside a month."""

from typing import Dict, List, Sequence

from .calculations import is_expiring
from .document_kind import DocumentKind
from .expiry_result import ExpiringVehicle, ExpiryCount, ExpiryResult
from .expiry_window import ExpiryWindow
from .vehicle_record import VehicleRecord


def filter_expiring(
    window: ExpiryWindow, records: Sequence[VehicleRecord]
) -> ExpiryResult:
    """
    Filter records against a window.

    First pass: count every (record, kind) match and collect each matching
    record once, in input order. Second pass: build each kind's table from
    the expiring set on its own, since one row can expire in several kinds.
    Unparseable or missing values never match.
    """
    counts = {kind: 0 for kind in DocumentKind}
    expiring: List[ExpiringVehicle] = []

    for record in records:
        kinds = tuple(
            kind
            for kind in DocumentKind
            if is_expiring(record.expiry_value(kind), window)
        )
        for kind in kinds:
            counts[kind] += 1
        if kinds:
            expiring.append(ExpiringVehicle(record=record, kinds=kinds))

    records_by_kind: Dict[DocumentKind, List[VehicleRecord]] = {}
    for kind in DocumentKind:
        matched = [
            ev.record
            for ev in expiring
            if is_expiring(ev.record.expiry_value(kind), window)
        ]
        if matched:
            records_by_kind[kind] = matched

    return ExpiryResult(
        window=window,
        counts=ExpiryCount(**{kind.value: n for kind, n in counts.items()}),
        expiring=expiring,
        records_by_kind=records_by_kind,
    )
