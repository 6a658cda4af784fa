"""Report builder - renders expiry results as an HTML email body."""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Sequence

from jinja2 import Environment, FileSystemLoader

from config import EMAIL_SUBJECT_TEMPLATE
from models import DocumentKind, ExpiryCount, VehicleRecord

TEMPLATES_DIR = Path(__file__).parent / "templates"


class ReportLayout(Enum):
    """How detail rows are grouped in the report."""

    PER_DOCUMENT = "per-document"  # One table per document kind
    COMBINED = "combined"  # Single table with a Document column


@lru_cache(maxsize=2)
def _environment(escape: bool) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=escape,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def build_subject(month: str) -> str:
    """Email subject for a month label."""
    return EMAIL_SUBJECT_TEMPLATE.format(month=month)


def _summary_lines(counts: ExpiryCount) -> List[Dict[str, object]]:
    return [{"label": kind.summary_label, "count": counts[kind]} for kind in DocumentKind]


def _sections(
    records_by_kind: Dict[DocumentKind, Sequence[VehicleRecord]]
) -> List[Dict[str, object]]:
    """One section per kind with rows, in fixed kind order."""
    sections = []
    for kind in DocumentKind:
        records = records_by_kind.get(kind) or []
        if not records:
            continue
        sections.append({
            "title": kind.document_name,
            "date_header": kind.column,
            "rows": [
                {
                    "registration_number": r.registration_number,
                    "expiry": r.display_value(kind),
                }
                for r in records
            ],
        })
    return sections


def _combined_rows(
    records_by_kind: Dict[DocumentKind, Sequence[VehicleRecord]]
) -> List[Dict[str, str]]:
    """
    Rows for the combined table, grouped by vehicle.

    Vehicles appear in first-seen order; each vehicle's documents follow the
    fixed kind order.
    """
    vehicles: List[VehicleRecord] = []
    seen = set()
    for kind in DocumentKind:
        for record in records_by_kind.get(kind) or []:
            if id(record) not in seen:
                seen.add(id(record))
                vehicles.append(record)

    rows = []
    for record in vehicles:
        for kind in DocumentKind:
            if any(r is record for r in records_by_kind.get(kind) or []):
                rows.append({
                    "registration_number": record.registration_number,
                    "document": kind.document_name,
                    "expiry": record.display_value(kind),
                })
    return rows


def build_report_html(
    month: str,
    counts: ExpiryCount,
    records_by_kind: Dict[DocumentKind, Sequence[VehicleRecord]],
    escape: bool = True,
    layout: ReportLayout = ReportLayout.PER_DOCUMENT,
) -> str:
    """
    Render the expiry report.

    Args:
        month: "YYYY-MM" label shown in the summary heading
        counts: Per-kind expiry counts for the summary list
        records_by_kind: Expiring records per kind; empty kinds get no table
        escape: HTML-escape uploaded values (registration numbers, dates)
        layout: Per-document tables (default) or one combined table
    """
    env = _environment(escape)
    if layout == ReportLayout.COMBINED:
        template = env.get_template("expiry_report_combined.html")
        return template.render(
            month=month,
            summary=_summary_lines(counts),
            rows=_combined_rows(records_by_kind),
        )

    template = env.get_template("expiry_report.html")
    return template.render(
        month=month,
        summary=_summary_lines(counts),
        sections=_sections(records_by_kind),
    )
