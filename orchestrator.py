"""
Expiry report pipeline.

Reader -> Filter -> Builder -> Notifier, shared by the web handler and the
CLI. This is glue only; each stage lives in its own module.
"""

from dataclasses import dataclass
from typing import Union

from logger import get_logger
from models import ExpiryResult, ExpiryWindow, filter_expiring, read_vehicle_records
from notifier import Notifier
from reports import ReportLayout, build_report_html, build_subject

logger = get_logger(__name__)


@dataclass
class ExpiryReport:
    """A rendered report, ready to send."""

    result: ExpiryResult
    subject: str
    html: str


def build_expiry_report(
    data: Union[bytes, bytearray],
    month: str,
    layout: ReportLayout = ReportLayout.PER_DOCUMENT,
    escape: bool = True,
) -> ExpiryReport:
    """Read, filter and render a workbook for one month."""
    window = ExpiryWindow.from_month(month)
    logger.info(f"Building expiry report for {window.label} ({window.start} to {window.end})")

    records = read_vehicle_records(data)
    result = filter_expiring(window, records)
    logger.info(
        f"{len(result.expiring)} of {len(records)} vehicle(s) have documents expiring in {window.label}"
    )
    logger.debug(f"Expiry counts: {result.counts.as_dict()}")

    html = build_report_html(
        month,
        result.counts,
        result.records_by_kind,
        escape=escape,
        layout=layout,
    )
    logger.debug(f"Rendered report ({len(html)} characters)")
    return ExpiryReport(result=result, subject=build_subject(month), html=html)


def run_expiry_report(
    data: Union[bytes, bytearray],
    recipient: str,
    month: str,
    notifier: Notifier,
    layout: ReportLayout = ReportLayout.PER_DOCUMENT,
    escape: bool = True,
) -> ExpiryReport:
    """Build the report and email it. Any stage failure propagates."""
    report = build_expiry_report(data, month, layout=layout, escape=escape)
    notifier.send(recipient, report.subject, report.html)
    return report
