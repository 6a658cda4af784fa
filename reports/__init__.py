"""HTML rendering for vehicle document expiry reports."""

from .builder import ReportLayout, build_report_html, build_subject

__all__ = ["ReportLayout", "build_report_html", "build_subject"]
