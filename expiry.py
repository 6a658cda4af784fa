#!/usr/bin/env python3
"""
Command-line access to vehicle document expiry reports.

Commands:
  summary - Show counts and expiring vehicles for a month
  render  - Write the HTML report to a file (or stdout)
  send    - Email the HTML report
"""

import argparse
import sys
from pathlib import Path
from typing import List, Sequence

from dotenv import load_dotenv
from tabulate import tabulate

load_dotenv()

from config import REPORT_ESCAPE_HTML, REPORT_LAYOUT
from models import DocumentKind, ExpiryCount, ExpiryReportError, VehicleRecord
from notifier import MailConfig, Notifier
from orchestrator import build_expiry_report, run_expiry_report
from reports import ReportLayout

# =============================================================================
# Table helpers
# =============================================================================


def make_summary_table(counts: ExpiryCount) -> List[List[object]]:
    """One row per document kind, in report order."""
    return [[kind.summary_label, counts[kind]] for kind in DocumentKind]


def make_detail_table(records: Sequence[VehicleRecord], kind: DocumentKind) -> List[List[str]]:
    """Registration number and expiry value for each record."""
    return [[r.registration_number, r.display_value(kind) or "-"] for r in records]


def _layout_and_escape(args):
    return ReportLayout(args.layout), not args.no_escape


# =============================================================================
# Commands
# =============================================================================


def cmd_summary(args):
    """Show counts and per-document tables."""
    report = build_expiry_report(args.workbook.read_bytes(), args.month)
    result = report.result

    print(f"Month: {result.window.label} ({result.window.start} to {result.window.end})")
    print(f"Vehicles with expiring documents: {len(result.expiring)}")
    print()
    print(tabulate(make_summary_table(result.counts), headers=["Document", "Count"], tablefmt="simple"))
    print()

    for kind in DocumentKind:
        records = result.records_for(kind)
        if not records:
            continue
        print(f"{kind.document_name.upper()}:")
        print(tabulate(
            make_detail_table(records, kind),
            headers=["Registration Number", kind.column],
            tablefmt="simple",
        ))
        print()

    return 0


def cmd_render(args):
    """Write the HTML report."""
    layout, escape = _layout_and_escape(args)
    report = build_expiry_report(args.workbook.read_bytes(), args.month, layout=layout, escape=escape)

    if args.output:
        args.output.write_text(report.html, encoding="utf-8")
        print(f"Wrote {args.output}")
    else:
        print(report.html)
    return 0


def cmd_send(args):
    """Email the HTML report."""
    layout, escape = _layout_and_escape(args)
    data = args.workbook.read_bytes()

    if args.dry_run:
        report = build_expiry_report(data, args.month, layout=layout, escape=escape)
        print("DRY RUN - would send:")
        print(f"  To: {args.to}")
        print(f"  Subject: {report.subject}")
        print(f"  Vehicles: {len(report.result.expiring)}")
        return 0

    notifier = Notifier(MailConfig.from_env())
    report = run_expiry_report(data, args.to, args.month, notifier, layout=layout, escape=escape)
    print(f"Sent '{report.subject}' to {args.to}")
    return 0


# =============================================================================
# Main
# =============================================================================


def _add_render_options(subparser):
    subparser.add_argument(
        "--layout",
        choices=[layout.value for layout in ReportLayout],
        default=REPORT_LAYOUT,
        help=f"Detail table layout (default: {REPORT_LAYOUT})",
    )
    subparser.add_argument(
        "--no-escape",
        action="store_true",
        default=not REPORT_ESCAPE_HTML,
        help="Insert uploaded values into the HTML without escaping",
    )


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Vehicle document expiry reports",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s vehicles.xlsx summary --month 2024-03
  %(prog)s vehicles.xlsx render --month 2024-03 --output report.html
  %(prog)s vehicles.xlsx render --month 2024-03 --layout combined
  %(prog)s vehicles.xlsx send --month 2024-03 --to fleet@example.com
""",
    )
    parser.add_argument(
        "workbook",
        type=Path,
        help="Path to the vehicle spreadsheet (.xlsx)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    summary_parser = subparsers.add_parser("summary", help="Show counts and expiring vehicles")
    summary_parser.add_argument("--month", required=True, help="Target month (YYYY-MM)")

    render_parser = subparsers.add_parser("render", help="Write the HTML report")
    render_parser.add_argument("--month", required=True, help="Target month (YYYY-MM)")
    render_parser.add_argument("--output", type=Path, help="Output file (default: stdout)")
    _add_render_options(render_parser)

    send_parser = subparsers.add_parser("send", help="Email the HTML report")
    send_parser.add_argument("--month", required=True, help="Target month (YYYY-MM)")
    send_parser.add_argument("--to", required=True, help="Recipient email address")
    send_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Build the report and show what would be sent without sending",
    )
    _add_render_options(send_parser)

    args = parser.parse_args(argv)

    if not args.workbook.exists():
        print(f"Error: File not found: {args.workbook}")
        return 1

    commands = {"summary": cmd_summary, "render": cmd_render, "send": cmd_send}
    try:
        return commands[args.command](args)
    except (ExpiryReportError, ValueError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main() or 0)
