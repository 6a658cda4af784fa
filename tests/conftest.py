"""Shared fixtures for building in-memory workbooks."""

import io
from datetime import date

import pytest
from openpyxl import Workbook

HEADERS = [
    "Registration Number",
    "Fitness Expiry Date",
    "Insurance Expiry Date",
    "Pollution Expiry Date",
    "Permit Expiry Date",
    "National Expiry Date",
]


def build_workbook(rows, headers=HEADERS, extra_sheets=()):
    """Return .xlsx bytes with headers on the first row of the first sheet."""
    wb = Workbook()
    ws = wb.active
    ws.title = "Vehicles"
    ws.append(list(headers))
    for row in rows:
        ws.append(list(row))
    for name in extra_sheets:
        other = wb.create_sheet(name)
        other.append(["Registration Number", "Fitness Expiry Date"])
        other.append(["IGNORED", date(2024, 3, 1)])
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


@pytest.fixture
def workbook_bytes():
    """Factory fixture: workbook_bytes(rows, headers=...) -> bytes."""
    return build_workbook


@pytest.fixture
def march_fleet():
    """A small fleet with documents spread around March 2024."""
    return build_workbook([
        ["KA01AB1234", date(2024, 3, 15), "2024-04-01", None, "2024-03-31", ""],
        ["KA02CD5678", "2024-02-29", date(2024, 3, 1), "2024-03-10", None, "2024-03-20"],
        ["KA03EF9012", "not a date", None, None, None, None],
    ])
