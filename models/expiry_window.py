"""ExpiryWindow - the inclusive calendar month a report covers."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from dateutil.relativedelta import relativedelta

MONTH_FORMAT = "%Y-%m"


@dataclass(frozen=True)
class ExpiryWindow:
    """Closed interval [start, end] covering one calendar month."""

    start: date
    end: date

    @classmethod
    def from_month(cls, month: str) -> "ExpiryWindow":
        """
        Build the window for a "YYYY-MM" string.

        Raises ValueError when the string is not a valid year-month.
        """
        start = datetime.strptime(month.strip(), MONTH_FORMAT).date()
        end = start + relativedelta(months=1, days=-1)
        return cls(start=start, end=end)

    @property
    def label(self) -> str:
        """Year-month label, e.g. '2024-03'."""
        return self.start.strftime(MONTH_FORMAT)

    def contains(self, day: Optional[date]) -> bool:
        """Inclusive on both ends; None is never inside."""
        if day is None:
            return False
        return self.start <= day <= self.end
