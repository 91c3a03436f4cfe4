#!/usr/bin/env python3
"""
FinancialDate Primitive Type and Clocks

Immutable date wrapper used for billing dates, plus an injectable time source
so that "one month from now" defaults and renewal windows can be pinned in
tests instead of depending on the wall clock.
"""

import calendar
import math
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

SECONDS_PER_DAY = 24 * 60 * 60

_DAY_FIRST_SPLIT = re.compile(r"[/\-]")


class Clock(ABC):
    """Source of the current moment."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current moment."""

    def today(self) -> "FinancialDate":
        """Return the current calendar date."""
        return FinancialDate(date=self.now().date())


class SystemClock(Clock):
    """Wall-clock time in the local timezone."""

    def now(self) -> datetime:
        return datetime.now()


@dataclass(frozen=True)
class FixedClock(Clock):
    """Clock frozen at a given moment."""

    at: datetime

    def now(self) -> datetime:
        return self.at


def resolve_clock(clock: Clock | None) -> Clock:
    """Return the given clock or a SystemClock when None."""
    return clock if clock is not None else SystemClock()


@dataclass(frozen=True, order=True)
class FinancialDate:
    """Immutable calendar date with billing-specific helpers."""

    date: date

    @classmethod
    def from_day_first(cls, date_str: str) -> "FinancialDate":
        """
        Parse a day-first date like "15/03/2025", "5-3-2025" or "15/03/25".

        Two-digit years are read as 20YY.

        Raises:
            ValueError: If the string is not a valid day-first date
        """
        parts = _DAY_FIRST_SPLIT.split(date_str.strip())
        if len(parts) != 3:
            raise ValueError(f"Not a day-first date: {date_str!r}")

        day, month, year = (int(part) for part in parts)
        if year < 100:
            year += 2000
        return cls(date=date(year, month, day))

    @classmethod
    def from_iso(cls, value: str) -> "FinancialDate":
        """Parse an ISO date or datetime ('2025-03-15' or '2025-03-15T10:00:00.000Z')."""
        return cls(date=datetime.fromisoformat(value.replace("Z", "+00:00")).date())

    @classmethod
    def today(cls, clock: Clock | None = None) -> "FinancialDate":
        """Get today's date."""
        return resolve_clock(clock).today()

    def add_days(self, days: int) -> "FinancialDate":
        """Shift by a number of days."""
        return FinancialDate(date=self.date + timedelta(days=days))

    def add_months(self, months: int) -> "FinancialDate":
        """
        Shift by whole calendar months, clamping to the last day of the month.

        Example:
            2025-01-31 + 1 month -> 2025-02-28
        """
        month_index = self.date.month - 1 + months
        year = self.date.year + month_index // 12
        month = month_index % 12 + 1
        day = min(self.date.day, calendar.monthrange(year, month)[1])
        return FinancialDate(date=date(year, month, day))

    def days_until(self, now: datetime) -> int:
        """
        Whole days from now until the start of this date, rounded up.

        A date later today-at-midnight returns 0 or a negative number; a date
        at any point tomorrow returns 1.
        """
        start = datetime.combine(self.date, time.min, tzinfo=now.tzinfo)
        return math.ceil((start - now).total_seconds() / SECONDS_PER_DAY)

    def to_iso_string(self) -> str:
        """Format as YYYY-MM-DD."""
        return self.date.isoformat()

    def __str__(self) -> str:
        return self.to_iso_string()

    def __repr__(self) -> str:
        return f"FinancialDate(date={self.date!r})"


def one_month_from(clock: Clock | None = None) -> FinancialDate:
    """Default next billing date: exactly one calendar month after today."""
    return FinancialDate.today(clock).add_months(1)
