"""Pure work/off calendar calculations, free of UI dependencies."""

from __future__ import annotations

import calendar
import logging
from datetime import date
from typing import Iterator, NamedTuple

from dateutil.relativedelta import relativedelta

log = logging.getLogger(__name__)

PERSON = "Rômulo"

# Column headers, Sunday first
WEEKDAY_HEADERS = ["Dom", "Seg", "Ter", "Qua", "Qui", "Sex", "Sáb"]

# Indexed by date.weekday() (Monday = 0)
DAY_ABBR = ["seg", "ter", "qua", "qui", "sex", "sáb", "dom"]

MONTH_NAMES = [
    "", "janeiro", "fevereiro", "março", "abril", "maio", "junho",
    "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
]

WORK_LABEL = "Trabalho"
OFF_LABEL = "Folga"


class DayCell(NamedTuple):
    date: date
    is_work_day: bool
    is_today: bool


class WeekGrid(NamedTuple):
    """One month laid out on a Sunday-first 7-column page.

    ``slots`` holds ``None`` for each leading blank followed by one
    :class:`DayCell` per day of the month. There is no trailing padding.
    """

    month: date
    slots: tuple[DayCell | None, ...]

    @property
    def leading_blanks(self) -> int:
        return sum(1 for s in self.slots if s is None)

    @property
    def day_cells(self) -> list[DayCell]:
        return [s for s in self.slots if s is not None]

    def rows(self) -> list[list[DayCell | None]]:
        """Split the slots into weeks of 7; the last week may be short."""
        return [list(self.slots[i:i + 7]) for i in range(0, len(self.slots), 7)]


# ------------------------------------------------------------------
# Day classifier
# ------------------------------------------------------------------
def day_offset(day: date, reference: date) -> int:
    """Whole calendar days from ``reference`` to ``day`` (negative before it)."""
    return (day - reference).days


def classify(day: date, reference: date) -> bool:
    """Return True when ``day`` is a work day, False when it is off.

    Parity alternates every calendar day starting with a work day on
    ``reference``. Python's ``%`` floors, so days before the reference
    keep alternating without a flip at zero.
    """
    return day_offset(day, reference) % 2 == 0


def is_today(day: date, today: date | None = None) -> bool:
    return day == (today or date.today())


def status_label(is_work_day: bool) -> str:
    return WORK_LABEL if is_work_day else OFF_LABEL


# ------------------------------------------------------------------
# Month navigator
# ------------------------------------------------------------------
def advance(cursor: date) -> date:
    """Return ``cursor`` one calendar month later, clamping the day."""
    return cursor + relativedelta(months=1)


def retreat(cursor: date) -> date:
    """Return ``cursor`` one calendar month earlier, clamping the day."""
    return cursor - relativedelta(months=1)


class MonthNavigator:
    """Owns the displayed-month cursor; mutated only by its transitions."""

    __slots__ = ("_cursor",)

    def __init__(self, start: date | None = None) -> None:
        self._cursor = start or date.today()

    @property
    def displayed_month(self) -> date:
        return self._cursor

    def advance(self) -> date:
        self._cursor = advance(self._cursor)
        log.debug("advanced to %s", self._cursor)
        return self._cursor

    def retreat(self) -> date:
        self._cursor = retreat(self._cursor)
        log.debug("retreated to %s", self._cursor)
        return self._cursor

    def reset(self, today: date | None = None) -> date:
        self._cursor = today or date.today()
        log.debug("reset to %s", self._cursor)
        return self._cursor


# ------------------------------------------------------------------
# Grid builder
# ------------------------------------------------------------------
def first_day(month: date) -> date:
    return month.replace(day=1)


def last_day(month: date) -> date:
    return month.replace(day=calendar.monthrange(month.year, month.month)[1])


def days_in_month(month: date) -> int:
    return calendar.monthrange(month.year, month.month)[1]


def iter_month_days(month: date) -> Iterator[date]:
    """Yield every day of ``month`` in ascending order.

    Each call starts a fresh iteration, so the same month always yields
    the same sequence.
    """
    cal = calendar.Calendar()
    for d in cal.itermonthdates(month.year, month.month):
        if d.month == month.month:
            yield d


def sunday_index(day: date) -> int:
    """Weekday index with Sunday = 0 … Saturday = 6."""
    return (day.weekday() + 1) % 7


def build_grid(month: date, reference: date, today: date | None = None) -> WeekGrid:
    """Lay out ``month`` as a calendar page with every day classified."""
    today = today or date.today()
    blanks = sunday_index(first_day(month))
    slots: list[DayCell | None] = [None] * blanks
    for d in iter_month_days(month):
        slots.append(DayCell(d, classify(d, reference), is_today(d, today)))
    log.debug("built grid for %04d-%02d: %d blanks, %d days",
              month.year, month.month, blanks, len(slots) - blanks)
    return WeekGrid(first_day(month), tuple(slots))


def count_days(grid: WeekGrid) -> tuple[int, int]:
    """Return (work days, off days) for the month in ``grid``."""
    work = sum(1 for c in grid.day_cells if c.is_work_day)
    return work, len(grid.day_cells) - work


# ------------------------------------------------------------------
# Labels
# ------------------------------------------------------------------
def month_title(month: date) -> str:
    """Return e.g. ``"março 2024"``."""
    return f"{MONTH_NAMES[month.month]} {month.year}"


def day_abbr(day: date) -> str:
    return DAY_ABBR[day.weekday()]
