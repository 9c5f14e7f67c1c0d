import calendar
import re
from dataclasses import dataclass
from datetime import date

MONTH_NAMES = (
    "Январь", "Февраль", "Март", "Апрель", "Май", "Июнь",
    "Июль", "Август", "Сентябрь", "Октябрь", "Ноябрь", "Декабрь",
)
WEEKDAY_NAMES = ("Пн", "Вт", "Ср", "Чт", "Пт", "Сб", "Вс")

WEEK_LENGTH = 7

_NUMBER_RE = re.compile(r"\+?\d+", re.ASCII)


class CalendarError(ValueError):
    pass


class InvalidMonth(CalendarError):
    def __init__(self, month):
        super().__init__(f"month must be in 1..12, got {month!r}")
        self.month = month


class MalformedNotation(CalendarError):
    def __init__(self, notation):
        super().__init__(f"expected YYYY-MM notation, got {notation!r}")
        self.notation = notation


class UnsupportedYear(CalendarError):
    def __init__(self, year, month):
        super().__init__(f"{year}-{month:02d} is outside the supported date range")
        self.year = year
        self.month = month


@dataclass(frozen=True)
class Day:
    text: str
    is_weekend: bool

    @classmethod
    def empty(cls) -> "Day":
        return cls(text="", is_weekend=False)

    @classmethod
    def from_date(cls, d: date) -> "Day":
        # isoweekday: 6 = Saturday, 7 = Sunday
        return cls(text=str(d.day), is_weekend=d.isoweekday() >= 6)


@dataclass(frozen=True)
class Month:
    year: int
    month: int
    display_name: str
    grid: tuple[tuple[Day, ...], ...]


def previous_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 12:
        return year + 1, 1
    return year, month + 1


def to_notation(year: int, month: int) -> str:
    return f"{year}-{month:02d}"


def build_month(month: int, year: int) -> Month:
    """
    Build the calendar page of the given month.

    The first week is left-padded with empty cells so that day 1 sits in
    its weekday column (weeks start on Monday). The last week is not
    padded and may be shorter than 7 cells.
    """
    if not 1 <= month <= 12:
        raise InvalidMonth(month)

    try:
        first = date(year, month, 1)
    except (ValueError, OverflowError) as e:
        raise UnsupportedYear(year, month) from e

    weekday = first.isoweekday()
    days_in_month = calendar.monthrange(year, month)[1]

    cells = [None] * (weekday - 1)
    cells.extend(date(year, month, day) for day in range(1, days_in_month + 1))
    days = [Day.empty() if d is None else Day.from_date(d) for d in cells]

    grid = tuple(
        tuple(days[i:i + WEEK_LENGTH])
        for i in range(0, len(days), WEEK_LENGTH)
    )

    return Month(
        year=year,
        month=month,
        display_name=f"{MONTH_NAMES[month - 1]} {year}",
        grid=grid,
    )


def build_month_from_notation(notation: str) -> Month:
    """Build a month from "YYYY-MM" notation, e.g. "2021-03"."""
    # segments after the month are ignored
    segments = notation.split("-")
    if len(segments) < 2:
        raise MalformedNotation(notation)
    year_text, month_text = segments[0], segments[1]
    if not _NUMBER_RE.fullmatch(year_text) or not _NUMBER_RE.fullmatch(month_text):
        raise MalformedNotation(notation)

    return build_month(int(month_text), int(year_text))
