"""Date, date range and time-of-day grammar.

Every resolver takes the reference instant `now` explicitly; nothing here
reads the wall clock. Resolvers raise ExtractionAmbiguous for spans that
look like dates but do not name a real calendar day.
"""

import re
from collections.abc import Callable
from datetime import date, datetime, timedelta

from dateutil.relativedelta import relativedelta

from switchboard.errors import ExtractionAmbiguous
from switchboard.extraction.numbers import QUANTITY, parse_quantity

WEEKDAYS: dict[str, int] = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}

MONTHS: dict[str, int] = {
    "january": 1, "jan": 1,
    "february": 2, "feb": 2,
    "march": 3, "mar": 3,
    "april": 4, "apr": 4,
    "may": 5,
    "june": 6, "jun": 6,
    "july": 7, "jul": 7,
    "august": 8, "aug": 8,
    "september": 9, "sept": 9, "sep": 9,
    "october": 10, "oct": 10,
    "november": 11, "nov": 11,
    "december": 12, "dec": 12,
}

_WEEKDAY = "(?:" + "|".join(WEEKDAYS) + ")"
_MONTH = "(?:" + "|".join(sorted(MONTHS, key=len, reverse=True)) + ")"
_ORDINAL = r"(?:st|nd|rd|th)?"
_FLAGS = re.IGNORECASE

ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
ISO_RANGE = re.compile(r"^\d{4}-\d{2}-\d{2}/\d{4}-\d{2}-\d{2}$")
CLOCK_TIME = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")

DateResolver = Callable[[re.Match[str], datetime], date]
RangeResolver = Callable[[re.Match[str], datetime], tuple[date, date]]


def _calendar_date(raw: str, year: int, month: int, day: int) -> date:
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise ExtractionAmbiguous(raw, str(exc)) from exc


def _upcoming(raw: str, now: datetime, month: int, day: int, year: str | None) -> date:
    """A month/day with an optional year; without one, the next occurrence.

    February 29 without a year moves forward to the next leap year.
    """
    if year:
        full_year = int(year) + 2000 if len(year) == 2 else int(year)
        return _calendar_date(raw, full_year, month, day)

    today = now.date()
    # Leap years are at most eight years apart.
    for candidate_year in range(now.year, now.year + 9):
        try:
            candidate = date(candidate_year, month, day)
        except ValueError:
            continue
        if candidate >= today:
            return candidate
    raise ExtractionAmbiguous(raw, f"no upcoming calendar day {month}/{day}")


def _week_start(day: date) -> date:
    return day - timedelta(days=day.weekday())


def _weekday_date(modifier: str | None, weekday_name: str, now: datetime) -> date:
    """Resolve a weekday reference.

    - "this friday": the coming friday, today included
    - "next friday": friday of the following calendar week (weeks start monday)
    - "last friday": the most recent friday before today
    - "friday" / "on friday": the coming friday, today excluded
    """
    today = now.date()
    target = WEEKDAYS[weekday_name.lower()]
    mode = (modifier or "").lower()

    if mode == "next":
        return _week_start(today) + timedelta(days=7 + target)
    if mode == "last":
        return today - timedelta(days=((today.weekday() - target) % 7) or 7)
    if mode in ("this", "coming"):
        return today + timedelta(days=(target - today.weekday()) % 7)
    return today + timedelta(days=((target - today.weekday()) % 7) or 7)


def _offset(raw: str, now: datetime, amount: int, unit: str) -> date:
    unit = unit.lower().rstrip("s")
    try:
        if unit == "day":
            return now.date() + timedelta(days=amount)
        if unit == "week":
            return now.date() + timedelta(weeks=amount)
        return now.date() + relativedelta(months=amount)
    except (OverflowError, ValueError) as exc:
        raise ExtractionAmbiguous(raw, "offset out of range") from exc


def _resolve_iso(match: re.Match[str], now: datetime) -> date:  # noqa: ARG001
    return _calendar_date(match.group(0), int(match["y"]), int(match["m"]), int(match["d"]))


def _resolve_month_day(match: re.Match[str], now: datetime) -> date:
    return _upcoming(
        match.group(0), now, MONTHS[match["month"].lower()], int(match["day"]), match["year"]
    )


def _resolve_numeric(match: re.Match[str], now: datetime) -> date:
    return _upcoming(match.group(0), now, int(match["m"]), int(match["d"]), match["year"])


def _resolve_relative_word(match: re.Match[str], now: datetime) -> date:
    word = match["word"].lower()
    offsets = {"today": 0, "tonight": 0, "tomorrow": 1, "yesterday": -1}
    if word.endswith("after tomorrow"):
        return now.date() + timedelta(days=2)
    return now.date() + timedelta(days=offsets[word])


def _resolve_weekday(match: re.Match[str], now: datetime) -> date:
    return _weekday_date(match["modifier"], match["weekday"], now)


def _resolve_in_offset(match: re.Match[str], now: datetime) -> date:
    amount = parse_quantity(match["amount"])
    if amount is None:
        raise ExtractionAmbiguous(match.group(0), "unreadable quantity")
    return _offset(match.group(0), now, amount, match["unit"])


DATE_PATTERNS: tuple[tuple[re.Pattern[str], DateResolver], ...] = (
    (
        re.compile(r"\b(?P<y>\d{4})-(?P<m>\d{1,2})-(?P<d>\d{1,2})\b"),
        _resolve_iso,
    ),
    (
        re.compile(
            rf"\b(?P<month>{_MONTH})\.?\s+(?P<day>\d{{1,2}}){_ORDINAL}\b(?:,?\s+(?P<year>\d{{4}})\b)?",
            _FLAGS,
        ),
        _resolve_month_day,
    ),
    (
        re.compile(
            rf"\b(?P<day>\d{{1,2}}){_ORDINAL}\s+(?:of\s+)?(?P<month>{_MONTH})\b(?:,?\s+(?P<year>\d{{4}})\b)?",
            _FLAGS,
        ),
        _resolve_month_day,
    ),
    (
        re.compile(r"(?<![\w/.-])(?P<m>\d{1,2})/(?P<d>\d{1,2})(?:/(?P<year>\d{4}|\d{2}))?(?![\w/])"),
        _resolve_numeric,
    ),
    (
        re.compile(
            r"\b(?P<word>(?:the\s+)?day\s+after\s+tomorrow|today|tonight|tomorrow|yesterday)\b",
            _FLAGS,
        ),
        _resolve_relative_word,
    ),
    (
        re.compile(rf"\b(?:(?P<modifier>this|next|last|coming)\s+)?(?P<weekday>{_WEEKDAY})\b", _FLAGS),
        _resolve_weekday,
    ),
    (
        re.compile(rf"\bin\s+(?P<amount>{QUANTITY})\s+(?P<unit>days?|weeks?|months?)\b", _FLAGS),
        _resolve_in_offset,
    ),
    (
        re.compile(
            rf"\b(?P<amount>{QUANTITY})\s+(?P<unit>days?|weeks?|months?)\s+from\s+(?:now|today)\b",
            _FLAGS,
        ),
        _resolve_in_offset,
    ),
)


def _resolve_relative_week(match: re.Match[str], now: datetime) -> tuple[date, date]:
    shift = {"this": 0, "next": 7, "last": -7}[match["modifier"].lower()]
    start = _week_start(now.date()) + timedelta(days=shift)
    return start, start + timedelta(days=6)


def _resolve_relative_weekend(match: re.Match[str], now: datetime) -> tuple[date, date]:
    shift = 7 if match["modifier"].lower() == "next" else 0
    saturday = _week_start(now.date()) + timedelta(days=5 + shift)
    return saturday, saturday + timedelta(days=1)


def _resolve_relative_month(match: re.Match[str], now: datetime) -> tuple[date, date]:
    shift = {"this": 0, "next": 1, "last": -1}[match["modifier"].lower()]
    start = now.date().replace(day=1) + relativedelta(months=shift)
    return start, start + relativedelta(months=1, days=-1)


def _resolve_month_span(match: re.Match[str], now: datetime) -> tuple[date, date]:
    month = MONTHS[match["month"].lower()]
    start = _upcoming(match.group(0), now, month, int(match["start"]), match["year"])
    end = _calendar_date(match.group(0), start.year, month, int(match["end"]))
    if end < start:
        raise ExtractionAmbiguous(match.group(0), "range ends before it starts")
    return start, end


def _resolve_weekday_span(match: re.Match[str], now: datetime) -> tuple[date, date]:
    start = _weekday_date(None, match["first"], now)
    end = start + timedelta(days=(WEEKDAYS[match["last"].lower()] - start.weekday()) % 7)
    return start, end


# One date expression, without groups, for embedding in range patterns.
_DATE_EXPRESSION = (
    r"(?:\d{4}-\d{1,2}-\d{1,2}"
    rf"|{_MONTH}\.?\s+\d{{1,2}}{_ORDINAL}(?:,?\s+\d{{4}})?"
    rf"|\d{{1,2}}{_ORDINAL}\s+(?:of\s+)?{_MONTH}(?:,?\s+\d{{4}})?"
    r"|\d{1,2}/\d{1,2}(?:/(?:\d{4}|\d{2}))?"
    r"|(?:the\s+)?day\s+after\s+tomorrow|today|tomorrow"
    rf"|(?:(?:this|next|coming)\s+)?{_WEEKDAY})"
)
_EXPLICIT_YEAR = re.compile(r"\d{4}")


def _resolve_date_span(match: re.Match[str], now: datetime) -> tuple[date, date]:
    """Both ends resolve with the date grammar.

    An end without a year that lands before the start moves into the
    start's year: "from June 10 to June 20" stays within one June.
    """
    start = date.fromisoformat(normalize_date(match["first"], now))
    end = date.fromisoformat(normalize_date(match["last"], now))
    if end < start and end.year < start.year and not _EXPLICIT_YEAR.search(match["last"]):
        try:
            end = end.replace(year=start.year)
        except ValueError as exc:
            raise ExtractionAmbiguous(match.group(0), str(exc)) from exc
    if end < start:
        raise ExtractionAmbiguous(match.group(0), "range ends before it starts")
    return start, end


DATE_RANGE_PATTERNS: tuple[tuple[re.Pattern[str], RangeResolver], ...] = (
    (
        re.compile(
            rf"\b(?P<month>{_MONTH})\.?\s+(?P<start>\d{{1,2}}){_ORDINAL}\s*(?:-|–|to|through|thru)\s*"
            rf"(?P<end>\d{{1,2}}){_ORDINAL}\b(?:,?\s+(?P<year>\d{{4}})\b)?",
            _FLAGS,
        ),
        _resolve_month_span,
    ),
    (
        re.compile(
            rf"\b(?:from\s+)?(?P<first>{_WEEKDAY})\s+(?:to|until|through|thru|-)\s+(?P<last>{_WEEKDAY})\b",
            _FLAGS,
        ),
        _resolve_weekday_span,
    ),
    (
        re.compile(
            rf"\bfrom\s+(?P<first>{_DATE_EXPRESSION})"
            rf"(?:\s*(?:-|–)\s*|\s+(?:to|until|through|thru)\s+)(?P<last>{_DATE_EXPRESSION})\b",
            _FLAGS,
        ),
        _resolve_date_span,
    ),
    (
        re.compile(r"\b(?P<modifier>this|next|last)\s+week\b", _FLAGS),
        _resolve_relative_week,
    ),
    (
        re.compile(r"\b(?P<modifier>this|next)\s+weekend\b", _FLAGS),
        _resolve_relative_weekend,
    ),
    (
        re.compile(r"\b(?P<modifier>this|next|last)\s+month\b", _FLAGS),
        _resolve_relative_month,
    ),
)


def _resolve_meridiem(match: re.Match[str]) -> tuple[int, int]:
    hour = int(match["hour"])
    minute = int(match["minute"] or 0)
    if not 1 <= hour <= 12 or minute > 59:
        raise ExtractionAmbiguous(match.group(0), "hour or minute out of range")
    is_pm = match["meridiem"].lower().startswith("p")
    hour = hour % 12 + (12 if is_pm else 0)
    return hour, minute


def _resolve_clock(match: re.Match[str]) -> tuple[int, int]:
    return int(match["hour"]), int(match["minute"])


def _resolve_named_time(match: re.Match[str]) -> tuple[int, int]:
    named = {
        "noon": (12, 0),
        "midday": (12, 0),
        "midnight": (0, 0),
        "morning": (9, 0),
        "afternoon": (14, 0),
        "evening": (18, 0),
    }
    return named[match["name"].lower()]


# (pattern, resolver, confidence)
TIME_PATTERNS: tuple[tuple[re.Pattern[str], Callable[[re.Match[str]], tuple[int, int]], float], ...] = (
    (
        re.compile(
            r"\b(?P<hour>\d{1,2})(?::(?P<minute>\d{2}))?\s*(?P<meridiem>a\.?m\.?|p\.?m\.?)(?![a-z])",
            _FLAGS,
        ),
        _resolve_meridiem,
        0.95,
    ),
    (
        re.compile(r"(?<![\d:])(?P<hour>[01]?\d|2[0-3]):(?P<minute>[0-5]\d)(?![\d:])"),
        _resolve_clock,
        0.9,
    ),
    (
        re.compile(r"\b(?P<name>noon|midday|midnight)\b", _FLAGS),
        _resolve_named_time,
        0.85,
    ),
    (
        re.compile(r"\b(?P<name>morning|afternoon|evening)\b", _FLAGS),
        _resolve_named_time,
        0.6,
    ),
)


def format_time(hour: int, minute: int) -> str:
    """Render a time of day as HH:MM."""
    return f"{hour:02d}:{minute:02d}"


def format_range(start: date, end: date) -> str:
    """Render a date range as an ISO 8601 interval."""
    return f"{start.isoformat()}/{end.isoformat()}"


def normalize_date(raw: str, now: datetime) -> str:
    """Normalize one date expression to ISO YYYY-MM-DD.

    Accepts anything the date grammar understands, including its own
    output, so normalization is idempotent.

    Raises:
        ExtractionAmbiguous: the text is not exactly one date expression
    """
    text = raw.strip()
    if ISO_DATE.match(text):
        year, month, day = (int(part) for part in text.split("-"))
        return _calendar_date(text, year, month, day).isoformat()

    for pattern, resolver in DATE_PATTERNS:
        match = pattern.fullmatch(text)
        if match:
            return resolver(match, now).isoformat()

    raise ExtractionAmbiguous(raw, "not a date expression")


def normalize_date_range(raw: str, now: datetime) -> str:
    """Normalize a date range expression to an ISO interval start/end.

    Raises:
        ExtractionAmbiguous: not a range, or the end precedes the start
    """
    text = raw.strip()
    if ISO_RANGE.match(text):
        start_text, end_text = text.split("/")
        start = date.fromisoformat(normalize_date(start_text, now))
        end = date.fromisoformat(normalize_date(end_text, now))
    else:
        for pattern, resolver in DATE_RANGE_PATTERNS:
            match = pattern.fullmatch(text)
            if match:
                start, end = resolver(match, now)
                break
        else:
            raise ExtractionAmbiguous(raw, "not a date range expression")

    if end < start:
        raise ExtractionAmbiguous(raw, "range ends before it starts")
    return format_range(start, end)


def normalize_time(raw: str) -> str:
    """Normalize a time-of-day expression to HH:MM (idempotent).

    Raises:
        ExtractionAmbiguous: the text is not exactly one time expression
    """
    text = raw.strip()
    clock = CLOCK_TIME.match(text)
    if clock:
        return text

    for pattern, resolver, _confidence in TIME_PATTERNS:
        match = pattern.fullmatch(text)
        if match:
            return format_time(*resolver(match))

    raise ExtractionAmbiguous(raw, "not a time expression")
