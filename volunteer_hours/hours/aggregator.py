import logging
from datetime import date

from ..awards.calendar import program_year
from .classifier import classify
from .models import DateGroup, HourDetail, HoursSummary
from .records import leading_int, split_fields


logger = logging.getLogger(__name__)

DATE_COLUMN = 1
DESCRIPTION_COLUMN = 7
MIN_FIELDS = DESCRIPTION_COLUMN + 1
UNKNOWN_DATE = "Unknown Date"


def parse_activity_date(date_str: str) -> date | None:
    """Parse an activity date in MM/DD/YYYY format, or None if it is not a real date.

    Anything after the year, such as a "10:00:00" time of day, is ignored.
    """
    parts = date_str.split("/")
    if len(parts) != 3:
        return None

    month, day, year = (leading_int(part) for part in parts)
    if month is None or day is None or year is None:
        return None
    try:
        return date(year, month, day)
    except ValueError:
        return None


def format_date(date_str: str) -> str:
    """Format an MM/DD/YYYY date as e.g. "Mar 5, 2024", leaving unparseable text as-is"""
    if not date_str:
        return UNKNOWN_DATE

    parsed = parse_activity_date(date_str)
    if parsed is None:
        return date_str
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}"


def aggregate(rows: list[str], today: date | None = None) -> HoursSummary:
    """Group matched rows by date and category, totalling their hours.

    Args:
        rows: Rows already matched to a single volunteer
        today: Reference date for the program-year subtotal, defaults to today

    Returns:
        HoursSummary with date groups newest first, the grand total and the
        subtotal for the current program year

    """
    period_start, period_end = program_year(today or date.today())

    # {raw_date: {category: [hours, count]}}
    hours_by_date: dict[str, dict[str, list[float]]] = {}
    total_hours = 0.0
    annual_hours = 0.0

    for row in rows:
        fields = split_fields(row)
        if len(fields) < MIN_FIELDS:
            continue

        date_str = fields[DATE_COLUMN].strip() or UNKNOWN_DATE
        description = fields[DESCRIPTION_COLUMN].strip()

        classification = classify(description)
        if classification.hours <= 0:
            continue

        totals = hours_by_date.setdefault(date_str, {}).setdefault(classification.category, [0.0, 0])
        totals[0] += classification.hours
        totals[1] += 1
        total_hours += classification.hours

        row_date = parse_activity_date(date_str)
        if row_date is None:
            logger.debug(f"Skipping unparseable date {date_str!r} for program-year subtotal")
        elif period_start <= row_date <= period_end:
            annual_hours += classification.hours

    date_groups = tuple(
        _build_date_group(raw_date, hours_by_date[raw_date]) for raw_date in _sort_dates_descending(hours_by_date)
    )
    return HoursSummary(date_groups=date_groups, total_hours=total_hours, annual_hours=annual_hours)


def calculate_total_hours(rows: list[str]) -> float:
    """Return the total hours credited across rows"""
    return aggregate(rows).total_hours


def _sort_dates_descending(date_strs: dict[str, dict[str, list[float]]]) -> list[str]:
    """Order raw dates newest first; unparseable dates go last in first-seen order"""
    dated = []
    undated = []
    for date_str in date_strs:
        parsed = parse_activity_date(date_str)
        if parsed is None:
            undated.append(date_str)
        else:
            dated.append((parsed, date_str))

    dated.sort(key=lambda item: item[0], reverse=True)
    return [date_str for _, date_str in dated] + undated


def _build_date_group(raw_date: str, totals: dict[str, list[float]]) -> DateGroup:
    hour_details = sorted(
        (HourDetail(category=category, hours=hours, count=int(count)) for category, (hours, count) in totals.items()),
        key=lambda detail: detail.hours,
        reverse=True,
    )
    return DateGroup(raw_date=raw_date, display_date=format_date(raw_date), hour_details=tuple(hour_details))
