"""Date formatting utilities."""

import re
from datetime import date, datetime
from typing import Optional, Union

# Pattern names follow moment.js display tokens
LONG_DATE = "LL"  # June 30, 2020
MONTH_YEAR = "MMMM YYYY"  # June 2020

# JSON Resume partial ISO 8601 dates: YYYY, YYYY-MM or YYYY-MM-DD
PARTIAL_DATE_REGEX = re.compile(r"^(\d{4})(?:-(\d{1,2})(?:-(\d{1,2}))?)?$")


def _format_long_date(dt: date) -> str:
    return f"{dt.strftime('%B')} {dt.day}, {dt.year}"


def _format_month_year(dt: date) -> str:
    return f"{dt.strftime('%B')} {dt.year}"


DATE_FORMATTERS = {
    LONG_DATE: _format_long_date,
    MONTH_YEAR: _format_month_year,
}


def parse_date(value: str) -> date:
    """
    Parse a JSON Resume date.

    Accepts partial ISO 8601 dates (missing month or day default to 1) and
    full ISO timestamps.

    Raises:
        ValueError: If the value is not a recognizable date
    """
    value = value.strip()
    match = PARTIAL_DATE_REGEX.match(value)
    if match:
        year, month, day = match.groups()
        return date(int(year), int(month or 1), int(day or 1))
    return datetime.fromisoformat(value).date()


def format_date(value: Optional[Union[str, date]], pattern: str = LONG_DATE) -> str:
    """
    Format a resume date for display.

    Args:
        value: ISO-ish date string or date object
        pattern: Pattern name, LONG_DATE ("LL") or MONTH_YEAR ("MMMM YYYY")

    Returns:
        Formatted date, "" for missing input, or the original string if it
        cannot be parsed

    Raises:
        ValueError: If the pattern name is not supported

    Examples:
        format_date("2020-06-30")
        # "June 30, 2020"

        format_date("2020-06", MONTH_YEAR)
        # "June 2020"
    """
    if pattern not in DATE_FORMATTERS:
        raise ValueError(
            f"Unsupported date pattern '{pattern}'. Valid patterns: {list(DATE_FORMATTERS)}"
        )
    if not value:
        return ""

    if isinstance(value, date):
        dt = value
    else:
        try:
            dt = parse_date(str(value))
        except ValueError:
            # Return original if parsing fails
            return str(value)

    return DATE_FORMATTERS[pattern](dt)
