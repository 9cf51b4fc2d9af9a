"""
Field formatters for resume data.

Phone numbers, date ranges and the literal fallbacks used when optional
fields are absent.
"""

import re
from typing import Optional

from jsonresume_latex.utils.latex_tools import escape
from jsonresume_latex.utils.timestamp import LONG_DATE, format_date

UNTITLED = "Untitled"
UNDISCLOSED = "Undisclosed"
PRESENT = "Present"

# LaTeX en-dash
RANGE_SEPARATOR = "--"

NATIONAL_NUMBER_LENGTH = 10


def raw_phone(phone: str) -> str:
    """Strip a phone number down to digits and the "+" country marker."""
    return re.sub(r"[^+0-9]", "", phone)


def format_phone_number(phone: str) -> str:
    """
    Format a raw phone number into a pretty LaTeX form.

    Everything before the trailing 10-digit national number is treated as the
    country code when the number starts with "+" or is longer than 10
    characters. Input is not validated: malformed numbers give malformed but
    non-crashing output.

    Args:
        phone: Raw phone number, e.g. 5555555555 or +15555555555

    Returns:
        Formatted phone number

    Examples:
        format_phone_number("5555555555")
        # "(555) 555--5555"

        format_phone_number("+15555555555")
        # "1 (555) 555--5555"
    """
    country = ""
    if phone.startswith("+") or len(phone) > NATIONAL_NUMBER_LENGTH:
        country = phone[:-NATIONAL_NUMBER_LENGTH].lstrip("+")
        phone = phone[-NATIONAL_NUMBER_LENGTH:]

    formatted = f"({phone[0:3]}) {phone[3:6]}{RANGE_SEPARATOR}{phone[6:10]}"
    return f"{country} {formatted}" if country else formatted


def format_date_range(
    start_date: Optional[str], end_date: Optional[str], pattern: str = LONG_DATE
) -> str:
    """
    Format a start/end date pair as a LaTeX date range.

    A missing end date means the entry is ongoing and renders as "Present".
    Unparseable dates pass through format_date unchanged, so both ends are
    escaped.
    """
    start = format_date(start_date, pattern)
    end = format_date(end_date, pattern) if end_date else PRESENT
    return f"{escape(start)}{RANGE_SEPARATOR}{escape(end)}"


def with_details(label: str, details: Optional[str]) -> str:
    """Append a parenthesized detail, e.g. "Python (Expert)", when present."""
    return f"{label} ({details})" if details else label
