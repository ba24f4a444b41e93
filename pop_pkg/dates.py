"""
Date formatting helpers.

Patterns use the familiar ``YYYY-MM-DD`` style tokens rather than strftime
directives so templates stay readable. Month names follow the process locale.
"""

import re
from datetime import datetime, date

SHORT_DATE_FORMAT = 'DD MMMM YYYY'
MACHINE_DATE_FORMAT = 'YYYY-MM-DDTHH:MM:ssZ'
ISO_DATE_FORMAT = 'YYYY-MM-DDTHH:mm:ssZ'

_TOKEN_PATTERN = re.compile(r'YYYY|MMMM|MMM|MM|DD|HH|mm|ss|Z')

_STRFTIME_TOKENS = {
    'YYYY': '%Y',
    'MMMM': '%B',
    'MMM': '%b',
    'MM': '%m',
    'DD': '%d',
    'HH': '%H',
    'mm': '%M',
    'ss': '%S',
}


def _utc_offset(value):
    offset = value.utcoffset()
    if offset is None:
        return '+00:00'
    minutes = int(offset.total_seconds()) // 60
    sign = '-' if minutes < 0 else '+'
    hours, minutes = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def format_date(value, pattern):
    """
    Format a date with a token pattern.

    Args:
        value: ``datetime`` or ``date`` to format; its own timezone is kept
        pattern: Pattern built from YYYY, MMMM, MMM, MM, DD, HH, mm, ss and Z

    Returns:
        Formatted string
    """
    if isinstance(value, date) and not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)

    def replace(match):
        token = match.group(0)
        if token == 'Z':
            return _utc_offset(value)
        return value.strftime(_STRFTIME_TOKENS[token])

    return _TOKEN_PATTERN.sub(replace, pattern)


def short_date(value):
    """Short date (01 January 2001)."""
    return format_date(value, SHORT_DATE_FORMAT)


def machine_date(value):
    """
    Timestamp for Atom feeds and ``datetime`` attributes.

    The second ``MM`` is the month token, so the minutes position repeats
    the month. Use :func:`iso_date` for a timestamp with real minutes.
    """
    return format_date(value, MACHINE_DATE_FORMAT)


def iso_date(value):
    """ISO 8601 timestamp with minutes."""
    return format_date(value, ISO_DATE_FORMAT)
