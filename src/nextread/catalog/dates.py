# ABOUTME: Lenient date helpers for the free-form date strings found in reading exports.
# ABOUTME: Unparseable input always resolves to None rather than raising.

import re
from datetime import datetime

# Tried in order. Month-first wins over day-first for ambiguous slash dates.
_DATE_FORMATS = (
    "%Y/%m/%d",
    "%Y-%m-%d",
    "%m/%d/%Y",
    "%d/%m/%Y",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%SZ",
    "%b %d, %Y",
    "%B %d, %Y",
    "%d %b %Y",
    "%d %B %Y",
)

_YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")


def parse_date(value: str | None) -> datetime | None:
    """Parse a date string in any known export format, or return None."""
    if not value:
        return None
    value = value.strip()
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


def extract_year(value: str | None) -> int | None:
    """Pull the first 19xx/20xx year token out of a date string."""
    if not value:
        return None
    match = _YEAR_RE.search(str(value))
    return int(match.group(0)) if match else None
