# ABOUTME: Normalization of raw CSV rows into Book records.
# ABOUTME: Maps Goodreads and simple export column names, coercing bad values to sentinels.

import re
from collections.abc import Mapping
from typing import Any

from nextread.catalog.types import Book

# Leading integer or decimal, mirroring lenient "parse what you can" number parsing.
_INT_PREFIX_RE = re.compile(r"^\s*([+-]?\d+)")
_FLOAT_PREFIX_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_ISBN_QUOTES_RE = re.compile(r"^[\"']+|[\"']+$")

# Candidate column names per field, checked in order. The first non-empty value wins.
_TITLE_COLUMNS = ("Title", "title")
_AUTHOR_COLUMNS = ("Author", "author", "Authors")
_PAGES_COLUMNS = ("Number of Pages", "pages", "Pages")
_YEAR_COLUMNS = ("Original Publication Year", "publicationYear", "Year Published")
_AVG_RATING_COLUMNS = ("Average Rating", "averageRating")
_USER_RATING_COLUMNS = ("My Rating", "userRating", "Rating")
_DATE_READ_COLUMNS = ("Date Read", "dateRead", "Date Finished")
_DATE_ADDED_COLUMNS = ("Date Added", "dateAdded", "Date Started")
_SHELVES_COLUMNS = ("Bookshelves", "shelves", "Status")
_ISBN_COLUMNS = ("ISBN13", "ISBN", "isbn13", "isbn")


def _first(row: Mapping[str, Any], columns: tuple[str, ...]) -> Any:
    """Return the first truthy value among the given columns, or None."""
    for column in columns:
        value = row.get(column)
        if value:
            return value
    return None


def parse_int(value: Any) -> int:
    """Parse a leading integer from value, returning 0 when there is none."""
    if value is None:
        return 0
    match = _INT_PREFIX_RE.match(str(value))
    return int(match.group(1)) if match else 0


def parse_float(value: Any) -> float:
    """Parse a leading float from value, returning 0.0 when there is none."""
    if value is None:
        return 0.0
    match = _FLOAT_PREFIX_RE.match(str(value))
    return float(match.group(1)) if match else 0.0


def clean_string(value: Any) -> str | None:
    """Trim a value to a string, returning None for missing or blank input."""
    if value is None:
        return None
    cleaned = str(value).strip()
    return cleaned or None


def extract_isbn(value: Any) -> str | None:
    """Strip Excel formula wrapping (``="978..."`` or ``=978...``) from an ISBN."""
    if not value:
        return None

    cleaned = str(value).strip()
    if cleaned.startswith('="') and cleaned.endswith('"'):
        cleaned = cleaned[2:-1]
    elif cleaned.startswith("="):
        cleaned = cleaned[1:]

    cleaned = _ISBN_QUOTES_RE.sub("", cleaned)
    return cleaned or None


def normalize_row(row: Mapping[str, Any]) -> Book:
    """Convert a raw CSV row into a Book.

    Never raises for bad data: unparseable numbers become 0 and blank strings
    become None.
    """
    return Book(
        title=clean_string(_first(row, _TITLE_COLUMNS)),
        author=clean_string(_first(row, _AUTHOR_COLUMNS)),
        pages=max(0, parse_int(_first(row, _PAGES_COLUMNS))),
        publication_year=max(0, parse_int(_first(row, _YEAR_COLUMNS))),
        average_rating=parse_float(_first(row, _AVG_RATING_COLUMNS)),
        user_rating=parse_float(_first(row, _USER_RATING_COLUMNS)),
        date_read=clean_string(_first(row, _DATE_READ_COLUMNS)),
        date_added=clean_string(_first(row, _DATE_ADDED_COLUMNS)),
        shelves=clean_string(_first(row, _SHELVES_COLUMNS)),
        isbn=extract_isbn(_first(row, _ISBN_COLUMNS)),
    )
