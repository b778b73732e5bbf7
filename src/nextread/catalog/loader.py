# ABOUTME: CSV loading for reading-history exports (Goodreads and simple layouts).
# ABOUTME: Reads rows with csv.DictReader and normalizes each one into a Book.

import csv
import io
import logging
from collections.abc import Iterable
from pathlib import Path

from nextread.catalog.normalizer import normalize_row
from nextread.catalog.sample import SAMPLE_CSV
from nextread.catalog.types import Book

logger = logging.getLogger(__name__)


class CatalogReadError(Exception):
    """Raised when a reading-history file cannot be read or parsed as CSV."""


def _normalize_rows(lines: Iterable[str]) -> list[Book]:
    reader = csv.DictReader(lines)
    books: list[Book] = []
    for row in reader:
        # Blank lines come through as rows of empty values
        if not any((value or "").strip() for value in row.values() if isinstance(value, str)):
            continue
        books.append(normalize_row(row))
    return books


def load_library(path: Path) -> list[Book]:
    """Load and normalize every row of a CSV reading history.

    Args:
        path: Path to the CSV export.

    Returns:
        Normalized books in file order.

    Raises:
        CatalogReadError: If the file cannot be opened, decoded, or parsed.
    """
    try:
        # utf-8-sig swallows the BOM that spreadsheet exports like to add
        with path.open(newline="", encoding="utf-8-sig") as handle:
            books = _normalize_rows(handle)
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise CatalogReadError(f"Cannot read {path}: {exc}") from exc

    logger.debug("Loaded %d book(s) from %s", len(books), path)
    return books


def load_sample_library() -> list[Book]:
    """Load the bundled sample reading history."""
    return _normalize_rows(io.StringIO(SAMPLE_CSV))
