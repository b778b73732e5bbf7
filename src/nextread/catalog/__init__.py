# ABOUTME: Catalog package: book records, CSV loading, and row normalization.
# ABOUTME: Exports the Book record and the read/unread/backlog partition helpers.

from nextread.catalog.loader import CatalogReadError, load_library, load_sample_library
from nextread.catalog.normalizer import normalize_row
from nextread.catalog.types import (
    Book,
    Enrichment,
    is_backlog,
    is_read,
    read_books,
    unread_books,
    want_to_read_books,
)

__all__ = [
    "Book",
    "CatalogReadError",
    "Enrichment",
    "is_backlog",
    "is_read",
    "load_library",
    "load_sample_library",
    "normalize_row",
    "read_books",
    "unread_books",
    "want_to_read_books",
]
