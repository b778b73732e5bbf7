# ABOUTME: Core book record structures shared by insights, decision, and enrichment.
# ABOUTME: Book is the interchange format between the CSV normalizer and the scoring funnel.

from collections.abc import Iterable
from dataclasses import dataclass, field

# Shelf markers that put an unread book on the backlog (matched as substrings).
_BACKLOG_MARKERS = ("to-read", "want-to-read")


@dataclass
class Enrichment:
    """External metadata attached to a book after an Open Library lookup."""

    subjects_raw: list[str] = field(default_factory=list)
    genres: list[str] = field(default_factory=list)
    cover_id: int | None = None

    @classmethod
    def empty(cls) -> "Enrichment":
        """Sentinel stored when a lookup fails, so the book is not fetched again."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.subjects_raw and not self.genres and self.cover_id is None


@dataclass
class Book:
    """A single normalized row from a reading-history export.

    Numeric fields use 0 for "unknown" and string fields use None, so nothing
    downstream has to guard against missing keys. Only ``enrichment`` changes
    after normalization.
    """

    title: str | None = None
    author: str | None = None
    pages: int = 0
    publication_year: int = 0
    average_rating: float = 0.0
    user_rating: float = 0.0
    date_read: str | None = None
    date_added: str | None = None
    shelves: str | None = None
    isbn: str | None = None
    enrichment: Enrichment | None = None

    @property
    def display_title(self) -> str:
        return self.title or "Unknown Title"

    @property
    def display_author(self) -> str:
        return self.author or "Unknown Author"


def is_read(book: Book) -> bool:
    """A book is read iff it carries a date_read value."""
    return book.date_read is not None


def is_backlog(book: Book) -> bool:
    """Whether an unread book is tagged as want-to-read."""
    if is_read(book) or not book.shelves:
        return False
    shelves = book.shelves.lower()
    return any(marker in shelves for marker in _BACKLOG_MARKERS)


def read_books(books: Iterable[Book]) -> list[Book]:
    return [book for book in books if is_read(book)]


def unread_books(books: Iterable[Book]) -> list[Book]:
    return [book for book in books if not is_read(book)]


def want_to_read_books(books: Iterable[Book]) -> list[Book]:
    return [book for book in books if is_backlog(book)]
