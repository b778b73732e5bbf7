# ABOUTME: Unit tests for the Book and Enrichment dataclasses and read/backlog predicates.
# ABOUTME: Validates shelf matching rules and the empty-enrichment sentinel.

from nextread.catalog import (
    Book,
    Enrichment,
    is_backlog,
    is_read,
    read_books,
    unread_books,
    want_to_read_books,
)


class TestEnrichment:
    """Tests for the Enrichment dataclass."""

    def test_empty_sentinel(self) -> None:
        empty = Enrichment.empty()
        assert empty.is_empty is True
        assert empty.genres == []
        assert empty.cover_id is None

    def test_populated_is_not_empty(self) -> None:
        assert Enrichment(genres=["Fantasy"]).is_empty is False
        assert Enrichment(cover_id=42).is_empty is False


class TestReadAndBacklog:
    """Tests for is_read / is_backlog classification."""

    def test_date_read_marks_book_read(self) -> None:
        assert is_read(Book(title="A", date_read="2024/01/01")) is True
        assert is_read(Book(title="A")) is False

    def test_to_read_shelf_is_backlog(self) -> None:
        assert is_backlog(Book(title="A", shelves="to-read")) is True

    def test_want_to_read_case_insensitive(self) -> None:
        """Shelf markers match case-insensitively."""
        assert is_backlog(Book(title="A", shelves="Want-To-Read")) is True

    def test_marker_matches_as_substring(self) -> None:
        assert is_backlog(Book(title="A", shelves="favorites, to-read, sci-fi")) is True

    def test_currently_reading_is_not_backlog(self) -> None:
        assert is_backlog(Book(title="A", shelves="currently-reading")) is False

    def test_read_book_never_backlog(self) -> None:
        """A finished book stays out of the backlog even on a to-read shelf."""
        book = Book(title="A", shelves="to-read", date_read="2024/01/01")
        assert is_backlog(book) is False

    def test_no_shelves_is_not_backlog(self) -> None:
        assert is_backlog(Book(title="A")) is False

    def test_partitions(self) -> None:
        books = [
            Book(title="Read", date_read="2024/01/01"),
            Book(title="Queued", shelves="to-read"),
            Book(title="Reading", shelves="currently-reading"),
        ]
        assert [b.title for b in read_books(books)] == ["Read"]
        assert [b.title for b in unread_books(books)] == ["Queued", "Reading"]
        assert [b.title for b in want_to_read_books(books)] == ["Queued"]
