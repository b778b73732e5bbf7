# ABOUTME: Open Library enrichment: ISBN edition lookup followed by the works record.
# ABOUTME: Produces an Enrichment with raw subjects, canonical genres, and a cover id.

import logging
import re
from typing import Any

from nextread.catalog.types import Book, Enrichment
from nextread.enrichment.genres import map_subjects_to_genres
from nextread.enrichment.http import EnrichmentFetchError, HttpClient

logger = logging.getLogger(__name__)

_OL_BASE = "https://openlibrary.org"
_COVERS_BASE_URL = "https://covers.openlibrary.org/b"
_ISBN_STRIP_RE = re.compile(r"[^0-9X]", re.IGNORECASE)


def clean_isbn(isbn: str) -> str:
    """Drop everything but digits and the X check character."""
    return _ISBN_STRIP_RE.sub("", isbn)


def cover_url(book: Book, size: str = "L") -> str | None:
    """Cover image URL for a book, by ISBN first and enrichment cover id second."""
    if book.isbn:
        isbn = clean_isbn(book.isbn)
        if isbn:
            return f"{_COVERS_BASE_URL}/isbn/{isbn}-{size}.jpg"
    if book.enrichment is not None and book.enrichment.cover_id is not None:
        return f"{_COVERS_BASE_URL}/id/{book.enrichment.cover_id}-{size}.jpg"
    return None


def _first_cover(data: dict[str, Any]) -> int | None:
    covers = data.get("covers")
    if not isinstance(covers, list):
        return None
    # Open Library uses -1 as a "no cover" placeholder
    for cover in covers:
        if isinstance(cover, int) and cover > 0:
            return cover
    return None


def parse_enrichment(edition: dict[str, Any], work: dict[str, Any]) -> Enrichment:
    """Build an Enrichment from an edition (ISBN) payload and its works payload."""
    listed = work.get("subjects")
    subjects = [s for s in listed if isinstance(s, str)] if isinstance(listed, list) else []
    return Enrichment(
        subjects_raw=subjects,
        genres=map_subjects_to_genres(subjects),
        cover_id=_first_cover(edition) or _first_cover(work),
    )


class OpenLibraryEnricher:
    """Fetches subject and cover data for a book from openlibrary.org.

    Uses a dependency-injected HttpClient for testability.
    """

    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    @property
    def name(self) -> str:
        return "openlibrary"

    def fetch(self, book: Book) -> Enrichment:
        """Look up a book by ISBN and return its enrichment.

        Raises:
            EnrichmentFetchError: If the book has no usable ISBN, either
                request fails, a payload is not a JSON object, or the edition
                is not linked to a work.
        """
        isbn = clean_isbn(book.isbn or "")
        if not isbn:
            raise EnrichmentFetchError(f"No ISBN for {book.display_title!r}")

        edition = self._http.get(f"{_OL_BASE}/isbn/{isbn}.json")
        if not isinstance(edition, dict):
            raise EnrichmentFetchError(f"Unexpected edition payload for ISBN {isbn}")

        works = edition.get("works") or []
        works_key = None
        if isinstance(works, list) and works and isinstance(works[0], dict):
            works_key = works[0].get("key")
        if not isinstance(works_key, str) or not works_key:
            raise EnrichmentFetchError(f"No works found for ISBN {isbn}")

        work = self._http.get(f"{_OL_BASE}{works_key}.json")
        if not isinstance(work, dict):
            raise EnrichmentFetchError(f"Unexpected work payload for {works_key}")
        enrichment = parse_enrichment(edition, work)
        logger.debug(
            "Enriched %s: %d subject(s), %d genre(s)",
            isbn,
            len(enrichment.subjects_raw),
            len(enrichment.genres),
        )
        return enrichment
