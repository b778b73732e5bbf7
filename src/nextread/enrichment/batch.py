# ABOUTME: Batched, bounded-concurrency enrichment of candidate books.
# ABOUTME: Runs at most batch_size lookups at once and records an empty sentinel on failure.

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Protocol

from nextread.catalog.types import Book, Enrichment
from nextread.enrichment.http import EnrichmentFetchError

logger = logging.getLogger(__name__)

DEFAULT_ENRICH_LIMIT = 10
DEFAULT_BATCH_SIZE = 3


class Enricher(Protocol):
    def fetch(self, book: Book) -> Enrichment: ...


def _fetch_or_empty(enricher: Enricher, book: Book) -> Enrichment:
    try:
        return enricher.fetch(book)
    except EnrichmentFetchError as exc:
        logger.warning("Enrichment failed for %s: %s", book.display_title, exc)
        return Enrichment.empty()
    except Exception:
        # One bad record must not abort the batch or leave its siblings unset
        logger.warning("Unexpected error enriching %s", book.display_title, exc_info=True)
        return Enrichment.empty()


def enrich_book(book: Book, enricher: Enricher) -> Enrichment:
    """Enrich a single book unless it already carries an enrichment."""
    if book.enrichment is None:
        book.enrichment = _fetch_or_empty(enricher, book)
    return book.enrichment


def enrich_candidates(
    books: Sequence[Book],
    enricher: Enricher,
    *,
    limit: int = DEFAULT_ENRICH_LIMIT,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> int:
    """Attach enrichment to up to `limit` books that have an ISBN and none yet.

    MUTATES books in place. Books are processed in batches of `batch_size`;
    each batch runs concurrently and finishes before the next one starts.
    A failed lookup, whatever the error, stores Enrichment.empty() so it is
    never retried and never reaches the caller.

    Returns:
        Number of books that were looked up.
    """
    pending = [book for book in books if book.isbn and book.enrichment is None][:limit]
    if not pending:
        return 0

    with ThreadPoolExecutor(max_workers=batch_size) as pool:
        for start in range(0, len(pending), batch_size):
            batch = pending[start : start + batch_size]
            results = pool.map(lambda book: _fetch_or_empty(enricher, book), batch)
            for book, enrichment in zip(batch, results, strict=True):
                book.enrichment = enrichment

    logger.debug("Enriched %d book(s) in batches of %d", len(pending), batch_size)
    return len(pending)
