# ABOUTME: Enrichment package: Open Library lookups that attach genres and cover ids to books.
# ABOUTME: Scoring never waits on enrichment; failures leave an empty sentinel behind.

from nextread.enrichment.batch import enrich_candidates
from nextread.enrichment.http import EnrichmentFetchError, HttpClient, NextreadHttpClient
from nextread.enrichment.openlibrary import OpenLibraryEnricher, cover_url

__all__ = [
    "EnrichmentFetchError",
    "HttpClient",
    "NextreadHttpClient",
    "OpenLibraryEnricher",
    "cover_url",
    "enrich_candidates",
]
