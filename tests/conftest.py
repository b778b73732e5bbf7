# ABOUTME: Shared pytest fixtures for nextread tests.
# ABOUTME: Provides the sample library, a CSV export on disk, and a fixed reference time.

from datetime import datetime
from pathlib import Path

import pytest

from nextread.catalog import Book, load_sample_library

GOODREADS_HEADER = (
    "Book Id,Title,Author,ISBN,ISBN13,My Rating,Average Rating,Number of Pages,"
    "Original Publication Year,Date Read,Date Added,Bookshelves,Exclusive Shelf\n"
)


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def now() -> datetime:
    """Fixed reference time for anything that depends on backlog age."""
    return datetime(2026, 1, 1)


@pytest.fixture
def sample_books() -> list[Book]:
    """The bundled sample library, freshly normalized."""
    return load_sample_library()


@pytest.fixture
def goodreads_csv(tmp_path: Path) -> Path:
    """A small Goodreads-style export with read, to-read, and currently-reading rows."""
    rows = [
        '1,Dune,Frank Herbert,="0441172717",="9780441172719",5,4.25,412,1965,'
        "2024/02/10,2023/12/01,,read\n",
        '2,Kindred,Octavia E. Butler,="0807083690",="9780807083697",4,4.25,264,1979,'
        "2024/03/01,2024/01/15,,read\n",
        '3,The Dispossessed,Ursula K. Le Guin,="0061054887",="9780061054884",0,4.22,387,1974,'
        ",2020/05/01,to-read,to-read\n",
        '4,Piranesi,Susanna Clarke,="1635575636",="9781635575637",0,4.22,272,2020,'
        ",2025/10/01,to-read,to-read\n",
        '5,Middlemarch,George Eliot,="",="",0,3.99,880,1871,'
        ",2018/07/04,currently-reading,currently-reading\n",
    ]
    path = tmp_path / "goodreads_library_export.csv"
    path.write_text(GOODREADS_HEADER + "".join(rows), encoding="utf-8")
    return path


@pytest.fixture
def read_only_csv(tmp_path: Path) -> Path:
    """An export where every book has been finished, so the backlog is empty."""
    path = tmp_path / "finished.csv"
    path.write_text(
        "Title,Author,Pages,Year Published,Date Finished,Rating,Average Rating,Status\n"
        "Dune,Frank Herbert,412,1965,2024/02/10,5,4.25,read\n"
        "Circe,Madeline Miller,393,2018,2024/05/01,4,4.25,read\n",
        encoding="utf-8",
    )
    return path
