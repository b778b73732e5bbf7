# ABOUTME: nextread - picks the next book to read from a personal reading history.
# ABOUTME: The package version lives here so the CLI and HTTP client can report it.

__version__ = "0.1.0"
