"""Read-only queries over an in-memory client collection."""

from .duplicates import FindDuplicates, find_duplicates
from .search import SearchClients, search

__all__ = ["FindDuplicates", "SearchClients", "find_duplicates", "search"]
