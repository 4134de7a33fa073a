"""Load client records from JSON and query them by name or shared email."""

from .errors import (
    ClientDataError,
    DataFileNotFoundError,
    DataFileReadError,
    ParseError,
    SchemaError,
    ValidationError,
)
from .models import Client
from .queries import FindDuplicates, SearchClients, find_duplicates, search
from .repository import DEFAULT_DATA_FILE, ClientRepository, load_all
from .result import Failure, Result, Success

__all__ = [
    "Client",
    "ClientDataError",
    "ClientRepository",
    "DEFAULT_DATA_FILE",
    "DataFileNotFoundError",
    "DataFileReadError",
    "Failure",
    "FindDuplicates",
    "ParseError",
    "Result",
    "SchemaError",
    "SearchClients",
    "Success",
    "ValidationError",
    "find_duplicates",
    "load_all",
    "search",
]
