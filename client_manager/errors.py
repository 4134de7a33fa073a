"""Error types raised while decoding and validating client data.

These never escape the public load/search/duplicates functions: they are
caught at that boundary and turned into :class:`~client_manager.result.Failure`
values carrying ``str(exc)``.
"""
from __future__ import annotations


class ClientDataError(ValueError):
    """Base class for expected problems with client input."""


class ValidationError(ClientDataError):
    """Raised when a client attribute or query argument is invalid."""


class DataFileNotFoundError(ClientDataError):
    """Raised when the client data file does not exist."""


class DataFileReadError(ClientDataError):
    """Raised when the client data file exists but cannot be read."""


class ParseError(ClientDataError):
    """Raised when the client data file is not valid JSON."""


class SchemaError(ClientDataError):
    """Raised when the decoded JSON does not have the expected shape."""


__all__ = [
    "ClientDataError",
    "ValidationError",
    "DataFileNotFoundError",
    "DataFileReadError",
    "ParseError",
    "SchemaError",
]
