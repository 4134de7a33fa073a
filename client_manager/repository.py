"""Loading client records from a JSON data file."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Union

from .errors import (
    ClientDataError,
    DataFileNotFoundError,
    DataFileReadError,
    ParseError,
    SchemaError,
)
from .models import Client
from .result import Failure, Result, Success

LOGGER = logging.getLogger(__name__)

PathLike = Union[str, Path]

DEFAULT_DATA_FILE = Path(__file__).resolve().parent / "data" / "clients.json"


class ClientRepository:
    """Reads every client from a JSON array stored at ``file_path``.

    The file is re-read on each call to :meth:`load_all`; nothing is cached.
    """

    def __init__(self, file_path: PathLike = DEFAULT_DATA_FILE) -> None:
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load_all(self) -> Result[List[Client]]:
        """Return all clients in file order, or a :class:`Failure` describing the first problem."""

        try:
            self._ensure_exists()
            text = self._read_text()
            clients = self._build_clients(self._parse_json(text))
        except ClientDataError as exc:
            LOGGER.warning("Failed to load clients from %s: %s", self._file_path, exc)
            return Failure(str(exc))

        LOGGER.debug("Loaded %s clients from %s", len(clients), self._file_path)
        return Success(clients)

    def _ensure_exists(self) -> None:
        if not self._file_path.exists():
            raise DataFileNotFoundError(f"File not found: {self._file_path}")

    def _read_text(self) -> str:
        try:
            return self._file_path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise DataFileNotFoundError(f"File not found: {exc}") from exc
        except PermissionError as exc:
            raise DataFileReadError(f"Permission denied: {exc}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise DataFileReadError(f"Error reading file: {exc}") from exc

    @staticmethod
    def _parse_json(text: str) -> Any:
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ParseError(f"Invalid JSON format: {exc}") from exc

    @staticmethod
    def _build_clients(data: Any) -> List[Client]:
        if not isinstance(data, list):
            raise SchemaError("JSON root must be an array")

        clients: List[Client] = []
        for index, attributes in enumerate(data):
            try:
                clients.append(Client.from_mapping(attributes))
            except ClientDataError as exc:
                raise type(exc)(f"Invalid client data at index {index}: {exc}") from exc
        return clients


def load_all(path: PathLike = DEFAULT_DATA_FILE) -> Result[List[Client]]:
    """Shortcut for ``ClientRepository(path).load_all()``."""

    return ClientRepository(path).load_all()


__all__ = ["ClientRepository", "DEFAULT_DATA_FILE", "load_all"]
