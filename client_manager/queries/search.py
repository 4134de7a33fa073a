"""Case-insensitive partial matching on client names."""
from __future__ import annotations

from typing import Any, Iterable, List, Tuple

from ..errors import ValidationError
from ..models import Client
from ..result import Failure, Result, Success


def _normalise(value: str) -> str:
    return value.strip().lower()


class SearchClients:
    """Finds clients whose ``full_name`` contains a search term."""

    def __init__(self, clients: Iterable[Client]) -> None:
        self._clients: Tuple[Client, ...] = tuple(clients)

    def call(self, search_term: Any) -> Result[List[Client]]:
        """Return matching clients in collection order.

        An invalid term yields a :class:`Failure`; no matches is an empty
        :class:`Success`.
        """

        try:
            self._validate(search_term)
        except ValidationError as exc:
            return Failure(str(exc))

        term = _normalise(search_term)
        return Success([client for client in self._clients if term in _normalise(client.full_name)])

    @staticmethod
    def _validate(search_term: Any) -> None:
        if search_term is None:
            raise ValidationError("search_term cannot be nil")
        if not isinstance(search_term, str):
            raise ValidationError("search_term must be a string")
        if not search_term.strip():
            raise ValidationError("search_term cannot be empty")


def search(clients: Iterable[Client], search_term: Any) -> Result[List[Client]]:
    return SearchClients(clients).call(search_term)


__all__ = ["SearchClients", "search"]
