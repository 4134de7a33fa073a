"""Detection of clients that share an email address."""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Tuple

from ..models import Client
from ..result import Result, Success

LOGGER = logging.getLogger(__name__)


def normalise_email(email: str) -> str:
    return email.strip().lower()


class FindDuplicates:
    """Groups clients by normalised email and keeps groups with several members."""

    def __init__(self, clients: Iterable[Client]) -> None:
        self._clients: Tuple[Client, ...] = tuple(clients)

    def call(self) -> Result[Dict[str, List[Client]]]:
        grouped: Dict[str, List[Client]] = {}
        for client in self._clients:
            grouped.setdefault(normalise_email(client.email), []).append(client)

        duplicates = {email: members for email, members in grouped.items() if len(members) > 1}
        LOGGER.debug("Found %s duplicate emails among %s clients", len(duplicates), len(self._clients))
        return Success(duplicates)


def find_duplicates(clients: Iterable[Client]) -> Result[Dict[str, List[Client]]]:
    return FindDuplicates(clients).call()


__all__ = ["FindDuplicates", "find_duplicates", "normalise_email"]
