"""Client value object and the decoder for loosely-typed client records."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Sequence

from .errors import ValidationError
from .result import Failure, Result, Success

# Only these exact key names are read; any other key is ignored.
_FIELD_SYNONYMS: Mapping[str, Sequence[str]] = {
    "id": ("id",),
    "full_name": ("full_name", "fullName"),
    "email": ("email",),
}


def _key_name(key: Any) -> str:
    if isinstance(key, Enum):
        return key.value if isinstance(key.value, str) else key.name
    return str(key)


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


@dataclass(frozen=True, slots=True)
class Client:
    """Immutable, validated client record.

    Attributes are stored exactly as given; trimming only happens for the
    emptiness checks. Any violation raises :class:`ValidationError` before the
    instance is handed back, checked in the order ``id``, ``full_name``,
    ``email``.
    """

    id: int
    full_name: str
    email: str

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id <= 0:
            raise ValidationError("id must be a positive integer")
        if _is_blank(self.full_name):
            raise ValidationError("full_name must be a non-empty string")
        if _is_blank(self.email):
            raise ValidationError("email must be a non-empty string")

    @classmethod
    def create(cls, id: Any, full_name: Any, email: Any) -> Result[Client]:
        """Build a client, reporting validation problems as a :class:`Failure`."""

        try:
            return Success(cls(id=id, full_name=full_name, email=email))
        except ValidationError as exc:
            return Failure(str(exc))

    @classmethod
    def from_mapping(cls, attributes: Any) -> Client:
        """Build a client from a decoded JSON object (or any similar mapping).

        Missing keys are passed through as ``None`` so they fail with the same
        message as an empty value would.
        """

        if not isinstance(attributes, Mapping):
            raise ValidationError("client data must be an object")

        by_name: Dict[str, Any] = {}
        for key, value in attributes.items():
            by_name.setdefault(_key_name(key), value)

        return cls(
            id=_extract(by_name, "id"),
            full_name=_extract(by_name, "full_name"),
            email=_extract(by_name, "email"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "full_name": self.full_name, "email": self.email}

    def __str__(self) -> str:
        return f"Client #{self.id}: {self.full_name} ({self.email})"


def _extract(by_name: Mapping[str, Any], field: str) -> Optional[Any]:
    for synonym in _FIELD_SYNONYMS[field]:
        if synonym in by_name:
            return by_name[synonym]
    return None


__all__ = ["Client"]
