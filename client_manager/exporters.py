"""Export utilities for client query results."""
from __future__ import annotations

from pathlib import Path
from typing import List, Mapping, MutableMapping, Optional, Sequence, Union

import pandas as pd

from .models import Client

PathLike = Union[str, Path]

_CLIENT_COLUMNS = ["id", "full_name", "email"]
_DUPLICATE_COLUMNS = ["normalized_email", "occurrences", *_CLIENT_COLUMNS]


class UnsupportedFileTypeError(ValueError):
    """Raised when results are exported to an unsupported file format."""


def clients_to_dataframe(clients: Sequence[Client]) -> pd.DataFrame:
    """Convert clients into a :class:`pandas.DataFrame`, one row per client."""

    return pd.DataFrame([client.to_dict() for client in clients], columns=_CLIENT_COLUMNS)


def duplicates_to_dataframe(duplicates: Mapping[str, Sequence[Client]]) -> pd.DataFrame:
    """Flatten duplicate groups into one row per client, tagged with the shared email."""

    records: List[MutableMapping[str, object]] = []
    for email, members in duplicates.items():
        for client in members:
            row: MutableMapping[str, object] = {"normalized_email": email, "occurrences": len(members)}
            row.update(client.to_dict())
            records.append(row)
    return pd.DataFrame(records, columns=_DUPLICATE_COLUMNS)


def export_clients(
    clients: Sequence[Client],
    path: PathLike,
    *,
    sheet_name: str = "Clients",
    exporter_kwargs: Optional[MutableMapping[str, object]] = None,
) -> Path:
    """Write clients to a CSV, TSV or Excel file."""

    output_path = Path(path)
    _write_dataframe(clients_to_dataframe(clients), output_path, sheet_name=sheet_name, exporter_kwargs=exporter_kwargs)
    return output_path


def export_duplicates(
    duplicates: Mapping[str, Sequence[Client]],
    path: PathLike,
    *,
    sheet_name: str = "Duplicates",
    exporter_kwargs: Optional[MutableMapping[str, object]] = None,
) -> Path:
    """Write duplicate email groups to a CSV, TSV or Excel file."""

    output_path = Path(path)
    _write_dataframe(
        duplicates_to_dataframe(duplicates), output_path, sheet_name=sheet_name, exporter_kwargs=exporter_kwargs
    )
    return output_path


def _write_dataframe(
    dataframe: pd.DataFrame,
    path: Path,
    *,
    sheet_name: str,
    exporter_kwargs: Optional[MutableMapping[str, object]],
) -> None:
    exporter_kwargs = dict(exporter_kwargs or {})
    suffix = path.suffix.lower()

    if suffix in {".csv", ".tsv"}:
        if suffix == ".tsv":
            exporter_kwargs.setdefault("sep", "\t")
        path.parent.mkdir(parents=True, exist_ok=True)
        dataframe.to_csv(path, index=False, **exporter_kwargs)
        return

    if suffix in {".xlsx", ".xlsm"}:
        engine = exporter_kwargs.pop("engine", None) or "openpyxl"
        path.parent.mkdir(parents=True, exist_ok=True)
        dataframe.to_excel(path, index=False, sheet_name=sheet_name, engine=engine, **exporter_kwargs)
        return

    raise UnsupportedFileTypeError(f"Unsupported export file extension: {path.suffix}")


__all__ = [
    "UnsupportedFileTypeError",
    "clients_to_dataframe",
    "duplicates_to_dataframe",
    "export_clients",
    "export_duplicates",
]
