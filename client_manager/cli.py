"""Command line interface for searching clients and finding duplicate emails."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

from .config import ConfigurationError, resolve_settings
from .exporters import UnsupportedFileTypeError, export_clients, export_duplicates
from .models import Client
from .queries import find_duplicates, search
from .repository import ClientRepository
from .result import Failure

LOGGER = logging.getLogger(__name__)

SEPARATOR = "=" * 80


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Search client records and detect clients sharing an email address",
    )
    parser.add_argument(
        "--config",
        help="Path to a configuration file (YAML or JSON) providing 'data_file'",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING)",
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-f",
        "--file",
        help="Path to the clients JSON file (defaults to the bundled data/clients.json)",
    )
    common.add_argument(
        "-o",
        "--output",
        help="Also export the results to this CSV, TSV or XLSX file",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    search_parser = subparsers.add_parser(
        "search",
        parents=[common],
        help="Search clients by partial, case-insensitive name match",
    )
    search_parser.add_argument("query", help="Part of the client's full name to look for")
    subparsers.add_parser(
        "duplicates",
        parents=[common],
        help="List clients that share the same email address",
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    try:
        data_file = Path(args.file) if args.file else resolve_settings(args.config).data_file
    except ConfigurationError as exc:
        _print_error(str(exc))
        return 1

    loaded = ClientRepository(data_file).load_all()
    if isinstance(loaded, Failure):
        _print_error(f"Failed to load clients: {loaded.error}")
        return 1
    clients = loaded.value

    if args.command == "search":
        return _run_search(clients, args.query, args.output)
    return _run_duplicates(clients, args.output)


def _run_search(clients: List[Client], query: str, output: Optional[str]) -> int:
    result = search(clients, query)
    if isinstance(result, Failure):
        _print_error(result.error)
        return 1

    print(format_search_results(query, result.value))
    if output:
        return _export(export_clients, result.value, output)
    return 0


def _run_duplicates(clients: List[Client], output: Optional[str]) -> int:
    result = find_duplicates(clients)
    if isinstance(result, Failure):
        _print_error(result.error)
        return 1

    print(format_duplicates(result.value))
    if output:
        return _export(export_duplicates, result.value, output)
    return 0


def _export(exporter: Callable[[Any, str], Path], payload: Any, output: str) -> int:
    try:
        destination = exporter(payload, output)
    except UnsupportedFileTypeError as exc:
        _print_error(str(exc))
        return 1
    except OSError as exc:
        _print_error(f"Failed to export results: {exc}")
        return 1
    LOGGER.info("Results written to %s", destination.resolve())
    return 0


def format_search_results(query: str, clients: Sequence[Client]) -> str:
    lines = [f"Search results for '{query}'", SEPARATOR]
    if not clients:
        lines.append("No clients found matching your search.")
        return "\n".join(lines)

    lines.append(f"Found {len(clients)} client(s):")
    blocks = [f"ID: {client.id}\nName: {client.full_name}\nEmail: {client.email}" for client in clients]
    return "\n".join(lines) + "\n\n" + "\n\n".join(blocks)


def format_duplicates(duplicates: Dict[str, List[Client]]) -> str:
    lines = ["Duplicate Email Analysis", SEPARATOR]
    if not duplicates:
        lines.append("No duplicate emails found.")
        return "\n".join(lines)

    lines.append(f"Found {len(duplicates)} duplicate email(s):")
    blocks = []
    for email, members in duplicates.items():
        entries = [f"Email: {email} ({len(members)} occurrences)"]
        entries.extend(f"  - ID: {client.id}, Name: {client.full_name}" for client in members)
        blocks.append("\n".join(entries))
    return "\n".join(lines) + "\n\n" + "\n\n".join(blocks)


def _print_error(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
