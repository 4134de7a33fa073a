"""Run the client manager with ``python -m client_manager``."""
from __future__ import annotations

import sys

from . import cli


def main(argv: list[str] | None = None) -> int:
    """Search clients or report duplicate emails; without a subcommand, show usage."""

    args = sys.argv[1:] if argv is None else argv
    if args:
        return cli.main(args)

    cli.build_parser(prog="python -m client_manager").print_help()
    return 2


if __name__ == "__main__":  # pragma: no cover - module entry point
    sys.exit(main())
