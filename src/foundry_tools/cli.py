"""Development tools for the plugin marketplace."""

from __future__ import annotations

import argparse
import sys

from common.cli_helpers import setup_logging
from common.config import get_config
from docs_fetch.cli import add_docs_fetch_args, run_docs_fetch

VERSION = "0.1.0"

COMMANDS = {
    "docs-fetch": (
        "Fetch documentation from skill sources",
        add_docs_fetch_args,
        run_docs_fetch,
    ),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="foundry-tools",
        description="Development tools for the plugin marketplace",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    for name, (help_text, add_args, run) in COMMANDS.items():
        subparser = subparsers.add_parser(name, help=help_text, description=help_text)
        add_args(subparser)
        subparser.set_defaults(run=run)

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(get_config().log_level)
    sys.exit(args.run(args))


if __name__ == "__main__":
    main()
