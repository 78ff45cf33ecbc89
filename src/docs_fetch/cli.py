"""CLI for fetching skill reference documentation."""

from __future__ import annotations

import argparse
import logging
import sys

from common.cli_helpers import setup_logging
from common.config import get_config
from docs_fetch.docs_fetch import docs_fetch
from docs_fetch.errors import InventoryNotFoundError, InventoryValidationError

logger = logging.getLogger(__name__)


def add_docs_fetch_args(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    '''Register docs-fetch arguments on a parser or subparser.'''

    parser.add_argument("inventory", help="Path to reference-inventory.json file")
    parser.add_argument(
        "--dirty",
        action="store_true",
        help="Keep existing reference files (skip cleanup)",
    )
    return parser


def run_docs_fetch(args: argparse.Namespace) -> int:
    '''Run docs-fetch for parsed arguments, returning a process exit code.'''

    try:
        docs_fetch(args.inventory, dirty=args.dirty, config=get_config())
    except (InventoryNotFoundError, InventoryValidationError) as e:
        logger.error("%s", e)
        return 1
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = add_docs_fetch_args(
        argparse.ArgumentParser(
            prog="docs-fetch",
            description="Fetch documentation from skill sources",
        )
    )
    args = parser.parse_args(argv)

    setup_logging(get_config().log_level)
    sys.exit(run_docs_fetch(args))


if __name__ == "__main__":
    main()
