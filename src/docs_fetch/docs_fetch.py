"""Fetch every source of a reference inventory into its reference directory."""

import logging
from pathlib import Path
from typing import Optional

from common.config import ToolsConfig, get_config
from common.datetime import utc_timestamp
from docs_fetch.errors import FetchError
from docs_fetch.fetch_content import fetch_content
from docs_fetch.inventory import load_inventory, save_inventory
from docs_fetch.process_html import process_content
from docs_fetch.write_reference import prepare_reference_dir, write_reference

logger = logging.getLogger(__name__)


def docs_fetch(
    inventory_path: str | Path,
    dirty: bool = False,
    config: Optional[ToolsConfig] = None,
) -> list[Path]:
    """
    Fetch, convert and write each inventory source, then stamp ``lastFetched``.

    A source that fails to fetch is logged and skipped. Errors while writing
    propagate. ``lastFetched`` is updated even when sources failed.

    Returns the paths written during this run.
    """
    config = config or get_config()
    inventory_path = Path(inventory_path).resolve()
    inventory = load_inventory(inventory_path)

    reference_dir = inventory_path.parent / config.reference_dirname
    prepare_reference_dir(reference_dir, keep_existing=dirty)

    logger.info("Found %d source(s)", len(inventory.sources))

    written = []
    for label, url in inventory.sources.items():
        logger.info("%s", label)

        try:
            raw = fetch_content(url, timeout=config.request_timeout)
        except FetchError as e:
            logger.error("  Failed: %s", e)
            continue

        fetched_at = utc_timestamp()
        document = process_content(url, raw)
        written.append(write_reference(reference_dir, label, url, document, fetched_at))

    inventory.last_fetched = utc_timestamp()
    save_inventory(inventory_path, inventory)

    logger.info("Done")
    return written
