"""Read and update the reference inventory file."""

import json
import logging
from pathlib import Path

from common.local_io import read_json, write_json
from docs_fetch.errors import InventoryNotFoundError, InventoryValidationError
from docs_fetch.models import ReferenceInventory

logger = logging.getLogger(__name__)

INVALID_SOURCES_MESSAGE = "Invalid inventory: 'sources' must be an object"


def load_inventory(path: Path) -> ReferenceInventory:
    """Load and validate an inventory file.

    Raises:
        InventoryNotFoundError: If ``path`` does not exist.
        InventoryValidationError: If the file is not JSON, or ``sources`` is
            missing, not an object, or an array.
    """
    if not path.exists():
        raise InventoryNotFoundError(f"Inventory not found: {path}")

    try:
        data = read_json(path)
    except json.JSONDecodeError as exc:
        raise InventoryValidationError(f"Invalid inventory: {exc}") from exc

    if not isinstance(data, dict) or not isinstance(data.get("sources"), dict):
        raise InventoryValidationError(INVALID_SOURCES_MESSAGE)

    return ReferenceInventory(
        sources=data["sources"],
        last_fetched=data.get("lastFetched"),
        data=data,
    )


def save_inventory(path: Path, inventory: ReferenceInventory) -> None:
    """Rewrite the inventory file with 2-space indentation."""
    write_json(path, inventory.to_dict())
    logger.debug("Updated inventory %s (lastFetched=%s)", path, inventory.last_fetched)
