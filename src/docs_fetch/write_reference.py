"""Write fetched documents into the reference directory."""

import logging
import re
import shutil
from pathlib import Path

from docs_fetch.models import FetchedDocument

logger = logging.getLogger(__name__)


def to_filename(label: str, ext: str) -> str:
    """Convert a label to a filesystem-safe name: ``"My API Docs!"`` -> ``my-api-docs.md``."""
    slug = re.sub(r"[^a-z0-9]+", "-", label.lower())
    return slug.strip("-") + ext


def add_frontmatter(content: str, url: str, fetched_at: str) -> str:
    """Prefix content with a YAML frontmatter block recording its source."""
    return f"---\nurl: {url}\nfetchedAt: {fetched_at}\n---\n\n{content}"


def prepare_reference_dir(reference_dir: Path, keep_existing: bool = False) -> None:
    """Wipe and recreate the reference directory unless ``keep_existing`` is set."""
    if not keep_existing and reference_dir.exists():
        logger.info("Cleaning reference directory")
        shutil.rmtree(reference_dir)

    reference_dir.mkdir(parents=True, exist_ok=True)


def write_reference(
    reference_dir: Path,
    label: str,
    url: str,
    document: FetchedDocument,
    fetched_at: str,
) -> Path:
    """Write one document with frontmatter and return its path."""
    filename = to_filename(label, document.file_extension)
    output_path = reference_dir / filename
    output_path.write_text(add_frontmatter(document.content, url, fetched_at), encoding="utf-8")
    logger.info("  Saved: %s", filename)
    return output_path
