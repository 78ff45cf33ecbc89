"""Data models for the docs_fetch pipeline."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class ContentFormat(str, Enum):
    MARKDOWN = "markdown"
    HTML = "html"


class ProcessingTier(str, Enum):
    """Which step of the content ladder produced a document."""
    PASSTHROUGH = "passthrough"  # source was already Markdown
    CONVERTED = "converted"      # extracted and converted to Markdown
    EXTRACTED = "extracted"      # extracted, conversion failed
    ORIGINAL = "original"        # extraction failed


@dataclass
class ReferenceInventory:
    """Label -> URL source list driving one fetch run."""
    sources: dict[str, str]
    last_fetched: Optional[str] = None
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the inventory as JSON data, keeping any unknown keys and their order."""
        return {**self.data, "sources": self.sources, "lastFetched": self.last_fetched}


@dataclass
class ExtractedArticle:
    """Main content pulled out of an HTML page."""
    content: str
    title: Optional[str] = None


@dataclass
class FetchedDocument:
    """Processed content of one inventory entry, ready to be written."""
    content: str
    format: ContentFormat
    tier: ProcessingTier
    title: Optional[str] = None
    extension: Optional[str] = None

    @property
    def file_extension(self) -> str:
        if self.extension:
            return self.extension
        return ".md" if self.format == ContentFormat.MARKDOWN else ".html"
