"""Exceptions raised by the docs_fetch pipeline."""

from typing import Optional


class DocsFetchError(Exception):
    """Base class for docs_fetch failures."""


class InventoryNotFoundError(DocsFetchError, FileNotFoundError):
    """The inventory file does not exist."""


class InventoryValidationError(DocsFetchError, ValueError):
    """The inventory file is not a JSON object with a ``sources`` mapping."""


class FetchError(DocsFetchError):
    """A source could not be retrieved.

    ``status`` and ``reason`` are set when the server answered with a
    non-success status; both are ``None`` for transport failures.
    """

    def __init__(
        self,
        url: str,
        status: Optional[int] = None,
        reason: Optional[str] = None,
        message: Optional[str] = None,
    ):
        self.url = url
        self.status = status
        self.reason = reason
        if message is None:
            message = f"Failed to fetch {url}: {status} {reason}"
        super().__init__(message)


class ExtractionError(DocsFetchError):
    """Readability produced no usable article content."""
