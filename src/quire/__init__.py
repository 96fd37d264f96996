"""quire - static document store for markdown blogs."""

from quire.store import Document, DocumentMetadata, DocumentStore

__all__ = ["Document", "DocumentMetadata", "DocumentStore"]
__version__ = "0.1.0"
