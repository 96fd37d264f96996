"""Static document store: locate, load and validate Markdown documents."""

from quire.store.exceptions import (
    DocumentNotFoundError,
    DocumentStoreError,
    DocumentValidationError,
    InvalidDocumentIdError,
    MalformedFrontMatterError,
    MissingMetadataError,
    StorageUnavailableError,
)
from quire.store.loader import DocumentLoader
from quire.store.locator import DocumentLocator
from quire.store.repository import DocumentFailure, DocumentStore
from quire.store.types import Document, DocumentId, DocumentMetadata, is_valid_document_id

__all__ = [
    "Document",
    "DocumentFailure",
    "DocumentId",
    "DocumentLoader",
    "DocumentLocator",
    "DocumentMetadata",
    "DocumentNotFoundError",
    "DocumentStore",
    "DocumentStoreError",
    "DocumentValidationError",
    "InvalidDocumentIdError",
    "MalformedFrontMatterError",
    "MissingMetadataError",
    "StorageUnavailableError",
    "is_valid_document_id",
]
