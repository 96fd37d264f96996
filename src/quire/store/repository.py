"""Filesystem-backed document store used by static site builds."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from quire.store.exceptions import DocumentStoreError
from quire.store.loader import DocumentLoader
from quire.store.locator import DEFAULT_EXTENSIONS, DocumentLocator
from quire.store.types import Document, DocumentId

if TYPE_CHECKING:
    from quire.config.settings import StoreSettings

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 8


@dataclass(frozen=True, slots=True)
class DocumentFailure:
    """A document that could not be loaded, and why."""

    document_id: DocumentId
    error: DocumentStoreError

    @property
    def reason(self) -> str:
        return str(self.error)


class DocumentStore:
    """Read-only access to the documents under one content root.

    The content root is the only source of truth: nothing is cached, and
    every call reads the files again.

    Example:
        >>> store = DocumentStore(Path("posts"))
        >>> for doc_id in store.list_document_ids():
        ...     post = store.load_document(doc_id)

    """

    def __init__(
        self,
        content_root: Path,
        *,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
        encoding: str = "utf-8",
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        if max_workers < 1:
            msg = f"max_workers must be at least 1, got {max_workers}"
            raise ValueError(msg)
        self.locator = DocumentLocator(content_root, extensions)
        self.loader = DocumentLoader(self.locator, encoding=encoding)
        self.max_workers = max_workers

    @classmethod
    def from_settings(cls, settings: StoreSettings) -> DocumentStore:
        return cls(
            settings.content_root,
            extensions=settings.extensions,
            encoding=settings.encoding,
            max_workers=settings.max_workers,
        )

    @property
    def content_root(self) -> Path:
        return self.locator.content_root

    def list_document_ids(self) -> list[DocumentId]:
        return self.locator.list_document_ids()

    def load_document(self, document_id: DocumentId) -> Document:
        return self.loader.load_document(document_id)

    def load_documents(self, document_ids: Sequence[DocumentId] | None = None) -> list[Document]:
        """Load several documents in parallel, in the order requested.

        Args:
            document_ids: Ids to load; defaults to every listed id.

        Raises:
            DocumentStoreError: The first failure observed. Loads that have
                not started yet are cancelled.

        """
        ids = list(document_ids) if document_ids is not None else self.list_document_ids()
        if not ids:
            return []

        results: list[Document | None] = [None] * len(ids)
        executor = ThreadPoolExecutor(max_workers=min(self.max_workers, len(ids)))
        try:
            future_to_index = {
                executor.submit(self.loader.load_document, doc_id): index for index, doc_id in enumerate(ids)
            }
            for future in as_completed(future_to_index):
                results[future_to_index[future]] = future.result()
        except Exception:
            executor.shutdown(wait=False, cancel_futures=True)
            raise
        finally:
            executor.shutdown(wait=True)

        logger.info("Loaded %d document(s) from %s", len(ids), self.content_root)
        return [doc for doc in results if doc is not None]

    def list_documents(self) -> list[Document]:
        """Return every document, newest first (ties broken by id)."""
        documents = sorted(self.load_documents(), key=lambda doc: doc.id)
        return sorted(documents, key=lambda doc: doc.metadata.published, reverse=True)

    def validate_documents(self) -> list[DocumentFailure]:
        """Load every document and report the ones that fail, sorted by id."""
        ids = self.list_document_ids()
        if not ids:
            return []

        failures: list[DocumentFailure] = []
        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(ids))) as executor:
            future_to_id: dict[Future[Document], DocumentId] = {
                executor.submit(self.loader.load_document, doc_id): doc_id for doc_id in ids
            }
            for future in as_completed(future_to_id):
                doc_id = future_to_id[future]
                try:
                    future.result()
                except DocumentStoreError as exc:
                    logger.debug("Document '%s' failed validation: %s", doc_id, exc)
                    failures.append(DocumentFailure(doc_id, exc))

        return sorted(failures, key=lambda failure: failure.document_id)
