"""Enumerate and resolve documents in a flat content root."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from quire.store.exceptions import (
    DocumentNotFoundError,
    InvalidDocumentIdError,
    StorageUnavailableError,
)
from quire.store.types import DocumentId, is_valid_document_id

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".md",)


def normalize_extensions(extensions: Iterable[str]) -> tuple[str, ...]:
    """Lowercase extensions and give each a leading dot, dropping duplicates.

    Raises:
        ValueError: If an extension is blank or none are given.

    """
    normalized: list[str] = []
    for ext in extensions:
        ext = ext.strip().lower()
        if not ext or ext == ".":
            msg = "Document extensions must not be blank"
            raise ValueError(msg)
        if not ext.startswith("."):
            ext = f".{ext}"
        if ext not in normalized:
            normalized.append(ext)
    if not normalized:
        msg = "At least one document extension is required"
        raise ValueError(msg)
    return tuple(normalized)


class DocumentLocator:
    """Filesystem locator for a flat directory of Markdown documents.

    Structure:
        content_root/{id}.md

    Only regular files directly inside the content root count as documents.
    Subdirectories and hidden files are ignored.
    """

    def __init__(self, content_root: Path, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> None:
        self.content_root = Path(content_root)
        self.extensions = normalize_extensions(extensions)

    def list_document_ids(self) -> list[DocumentId]:
        """Return the identifier of every document, ordered by filename.

        Ids shared by several files are listed once; loading them fails as
        ambiguous.

        Raises:
            StorageUnavailableError: If the content root cannot be listed.
            InvalidDocumentIdError: If a document filename is not URL-safe.

        """
        ids: list[DocumentId] = []
        seen: set[DocumentId] = set()
        for path in self._scan():
            document_id = self._document_id(path)
            if not is_valid_document_id(document_id):
                raise InvalidDocumentIdError(path.name, document_id)
            if document_id in seen:
                logger.warning("Several files share the document id '%s'", document_id)
                continue
            seen.add(document_id)
            ids.append(document_id)

        logger.info("Found %d document(s) in %s", len(ids), self.content_root)
        return ids

    def resolve(self, document_id: DocumentId) -> Path:
        """Return the single file backing ``document_id``.

        Raises:
            StorageUnavailableError: If the content root cannot be listed.
            DocumentNotFoundError: If no file, or more than one, matches.

        """
        if not is_valid_document_id(document_id):
            raise DocumentNotFoundError(document_id, reason="not a valid document id")

        candidates = [path for path in self._scan() if self._document_id(path) == document_id]
        if len(candidates) != 1:
            raise DocumentNotFoundError(document_id, candidates)
        return candidates[0]

    def _scan(self) -> list[Path]:
        root = self.content_root
        try:
            if not root.exists():
                raise StorageUnavailableError(root, "directory does not exist")
            if not root.is_dir():
                raise StorageUnavailableError(root, "not a directory")
            entries = sorted(root.iterdir(), key=lambda p: p.name)
            return [path for path in entries if self._is_document(path)]
        except OSError as exc:
            raise StorageUnavailableError(root, exc.strerror or str(exc)) from exc

    def _is_document(self, path: Path) -> bool:
        if path.name.startswith("."):
            return False
        if self._extension(path) is None:
            return False
        return path.is_file()

    def _extension(self, path: Path) -> str | None:
        name = path.name.lower()
        for ext in self.extensions:
            if name.endswith(ext) and len(name) > len(ext):
                return ext
        return None

    def _document_id(self, path: Path) -> DocumentId:
        ext = self._extension(path)
        if ext is None:
            return path.name
        return path.name[: -len(ext)]
