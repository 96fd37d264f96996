"""Custom exceptions for the document store."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from quire.exceptions import QuireError


class DocumentStoreError(QuireError):
    """Base class for document store errors."""


class StorageUnavailableError(DocumentStoreError):
    """Raised when the content root is missing or unreadable."""

    def __init__(self, content_root: Path, reason: str) -> None:
        self.content_root = content_root
        self.reason = reason
        super().__init__(f"Content root '{content_root}' is unavailable: {reason}")


class InvalidDocumentIdError(DocumentStoreError):
    """Raised when a document filename does not yield a URL-safe identifier."""

    def __init__(self, filename: str, document_id: str) -> None:
        self.filename = filename
        self.document_id = document_id
        super().__init__(
            f"File '{filename}' yields identifier '{document_id}', which is not URL-safe."
        )


class DocumentNotFoundError(DocumentStoreError):
    """Raised when an identifier has no backing file, or more than one."""

    def __init__(self, document_id: str, candidates: Sequence[Path] = (), reason: str | None = None) -> None:
        self.document_id = document_id
        self.candidates = list(candidates)
        if reason is None:
            if self.is_ambiguous:
                names = ", ".join(sorted(path.name for path in self.candidates))
                reason = f"ambiguous, matched {len(self.candidates)} files ({names})"
            else:
                reason = "no matching file"
        self.reason = reason
        super().__init__(f"Document '{document_id}' not found: {reason}")

    @property
    def is_ambiguous(self) -> bool:
        return len(self.candidates) > 1


class DocumentValidationError(DocumentStoreError):
    """Base class for documents that exist but fail structural validation."""

    def __init__(self, document_id: str, message: str) -> None:
        self.document_id = document_id
        super().__init__(message)


class MalformedFrontMatterError(DocumentValidationError):
    """Raised when a document's frontmatter block cannot be parsed."""

    def __init__(self, document_id: str, reason: str) -> None:
        self.reason = reason
        super().__init__(document_id, f"Document '{document_id}' has malformed frontmatter: {reason}")


class MissingMetadataError(DocumentValidationError):
    """Raised when required metadata keys are absent or blank."""

    def __init__(self, document_id: str, missing_fields: Sequence[str]) -> None:
        self.missing_fields = list(missing_fields)
        fields = ", ".join(f"'{name}'" for name in self.missing_fields)
        super().__init__(document_id, f"Document '{document_id}' is missing required metadata: {fields}")
