"""Load a single document: resolve, read, split and validate."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from quire.markdown.frontmatter import FrontmatterParsingError, split_frontmatter
from quire.store.exceptions import (
    MalformedFrontMatterError,
    MissingMetadataError,
    StorageUnavailableError,
)
from quire.store.locator import DocumentLocator
from quire.store.types import (
    REQUIRED_METADATA_FIELDS,
    Document,
    DocumentId,
    DocumentMetadata,
)

logger = logging.getLogger(__name__)


class DocumentLoader:
    """Turns a document id into a validated :class:`Document`.

    The loader keeps no state between calls, so one instance can serve many
    threads at once.
    """

    def __init__(self, locator: DocumentLocator, *, encoding: str = "utf-8") -> None:
        self.locator = locator
        self.encoding = encoding

    def load_document(self, document_id: DocumentId) -> Document:
        """Load and validate one document.

        Raises:
            StorageUnavailableError: If the content root or file cannot be read.
            DocumentNotFoundError: If no file, or more than one, backs the id.
            MalformedFrontMatterError: If the frontmatter cannot be parsed.
            MissingMetadataError: If ``title`` or ``date`` is absent.

        """
        path = self.locator.resolve(document_id)
        logger.debug("Loading document '%s' from %s", document_id, path)

        try:
            content = path.read_text(encoding=self.encoding)
        except UnicodeDecodeError as exc:
            reason = f"file is not valid {self.encoding} text"
            raise MalformedFrontMatterError(document_id, reason) from exc
        except OSError as exc:
            reason = f"cannot read '{path.name}': {exc.strerror or exc}"
            raise StorageUnavailableError(self.locator.content_root, reason) from exc

        try:
            raw_metadata, body = split_frontmatter(content)
        except FrontmatterParsingError as exc:
            raise MalformedFrontMatterError(document_id, exc.reason) from exc

        if raw_metadata is None:
            raise MissingMetadataError(document_id, REQUIRED_METADATA_FIELDS)

        metadata = build_metadata(document_id, raw_metadata)
        return Document(metadata=metadata, body=body)


def build_metadata(document_id: DocumentId, raw: dict[str, Any]) -> DocumentMetadata:
    """Validate frontmatter values and build :class:`DocumentMetadata`.

    Keys other than the required ones are kept in ``extra``.
    """
    missing = [name for name in REQUIRED_METADATA_FIELDS if _is_blank(raw.get(name))]
    if missing:
        raise MissingMetadataError(document_id, missing)

    extra = {key: value for key, value in raw.items() if key not in REQUIRED_METADATA_FIELDS}
    try:
        return DocumentMetadata(id=document_id, title=raw["title"], date=raw["date"], extra=extra)
    except ValidationError as exc:
        raise MalformedFrontMatterError(document_id, _describe_validation_error(exc)) from exc


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"]) or "metadata"
        message = error["msg"].removeprefix("Value error, ")
        parts.append(f"{field}: {message}")
    return "; ".join(parts)
