"""Core data types for the document store."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

DocumentId = str

# RFC 3986 unreserved characters; a leading dot would make a hidden file.
DOCUMENT_ID_PATTERN: Final = re.compile(r"[A-Za-z0-9_~-][A-Za-z0-9._~-]*")

REQUIRED_METADATA_FIELDS: Final[tuple[str, ...]] = ("title", "date")


def is_valid_document_id(value: str) -> bool:
    """Return True when ``value`` can be used as a URL path segment as-is."""
    return DOCUMENT_ID_PATTERN.fullmatch(value) is not None


def normalize_iso_date(value: Any) -> str:
    """Normalize a frontmatter date value to ``YYYY-MM-DD``.

    YAML already turns unquoted ``2021-01-01`` into a ``date`` and timestamps
    into ``datetime``; quoted strings are parsed as ISO-8601.

    Raises:
        ValueError: If the value is not an ISO-8601 date or datetime.

    """
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        text = value.strip()
        try:
            return datetime.fromisoformat(text).date().isoformat()
        except ValueError:
            msg = f"'{value}' is not an ISO-8601 date (expected YYYY-MM-DD)"
            raise ValueError(msg) from None
    msg = f"expected an ISO-8601 date, got {type(value).__name__}"
    raise ValueError(msg)


class DocumentMetadata(BaseModel):
    """Metadata extracted from a document's frontmatter."""

    model_config = ConfigDict(frozen=True)

    id: DocumentId
    title: str = Field(min_length=1)
    date: str
    extra: dict[str, Any] = Field(default_factory=dict)

    @field_validator("title", mode="before")
    @classmethod
    def _coerce_title(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return value
        if isinstance(value, int | float):
            return str(value)
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_date(cls, value: Any) -> str:
        return normalize_iso_date(value)

    @property
    def published(self) -> date:
        return date.fromisoformat(self.date)


class Document(BaseModel):
    """A loaded document: metadata plus the raw markdown body."""

    model_config = ConfigDict(frozen=True)

    metadata: DocumentMetadata
    body: str

    @property
    def id(self) -> DocumentId:
        return self.metadata.id

    @property
    def title(self) -> str:
        return self.metadata.title

    @property
    def date(self) -> str:
        return self.metadata.date
