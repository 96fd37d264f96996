"""Tests for document data types."""

from __future__ import annotations

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from quire.store.types import (
    Document,
    DocumentMetadata,
    is_valid_document_id,
    normalize_iso_date,
)


@pytest.mark.parametrize("value", ["hello-world", "2021_01_01", "a.b", "post~1", "X"])
def test_valid_document_ids(value):
    assert is_valid_document_id(value)


@pytest.mark.parametrize("value", ["", ".hidden", "with space", "../etc/passwd", "a/b", "café", "post\n"])
def test_invalid_document_ids(value):
    assert not is_valid_document_id(value)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2021-01-01", "2021-01-01"),
        ("  2021-01-01  ", "2021-01-01"),
        ("2021-01-01T10:30:00", "2021-01-01"),
        (date(2021, 1, 1), "2021-01-01"),
        (datetime(2021, 1, 1, 23, 59), "2021-01-01"),
    ],
)
def test_normalize_iso_date(value, expected):
    assert normalize_iso_date(value) == expected


@pytest.mark.parametrize("value", ["yesterday", "2021-13-01", "01/02/2021", 20210101, None])
def test_normalize_iso_date_rejects_invalid_values(value):
    with pytest.raises(ValueError):
        normalize_iso_date(value)


def test_metadata_is_frozen():
    metadata = DocumentMetadata(id="a", title="Hello", date="2021-01-01")

    with pytest.raises(ValidationError):
        metadata.title = "Changed"


def test_metadata_coerces_numeric_title():
    metadata = DocumentMetadata(id="a", title=1984, date="2021-01-01")

    assert metadata.title == "1984"


def test_metadata_rejects_non_scalar_title():
    with pytest.raises(ValidationError):
        DocumentMetadata(id="a", title=["a", "b"], date="2021-01-01")


def test_metadata_published_returns_date():
    metadata = DocumentMetadata(id="a", title="Hello", date=date(2021, 1, 1))

    assert metadata.published == date(2021, 1, 1)


def test_document_shortcuts():
    doc = Document(metadata=DocumentMetadata(id="a", title="Hello", date="2021-01-01"), body="World")

    assert (doc.id, doc.title, doc.date, doc.body) == ("a", "Hello", "2021-01-01", "World")
