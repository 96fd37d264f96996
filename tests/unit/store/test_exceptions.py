"""Tests for document store exceptions."""

from pathlib import Path

from quire.exceptions import QuireError
from quire.store.exceptions import (
    DocumentNotFoundError,
    DocumentStoreError,
    DocumentValidationError,
    InvalidDocumentIdError,
    MalformedFrontMatterError,
    MissingMetadataError,
    StorageUnavailableError,
)


def test_storage_unavailable_error():
    err = StorageUnavailableError(Path("/site/posts"), "directory does not exist")
    assert err.content_root == Path("/site/posts")
    assert str(err) == "Content root '/site/posts' is unavailable: directory does not exist"


def test_document_not_found_error_without_candidates():
    err = DocumentNotFoundError("ghost")
    assert not err.is_ambiguous
    assert str(err) == "Document 'ghost' not found: no matching file"


def test_document_not_found_error_ambiguous():
    err = DocumentNotFoundError("post", [Path("/p/post.md"), Path("/p/post.markdown")])
    assert err.is_ambiguous
    assert str(err) == "Document 'post' not found: ambiguous, matched 2 files (post.markdown, post.md)"


def test_invalid_document_id_error():
    err = InvalidDocumentIdError("my post.md", "my post")
    assert str(err) == "File 'my post.md' yields identifier 'my post', which is not URL-safe."


def test_malformed_frontmatter_error():
    err = MalformedFrontMatterError("hello", "missing closing '---' delimiter")
    assert err.document_id == "hello"
    assert err.reason == "missing closing '---' delimiter"
    assert str(err) == "Document 'hello' has malformed frontmatter: missing closing '---' delimiter"


def test_missing_metadata_error():
    err = MissingMetadataError("hello", ["title", "date"])
    assert err.missing_fields == ["title", "date"]
    assert str(err) == "Document 'hello' is missing required metadata: 'title', 'date'"


def test_hierarchy():
    assert issubclass(DocumentStoreError, QuireError)
    assert issubclass(MalformedFrontMatterError, DocumentValidationError)
    assert issubclass(MissingMetadataError, DocumentValidationError)
    for cls in (StorageUnavailableError, DocumentNotFoundError, InvalidDocumentIdError):
        assert issubclass(cls, DocumentStoreError)
