from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

PostWriter = Callable[..., Path]


def render_post(body: str = "", **metadata: object) -> str:
    """Build Markdown text with a ``---`` frontmatter block."""
    header = "".join(f"{key}: {value}\n" for key, value in metadata.items())
    return f"---\n{header}---\n{body}"


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    return tmp_path


@pytest.fixture
def content_root(site_root: Path) -> Path:
    root = site_root / "posts"
    root.mkdir()
    return root


@pytest.fixture
def write_post(content_root: Path) -> PostWriter:
    """Write a post into the content root and return its path.

    Pass ``raw=`` to write the text verbatim instead of rendering frontmatter.
    """

    def _write(name: str, body: str = "", *, raw: str | None = None, **metadata: object) -> Path:
        path = content_root / name
        text = raw if raw is not None else render_post(body, **metadata)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
