"""Helpers for splitting YAML frontmatter from Markdown content.

Unlike a lenient reader, these helpers never fall back to treating a broken
header as body text: a header that is present must parse as a mapping.
"""

from __future__ import annotations

from typing import Any

import yaml
from frontmatter.default_handlers import YAMLHandler

from quire.exceptions import QuireError

_BOM = "\ufeff"
_yaml_handler = YAMLHandler()


class FrontmatterParsingError(QuireError):
    """Raised when a frontmatter block is present but cannot be parsed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid YAML frontmatter: {reason}")


def split_frontmatter(content: str) -> tuple[dict[str, Any] | None, str]:
    """Split Markdown content into its frontmatter mapping and body.

    Args:
        content: Full text of a Markdown document.

    Returns:
        Tuple of (metadata, body). ``metadata`` is None when the document has
        no frontmatter block; an empty block yields an empty dict. The body is
        the text after the closing fence with leading line breaks removed.

    Raises:
        FrontmatterParsingError: If the block is unclosed, is not valid YAML,
            or does not hold a mapping.

    """
    text = content.removeprefix(_BOM)
    if not _yaml_handler.detect(text):
        return None, text

    try:
        raw_header, body = _yaml_handler.split(text)
    except ValueError as exc:
        raise FrontmatterParsingError("missing closing '---' delimiter") from exc

    try:
        data = _yaml_handler.load(raw_header)
    except yaml.YAMLError as exc:
        raise FrontmatterParsingError(_describe_yaml_error(exc)) from exc
    except ValueError as exc:
        # Timestamps such as 2021-02-30 fail in the YAML constructor with a plain ValueError.
        raise FrontmatterParsingError(str(exc)) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        msg = f"expected key: value pairs, got {type(data).__name__}"
        raise FrontmatterParsingError(msg)

    metadata = {str(key): value for key, value in data.items()}
    return metadata, body.lstrip("\r\n")


def _describe_yaml_error(exc: yaml.YAMLError) -> str:
    mark = getattr(exc, "problem_mark", None)
    problem = getattr(exc, "problem", None) or str(exc)
    if mark is not None:
        # The header text starts on the opening fence line.
        return f"{problem} (line {mark.line + 1}, column {mark.column + 1})"
    return problem


__all__ = ["FrontmatterParsingError", "split_frontmatter"]
