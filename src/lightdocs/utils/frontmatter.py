"""YAML front matter parsing for markdown documents."""

import re
from typing import Any

import yaml

# Opening fence on the first line, closing fence on its own line
FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)


class FrontmatterError(ValueError):
    """Raised when a document header block is not a valid YAML mapping."""


def parse_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Split a leading YAML header block from a markdown document.

    Args:
        text: Raw document text

    Returns:
        (frontmatter, body). Documents without a header block yield an
        empty mapping and the unchanged text.

    Raises:
        FrontmatterError: If the header is not valid YAML or not a mapping
    """
    if text.startswith("\ufeff"):
        text = text[1:]

    match = FRONTMATTER_PATTERN.match(text)
    if match is None:
        return {}, text

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        raise FrontmatterError(f"Invalid front matter: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontmatterError(
            f"Front matter must be a mapping, got {type(data).__name__}"
        )

    return data, text[match.end():]
