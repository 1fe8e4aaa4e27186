"""Reading the text to moderate."""

from __future__ import annotations

import logging
from pathlib import Path

from modcheck.config import DEFAULT_CONTENT_PATH
from modcheck.errors import ContentReadError

logger = logging.getLogger(__name__)


def read_content(path: str | Path = DEFAULT_CONTENT_PATH) -> str:
    """Return the UTF-8 contents of *path* with surrounding whitespace removed."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ContentReadError(f"Failed to read content from {path}: {e}") from e
    logger.debug("Read %d characters from %s", len(text), path)
    return text.strip()


def preview(text: str, limit: int) -> str:
    """First *limit* characters of *text*, with ``...`` appended if cut."""
    if len(text) > limit:
        return text[:limit] + "..."
    return text
