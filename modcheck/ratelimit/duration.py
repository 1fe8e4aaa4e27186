"""Parse short reset durations such as ``"30s"``, ``"2m"`` or ``"1h"``."""

from __future__ import annotations

import re
from typing import Optional

_DURATION_RE = re.compile(r"(\d+)([smh])", re.ASCII)

_UNIT_MS: dict[str, int] = {
    "s": 1_000,
    "m": 60 * 1_000,
    "h": 60 * 60 * 1_000,
}


def parse_duration_strict(text: Optional[str]) -> Optional[int]:
    """Return *text* in milliseconds, or ``None`` when it cannot be parsed."""
    if not text:
        return None
    match = _DURATION_RE.search(text)
    if not match:
        return None
    return int(match.group(1)) * _UNIT_MS[match.group(2)]


def parse_duration(text: Optional[str]) -> int:
    """Return *text* in milliseconds.

    Unparseable input yields ``0``, which callers read as "no wait".
    """
    return parse_duration_strict(text) or 0
