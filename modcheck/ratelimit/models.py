"""Quota snapshot parsed from ``x-ratelimit-*`` response headers."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from typing import Mapping, Optional

HEADER_LIMIT_REQUESTS = "x-ratelimit-limit-requests"
HEADER_REMAINING_REQUESTS = "x-ratelimit-remaining-requests"
HEADER_RESET_REQUESTS = "x-ratelimit-reset-requests"
HEADER_LIMIT_TOKENS = "x-ratelimit-limit-tokens"
HEADER_REMAINING_TOKENS = "x-ratelimit-remaining-tokens"
HEADER_RESET_TOKENS = "x-ratelimit-reset-tokens"

_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)


def _parse_int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    text = str(value).strip()
    if not _INT_RE.fullmatch(text):
        return None
    return int(text, 10)


@dataclass(frozen=True)
class RateLimitInfo:
    """Request and token quota state.  Every field may be absent."""

    limit_requests: Optional[int] = None
    remaining_requests: Optional[int] = None
    reset_requests: Optional[str] = None
    limit_tokens: Optional[int] = None
    remaining_tokens: Optional[int] = None
    reset_tokens: Optional[str] = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "RateLimitInfo":
        """Build from a response header mapping (names matched case-insensitively)."""
        lowered = {str(k).lower(): v for k, v in headers.items()}
        return cls(
            limit_requests=_parse_int(lowered.get(HEADER_LIMIT_REQUESTS)),
            remaining_requests=_parse_int(lowered.get(HEADER_REMAINING_REQUESTS)),
            reset_requests=lowered.get(HEADER_RESET_REQUESTS),
            limit_tokens=_parse_int(lowered.get(HEADER_LIMIT_TOKENS)),
            remaining_tokens=_parse_int(lowered.get(HEADER_REMAINING_TOKENS)),
            reset_tokens=lowered.get(HEADER_RESET_TOKENS),
        )

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))
