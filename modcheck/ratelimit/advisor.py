"""Recommend a pause before the next call when quota headroom runs low."""

from __future__ import annotations

from typing import Optional

from modcheck.ratelimit.duration import parse_duration
from modcheck.ratelimit.models import RateLimitInfo

DEFAULT_THRESHOLD = 0.1


def _candidate_wait(
    remaining: Optional[int],
    limit: Optional[int],
    reset: Optional[str],
    threshold: float,
) -> int:
    if remaining is None or not limit:
        return 0
    if remaining / limit < threshold and reset:
        return parse_duration(reset)
    return 0


def advise_wait(info: RateLimitInfo, threshold: float = DEFAULT_THRESHOLD) -> int:
    """Return the recommended wait in milliseconds before the next call.

    Requests and tokens are checked independently since either can run out
    first; the longer of the two resulting waits wins.
    """
    return max(
        _candidate_wait(
            info.remaining_requests, info.limit_requests, info.reset_requests, threshold
        ),
        _candidate_wait(
            info.remaining_tokens, info.limit_tokens, info.reset_tokens, threshold
        ),
    )
