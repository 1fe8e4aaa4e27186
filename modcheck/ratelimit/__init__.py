"""Rate-limit helpers — quota headers, duration parsing, and wait advice.

Quota values come from the ``x-ratelimit-*`` response headers of the
moderation endpoint.  The advisor recommends a pause once the remaining
headroom of either dimension (requests or tokens) drops below a threshold.
"""

from modcheck.ratelimit.advisor import DEFAULT_THRESHOLD, advise_wait
from modcheck.ratelimit.duration import parse_duration, parse_duration_strict
from modcheck.ratelimit.models import RateLimitInfo

__all__ = [
    "DEFAULT_THRESHOLD",
    "RateLimitInfo",
    "advise_wait",
    "parse_duration",
    "parse_duration_strict",
]
