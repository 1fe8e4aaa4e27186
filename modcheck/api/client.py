"""Client wrapper for the OpenAI moderation endpoint.

Returns :class:`ModerationResponse` objects keyed by
:class:`ModerationCategory`, with the quota state from the
``x-ratelimit-*`` response headers attached.
"""

from __future__ import annotations

import logging
import time
from typing import Any

import openai

from modcheck.config import DEFAULT_MODEL, Settings
from modcheck.errors import ModerationAPIError
from modcheck.moderation.models import ModerationResponse, ModerationResult
from modcheck.ratelimit.models import RateLimitInfo
from modcheck.utils.content import preview

logger = logging.getLogger(__name__)


class ModerationClient:
    """Thin wrapper around the OpenAI Python SDK's moderation resource.

    Parameters
    ----------
    api_key : str
        OpenAI API key.
    model : str
        Moderation model identifier.
    client : openai.OpenAI | None
        Pre-built SDK client; one is created from *api_key* when omitted.
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        client: Any = None,
    ) -> None:
        self.model = model
        self._client = client if client is not None else openai.OpenAI(api_key=api_key)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ModerationClient":
        return cls(api_key=settings.require_api_key(), model=settings.model)

    def moderate(self, text: str) -> ModerationResponse:
        """Moderate *text* and return the parsed response."""
        logger.info('Moderating text: "%s"', preview(text, 50))

        start = time.monotonic()
        try:
            raw = self._client.moderations.with_raw_response.create(
                model=self.model,
                input=text,
            )
            body = raw.parse()
        except openai.OpenAIError as e:
            raise ModerationAPIError(f"Moderation request failed: {e}") from e
        latency_ms = int((time.monotonic() - start) * 1000)

        rate_limit = RateLimitInfo.from_headers(raw.headers)
        response = ModerationResponse(
            id=body.id,
            model=body.model,
            results=[
                ModerationResult.from_dict(r.model_dump(by_alias=True))
                for r in body.results
            ],
            rate_limit=None if rate_limit.is_empty else rate_limit,
        )
        logger.info(
            "Moderation completed in %dms (%d result(s))", latency_ms, len(response.results)
        )
        logger.debug("Rate limit headers: %s", response.rate_limit)
        return response
