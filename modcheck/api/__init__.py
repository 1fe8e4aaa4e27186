"""Moderation endpoint client."""

from modcheck.api.client import ModerationClient

__all__ = ["ModerationClient"]
