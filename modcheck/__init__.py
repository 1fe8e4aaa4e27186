"""modcheck — moderation checks against the OpenAI moderation endpoint."""

__version__ = "0.1.0"
