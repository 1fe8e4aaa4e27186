"""Exception hierarchy for modcheck.

The pure helpers (duration parsing, rate-limit advice, result analysis)
never raise for well-typed input.  Everything that talks to the outside
world raises one of the errors below, and the CLI turns them into a
non-zero exit.
"""

from __future__ import annotations


class ModcheckError(Exception):
    """Base class for all modcheck errors."""


class ConfigurationError(ModcheckError, ValueError):
    """Missing credentials or an invalid configuration file."""


class ContentReadError(ModcheckError, OSError):
    """The content to moderate could not be read."""


class ModerationAPIError(ModcheckError, RuntimeError):
    """The moderation endpoint rejected the request or could not be reached."""


class ModerationFormatError(ModcheckError, ValueError):
    """A moderation payload does not cover exactly the known categories."""
