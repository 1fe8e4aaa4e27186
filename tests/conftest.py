"""Shared fixtures: moderation payloads shaped like the service's JSON."""

import pytest

from modcheck.moderation.models import ModerationCategory


def build_payload(flagged=False, flags=(), scores=None):
    scores = scores or {}
    return {
        "flagged": flagged,
        "categories": {c.value: c.value in flags for c in ModerationCategory},
        "category_scores": {c.value: scores.get(c.value, 0.0) for c in ModerationCategory},
        "category_applied_input_types": {c.value: ["text"] for c in ModerationCategory},
    }


@pytest.fixture
def payload():
    return build_payload


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep a developer's real key and .env out of the tests."""
    for var in ("OPENAI_API_KEY", "MODCHECK_MODEL", "MODCHECK_CONTENT_PATH", "MODCHECK_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
