"""Data models for moderation verdicts and their analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

from modcheck.errors import ModerationFormatError
from modcheck.ratelimit.models import RateLimitInfo


class ModerationCategory(Enum):
    """Content-policy categories reported by the moderation endpoint.

    Declaration order is the canonical order used for reporting.
    """

    SEXUAL = "sexual"
    SEXUAL_MINORS = "sexual/minors"
    HARASSMENT = "harassment"
    HARASSMENT_THREATENING = "harassment/threatening"
    HATE = "hate"
    HATE_THREATENING = "hate/threatening"
    ILLICIT = "illicit"
    ILLICIT_VIOLENT = "illicit/violent"
    SELF_HARM = "self-harm"
    SELF_HARM_INTENT = "self-harm/intent"
    SELF_HARM_INSTRUCTIONS = "self-harm/instructions"
    VIOLENCE = "violence"
    VIOLENCE_GRAPHIC = "violence/graphic"


def _category_mapping(
    raw: Mapping[Any, Any] | None,
    section: str,
    convert: Callable[[Any], Any],
) -> Mapping[ModerationCategory, Any]:
    """Key *raw* by :class:`ModerationCategory`, enforcing the full category set."""
    if not isinstance(raw, Mapping):
        raise ModerationFormatError(f"'{section}' must be a mapping of category to value")

    mapped: dict[ModerationCategory, Any] = {}
    for key, value in raw.items():
        tag = key.value if isinstance(key, ModerationCategory) else key
        try:
            category = ModerationCategory(tag)
        except ValueError:
            raise ModerationFormatError(f"Unknown category in '{section}': {tag!r}") from None
        try:
            mapped[category] = convert(value)
        except (TypeError, ValueError) as e:
            raise ModerationFormatError(
                f"Invalid value for {tag!r} in '{section}': {value!r}"
            ) from e

    missing = [c.value for c in ModerationCategory if c not in mapped]
    if missing:
        raise ModerationFormatError(
            f"'{section}' is missing categories: {', '.join(missing)}"
        )
    # Canonical order regardless of payload order.
    return MappingProxyType({c: mapped[c] for c in ModerationCategory})


def _score(value: Any) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bool):
        raise TypeError("score must be a number")
    return float(value)


def _input_types(value: Any) -> tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise TypeError("applied input types must be a list")
    return tuple(str(v) for v in value)


@dataclass(frozen=True)
class ModerationResult:
    """Verdict for a single moderated input.

    The category mappings are read-only views; applied input types are tuples.
    """

    flagged: bool
    categories: Mapping[ModerationCategory, bool]
    category_scores: Mapping[ModerationCategory, float]
    category_applied_input_types: Mapping[ModerationCategory, tuple[str, ...]]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ModerationResult":
        """Build a result from a service payload keyed by category tag.

        The service sends ``null`` for categories a model does not score;
        those become ``False``, ``0.0`` and ``()``.
        """
        if not isinstance(data, Mapping):
            raise ModerationFormatError("A moderation result must be a JSON object")
        return cls(
            flagged=bool(data.get("flagged", False)),
            categories=_category_mapping(
                data.get("categories"), "categories", lambda v: bool(v)
            ),
            category_scores=_category_mapping(
                data.get("category_scores"),
                "category_scores",
                _score,
            ),
            category_applied_input_types=_category_mapping(
                data.get("category_applied_input_types"),
                "category_applied_input_types",
                _input_types,
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "flagged": self.flagged,
            "categories": {c.value: v for c, v in self.categories.items()},
            "category_scores": {c.value: v for c, v in self.category_scores.items()},
            "category_applied_input_types": {
                c.value: list(v) for c, v in self.category_applied_input_types.items()
            },
        }


@dataclass
class ModerationResponse:
    """A moderation call's results plus whatever quota data came with it."""

    id: str = ""
    model: str = ""
    results: list[ModerationResult] = field(default_factory=list)
    rate_limit: Optional[RateLimitInfo] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ModerationResponse":
        if not isinstance(data, Mapping):
            raise ModerationFormatError("A moderation response must be a JSON object")
        results = data.get("results") or []
        if not isinstance(results, list):
            raise ModerationFormatError("'results' must be a list of moderation results")
        return cls(
            id=str(data.get("id", "")),
            model=str(data.get("model", "")),
            results=[ModerationResult.from_dict(r) for r in results],
        )


@dataclass(frozen=True)
class AnalysisReport:
    """Summary extracted from a :class:`ModerationResult`."""

    flagged: bool
    flagged_categories: list[ModerationCategory] = field(default_factory=list)
    top_scores: list[tuple[ModerationCategory, float]] = field(default_factory=list)

