"""Spiritual-destiny ("soul connection") method."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType

from ..arithmetic import wrap_mod
from ..fingerprint import SPIRITUAL_MODULUS, NameFingerprint
from .models import MethodId, ResonanceMethodResult
from .policy import ScoringPolicy, default_scoring_policy

__all__ = [
    "SOUL_ARCHETYPES",
    "SOUL_OFFSET",
    "Severity",
    "SoulArchetype",
    "soul_number",
    "spiritual_destiny",
]

SOUL_OFFSET = 7


class Severity(StrEnum):
    FAVORABLE = "favorable"
    CAUTIONARY = "cautionary"
    UNFAVORABLE = "unfavorable"


@dataclass(frozen=True)
class SoulArchetype:
    """Narrative archetype selected by a soul number."""

    number: int
    severity: Severity

    @property
    def token_prefix(self) -> str:
        return f"compatibility.soul.archetypes.{self.number}"

    def tokens(self, *fields: str) -> tuple[str, ...]:
        selected = fields or ("title", "oneLine", "meaning")
        return tuple(f"{self.token_prefix}.{name}" for name in selected)

    def to_payload(self) -> dict[str, object]:
        return {"number": self.number, "severity": str(self.severity)}


def _build_archetypes() -> Mapping[int, SoulArchetype]:
    severities = (
        Severity.CAUTIONARY,
        Severity.FAVORABLE,
        Severity.UNFAVORABLE,
        Severity.UNFAVORABLE,
        Severity.FAVORABLE,
        Severity.UNFAVORABLE,
        Severity.FAVORABLE,
        Severity.FAVORABLE,
        Severity.UNFAVORABLE,
    )
    return MappingProxyType(
        {
            number: SoulArchetype(number=number, severity=severity)
            for number, severity in enumerate(severities, start=1)
        }
    )


SOUL_ARCHETYPES = _build_archetypes()


def soul_number(first: int, second: int) -> int:
    """Return ``(first + second + 7) mod 9`` with zero mapped to 9."""

    for value in (first, second):
        if not 1 <= value <= SPIRITUAL_MODULUS:
            raise ValueError(f"spiritual remainders must be within 1..9, got {value}")
    return wrap_mod(first + second + SOUL_OFFSET, SPIRITUAL_MODULUS)


def spiritual_destiny(
    first: NameFingerprint,
    second: NameFingerprint,
    *,
    policy: ScoringPolicy | None = None,
) -> ResonanceMethodResult:
    active = policy or default_scoring_policy()
    number = soul_number(first.spiritual_remainder, second.spiritual_remainder)
    archetype = SOUL_ARCHETYPES[number]
    score = active.severity_scores[str(archetype.severity)]
    return ResonanceMethodResult(
        method_id=MethodId.SPIRITUAL_DESTINY,
        score=score,
        quality_tier=active.tier_for(score),
        explanation_tokens=archetype.tokens(),
        raw_inputs={
            "spiritual_remainders": (first.spiritual_remainder, second.spiritual_remainder),
            "soul_number": number,
            "severity": archetype.severity,
        },
    )
