"""Catalog entry to intention matching.

Relevance is the sum of three components:

* ``direct``: 70 when the entry carries the requested intention tag;
* ``related``: 10 per related intention tag the entry carries, at most 20;
* ``mode``: 10 for fast, 6 for gradual and 3 for hidden entries.

The maximum is therefore 100. Entries without any direct or related overlap
keep their mode component so they stay scorable, yet always rank below every
entry that shares at least one related tag.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from ..catalog import Catalog, CatalogEntry, IntentionTag, ModeOfAction, default_catalog
from ..errors import InvalidInputError
from ..resonance.policy import ScoringPolicy, default_scoring_policy
from .models import CatalogEntryIntentionEvaluation, IntentionAlignment, IntentionMatch

__all__ = [
    "DIRECT_WEIGHT",
    "MAX_ALTERNATIVES",
    "MODE_WEIGHTS",
    "RELATED_CAP",
    "RELATED_INTENTIONS",
    "RELATED_WEIGHT",
    "assess_catalog_entry_for_intention",
    "best_catalog_entry_for_intention",
    "evaluate_catalog_entry_intention_compatibility",
    "relevance_components",
]

LOG = logging.getLogger(__name__)

DIRECT_WEIGHT = 70
RELATED_WEIGHT = 10
RELATED_CAP = 20
MAX_ALTERNATIVES = 3

MODE_WEIGHTS: Mapping[ModeOfAction, int] = MappingProxyType(
    {ModeOfAction.FAST: 10, ModeOfAction.GRADUAL: 6, ModeOfAction.HIDDEN: 3}
)

RELATED_INTENTIONS: Mapping[IntentionTag, frozenset[IntentionTag]] = MappingProxyType(
    {
        IntentionTag.CLARITY: frozenset({IntentionTag.KNOWLEDGE, IntentionTag.GUIDANCE}),
        IntentionTag.PATIENCE: frozenset({IntentionTag.PEACE, IntentionTag.HEALING}),
        IntentionTag.PROVISION: frozenset({IntentionTag.STRENGTH}),
        IntentionTag.HEALING: frozenset({IntentionTag.PEACE, IntentionTag.PATIENCE}),
        IntentionTag.PROTECTION: frozenset({IntentionTag.STRENGTH, IntentionTag.PEACE}),
        IntentionTag.GUIDANCE: frozenset({IntentionTag.CLARITY, IntentionTag.KNOWLEDGE}),
        IntentionTag.STRENGTH: frozenset({IntentionTag.PROTECTION, IntentionTag.PROVISION}),
        IntentionTag.PEACE: frozenset({IntentionTag.HEALING, IntentionTag.PATIENCE}),
        IntentionTag.KNOWLEDGE: frozenset({IntentionTag.CLARITY, IntentionTag.GUIDANCE}),
        IntentionTag.FORGIVENESS: frozenset({IntentionTag.HEALING, IntentionTag.PEACE}),
    }
)

if set(RELATED_INTENTIONS) != set(IntentionTag):
    raise RuntimeError("every intention tag needs a related-intention group")


def _coerce_intention(intention: IntentionTag | str) -> IntentionTag:
    try:
        return IntentionTag(intention)
    except ValueError as exc:
        raise InvalidInputError(f"unknown intention {intention!r}") from exc


def relevance_components(entry: CatalogEntry, intention: IntentionTag | str) -> dict[str, int]:
    tag = _coerce_intention(intention)
    related = len(entry.function_tags & RELATED_INTENTIONS[tag])
    return {
        "direct": DIRECT_WEIGHT if tag in entry.function_tags else 0,
        "related": min(RELATED_CAP, related * RELATED_WEIGHT),
        "mode": MODE_WEIGHTS[entry.mode_of_action],
    }


def _alignment(components: Mapping[str, int], *, tag_held: bool) -> IntentionAlignment:
    if components["direct"]:
        return IntentionAlignment.OPTIMAL
    if components["related"]:
        return IntentionAlignment.SUITABLE
    if tag_held:
        return IntentionAlignment.NOT_RECOMMENDED
    return IntentionAlignment.NEUTRAL


def _rank(entries: Iterable[CatalogEntry], tag: IntentionTag) -> list[IntentionMatch]:
    pool = list(entries)
    tag_held = any(tag in entry.function_tags for entry in pool)
    matches = []
    for entry in pool:
        components = relevance_components(entry, tag)
        matches.append(
            IntentionMatch(
                entry=entry,
                relevance_score=sum(components.values()),
                components=components,
                alignment=_alignment(components, tag_held=tag_held),
            )
        )
    matches.sort(key=lambda match: (-match.relevance_score, match.entry.id))
    return matches


def evaluate_catalog_entry_intention_compatibility(
    intention: IntentionTag | str,
    catalog: Iterable[CatalogEntry] | None = None,
    *,
    top_n: int | None = None,
) -> tuple[IntentionMatch, ...]:
    """Rank catalog entries by relevance to ``intention``.

    Ties are broken by ascending entry id so the ranking is deterministic.
    ``top_n`` truncates the ranking when given.
    """

    tag = _coerce_intention(intention)
    if top_n is not None and top_n < 1:
        raise InvalidInputError(f"top_n must be at least 1, got {top_n}")
    ranked = _rank(default_catalog() if catalog is None else catalog, tag)
    LOG.debug("ranked %d entries for %s", len(ranked), tag)
    return tuple(ranked[:top_n] if top_n is not None else ranked)


def best_catalog_entry_for_intention(
    intention: IntentionTag | str, catalog: Iterable[CatalogEntry] | None = None
) -> IntentionMatch:
    ranked = evaluate_catalog_entry_intention_compatibility(intention, catalog, top_n=1)
    if not ranked:
        raise InvalidInputError("cannot rank an empty catalog")
    return ranked[0]


def assess_catalog_entry_for_intention(
    entry_id: int,
    intention: IntentionTag | str,
    *,
    catalog: Catalog | None = None,
    policy: ScoringPolicy | None = None,
) -> CatalogEntryIntentionEvaluation:
    """Judge one entry against ``intention`` and suggest alternatives.

    When the entry is not recommended, up to three entries carrying the
    intention tag are offered in ranking order.
    """

    tag = _coerce_intention(intention)
    active_catalog = default_catalog() if catalog is None else catalog
    active = policy or default_scoring_policy()
    entry = active_catalog.get(entry_id)
    ranked = _rank(active_catalog, tag)
    match = next(item for item in ranked if item.entry.id == entry.id)

    alternatives: tuple[CatalogEntry, ...] = ()
    if match.alignment is IntentionAlignment.NOT_RECOMMENDED:
        alternatives = tuple(
            item.entry
            for item in ranked
            if item.alignment is IntentionAlignment.OPTIMAL
        )[:MAX_ALTERNATIVES]

    tier = active.tier_for(match.relevance_score)
    summary = (
        f"guidance.intention.{match.alignment}",
        f"guidance.intention.{tag}.{match.alignment}",
        f"guidance.summary.{tier}",
        f"guidance.manifestation.mode.{entry.mode_of_action}",
    )
    recommendations = (f"guidance.recommend.intention.{match.alignment}",) + tuple(
        f"guidance.intention.alternative.{item.id}" for item in alternatives
    )
    return CatalogEntryIntentionEvaluation(
        intention=tag,
        match=match,
        alternatives=alternatives,
        overall_score=match.relevance_score,
        overall_tier=tier,
        summary_tokens=summary,
        recommendation_tokens=recommendations,
    )
