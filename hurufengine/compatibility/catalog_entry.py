"""Person to catalog entry compatibility."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from ..catalog import Catalog, ModeOfAction, default_catalog
from ..classification import (
    Element,
    ElementalRelation,
    Orientation,
    element_of_elemental_remainder,
    elemental_relation,
    orientation_of,
)
from ..fingerprint import Chapter, NameFingerprint, scriptural_pointer
from ..guidance import aggregate
from ..resonance import elemental_temperament, planetary_cosmic, spiritual_destiny
from ..resonance.policy import ScoringPolicy, default_scoring_policy
from .models import Manifestation, NameAction, PersonCatalogEntryEvaluation

__all__ = [
    "evaluate_person_catalog_entry_compatibility",
    "manifestation_speed",
    "name_action",
]

LOG = logging.getLogger(__name__)

_ACTION_BY_RELATION: Mapping[ElementalRelation, NameAction] = MappingProxyType(
    {
        ElementalRelation.HARMONIOUS: NameAction.STRENGTHENS,
        ElementalRelation.SUPPORTIVE: NameAction.STABILIZES,
        ElementalRelation.CHALLENGING: NameAction.TEMPERS,
        ElementalRelation.NEUTRAL: NameAction.CHALLENGES,
    }
)


def name_action(person_element: Element | str, entry_element: Element | str) -> NameAction:
    return _ACTION_BY_RELATION[elemental_relation(person_element, entry_element)]


def manifestation_speed(mode: ModeOfAction | str, person_element: Element | str) -> Manifestation:
    """Expected pace of results for an entry's mode and the person's element."""

    mode = ModeOfAction(mode)
    if mode is ModeOfAction.HIDDEN:
        return Manifestation.SUBTLE
    if mode is ModeOfAction.FAST and orientation_of(person_element) is Orientation.ZAHIR:
        return Manifestation.FAST
    return Manifestation.DELAYED


def evaluate_person_catalog_entry_compatibility(
    fingerprint: NameFingerprint,
    entry_id: int,
    *,
    catalog: Catalog | None = None,
    policy: ScoringPolicy | None = None,
    chapters: Sequence[Chapter] | None = None,
) -> PersonCatalogEntryEvaluation:
    """Compare a person's fingerprint with a catalog entry's total.

    Raises :class:`~hurufengine.errors.UnknownEntityError` when ``entry_id``
    is not in the catalog.
    """

    active_catalog = default_catalog() if catalog is None else catalog
    active = policy or default_scoring_policy()
    entry = active_catalog.get(entry_id)
    entry_fingerprint = entry.fingerprint()
    if fingerprint.table_name != entry_fingerprint.table_name:
        LOG.debug(
            "person table %s differs from catalog table %s",
            fingerprint.table_name,
            entry_fingerprint.table_name,
        )

    results = (
        spiritual_destiny(fingerprint, entry_fingerprint, policy=active),
        elemental_temperament(fingerprint, entry_fingerprint, policy=active),
        planetary_cosmic(fingerprint, entry_fingerprint, policy=active),
    )
    summary = aggregate(results, policy=active)
    person_element = element_of_elemental_remainder(fingerprint.elemental_remainder)
    action = name_action(person_element, entry.element)
    manifestation = manifestation_speed(entry.mode_of_action, person_element)
    pointer = scriptural_pointer(fingerprint.total, chapters)
    LOG.debug(
        "entry %d against %s: score=%d action=%s",
        entry.id,
        fingerprint.normalized_text,
        summary.overall_score,
        action,
    )
    return PersonCatalogEntryEvaluation(
        fingerprint=fingerprint,
        entry=entry,
        entry_fingerprint=entry_fingerprint,
        person_element=person_element,
        name_action=action,
        manifestation=manifestation,
        scriptural_pointer=pointer,
        method_results=results,
        overall_score=summary.overall_score,
        overall_tier=summary.overall_tier,
        summary_tokens=summary.summary_tokens
        + (f"guidance.name_action.{action}", f"guidance.manifestation.{manifestation}"),
        recommendation_tokens=summary.recommendation_tokens,
    )
