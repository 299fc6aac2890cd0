"""Numeric fingerprints derived from names and letter-value tables."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..arithmetic import wrap_mod
from ..errors import InvalidInputError
from ..letters import LetterValueTable, normalize_name
from ..letters.normalize import HAMZA_FORMS

__all__ = [
    "ELEMENTAL_MODULUS",
    "NameFingerprint",
    "SPIRITUAL_MODULUS",
    "ZODIACAL_MODULUS",
    "compute_fingerprint",
    "fingerprint_from_total",
]

LOG = logging.getLogger(__name__)

SPIRITUAL_MODULUS = 9
ELEMENTAL_MODULUS = 4
ZODIACAL_MODULUS = 12


@dataclass(frozen=True)
class NameFingerprint:
    """Letter-value total of a name and its three modular reductions."""

    normalized_text: str
    total: int
    spiritual_remainder: int
    elemental_remainder: int
    zodiacal_remainder: int
    table_name: str

    def to_payload(self) -> dict[str, object]:
        return {
            "normalized_text": self.normalized_text,
            "total": self.total,
            "spiritual_remainder": self.spiritual_remainder,
            "elemental_remainder": self.elemental_remainder,
            "zodiacal_remainder": self.zodiacal_remainder,
            "table_name": self.table_name,
        }


def fingerprint_from_total(
    total: int, *, table_name: str, text: str = ""
) -> NameFingerprint:
    """Build a fingerprint from a precomputed letter-value ``total``."""

    if total <= 0:
        raise InvalidInputError(f"fingerprint total must be positive, got {total}")
    return NameFingerprint(
        normalized_text=text,
        total=total,
        spiritual_remainder=wrap_mod(total, SPIRITUAL_MODULUS),
        elemental_remainder=wrap_mod(total, ELEMENTAL_MODULUS),
        zodiacal_remainder=wrap_mod(total, ZODIACAL_MODULUS),
        table_name=table_name,
    )


def compute_fingerprint(name: str, table: LetterValueTable) -> NameFingerprint:
    """Normalize ``name`` and reduce its letter values under ``table``.

    Raises :class:`InvalidInputError` when nothing survives normalization or
    when no character of the name is known to ``table``.
    """

    normalized = normalize_name(name)
    if not normalized:
        raise InvalidInputError("name is empty after normalization")
    total = table.total(normalized)
    if total == 0:
        raise InvalidInputError(
            f"no character of {name!r} carries a value in the '{table.name}' table"
        )
    if HAMZA_FORMS.intersection(normalized):
        LOG.warning("hamza forms in %r carry no letter value", name)
    unknown = sorted({char for char in normalized if char not in table})
    if unknown:
        LOG.debug("ignoring characters %s absent from '%s'", unknown, table.name)
    fingerprint = fingerprint_from_total(total, table_name=table.name, text=normalized)
    LOG.debug(
        "fingerprint %s total=%d remainders=(%d, %d, %d)",
        normalized,
        total,
        fingerprint.spiritual_remainder,
        fingerprint.elemental_remainder,
        fingerprint.zodiacal_remainder,
    )
    return fingerprint
