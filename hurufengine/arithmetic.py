"""Integer helpers shared by the fingerprint and scoring layers."""

from __future__ import annotations

import math

__all__ = ["clamp_score", "round_half_up", "wrap_mod"]


def wrap_mod(value: int, modulus: int) -> int:
    """Return ``value mod modulus`` with a zero result mapped to ``modulus``.

    Every classification index produced by the engine is 1-based, so a
    remainder of zero always denotes the last slot of the table.
    """

    if modulus < 1:
        raise ValueError(f"modulus must be positive, got {modulus}")
    remainder = value % modulus
    return remainder or modulus


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_score(value: float, lower: int = 0, upper: int = 100) -> int:
    """Round ``value`` half-up and clamp it to ``[lower, upper]``."""

    return max(lower, min(upper, round_half_up(value)))
