"""Static correspondence tables for elements, planets and letters."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType

from .letters import ARABIC_LETTERS, LETTER_VARIANTS

__all__ = [
    "ELEMENT_BY_ELEMENTAL_REMAINDER",
    "ELEMENT_BY_PLANET",
    "ELEMENT_BY_SPIRITUAL_REMAINDER",
    "ELEMENT_PRIORITY",
    "Element",
    "ElementalRelation",
    "LETTER_ELEMENTS",
    "Orientation",
    "Planet",
    "PlanetaryFriendliness",
    "ZODIAC_SIGNS",
    "element_of_elemental_remainder",
    "element_of_planet",
    "element_of_spiritual_remainder",
    "elemental_relation",
    "letter_element",
    "orientation_of",
    "planet_friendliness",
    "planetary_ruler_of",
    "zodiac_sign_of",
]


class Element(StrEnum):
    FIRE = "fire"
    WATER = "water"
    AIR = "air"
    EARTH = "earth"


class Planet(StrEnum):
    SUN = "sun"
    MOON = "moon"
    MARS = "mars"
    MERCURY = "mercury"
    JUPITER = "jupiter"
    VENUS = "venus"
    SATURN = "saturn"


class ElementalRelation(StrEnum):
    HARMONIOUS = "harmonious"
    SUPPORTIVE = "supportive"
    NEUTRAL = "neutral"
    CHALLENGING = "challenging"


class PlanetaryFriendliness(StrEnum):
    FRIENDLY = "friendly"
    NEUTRAL = "neutral"
    OPPOSING = "opposing"


class Orientation(StrEnum):
    """Outward (zahir) or inward (batin) expression of an element."""

    ZAHIR = "zahir"
    BATIN = "batin"


# Keyed on the 1..4 elemental remainder (Maghribi order).
ELEMENT_BY_ELEMENTAL_REMAINDER: Mapping[int, Element] = MappingProxyType(
    {1: Element.FIRE, 2: Element.EARTH, 3: Element.AIR, 4: Element.WATER}
)

# Keyed on the 1..9 spiritual remainder; narrative use only.
ELEMENT_BY_SPIRITUAL_REMAINDER: Mapping[int, Element] = MappingProxyType(
    {
        1: Element.FIRE,
        2: Element.EARTH,
        3: Element.AIR,
        4: Element.WATER,
        5: Element.FIRE,
        6: Element.EARTH,
        7: Element.AIR,
        8: Element.WATER,
        9: Element.FIRE,
    }
)

ZODIAC_SIGNS: tuple[tuple[str, Planet], ...] = (
    ("aries", Planet.MARS),
    ("taurus", Planet.VENUS),
    ("gemini", Planet.MERCURY),
    ("cancer", Planet.MOON),
    ("leo", Planet.SUN),
    ("virgo", Planet.MERCURY),
    ("libra", Planet.VENUS),
    ("scorpio", Planet.MARS),
    ("sagittarius", Planet.JUPITER),
    ("capricorn", Planet.SATURN),
    ("aquarius", Planet.SATURN),
    ("pisces", Planet.JUPITER),
)

ELEMENT_BY_PLANET: Mapping[Planet, Element] = MappingProxyType(
    {
        Planet.SUN: Element.FIRE,
        Planet.MARS: Element.FIRE,
        Planet.JUPITER: Element.AIR,
        Planet.MERCURY: Element.AIR,
        Planet.MOON: Element.WATER,
        Planet.VENUS: Element.WATER,
        Planet.SATURN: Element.EARTH,
    }
)

# Tie-break order for the dominant element of a letter histogram.
ELEMENT_PRIORITY: tuple[Element, ...] = (
    Element.FIRE,
    Element.AIR,
    Element.WATER,
    Element.EARTH,
)

_ELEMENT_LETTERS: Mapping[Element, str] = MappingProxyType(
    {
        Element.FIRE: "اهطمفشذ",
        Element.AIR: "بوينضظغ",
        Element.WATER: "جزكسقثخ",
        Element.EARTH: "دحلعرصت",
    }
)

# Variants follow their base letter except where listed here.
_VARIANT_ELEMENTS: Mapping[str, Element] = MappingProxyType({"ة": Element.EARTH})


def _build_letter_elements() -> Mapping[str, Element]:
    table: dict[str, Element] = {}
    for element, letters in _ELEMENT_LETTERS.items():
        for letter in letters:
            if letter in table:
                raise RuntimeError(f"letter {letter} assigned to more than one element")
            table[letter] = element
    missing = [letter for letter in ARABIC_LETTERS if letter not in table]
    if missing:
        raise RuntimeError(f"letter element table is missing {''.join(missing)}")
    for variant, base in LETTER_VARIANTS.items():
        table[variant] = _VARIANT_ELEMENTS.get(variant, table[base])
    return MappingProxyType(table)


LETTER_ELEMENTS = _build_letter_elements()

_SUPPORTIVE = frozenset(
    {
        frozenset({Element.FIRE, Element.AIR}),
        frozenset({Element.WATER, Element.EARTH}),
    }
)
_CHALLENGING = frozenset(
    {
        frozenset({Element.FIRE, Element.WATER}),
        frozenset({Element.EARTH, Element.AIR}),
    }
)

_FRIENDLY_PAIRS = frozenset(
    frozenset(pair)
    for pair in (
        (Planet.SUN, Planet.JUPITER),
        (Planet.SUN, Planet.MARS),
        (Planet.MARS, Planet.JUPITER),
        (Planet.MOON, Planet.VENUS),
        (Planet.MOON, Planet.MERCURY),
        (Planet.MERCURY, Planet.VENUS),
        (Planet.MERCURY, Planet.JUPITER),
        (Planet.VENUS, Planet.JUPITER),
        (Planet.VENUS, Planet.SATURN),
        (Planet.MERCURY, Planet.SATURN),
    )
)
_OPPOSING_PAIRS = frozenset(
    frozenset(pair)
    for pair in (
        (Planet.SATURN, Planet.SUN),
        (Planet.SATURN, Planet.MARS),
        (Planet.MARS, Planet.VENUS),
    )
)

if _FRIENDLY_PAIRS & _OPPOSING_PAIRS:
    raise RuntimeError("planet pairs cannot be both friendly and opposing")


def _lookup(table: Mapping[int, Element], remainder: int, label: str) -> Element:
    try:
        return table[remainder]
    except KeyError as exc:
        raise ValueError(
            f"{label} remainder must be within 1..{len(table)}, got {remainder}"
        ) from exc


def element_of_elemental_remainder(remainder: int) -> Element:
    return _lookup(ELEMENT_BY_ELEMENTAL_REMAINDER, remainder, "elemental")


def element_of_spiritual_remainder(remainder: int) -> Element:
    return _lookup(ELEMENT_BY_SPIRITUAL_REMAINDER, remainder, "spiritual")


def zodiac_sign_of(remainder: int) -> str:
    if not 1 <= remainder <= len(ZODIAC_SIGNS):
        raise ValueError(f"zodiacal remainder must be within 1..12, got {remainder}")
    return ZODIAC_SIGNS[remainder - 1][0]


def planetary_ruler_of(remainder: int) -> Planet:
    """Return the classical ruler of the sign selected by ``remainder``."""

    if not 1 <= remainder <= len(ZODIAC_SIGNS):
        raise ValueError(f"zodiacal remainder must be within 1..12, got {remainder}")
    return ZODIAC_SIGNS[remainder - 1][1]


def element_of_planet(planet: Planet | str) -> Element:
    return ELEMENT_BY_PLANET[Planet(planet)]


def letter_element(char: str) -> Element | None:
    return LETTER_ELEMENTS.get(char)


def orientation_of(element: Element | str) -> Orientation:
    if Element(element) in (Element.FIRE, Element.AIR):
        return Orientation.ZAHIR
    return Orientation.BATIN


def elemental_relation(first: Element | str, second: Element | str) -> ElementalRelation:
    """Classify a pair of elements; the result does not depend on order."""

    pair = frozenset({Element(first), Element(second)})
    if len(pair) == 1:
        return ElementalRelation.HARMONIOUS
    if pair in _SUPPORTIVE:
        return ElementalRelation.SUPPORTIVE
    if pair in _CHALLENGING:
        return ElementalRelation.CHALLENGING
    return ElementalRelation.NEUTRAL


def planet_friendliness(first: Planet | str, second: Planet | str) -> PlanetaryFriendliness:
    """Classify a pair of planets; the result does not depend on order."""

    pair = frozenset({Planet(first), Planet(second)})
    if len(pair) == 1 or pair in _FRIENDLY_PAIRS:
        return PlanetaryFriendliness.FRIENDLY
    if pair in _OPPOSING_PAIRS:
        return PlanetaryFriendliness.OPPOSING
    return PlanetaryFriendliness.NEUTRAL
