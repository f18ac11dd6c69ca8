"""
Meter classification for single verses and whole poems.

The rules are intentionally strict: whenever a verse or a poem does not
clearly follow a known meter it is left as `MeterKind.UNKNOWN`.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from verse.core.constants import (
    HEXAMETER_FEET,
    HEXAMETER_MIN_SYLLABLES,
    PENTAMETER_CLAUSULA,
    PENTAMETER_MAX_SYLLABLES,
    PENTAMETER_MIN_SYLLABLES,
)
from verse.core.models import MeterKind, Poem, Quantity, RhythmStats, Verse

logger = logging.getLogger(__name__)

_PATTERN_SYMBOLS = {"-": Quantity.LONG, "u": Quantity.SHORT}


def parse_pattern(pattern: str) -> List[Quantity]:
    """
    Turn a pattern string such as "-uu--" into quantities.

    Args:
        pattern: '-' for a long syllable, 'u' for a short one

    Returns:
        List of quantities

    Raises:
        ValueError: If the pattern contains any other symbol
    """
    try:
        return [_PATTERN_SYMBOLS[c] for c in pattern]
    except KeyError as exc:
        raise ValueError(f"Invalid pattern symbol: {exc.args[0]!r}") from None


def meter_ends_with(pattern: Sequence[Quantity], ending: str) -> bool:
    """Return True if the quantity pattern ends with the given pattern string."""
    expected = parse_pattern(ending)
    if len(expected) > len(pattern):
        return False
    return list(pattern[len(pattern) - len(expected) :]) == expected


def _quantity_at(pattern: Sequence[Quantity], index: int) -> Optional[Quantity]:
    if 0 <= index < len(pattern):
        return pattern[index]
    return None


def is_enclitic_dactyl(pattern: Sequence[Quantity], feet: int, forbid_contraction: int = -1) -> bool:
    """
    Check whether a pattern follows an enclitic dactylic verse of `feet` feet
    (6 for a hexameter).

    Every foot but the last must be a dactyl (- u u) or a spondee (- -). The
    last foot is a long syllable plus an anceps.

    Args:
        pattern: Quantities of the verse
        feet: Number of feet, including the final one
        forbid_contraction: 0-based index of the foot which may not be a
            spondee, or -1 if all of them can be contracted

    Returns:
        True if the pattern matches

    Raises:
        ValueError: If `feet` is lower than 1
    """
    if feet < 1:
        raise ValueError(f"A verse needs at least one foot, got {feet}")

    i = 0
    for foot in range(feet - 1):
        # Regardless of the foot, it always starts with a long syllable.
        if _quantity_at(pattern, i) is not Quantity.LONG:
            return False

        # It's either followed by a single long syllable, or two short ones.
        if _quantity_at(pattern, i + 1) is Quantity.LONG:
            if foot == forbid_contraction:
                return False
            i += 2
        elif _quantity_at(pattern, i + 1) is Quantity.SHORT and _quantity_at(pattern, i + 2) is Quantity.SHORT:
            i += 3
        else:
            return False

    # Only two syllables left, the first one long (the second one is anceps).
    return i + 2 == len(pattern) and pattern[i] is Quantity.LONG


def figure_out_rhythm(stats: RhythmStats) -> MeterKind:
    """Return the meter of a single verse given its rhythm statistics."""
    total = stats.total

    if PENTAMETER_MIN_SYLLABLES <= total <= PENTAMETER_MAX_SYLLABLES:
        if meter_ends_with(stats.pattern, PENTAMETER_CLAUSULA):
            return MeterKind.DACTYLIC_PENTAMETER
    if total >= HEXAMETER_MIN_SYLLABLES and is_enclitic_dactyl(stats.pattern, HEXAMETER_FEET):
        return MeterKind.DACTYLIC_HEXAMETER
    return MeterKind.UNKNOWN


def can_coerce_into(verse: Verse, meter: MeterKind) -> bool:
    """
    Return True if the verse can be considered to be in `meter` when taking a
    broad definition of it.

    NOTE: for now nothing is coerced: the per-verse rules are expected to be
    relaxed enough not to leave known meters as unknown. This is kept as the
    place to handle special cases in the future.
    """
    return False


def _fits(verse: Verse, meter: MeterKind) -> bool:
    if verse.kind is meter:
        return True
    return verse.kind is MeterKind.UNKNOWN and can_coerce_into(verse, meter)


def is_single_meter(verses: Sequence[Verse], meter: MeterKind) -> bool:
    """Return True if every verse is in (or can be coerced into) `meter`."""
    return all(_fits(verse, meter) for verse in verses)


def is_elegiac_couplet(verses: Sequence[Verse]) -> bool:
    """Return True if the verses alternate hexameters and pentameters."""
    if len(verses) % 2 != 0:
        return False

    for i, verse in enumerate(verses):
        expected = MeterKind.DACTYLIC_HEXAMETER if i % 2 == 0 else MeterKind.DACTYLIC_PENTAMETER
        if not _fits(verse, expected):
            return False
    return True


def analyze(verses: Sequence[Verse]) -> Poem:
    """
    Build the `Poem` for the given verses, deciding the meter of the whole.

    Only one candidate meter is ever considered: a single known meter across
    all verses, or hexameters and pentameters making up elegiac couplets.
    """
    found = []
    for verse in verses:
        if verse.kind is not MeterKind.UNKNOWN and verse.kind not in found:
            found.append(verse.kind)

    kind = MeterKind.UNKNOWN
    if len(found) == 1:
        if is_single_meter(verses, found[0]):
            kind = found[0]
    elif len(found) == 2 and set(found) == {MeterKind.DACTYLIC_HEXAMETER, MeterKind.DACTYLIC_PENTAMETER}:
        if is_elegiac_couplet(verses):
            kind = MeterKind.ELEGIAC_COUPLET

    unknowns = sum(1 for verse in verses if verse.kind is MeterKind.UNKNOWN)
    logger.debug("Found meters %s (%d unknown verses): poem is %s", [m.value for m in found], unknowns, kind.value)
    return Poem(verses=tuple(verses), kind=kind)
