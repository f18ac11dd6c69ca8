"""
Quantity annotation: decide whether each verse syllable is long or short and
collect the rhythm statistics of the verse.
"""

from __future__ import annotations

from typing import Iterable, Optional

from verse.core.constants import ELISION_MARK, MACRON_VOWELS
from verse.core.models import Quantity, RawSyllable, RhythmStats, Verse, VerseSyllable
from verse.languages.latin.characters import char_at, is_vowel, reads_as_vowel, vocalic_semivowel
from verse.processing.meter import figure_out_rhythm


def _vowel_weight(syllable: RawSyllable) -> int:
    """
    Add up the weight of the vowels of a syllable.

    A macron counts twice, so one marked vowel or a diphthong is enough to
    make the syllable long. Everything before an elision mark is discarded:
    the quantity is the one of whatever comes after it.
    """
    weight = 0
    value = syllable.value

    for i, c in enumerate(value.lower()):
        if c == ELISION_MARK:
            weight = 0
        elif c in MACRON_VOWELS:
            weight += 2
        elif c in "aeoy":
            weight += 1
        elif c == "i":
            # A sneaky semivowel is a consonant.
            if not (i == 0 and syllable.is_sneaky):
                weight += 1
        elif c == "u" or (c == "v" and vocalic_semivowel(value, i)):
            if i == 0 and syllable.is_sneaky:
                continue
            # Not to be considered inside "qu-" or "gu-".
            if char_at(value, i - 1) in ("q", "g") and is_vowel(value, i + 1):
                continue
            weight += 1

    return weight


def syllable_quantity(syllable: RawSyllable) -> Quantity:
    """Return the quantity of a syllable which has already been resyllabified."""
    # Closed syllables are always long.
    if not reads_as_vowel(syllable.value, len(syllable.value) - 1):
        return Quantity.LONG
    if _vowel_weight(syllable) > 1:
        return Quantity.LONG
    return Quantity.SHORT


def mark_rhythm(syllables: Iterable[RawSyllable], line: str = "", number: Optional[int] = None) -> Verse:
    """
    Annotate the quantity of every syllable and classify the resulting verse.

    Args:
        syllables: Resyllabified syllables of a single line
        line: Display text of the line
        number: Index of the line in the scanned text

    Returns:
        The annotated `Verse`
    """
    stats = RhythmStats()
    annotated = []

    for syllable in syllables:
        quantity = syllable_quantity(syllable)
        stats = stats.add(quantity)
        annotated.append(
            VerseSyllable(
                value=syllable.value,
                begin=syllable.begin,
                end=syllable.end,
                quantity=quantity,
            )
        )

    return Verse(
        syllables=tuple(annotated),
        kind=figure_out_rhythm(stats),
        line=line,
        stats=stats,
        number=number,
    )
