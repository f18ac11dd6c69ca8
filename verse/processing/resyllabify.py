"""
Resyllabification: apply verse rules (elision and consonant transfer) on word
contact to the bare syllables of a line.
"""

from __future__ import annotations

from typing import Iterable, List

from verse.core.constants import ELISION_MARK
from verse.core.models import RawSyllable, WordPosition
from verse.languages.latin.characters import char_at, is_vowel, reads_as_vowel


def in_word_boundaries(prev: RawSyllable, cur: RawSyllable) -> bool:
    """Return True if `prev` ends a word and `cur` starts the next one."""
    return prev.is_word_end and cur.is_word_start


def is_elidable(syllable: RawSyllable) -> bool:
    """Return True if the syllable starts with a vowel or 'h'."""
    return reads_as_vowel(syllable.value, 0) or char_at(syllable.value, 0) == "h"


def ends_in_elision(syllable: RawSyllable) -> bool:
    """Return True if the syllable ends in a vowel, or in a vowel followed by 'm'."""
    value = syllable.value
    last = len(value) - 1
    if reads_as_vowel(value, last):
        return True
    return char_at(value, last) == "m" and is_vowel(value, last - 1)


def _elide(prev: RawSyllable, cur: RawSyllable):
    """Swallow `prev` into `cur`, which now spans both syllables."""
    dirty = prev.model_copy(update={"position": prev.position | {WordPosition.DIRTY}})
    merged = cur.model_copy(
        update={
            "value": f"{prev.value[-1]}{ELISION_MARK}{cur.value}",
            "begin": prev.begin,
            "position": cur.position | {WordPosition.MERGED},
        }
    )
    return dirty, merged


def _split(prev: RawSyllable, cur: RawSyllable):
    """Move the final consonant of `prev` onto the front of `cur`."""
    shrunk = prev.model_copy(update={"value": prev.value[:-1], "end": prev.end - 1})
    grown = cur.model_copy(update={"value": prev.value[-1] + cur.value, "begin": prev.end - 1})
    return shrunk, grown


def resyllabify(syllables: Iterable[RawSyllable]) -> List[RawSyllable]:
    """
    Rewrite the syllables of a line taking into account that this is verse.

    Contact between words happens between a syllable ending a word and the
    next one starting a word. When the latter starts with 'h' or with a vowel
    which is not a "sneaky" semivowel, either:

      1. Elision: the previous syllable ends with a vowel (or vowel + 'm') and
         both syllables are merged, or
      2. Splitting: the previous syllable ends with a consonant, which moves
         into the next syllable.

    The input is left untouched; a new list is returned without the syllables
    swallowed by elisions.
    """
    result: List[RawSyllable] = []

    for cur in syllables:
        if result:
            prev = result[-1]
            if in_word_boundaries(prev, cur) and not cur.is_sneaky and is_elidable(cur) and prev.value:
                if ends_in_elision(prev):
                    result[-1], cur = _elide(prev, cur)
                else:
                    result[-1], cur = _split(prev, cur)
        result.append(cur)

    return [s for s in result if WordPosition.DIRTY not in s.position and s.value]
