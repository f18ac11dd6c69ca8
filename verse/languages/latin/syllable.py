"""
Latin Syllabification Module.

This module splits a single Latin word into syllables. The word is walked left
to right keeping track of whether the syllable being built already has a
vowel; every boundary decision is delegated to the predicates in
`verse.languages.latin.characters`.
"""

from __future__ import annotations

from typing import FrozenSet, List

from verse.core.constants import HEAD_MERGES, SUFFIX_MERGES
from verse.core.models import RawSyllable, SyllableFlag, WordPosition
from verse.languages.latin.characters import (
    consonant_starts_next_syllable,
    is_diphthong,
    long_coda,
    prefix_index,
    reads_as_vowel,
    sneaky_semivowel,
    strip_diaeresis,
    vowel_ahead,
)


class _SyllableBuilder:
    """Collects the syllables of a word while it is being scanned."""

    def __init__(self, word: str, offset: int) -> None:
        self.word = word
        self.plain = strip_diaeresis(word)
        self.offset = offset
        self.syllables: List[RawSyllable] = []
        self.begin = 0
        self.flags: FrozenSet[SyllableFlag] = frozenset()

    def current(self, index: int) -> str:
        """Text of the syllable being built, as originally written."""
        return self.word[self.begin : index]

    def close(self, end: int) -> None:
        """Emit the syllable spanning from the last boundary up to `end`."""
        self.syllables.append(
            RawSyllable(
                value=self.plain[self.begin : end],
                begin=self.begin + self.offset,
                end=end + self.offset,
                flags=self.flags,
            )
        )
        self.begin = end
        self.flags = frozenset()

    def finish(self) -> List[RawSyllable]:
        """Emit whatever is left and apply the hardcoded merge exceptions."""
        tail = self.plain[self.begin :]
        if tail:
            if self.syllables and _merges(self.syllables[-1].value, tail, SUFFIX_MERGES):
                self.syllables[-1] = _join(self.syllables[-1], tail, len(self.word) + self.offset)
            else:
                self.close(len(self.word))

        if len(self.syllables) > 1 and _merges(self.syllables[0].value, self.syllables[1].value, HEAD_MERGES):
            head = _join(self.syllables[0], self.syllables[1].value, self.syllables[1].end)
            self.syllables[0:2] = [head]

        return self.syllables


def _merges(first: str, second: str, pairs) -> bool:
    return (first.lower(), second.lower()) in pairs


def _join(syllable: RawSyllable, text: str, end: int) -> RawSyllable:
    return syllable.model_copy(update={"value": syllable.value + text, "end": end})


def _tag_positions(syllables: List[RawSyllable]) -> List[RawSyllable]:
    """Mark the first syllable as START and the last one as END."""
    last = len(syllables) - 1
    tagged = []
    for i, syllable in enumerate(syllables):
        position = set()
        if i == 0:
            position.add(WordPosition.START)
        if i == last:
            position.add(WordPosition.END)
        tagged.append(syllable.model_copy(update={"position": frozenset(position)}))
    return tagged


def syllabify(word: str, offset: int = 0) -> List[RawSyllable]:
    """
    Split a word into syllables.

    Args:
        word: A run of Latin letters (macrons, breves and diaereses allowed)
        offset: Added to the begin/end range of every syllable, so that the
            ranges point into the line the word was taken from

    Returns:
        The syllables of the word, in order. Values have diaeresis marks
        normalized, so `strip_diaeresis(word)[s.begin - offset:s.end - offset]`
        is always `s.value`.
    """
    if not word:
        return []

    builder = _SyllableBuilder(word, offset)

    # Some prefixes cannot be split and count as an atomic syllable. Take them
    # out now so the main loop doesn't have to care about them.
    index = prefix_index(word)
    if index > 0:
        builder.close(index)

    # Have we already seen a vowel in this syllable? If not, swallow
    # everything until we find one. Once that happens the fun begins.
    vowel = False
    i = index
    while i < len(word):
        if not vowel:
            vowel = reads_as_vowel(word, i)
        elif reads_as_vowel(word, i):
            # A vowel after another one is not a new syllable yet if it closes
            # a diphthong or if the syllable so far is a semivowel written
            # with 'i' or 'u' instead of 'j' or 'v'.
            sneaky = sneaky_semivowel(word, builder.current(i), i)
            if sneaky:
                builder.flags = frozenset({SyllableFlag.SNEAKY_SEMIVOWEL})
            elif not is_diphthong(word, i):
                builder.close(i)
        else:
            vowel = False
            if consonant_starts_next_syllable(word, i):
                builder.close(i)
            elif vowel_ahead(word, i + 1):
                # Eat this consonant (and maybe the next one) as the coda of
                # the current syllable and call for a new one.
                end = i + 2 if long_coda(word, i) else i + 1
                builder.close(end)
                i = end
                continue
        i += 1

    return _tag_positions(builder.finish())
