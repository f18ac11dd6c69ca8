"""
Latin character classification.

Stateless predicates over a piece of text and an index into it. They answer
the questions the syllabifier asks while walking a word: is this a vowel, does
it close a diphthong, does this consonant belong to the next syllable, and so
on. An index outside of the text is never an error: it simply fails every
predicate.
"""

from verse.core.constants import (
    DIAERESIS_MAP,
    DIAERESIS_VOWELS,
    INDIVISIBLE_PREFIXES,
    LIQUID_CONSONANTS,
    LONG_CODA_CONSONANTS,
    SEMIVOWELS,
    STOP_CONSONANTS,
    VOWELS,
)

# First vowel of a diphthong (plain or breve) -> vowels that may follow it.
_DIPHTHONGS = {
    "a": "eu",
    "ă": "eu",
    "e": "iu",
    "ĕ": "iu",
    "o": "e",
    "ŏ": "e",
}


def char_at(text: str, index: int) -> str:
    """Return the lowercased character at `index`, or '' when out of range."""
    if 0 <= index < len(text):
        return text[index].lower()
    return ""


def is_vowel(text: str, index: int, accept_semivowel: bool = False) -> bool:
    """
    Check whether the character at `index` is a vowel.

    Args:
        text: Text to inspect
        index: Position of the character
        accept_semivowel: Also accept the semivowels 'j' and 'v'

    Returns:
        True for a/e/i/o/u/y with or without macron, breve or diaeresis
    """
    c = char_at(text, index)
    if c == "":
        return False
    if c in VOWELS:
        return True
    return accept_semivowel and c in SEMIVOWELS


def vocalic_semivowel(text: str, index: int) -> bool:
    """
    Check whether a 'j' or 'v' stands for a vowel.

    A semivowel letter that is not followed by a vowel cannot be a consonant,
    as in inscriptional capitals (VIRVMQVE) where V is written for U.
    """
    return is_vowel(text, index, accept_semivowel=True) and not is_vowel(text, index) and not is_vowel(text, index + 1)


def reads_as_vowel(text: str, index: int) -> bool:
    """Return True if the character at `index` is the nucleus of a syllable."""
    return is_vowel(text, index) or vocalic_semivowel(text, index)


def is_diphthong(text: str, index: int) -> bool:
    """
    Check whether the vowel at `index` closes a diphthong opened by the
    previous character (for 'aestās' only index 1 qualifies).

    A 'u' after 'q' or 'g' is part of the consonant cluster, so any vowel
    after "qu-" or "gu-" continues the syllable. The 'ui' diphthong is left
    to the general algorithm.
    """
    c = char_at(text, index)
    prev = char_at(text, index - 1)

    if prev in _DIPHTHONGS:
        return c != "" and c in _DIPHTHONGS[prev]
    if prev in ("u", "ŭ", "v"):
        return char_at(text, index - 2) in ("q", "g") and is_vowel(text, index)
    return False


def vowel_ahead(text: str, index: int) -> bool:
    """Return True if there is at least one vowel at or after `index`."""
    return any(reads_as_vowel(text, i) for i in range(max(index, 0), len(text)))


def liquid_consonant(text: str, index: int) -> bool:
    """Return True if a stop consonant is followed by 'l' or 'r' (e.g. "cr")."""
    next_char = char_at(text, index + 1)
    if next_char == "" or next_char not in LIQUID_CONSONANTS:
        return False
    c = char_at(text, index)
    return c != "" and c in STOP_CONSONANTS


def is_th(text: str, index: int) -> bool:
    """Return True for the aspirate "th", which is never split."""
    return char_at(text, index) == "t" and char_at(text, index + 1) == "h"


def special_nj_cluster(text: str, index: int) -> bool:
    """Return True for 'n' followed by 'i' or 'j' and a vowel (e.g. "Lāvīnja")."""
    if char_at(text, index) != "n":
        return False
    return char_at(text, index + 1) in ("i", "j") and is_vowel(text, index + 2)


def qu_cluster(text: str, index: int) -> bool:
    """Return True for "qu-" or "gu-" (also spelled with 'v') before a vowel."""
    if char_at(text, index) not in ("q", "g"):
        return False
    return char_at(text, index + 1) in ("u", "v") and is_vowel(text, index + 2)


def vowel_then_coda(text: str, index: int) -> bool:
    """
    Return True if the consonant at `index` is followed by a 'j' or 'v' that
    can only be a vowel because a coda (or the end of the word) comes right
    after it, as in the "RVM" of "VIRVMQVE".
    """
    return vocalic_semivowel(text, index + 1)


def consonant_starts_next_syllable(text: str, index: int) -> bool:
    """
    Check whether the consonant at `index` opens the next syllable, so that
    the current syllable has to be closed right before it.
    """
    return (
        is_vowel(text, index + 1)
        or vowel_then_coda(text, index)
        or qu_cluster(text, index)
        or special_nj_cluster(text, index)
        or is_th(text, index)
        or liquid_consonant(text, index)
    )


def is_consonant(text: str, index: int) -> bool:
    """Return True for a letter inside the text that is not read as a vowel."""
    c = char_at(text, index)
    return c.isalpha() and not reads_as_vowel(text, index)


def long_coda(text: str, index: int) -> bool:
    """Return True if 'b' or 'n' is followed by two more consonants ("obsc", "nst")."""
    c = char_at(text, index)
    if c == "" or c not in LONG_CODA_CONSONANTS:
        return False
    return is_consonant(text, index + 1) and is_consonant(text, index + 2)


def prefix_index(word: str) -> int:
    """
    Return the length of an indivisible prefix at the start of `word`, or 0
    when the word does not start with one.
    """
    lowered = word.lower()
    for prefix in INDIVISIBLE_PREFIXES:
        if lowered.startswith(prefix):
            return len(prefix)
    return 0


def sneaky_semivowel(text: str, current: str, index: int) -> bool:
    """
    Check whether the vowel at `index` follows an 'i' or 'u' which is in fact
    the semivowel 'j' or 'v'.

    Args:
        text: Word being syllabified
        current: Syllable parsed so far
        index: Position of the vowel being considered

    Returns:
        True when `current` is exactly 'i' or 'u' and a vowel follows
    """
    if current.lower() not in ("i", "u"):
        return False
    return is_vowel(text, index)


def strip_diaeresis(text: str) -> str:
    """Replace vowels with a diaeresis by their plain counterpart."""
    if not any(c.lower() in DIAERESIS_VOWELS for c in text):
        return text
    return "".join(DIAERESIS_MAP.get(c, c) for c in text)
