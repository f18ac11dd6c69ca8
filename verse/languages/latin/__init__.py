"""
Latin Language Module.

This module provides character classification and syllabification for Latin
words.
"""

from verse.languages.latin.characters import (
    is_diphthong,
    is_vowel,
    reads_as_vowel,
    strip_diaeresis,
)
from verse.languages.latin.syllable import syllabify

__all__ = [
    # Characters
    "is_vowel",
    "is_diphthong",
    "reads_as_vowel",
    "strip_diaeresis",
    # Syllables
    "syllabify",
]
