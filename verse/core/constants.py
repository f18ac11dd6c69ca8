"""
Core Constants Module.

This module defines the character tables and metrical constants used across the
scansion pipeline.
"""

# Latin vowels, lowercase. Uppercase input is lowercased before lookup.
PLAIN_VOWELS = "aeiouy"
MACRON_VOWELS = "āēīōūȳ"
BREVE_VOWELS = "ăĕĭŏŭ"
DIAERESIS_VOWELS = "äëïöüÿ"
VOWELS = PLAIN_VOWELS + MACRON_VOWELS + BREVE_VOWELS + DIAERESIS_VOWELS

# Letters that are written for the semivowels.
SEMIVOWELS = "jv"

# Everything that can be part of a word.
LATIN_LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
LATIN_UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
MARKED_VOWELS = MACRON_VOWELS + BREVE_VOWELS + DIAERESIS_VOWELS
LATIN_LETTERS = LATIN_LOWERCASE + LATIN_UPPERCASE + MARKED_VOWELS + MARKED_VOWELS.upper()

# Diaeresis marks only separate vowels; they are dropped for display.
DIAERESIS_MAP = {
    "ä": "a",
    "ë": "e",
    "ï": "i",
    "ö": "o",
    "ü": "u",
    "ÿ": "y",
    "Ä": "A",
    "Ë": "E",
    "Ï": "I",
    "Ö": "O",
    "Ü": "U",
    "Ÿ": "Y",
}

# Consonant clusters
STOP_CONSONANTS = "bcdfgkptz"
LIQUID_CONSONANTS = "lr"
LONG_CODA_CONSONANTS = "bn"

# Prefixes that always make up a syllable of their own.
INDIVISIBLE_PREFIXES = ("in",)

# Words whose last vowels would otherwise be split apart:
# (previous syllable, trailing text) pairs merged at the end of a word.
SUFFIX_MERGES = (("cu", "i"), ("hu", "ic"))

# (first syllable, second syllable) pairs merged at the start of a word.
HEAD_MERGES = (("cu", "i"),)

# Inserted between the elided letter and the next syllable.
ELISION_MARK = "_"

# Metrical constants
PENTAMETER_MIN_SYLLABLES = 12
PENTAMETER_MAX_SYLLABLES = 14
HEXAMETER_MIN_SYLLABLES = 13
HEXAMETER_FEET = 6

# Second half of a pentameter: - - u u - u u - (the first two may be a
# spondee or the end of a dactyl).
PENTAMETER_CLAUSULA = "--uu-uu-"

# Rendering defaults
DEFAULT_BOUNDARY_MARK = "|"
DEFAULT_LONG_MARK = "-"
DEFAULT_SHORT_MARK = "u"
