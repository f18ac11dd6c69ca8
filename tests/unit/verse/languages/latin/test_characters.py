"""
Tests for the Latin character classification predicates.
"""

import pytest

from verse.languages.latin.characters import (
    consonant_starts_next_syllable,
    is_diphthong,
    is_th,
    is_vowel,
    liquid_consonant,
    long_coda,
    prefix_index,
    qu_cluster,
    reads_as_vowel,
    sneaky_semivowel,
    special_nj_cluster,
    strip_diaeresis,
    vocalic_semivowel,
    vowel_ahead,
    vowel_then_coda,
)
from verse.languages.latin.syllable import syllabify


@pytest.mark.parametrize("c", list("aeiouyAEIOUY") + list("āēīōūȳăĕĭŏŭäëïöüÿĀĒĪŌŪ"))
def test_is_vowel(c):
    """Test plain and marked vowels in both cases."""
    assert is_vowel(c, 0)


@pytest.mark.parametrize("c", list("bcdfghklmnpqrstxz") + [" ", "_", "-", "1"])
def test_is_not_vowel(c):
    """Test consonants and other characters."""
    assert not is_vowel(c, 0)


def test_semivowels_only_when_accepted():
    """Test that 'j' and 'v' are vowels only when asked for."""
    assert not is_vowel("j", 0)
    assert not is_vowel("V", 0)
    assert is_vowel("j", 0, accept_semivowel=True)
    assert is_vowel("V", 0, accept_semivowel=True)


def test_out_of_range_index():
    """Test that indices outside of the text fail every predicate."""
    assert not is_vowel("amo", 3)
    assert not is_vowel("amo", -1)
    assert not is_diphthong("ae", 0)
    assert not liquid_consonant("c", 0)


def test_vocalic_semivowel():
    """Test that a 'v' not followed by a vowel stands for 'u'."""
    assert vocalic_semivowel("VIRVMQVE", 3)
    assert not vocalic_semivowel("VIRVMQVE", 0)
    assert not vocalic_semivowel("VIRVMQVE", 6)
    assert not vocalic_semivowel("solvit", 3)
    assert reads_as_vowel("RVM", 1)
    assert not reads_as_vowel("vir", 0)


@pytest.mark.parametrize(
    "word,index",
    [("aestās", 1), ("causa", 2), ("deinde", 2), ("heu", 2), ("poena", 2), ("quae", 2), ("sanguis", 5)],
)
def test_is_diphthong(word, index):
    """Test the recognized diphthongs and the qu-/gu- clusters."""
    assert is_diphthong(word, index)


@pytest.mark.parametrize(
    "word,index",
    [("aestās", 2), ("cui", 2), ("suāuis", 3), ("meüs", 2), ("āēr", 1), ("spuere", 3), ("fīlius", 4)],
)
def test_is_not_diphthong(word, index):
    """Test vowel pairs which belong to different syllables."""
    assert not is_diphthong(word, index)


def test_vowel_ahead():
    assert vowel_ahead("dextra", 3)
    assert not vowel_ahead("est", 1)


@pytest.mark.parametrize("cluster", ["cr", "br", "pl", "tr", "gl", "dr"])
def test_liquid_consonant(cluster):
    assert liquid_consonant(cluster, 0)


@pytest.mark.parametrize("cluster", ["rl", "sr", "ll", "ct", "c"])
def test_not_liquid_consonant(cluster):
    assert not liquid_consonant(cluster, 0)


def test_is_th():
    assert is_th("Cytherēa", 2)
    assert not is_th("captus", 3)


def test_special_nj_cluster():
    assert special_nj_cluster("Lāvīnjaque", 4)
    assert special_nj_cluster("moenia", 3)
    assert not special_nj_cluster("conderet", 2)


def test_qu_cluster():
    assert qu_cluster("qvoqve", 3)
    assert qu_cluster("sanguis", 3)
    assert not qu_cluster("qu", 0)


def test_vowel_then_coda():
    assert vowel_then_coda("VIRVMQVE", 2)
    assert vowel_then_coda("CVRSVS", 3)
    assert not vowel_then_coda("solvit", 2)
    assert not vowel_then_coda("VIRVMQVE", 5)
    assert not vowel_then_coda("arma", 1)


def test_consonant_before_vowel_then_coda_starts_next_syllable():
    assert consonant_starts_next_syllable("VIRVMQVE", 2)
    assert consonant_starts_next_syllable("CVRSVS", 3)
    assert [s.value for s in syllabify("CVRSVS")] == ["CVR", "SVS"]


def test_consonant_starts_next_syllable():
    assert consonant_starts_next_syllable("amīcus", 1)
    assert consonant_starts_next_syllable("alacris", 3)
    assert consonant_starts_next_syllable("Cytherēa", 2)
    assert not consonant_starts_next_syllable("arma", 1)
    assert not consonant_starts_next_syllable("solvit", 2)


def test_long_coda():
    assert long_coda("obscūrus", 1)
    assert long_coda("īnstruō", 1)
    assert not long_coda("conderet", 2)
    assert not long_coda("dextra", 2)


def test_prefix_index():
    assert prefix_index("injūria") == 2
    assert prefix_index("Inde") == 2
    assert prefix_index("abeō") == 0
    assert prefix_index("īnstruō") == 0


def test_sneaky_semivowel():
    assert sneaky_semivowel("iam", "i", 1)
    assert sneaky_semivowel("uēnī", "u", 1)
    assert not sneaky_semivowel("cuius", "cu", 2)
    assert not sneaky_semivowel("ïa", "ï", 1)


def test_strip_diaeresis():
    assert strip_diaeresis("meüs Äëneas") == "meus Aeneas"
    assert strip_diaeresis("amīcus") == "amīcus"
