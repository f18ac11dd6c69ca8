"""
Tests for verse and poem meter classification.
"""

import pytest

from verse.core.models import MeterKind, RhythmStats, Verse
from verse.processing.meter import (
    analyze,
    can_coerce_into,
    figure_out_rhythm,
    is_elegiac_couplet,
    is_enclitic_dactyl,
    is_single_meter,
    meter_ends_with,
    parse_pattern,
)

HEXAMETER = "-uu-uu-uu-uu-uu--"
SPONDAIC_HEXAMETER = "-uu-uu-----uu-u"
PENTAMETER = "-uu-uu--uu-uu-"
SHORT_PENTAMETER = "------uu-uu-"


def _stats(pattern):
    stats = RhythmStats()
    for quantity in parse_pattern(pattern):
        stats = stats.add(quantity)
    return stats


def _verse(kind):
    return Verse(kind=kind)


HEX = MeterKind.DACTYLIC_HEXAMETER
PENT = MeterKind.DACTYLIC_PENTAMETER
UNKNOWN = MeterKind.UNKNOWN


class TestPatterns:
    """Test pattern parsing and matching."""

    def test_parse_pattern(self):
        assert len(parse_pattern("-uu-")) == 4
        assert parse_pattern("") == []

    def test_parse_pattern_rejects_other_symbols(self):
        with pytest.raises(ValueError):
            parse_pattern("-x-")

    def test_meter_ends_with(self):
        pattern = parse_pattern(PENTAMETER)

        assert meter_ends_with(pattern, "--uu-uu-")
        assert meter_ends_with(pattern, "")
        assert not meter_ends_with(pattern, "uu--")
        assert not meter_ends_with(parse_pattern("-u"), "--u")


class TestEncliticDactyl:
    """Test the dactylic verse matcher."""

    @pytest.mark.parametrize(
        "pattern,feet",
        [
            (HEXAMETER, 6),
            (SPONDAIC_HEXAMETER, 6),
            ("------------", 6),
            ("-uu" * 5 + "-u", 6),
            ("-uu--", 2),
            ("-uu-u", 2),
            ("--", 1),
            ("-u", 1),
        ],
    )
    def test_matches(self, pattern, feet):
        assert is_enclitic_dactyl(parse_pattern(pattern), feet)

    @pytest.mark.parametrize(
        "pattern,feet",
        [
            (HEXAMETER, 5),
            ("-uu" * 4 + "-u", 6),
            ("--" * 5, 6),
            ("-uu-uu-uu-uu-uu---", 6),
            ("-uu-uu-uu-uu-uu-", 6),
            ("u-uu-uu-uu-uu--", 6),
            ("-u-uu-uu-uu-uu--", 6),
            ("u-", 1),
            ("-", 1),
            ("", 1),
        ],
    )
    def test_does_not_match(self, pattern, feet):
        assert not is_enclitic_dactyl(parse_pattern(pattern), feet)

    def test_forbid_contraction(self):
        assert is_enclitic_dactyl(parse_pattern("-uu--"), 2, forbid_contraction=0)
        assert not is_enclitic_dactyl(parse_pattern("---"), 2, forbid_contraction=0)
        assert is_enclitic_dactyl(parse_pattern("----"), 2, forbid_contraction=1)

    @pytest.mark.parametrize("feet", [0, -1])
    def test_needs_a_foot(self, feet):
        with pytest.raises(ValueError):
            is_enclitic_dactyl(parse_pattern("--"), feet)


class TestFigureOutRhythm:
    """Test the classification of single verses."""

    def test_hexameter(self):
        assert figure_out_rhythm(_stats(HEXAMETER)) is HEX
        assert figure_out_rhythm(_stats(SPONDAIC_HEXAMETER)) is HEX

    def test_pentameter(self):
        assert figure_out_rhythm(_stats(PENTAMETER)) is PENT
        assert figure_out_rhythm(_stats(SHORT_PENTAMETER)) is PENT

    def test_pentameter_length_bounds(self):
        assert figure_out_rhythm(_stats("--" + "--uu-uu-")) is UNKNOWN
        assert figure_out_rhythm(_stats("-uu-uu-" + "--uu-uu-")) is UNKNOWN

    def test_hexameter_needs_thirteen_syllables(self):
        assert figure_out_rhythm(_stats("------------")) is UNKNOWN
        assert figure_out_rhythm(_stats("-uu----------")) is HEX

    def test_unknown(self):
        assert figure_out_rhythm(RhythmStats()) is UNKNOWN
        assert figure_out_rhythm(_stats("-u-u-u-u-u-u-u")) is UNKNOWN


class TestAnalyze:
    """Test the classification of whole poems."""

    def test_coercion_is_disabled(self):
        assert not can_coerce_into(_verse(UNKNOWN), HEX)
        assert not can_coerce_into(_verse(UNKNOWN), PENT)

    def test_is_single_meter(self):
        assert is_single_meter([_verse(HEX), _verse(HEX)], HEX)
        assert not is_single_meter([_verse(HEX), _verse(UNKNOWN)], HEX)

    def test_is_elegiac_couplet(self):
        assert is_elegiac_couplet([_verse(HEX), _verse(PENT)])
        assert is_elegiac_couplet([_verse(HEX), _verse(PENT), _verse(HEX), _verse(PENT)])
        assert not is_elegiac_couplet([_verse(PENT), _verse(HEX)])
        assert not is_elegiac_couplet([_verse(HEX), _verse(PENT), _verse(HEX)])
        assert not is_elegiac_couplet([_verse(HEX), _verse(PENT), _verse(PENT), _verse(HEX)])

    @pytest.mark.parametrize(
        "kinds,expected",
        [
            ([HEX, HEX, HEX], HEX),
            ([PENT, PENT], PENT),
            ([HEX, PENT], MeterKind.ELEGIAC_COUPLET),
            ([HEX, PENT, HEX, PENT], MeterKind.ELEGIAC_COUPLET),
            ([PENT, HEX], UNKNOWN),
            ([HEX, PENT, HEX], UNKNOWN),
            ([HEX, UNKNOWN, HEX], UNKNOWN),
            ([HEX, PENT, UNKNOWN, PENT], UNKNOWN),
            ([UNKNOWN, UNKNOWN], UNKNOWN),
            ([], UNKNOWN),
        ],
    )
    def test_poem_kind(self, kinds, expected):
        poem = analyze([_verse(kind) for kind in kinds])

        assert poem.kind is expected
        assert len(poem.verses) == len(kinds)

    def test_verses_are_kept_in_order(self):
        verses = [Verse(kind=HEX, number=0), Verse(kind=HEX, number=3)]

        assert [v.number for v in analyze(verses).verses] == [0, 3]
