"""
Scan pipeline: drive syllabification, resyllabification, quantity annotation and
meter classification over a whole text.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from verse.core.models import Poem, RawSyllable, ScanConfig, Verse
from verse.languages.latin.syllable import syllabify
from verse.processing import ingest
from verse.processing.meter import analyze
from verse.processing.quantity import mark_rhythm
from verse.processing.resyllabify import resyllabify

logger = logging.getLogger(__name__)


def bare_syllables(line: str) -> List[RawSyllable]:
    """
    Return the syllables of every word of the line, with ranges pointing into
    the line. No verse rule has been applied to them yet.
    """
    syllables: List[RawSyllable] = []
    for word, offset in ingest.iter_words(line):
        syllables.extend(syllabify(word, offset))
    return syllables


def scan_line(line: str, number: Optional[int] = None, config: Optional[ScanConfig] = None) -> Verse:
    """Scan a single line of verse."""
    config = config or ScanConfig()
    syllables = resyllabify(bare_syllables(line))
    verse = mark_rhythm(
        syllables,
        line=ingest.display_line(line, config.normalize_diaeresis),
        number=number,
    )
    logger.debug(
        "Line %s: %s -> %s",
        number,
        "|".join(s.value for s in verse.syllables),
        verse.kind.value,
    )
    return verse


def scan(text: str, config: Optional[ScanConfig] = None) -> Poem:
    """
    Scan a poem.

    The text is split into verses, each of them is syllabified with the verse
    rules applied, the quantity of every syllable is annotated and finally the
    meter of the verses and of the poem is figured out. This assumes that the
    text is a poem: prose and scattered phrases will give bad results.

    Args:
        text: Latin verse, one verse per line (or separated by "//")
        config: Scanning options

    Returns:
        The scanned `Poem`
    """
    config = config or ScanConfig()
    lines = ingest.split_lines(ingest.normalize_text(text), config.split_on_slashes)

    verses = [scan_line(line, number, config) for number, line in enumerate(lines) if not ingest.is_blank(line)]
    logger.debug("Scanned %d verses out of %d lines", len(verses), len(lines))
    return analyze(verses)
