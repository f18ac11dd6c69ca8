"""
Core domain models for the scansion pipeline.

Defines typed structures for raw syllables, annotated verse syllables, rhythm
statistics, verses and poems, plus the configuration models for scanning and
rendering.
"""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet, Optional, Tuple

from pydantic import BaseModel, Field

from verse.core.constants import DEFAULT_BOUNDARY_MARK, DEFAULT_LONG_MARK, DEFAULT_SHORT_MARK


class WordPosition(str, Enum):
    """Tags describing where a syllable sits inside its word.

    A syllable carries a set of these: a monosyllable is both START and END,
    an interior syllable carries none. DIRTY and MERGED only appear while
    resyllabifying a verse.
    """

    START = "start"
    END = "end"
    DIRTY = "dirty"  # discarded (e.g. swallowed by an elision)
    MERGED = "merged"  # result of joining two syllables on word contact


class SyllableFlag(str, Enum):
    """Special quirks of a syllable."""

    # The syllable appears to start with a vowel, but its leading 'i'/'u' is
    # in fact the semivowel 'j'/'v'.
    SNEAKY_SEMIVOWEL = "sneaky_semivowel"


class Quantity(str, Enum):
    """Quantity of a syllable."""

    SHORT = "short"
    LONG = "long"


class MeterKind(str, Enum):
    """Meter of a verse or of a whole poem."""

    UNKNOWN = "unknown"
    DACTYLIC_HEXAMETER = "dactylic_hexameter"
    DACTYLIC_PENTAMETER = "dactylic_pentameter"
    ELEGIAC_COUPLET = "elegiac_couplet"

    @property
    def label(self) -> str:
        if self is MeterKind.UNKNOWN:
            return "unknown"
        return self.value.replace("_", " ").capitalize()


class RawSyllable(BaseModel):
    """A syllable as produced by the syllabifier, before any quantity is known."""

    model_config = {"frozen": True}

    value: str
    begin: int
    end: int
    position: FrozenSet[WordPosition] = frozenset()
    flags: FrozenSet[SyllableFlag] = frozenset()

    @property
    def is_word_start(self) -> bool:
        return WordPosition.START in self.position

    @property
    def is_word_end(self) -> bool:
        return WordPosition.END in self.position

    @property
    def is_sneaky(self) -> bool:
        return SyllableFlag.SNEAKY_SEMIVOWEL in self.flags


class VerseSyllable(BaseModel):
    """A syllable in verse context (resyllabification applied) with its quantity."""

    model_config = {"frozen": True}

    value: str
    begin: int
    end: int
    quantity: Quantity


class RhythmStats(BaseModel):
    """Rhythm statistics for a verse, accumulated syllable by syllable.

    Stats are values: `add` returns new stats with one more syllable.
    """

    model_config = {"frozen": True}

    long_count: int = 0
    short_count: int = 0
    pattern: Tuple[Quantity, ...] = ()

    @property
    def total(self) -> int:
        return self.long_count + self.short_count

    def add(self, quantity: Quantity) -> "RhythmStats":
        if quantity is Quantity.LONG:
            update = {"long_count": self.long_count + 1}
        else:
            update = {"short_count": self.short_count + 1}
        update["pattern"] = self.pattern + (quantity,)
        return self.model_copy(update=update)


class Verse(BaseModel):
    """A scanned line of verse."""

    model_config = {"frozen": True}

    syllables: Tuple[VerseSyllable, ...] = ()
    kind: MeterKind = MeterKind.UNKNOWN
    line: str = ""
    stats: RhythmStats = Field(default_factory=RhythmStats)
    number: Optional[int] = None


class Poem(BaseModel):
    """A set of scanned verses and the meter of the whole."""

    model_config = {"frozen": True}

    verses: Tuple[Verse, ...] = ()
    kind: MeterKind = MeterKind.UNKNOWN


class ScanConfig(BaseModel):
    """Configuration for the scansion pipeline."""

    split_on_slashes: bool = True
    normalize_diaeresis: bool = True


class RenderConfig(BaseModel):
    """Configuration for the terminal renderer."""

    boundary_mark: str = Field(DEFAULT_BOUNDARY_MARK, min_length=1, max_length=1)
    long_mark: str = Field(DEFAULT_LONG_MARK, min_length=1, max_length=1)
    short_mark: str = Field(DEFAULT_SHORT_MARK, min_length=1, max_length=1)
    show_meter: bool = True
