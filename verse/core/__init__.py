"""
Core Package.

This package provides the data models and constants shared by the scansion
pipeline.
"""

from verse.core.models import (
    MeterKind,
    Poem,
    Quantity,
    RawSyllable,
    RenderConfig,
    RhythmStats,
    ScanConfig,
    SyllableFlag,
    Verse,
    VerseSyllable,
    WordPosition,
)

__all__ = [
    # Syllables
    "RawSyllable",
    "VerseSyllable",
    "WordPosition",
    "SyllableFlag",
    "Quantity",
    # Verses and poems
    "RhythmStats",
    "Verse",
    "Poem",
    "MeterKind",
    # Configuration
    "ScanConfig",
    "RenderConfig",
]
