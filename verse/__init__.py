"""
verse: automated scansion of Latin verse.

This package splits Latin verse into syllables, applies the verse rules on word
contact (elision), annotates the quantity of every syllable and infers the
meter of each verse and of the whole poem.
"""

__version__ = "0.3.0"

from verse.core.models import MeterKind, Poem, Quantity, Verse
from verse.languages.latin.syllable import syllabify
from verse.processing.pipeline import scan

__all__ = ["scan", "syllabify", "Poem", "Verse", "Quantity", "MeterKind", "__version__"]
