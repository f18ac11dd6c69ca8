"""
Processing Package.

The scansion pipeline: ingestion, resyllabification, quantity annotation,
meter classification and the scan stage driving them.
"""

from verse.processing.meter import analyze, figure_out_rhythm, is_enclitic_dactyl
from verse.processing.quantity import mark_rhythm, syllable_quantity
from verse.processing.resyllabify import resyllabify
from verse.processing.pipeline import scan, scan_line

__all__ = [
    "analyze",
    "figure_out_rhythm",
    "is_enclitic_dactyl",
    "mark_rhythm",
    "syllable_quantity",
    "resyllabify",
    "scan",
    "scan_line",
]
