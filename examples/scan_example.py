#!/usr/bin/env python3
"""
Example script demonstrating how to scan Latin verse with the verse package.
"""

import os
import sys
from pathlib import Path

# Add parent directory to path to import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from verse import scan, syllabify
from verse.core.models import RenderConfig
from verse.rendering.text import render_poem

HERE = Path(__file__).parent


def demonstrate_syllabification():
    """Demonstrate splitting single words into syllables."""
    print("\n=== Syllabification ===")

    for word in ["amīcus", "Lāvīnjaque", "iūnctārum", "cuiusquam"]:
        syllables = syllabify(word)
        print(f"  {word}: {' | '.join(s.value for s in syllables)}")


def demonstrate_scansion(filename):
    """Demonstrate scanning a whole poem."""
    print(f"\n=== Scansion of {filename} ===")

    text = (HERE / filename).read_text(encoding="utf-8")
    poem = scan(text)

    print(render_poem(poem))
    for verse in poem.verses:
        print(f"  Line {verse.number + 1}: {verse.stats.long_count} long, {verse.stats.short_count} short")


def demonstrate_custom_marks():
    """Demonstrate rendering with custom glyphs."""
    print("\n=== Custom marks ===")

    poem = scan("Arma virumque canō, Trōiae quī prīmus ab ōrīs")
    print(render_poem(poem, RenderConfig(boundary_mark="·", long_mark="_", short_mark="v", show_meter=False)))


if __name__ == "__main__":
    demonstrate_syllabification()
    demonstrate_scansion("sample_aeneid.txt")
    demonstrate_scansion("sample_amores.txt")
    demonstrate_custom_marks()
