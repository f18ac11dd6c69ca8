"""
Plain text rendering: syllable boundaries and rhythm glyphs for a terminal.
"""

from __future__ import annotations

from typing import List, Optional

from verse.core.models import Poem, Quantity, RenderConfig, Verse


def mark_boundaries(verse: Verse, mark: str) -> str:
    """Insert `mark` after every syllable of the verse but the last one."""
    line = verse.line
    pieces: List[str] = []
    prev_end = 0

    for syllable in verse.syllables[:-1]:
        pieces.append(line[prev_end : syllable.end])
        pieces.append(mark)
        prev_end = syllable.end
    pieces.append(line[prev_end:])
    return "".join(pieces)


def rhythm_line(verse: Verse, config: RenderConfig) -> str:
    """
    Return a line with the quantity glyph of each syllable centred below it,
    aligned with the output of `mark_boundaries`.
    """
    rhythm = ""
    prev_end = 0

    for k, syllable in enumerate(verse.syllables):
        # Elided syllables start before the previous one ends. Every boundary
        # mark inserted so far shifts the column by one.
        start = max(syllable.begin, prev_end)
        middle = (start + syllable.end - 1) // 2 + k
        glyph = config.long_mark if syllable.quantity is Quantity.LONG else config.short_mark

        rhythm = rhythm.ljust(middle) + glyph
        prev_end = syllable.end

    return rhythm


def render_verse(verse: Verse, config: Optional[RenderConfig] = None) -> str:
    """Return the verse with syllable boundaries and, below it, its rhythm."""
    config = config or RenderConfig()
    return f"{mark_boundaries(verse, config.boundary_mark)}\n{rhythm_line(verse, config)}"


def render_poem(poem: Poem, config: Optional[RenderConfig] = None) -> str:
    """Render every verse of the poem, headed by the meter of the poem."""
    config = config or RenderConfig()
    blocks = []
    if config.show_meter:
        blocks.append(f"Verse: {poem.kind.label}\n")
    for verse in poem.verses:
        blocks.append(render_verse(verse, config) + "\n")
    return "\n".join(blocks)
