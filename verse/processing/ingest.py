"""
Ingestion utilities: normalization, line splitting and word extraction.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Iterator, List, Tuple

from verse.core.constants import LATIN_LETTERS
from verse.languages.latin.characters import strip_diaeresis

_WORD_RE = re.compile(f"[{re.escape(LATIN_LETTERS)}]+")
_LINE_SEPARATOR_RE = re.compile(r"\r?\n")
_VERSE_SEPARATOR_RE = re.compile(r"\r?\n|//")


def normalize_text(text: str) -> str:
    """NFC normalize so that every marked vowel is a single codepoint."""
    if not text:
        return ""
    return unicodedata.normalize("NFC", text)


def split_lines(text: str, split_on_slashes: bool = True) -> List[str]:
    """
    Split text into lines.

    A line separator is a newline or, unless disabled, the "//" sequence used
    to write several verses on a single line.
    """
    pattern = _VERSE_SEPARATOR_RE if split_on_slashes else _LINE_SEPARATOR_RE
    return pattern.split(text)


def is_blank(line: str) -> bool:
    return line.strip() == ""


def iter_words(line: str) -> Iterator[Tuple[str, int]]:
    """Yield every maximal run of Latin letters in the line along with its offset."""
    for match in _WORD_RE.finditer(line):
        yield match.group(0), match.start()


def display_line(line: str, normalize_diaeresis: bool = True) -> str:
    """Return the line as it should be shown, without diaeresis marks."""
    return strip_diaeresis(line) if normalize_diaeresis else line
