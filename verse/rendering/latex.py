"""
LaTeX rendering of a scanned poem using Jinja2 templates.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from verse.core.models import Poem, Verse

DEFAULT_JOBNAME = "scansion"


def _latex_escape(value: str) -> str:
    """Escape LaTeX special characters in user-provided content."""
    if value is None:
        return ""
    replacements = {
        "\\": r"\textbackslash{}",
        "{": r"\{",
        "}": r"\}",
        "$": r"\$",
        "&": r"\&",
        "#": r"\#",
        "_": r"\_",
        "%": r"\%",
        "~": r"\textasciitilde{}",
        "^": r"\textasciicircum{}",
    }
    escaped = []
    for char in str(value):
        escaped.append(replacements.get(char, char))
    return "".join(escaped)


def _env(template_dir: Optional[str] = None) -> Environment:
    dir_path = Path(template_dir) if template_dir else Path(__file__).parent / "templates"
    env = Environment(
        loader=FileSystemLoader(str(dir_path)),
        autoescape=select_autoescape([]),
    )
    env.filters["latex_escape"] = _latex_escape
    return env


def verse_pieces(verse: Verse) -> List[Dict[str, Any]]:
    """
    Cut the display line of a verse into syllables and the text between them.

    Each piece is a dict with the `text` and the `quantity` (None for text
    which is not part of a syllable, such as spaces and punctuation). Elided
    syllables overlap the previous one, so each syllable only takes the text
    left after it.
    """
    line = verse.line
    pieces: List[Dict[str, Any]] = []
    cursor = 0

    for syllable in verse.syllables:
        start = max(syllable.begin, cursor)
        if start > cursor:
            pieces.append({"text": line[cursor:start], "quantity": None})
        pieces.append({"text": line[start : syllable.end], "quantity": syllable.quantity})
        cursor = syllable.end

    if cursor < len(line):
        pieces.append({"text": line[cursor:], "quantity": None})
    return pieces


def render_latex(
    poem: Poem,
    title: Optional[str] = None,
    template_name: str = "scansion.tex.j2",
    template_dir: Optional[str] = None,
) -> str:
    env = _env(template_dir)
    template = env.get_template(template_name)
    verses = [
        {
            "number": verse.number if verse.number is not None else i,
            "kind": verse.kind,
            "pieces": verse_pieces(verse),
        }
        for i, verse in enumerate(poem.verses)
    ]
    return template.render(poem=poem, verses=verses, title=title)


def write_latex(
    poem: Poem,
    output_dir: Union[str, Path],
    title: Optional[str] = None,
    jobname: str = DEFAULT_JOBNAME,
) -> Path:
    """Render the poem into `<output_dir>/<jobname>.tex` and return its path."""
    out_path = Path(output_dir)
    out_path.mkdir(parents=True, exist_ok=True)
    tex_path = out_path / f"{jobname}.tex"
    tex_path.write_text(render_latex(poem, title=title), encoding="utf-8")
    return tex_path
