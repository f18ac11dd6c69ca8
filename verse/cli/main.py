"""
Command-line interface: scan, syllabify, latex (end-to-end).
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError

from verse.core.constants import DEFAULT_BOUNDARY_MARK, DEFAULT_LONG_MARK, DEFAULT_SHORT_MARK
from verse.core.models import RenderConfig, ScanConfig
from verse.languages.latin.syllable import syllabify as syllabify_word
from verse.logging_config import setup_logging
from verse.processing import pipeline
from verse.rendering.latex import write_latex
from verse.rendering.pdf import compile_pdf
from verse.rendering.text import render_poem

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _read_input(path: Optional[Path]) -> str:
    if path is None or str(path) == "-":
        return sys.stdin.read()
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        typer.echo(f"Error: cannot read {path}: {exc}", err=True)
        raise typer.Exit(code=1)


@app.command()
def scan(
    paths: Optional[List[Path]] = typer.Argument(None, help="Files to scan (stdin when omitted or '-')"),
    boundary: str = typer.Option(DEFAULT_BOUNDARY_MARK, "--boundary", "-b", help="Syllable boundary mark"),
    long_mark: str = typer.Option(DEFAULT_LONG_MARK, "--long", help="Glyph for long syllables"),
    short_mark: str = typer.Option(DEFAULT_SHORT_MARK, "--short", help="Glyph for short syllables"),
    slashes: bool = typer.Option(True, "--slashes/--no-slashes", help="Treat '//' as a verse separator"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    setup_logging(verbose)
    try:
        render_config = RenderConfig(boundary_mark=boundary, long_mark=long_mark, short_mark=short_mark)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc))
    scan_config = ScanConfig(split_on_slashes=slashes)

    for path in paths or [None]:
        poem = pipeline.scan(_read_input(path), scan_config)
        typer.echo(render_poem(poem, render_config))


@app.command()
def syllabify(
    words: List[str] = typer.Argument(..., help="Words to split into syllables"),
    boundary: str = typer.Option(DEFAULT_BOUNDARY_MARK, "--boundary", "-b", help="Syllable boundary mark"),
) -> None:
    for word in words:
        typer.echo(boundary.join(s.value for s in syllabify_word(word)))


@app.command()
def latex(
    input_path: Path = typer.Argument(..., exists=True, readable=True),
    output_dir: Path = typer.Option(Path("output"), "--output", "-o"),
    pdf: bool = typer.Option(False, "--pdf/--no-pdf"),
    title: Optional[str] = typer.Option(None, "--title", help="Document title"),
    slashes: bool = typer.Option(True, "--slashes/--no-slashes", help="Treat '//' as a verse separator"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    setup_logging(verbose)
    text = _read_input(input_path)
    poem = pipeline.scan(text, ScanConfig(split_on_slashes=slashes))

    tex_path = write_latex(poem, output_dir, title=title)
    typer.echo(str(tex_path))
    if pdf:
        try:
            pdf_path = compile_pdf(tex_path)
        except RuntimeError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(code=1)
        typer.echo(str(pdf_path))


def run() -> None:  # entry point for module execution
    app()


if __name__ == "__main__":
    run()
