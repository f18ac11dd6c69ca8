"""
PDF rendering: typeset a scanned poem with pdflatex.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Union

from verse.core.models import Poem
from verse.rendering.latex import DEFAULT_JOBNAME, write_latex

logger = logging.getLogger(__name__)

PDFLATEX_COMMAND = ["pdflatex", "-interaction=nonstopmode", "-halt-on-error"]


def latex_errors(output: Optional[bytes]) -> List[str]:
    """Return the error lines ("! ...") of a pdflatex run."""
    if not output:
        return []
    text = output.decode("utf-8", errors="replace")
    return [line for line in text.splitlines() if line.startswith("!")]


def compile_pdf(tex_path: Union[str, Path]) -> Path:
    """
    Run pdflatex on a LaTeX file written by `write_latex`.

    The PDF is produced next to the source, with the same stem.

    Raises:
        RuntimeError: If pdflatex cannot be run, fails, or produces no PDF
    """
    tex_path = Path(tex_path)
    pdf_path = tex_path.with_suffix(".pdf")
    logger.debug("Running pdflatex on %s", tex_path)
    try:
        subprocess.run(
            PDFLATEX_COMMAND + [tex_path.name],
            cwd=str(tex_path.parent),
            check=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as exc:
        raise RuntimeError(f"Cannot run pdflatex: {exc}") from exc
    except subprocess.CalledProcessError as exc:
        errors = latex_errors(exc.stdout)
        detail = errors[0] if errors else f"exit status {exc.returncode}"
        raise RuntimeError(f"pdflatex failed on {tex_path.name}: {detail}") from exc
    if not pdf_path.exists():
        raise RuntimeError(f"pdflatex produced no {pdf_path.name}")
    return pdf_path


def render_pdf(
    poem: Poem,
    output_dir: Union[str, Path],
    title: Optional[str] = None,
    jobname: str = DEFAULT_JOBNAME,
) -> Path:
    """Typeset the scansion of a poem and return the path of the PDF."""
    logger.debug("Typesetting %d verses (%s) as %s", len(poem.verses), poem.kind.value, jobname)
    return compile_pdf(write_latex(poem, output_dir, title=title, jobname=jobname))
