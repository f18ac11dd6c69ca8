"""
Rendering Package.

Turns scanned poems into text for a terminal, LaTeX sources and PDFs.
"""

from verse.rendering.latex import render_latex, write_latex
from verse.rendering.pdf import compile_pdf, render_pdf
from verse.rendering.text import render_poem, render_verse

__all__ = ["render_poem", "render_verse", "render_latex", "write_latex", "render_pdf", "compile_pdf"]
