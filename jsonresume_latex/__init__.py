"""
jsonresume-latex - LaTeX output format for JSON Resume documents

Converts a structured resume (JSON Resume schema) into LaTeX source ready for
compilation into a formatted resume.

Architecture:
- Templating Context: section renderers, render options and document assembly
- Utils: markup primitives, date formatting, logger setup
- CLI: thin wrapper that reads a resume file and writes the rendered LaTeX
"""

__version__ = "0.1.0"

from jsonresume_latex.contexts.templating import (
    DEFAULT_OPTIONS,
    InvalidResumeError,
    RenderOptions,
    Section,
    UnknownSectionError,
    build_renderer,
    render,
    validate,
)

__all__ = [
    "DEFAULT_OPTIONS",
    "InvalidResumeError",
    "RenderOptions",
    "Section",
    "UnknownSectionError",
    "build_renderer",
    "render",
    "validate",
]
