"""
Templating Context

Responsibilities:
- Renders each JSON Resume section into LaTeX fragments
- Holds the render options (document class, preamble, section order, renderers)
- Validates resume structure before rendering
- Assembles fragments into a complete document from the packaged template

Owns: Section renderers, render options, document assembly, packaged preamble
Never: Compiles LaTeX or reads resume files
"""

from jsonresume_latex.contexts.templating.config_resolver import (
    load_preamble,
    load_theme_config,
    options_from_config,
)
from jsonresume_latex.contexts.templating.exceptions import (
    InvalidResumeError,
    UnknownSectionError,
)
from jsonresume_latex.contexts.templating.options import (
    DEFAULT_OPTIONS,
    RenderOptions,
    merge_options,
)
from jsonresume_latex.contexts.templating.sections import Section
from jsonresume_latex.contexts.templating.theme import (
    assemble_document,
    build_renderer,
    render,
)
from jsonresume_latex.contexts.templating.validator import validate

__all__ = [
    # Render pipeline
    "build_renderer",
    "render",
    "assemble_document",
    # Options and configuration
    "RenderOptions",
    "DEFAULT_OPTIONS",
    "merge_options",
    "load_theme_config",
    "load_preamble",
    "options_from_config",
    "Section",
    # Validation and errors
    "validate",
    "InvalidResumeError",
    "UnknownSectionError",
]
