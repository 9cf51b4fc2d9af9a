"""
Render Options

Immutable configuration for the render pipeline: document class, preamble,
which sections to emit and in what order, and the renderer used for each
section. DEFAULT_OPTIONS is shared process-wide and never mutated; overrides
always produce a new RenderOptions via merge_options().
"""

from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from jsonresume_latex.contexts.templating import renderers, validator
from jsonresume_latex.contexts.templating.exceptions import UnknownSectionError
from jsonresume_latex.contexts.templating.sections import DEFAULT_SECTIONS, Section

SectionRenderer = Callable[[Optional[List[Dict[str, Any]]]], str]


def _default_section_renderers() -> Mapping[Section, SectionRenderer]:
    return MappingProxyType(dict(renderers.SECTION_RENDERERS))


@dataclass(frozen=True)
class RenderOptions:
    """
    Global options for rendering a resume.

    Attributes:
        document_class: LaTeX documentclass for the output
        preamble: Preamble text placed between the documentclass and the document body
        sections: Sections to output, in order
        section_renderers: Renderer for each section (read-only mapping)
        render_header: Renders the header from the basics block
        render_summary: Renders the summary string
        validate: Returns a list of error descriptions for a resume
    """

    document_class: str = "article"
    preamble: str = ""
    sections: Tuple[Section, ...] = DEFAULT_SECTIONS
    section_renderers: Mapping[Section, SectionRenderer] = field(
        default_factory=_default_section_renderers
    )
    render_header: Callable[[Optional[Dict[str, Any]]], str] = renderers.render_header
    render_summary: Callable[[Optional[str]], str] = renderers.render_summary
    validate: Callable[[Any], List[str]] = validator.validate

    def __post_init__(self):
        if isinstance(self.sections, str):
            raise TypeError("sections must be a sequence of section names, not a string")

        # Normalize section names to Section tags (fails fast on unknown names)
        sections = tuple(Section.parse(name) for name in self.sections)
        section_renderers = MappingProxyType(
            {Section.parse(name): renderer for name, renderer in self.section_renderers.items()}
        )

        for section in sections:
            if section not in section_renderers:
                raise UnknownSectionError(
                    section.value, [registered.value for registered in section_renderers]
                )

        object.__setattr__(self, "sections", sections)
        object.__setattr__(self, "section_renderers", section_renderers)

    def renderer_for(self, section: Section) -> SectionRenderer:
        """Renderer registered for a section."""
        return self.section_renderers[section]


OPTION_NAMES = frozenset(option.name for option in fields(RenderOptions))

DEFAULT_OPTIONS = RenderOptions()


def merge_options(base: RenderOptions = None, **overrides) -> RenderOptions:
    """
    Merge caller overrides onto base options without mutating either.

    Overrides take precedence field by field; fields left unspecified (or given
    as None) keep the base value. section_renderers is merged per section, so
    overriding one renderer keeps the others.

    Args:
        base: Options to start from (defaults to DEFAULT_OPTIONS)
        **overrides: RenderOptions fields to replace

    Returns:
        New RenderOptions

    Raises:
        TypeError: If an override names an unknown option
        UnknownSectionError: If sections or section_renderers name an unknown section

    Examples:
        >>> # Only work and education, in that order
        >>> options = merge_options(sections=["work", "education"])

        >>> # Swap one renderer, keep the rest
        >>> options = merge_options(section_renderers={"skills": my_render_skills})
    """
    if base is None:
        base = DEFAULT_OPTIONS

    unknown = sorted(set(overrides) - OPTION_NAMES)
    if unknown:
        raise TypeError(f"Unknown render option(s): {unknown}. Valid options: {sorted(OPTION_NAMES)}")

    overrides = {name: value for name, value in overrides.items() if value is not None}

    if "section_renderers" in overrides:
        merged_renderers = dict(base.section_renderers)
        for name, renderer in overrides["section_renderers"].items():
            merged_renderers[Section.parse(name)] = renderer
        overrides["section_renderers"] = merged_renderers

    return replace(base, **overrides)
