"""
Resume Theme

The render pipeline: validates a resume, renders the header, the summary and
each configured section, and assembles the fragments into a complete LaTeX
document.
"""

from functools import lru_cache
from typing import Any, Callable, Dict, Iterable

from jsonresume_latex.contexts.templating.config_resolver import load_preamble
from jsonresume_latex.contexts.templating.exceptions import InvalidResumeError
from jsonresume_latex.contexts.templating.logger import _log_debug, log_validation_errors
from jsonresume_latex.contexts.templating.options import RenderOptions, merge_options
from jsonresume_latex.contexts.templating.registries import TemplateRegistry

DOCUMENT_TEMPLATE = "structure/document"

RenderFunction = Callable[[Dict[str, Any]], str]


@lru_cache(maxsize=None)
def _default_registry() -> TemplateRegistry:
    return TemplateRegistry()


def assemble_document(
    document_class: str,
    preamble: str,
    fragments: Iterable[str],
    template_registry: TemplateRegistry = None,
) -> str:
    """
    Assemble rendered fragments into a complete LaTeX document.

    Produces the documentclass declaration, the preamble, then the fragments
    joined by newlines inside the document environment, ending with a newline.

    Args:
        document_class: LaTeX documentclass
        preamble: Preamble text
        fragments: Rendered header, summary and sections, in output order
        template_registry: Registry providing the document template

    Returns:
        Complete LaTeX document string
    """
    registry = template_registry or _default_registry()
    template = registry.get_template(DOCUMENT_TEMPLATE)
    return template.render(
        document_class=document_class,
        preamble=preamble,
        body="\n".join(fragments),
    )


def build_renderer(options: RenderOptions = None, **overrides) -> RenderFunction:
    """
    Return a function that renders resume data in LaTeX format.

    Options are merged once, when the renderer is built; the returned function
    holds no other state and never mutates the resume it is given.

    Args:
        options: Base options (defaults to DEFAULT_OPTIONS)
        **overrides: RenderOptions fields to replace (see merge_options)

    Returns:
        Render function taking a resume document and returning LaTeX source

    Raises:
        TypeError: If an override names an unknown option
        UnknownSectionError: If the configured sections name an unknown section

    Example:
        render_resume = build_renderer(sections=["work", "education"], preamble=preamble)
        latex = render_resume(resume)
    """
    merged = merge_options(options, **overrides)

    def render_resume(resume: Dict[str, Any]) -> str:
        """
        Render a resume document.

        Raises:
            InvalidResumeError: If the validator reports any error
        """
        errors = merged.validate(resume)
        if errors:
            log_validation_errors(errors)
            raise InvalidResumeError(errors)

        basics = resume.get("basics")
        fragments = [
            merged.render_header(basics),
            merged.render_summary(basics.get("summary") if basics else None),
        ]

        for section in merged.sections:
            section_data = resume.get(section.value)
            if section_data is None:
                _log_debug(f"Section '{section.value}' absent, emitting placeholder")
            else:
                _log_debug(f"Rendering section '{section.value}' ({len(section_data)} entries)")
            fragments.append(merged.renderer_for(section)(section_data))

        return assemble_document(merged.document_class, merged.preamble, fragments)

    return render_resume


def render(resume: Dict[str, Any], **overrides) -> str:
    """
    Render a resume with the default options and the default preamble.

    Args:
        resume: Resume document
        **overrides: RenderOptions fields to replace

    Returns:
        Complete LaTeX document string

    Raises:
        InvalidResumeError: If the resume fails validation
    """
    if overrides.get("preamble") is None:
        overrides["preamble"] = load_preamble()
    return build_renderer(**overrides)(resume)
