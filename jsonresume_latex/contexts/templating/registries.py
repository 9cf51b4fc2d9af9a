"""
Templating Registries

Registry for loading and caching the Jinja2 templates and static LaTeX files
that frame the rendered resume.
"""

import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

load_dotenv()
TEMPLATE_PATH = Path(
    os.getenv("JSONRESUME_LATEX_TEMPLATE_PATH") or Path(__file__).parent / "template"
)


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for LaTeX generation.

    Templates are stored as {template_base_path}/{name}.tex.jinja and use custom
    delimiters to avoid conflicts with LaTeX syntax:
    - Variable: <<< var >>>
    - Block: <%% block %%>
    - Comment: <# comment #>
    """

    def __init__(self, template_base_path: Path = None):
        """
        Initialize the template registry.

        Args:
            template_base_path: Base path for templates. Defaults to
                           JSONRESUME_LATEX_TEMPLATE_PATH from environment, or the
                           packaged template directory
        """
        if template_base_path is None:
            template_base_path = TEMPLATE_PATH

        self.template_base_path = Path(template_base_path)
        self._cache: Dict[str, Template] = {}

        # Create Jinja2 environment with custom delimiters to avoid LaTeX conflicts
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_base_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            # Custom delimiters to avoid LaTeX brace conflicts
            variable_start_string="<<<",
            variable_end_string=">>>",
            block_start_string="<%%",
            block_end_string="%%>",
            comment_start_string="<#",
            comment_end_string="#>",
            # Preserve whitespace (important for LaTeX)
            trim_blocks=False,
            lstrip_blocks=False,
            keep_trailing_newline=True,
        )

    def get_template(self, name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            name: Template name relative to the base path (e.g., 'structure/document')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if name in self._cache:
            return self._cache[name]

        template_path = f"{name}.tex.jinja"

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for '{name}' at {self.template_base_path / template_path}"
            ) from e

        self._cache[name] = template
        return template

    def get_static_path(self, name: str) -> Path:
        """Get the file path for a static (non-template) LaTeX file, e.g. 'structure/preamble'."""
        return self.template_base_path / f"{name}.tex"

    def read_static(self, name: str) -> str:
        """
        Read a static LaTeX file verbatim.

        Raises:
            FileNotFoundError: If the file doesn't exist
        """
        path = self.get_static_path(name)
        if not path.exists():
            raise FileNotFoundError(f"Static LaTeX file '{name}' not found at {path}")
        return path.read_text(encoding="utf-8")
