"""
Shared utilities for jsonresume-latex.

Common functionality used by the templating context:
- LaTeX markup primitives
- Date formatting
- Logger configuration
"""

from jsonresume_latex.utils.latex_tools import escape, indent, use_environment
from jsonresume_latex.utils.timestamp import format_date

__all__ = ["escape", "format_date", "indent", "use_environment"]
