"""
LaTeX markup primitives shared by every section renderer.

Escaping here is intentionally partial: only newlines and spaced hyphens are
rewritten. LaTeX reserved characters (& % $ # _ { } ~ ^ \\) pass through
unchanged, so untrusted input can break the generated document.
"""

import re
from typing import Iterable, Optional

INDENT = "  "

# Literal substring -> LaTeX replacement
ESCAPES = {
    "\n": " \\\\ ",
    " - ": " --- ",
}
ESCAPE_REGEX = re.compile("|".join(re.escape(key) for key in ESCAPES))


def escape(text: Optional[str]) -> str:
    """
    Escape text for inclusion in the generated LaTeX.

    Newlines become forced line breaks and " - " becomes an em-dash.

    Args:
        text: Text to escape (None or empty is allowed)

    Returns:
        Escaped text, or "" for falsy input
    """
    if not text:
        return ""
    return ESCAPE_REGEX.sub(lambda match: ESCAPES[match.group(0)], str(text))


def indent(code: str) -> str:
    """Indent every non-empty line of code by one level."""
    return "\n".join(INDENT + line if line else "" for line in code.split("\n"))


def use_environment(env_name: str, content: str, *args: str) -> str:
    """
    Enclose LaTeX content inside an environment.

    Builds: \\begin{env}{arg1}{arg2}...
              content
            \\end{env}

    Arguments are inserted verbatim in the order given, so callers must escape
    any argument text that came from user data.

    Args:
        env_name: Environment name (e.g., "work", "job")
        content: Inner content, indented by one level
        *args: Mandatory arguments in {...}

    Returns:
        Complete LaTeX environment string
    """
    opening = f"\\begin{{{env_name}}}" + "".join(f"{{{arg}}}" for arg in args)
    closing = f"\\end{{{env_name}}}"
    return f"{opening}\n{indent(content)}\n{closing}"


def href(url: Optional[str], label: Optional[str]) -> str:
    """
    Render a label as a hyperlink when a URL is available.

    The URL is emitted raw; only the label is escaped.
    """
    if url:
        return f"\\href{{{url}}}{{{escape(label)}}}"
    return escape(label)


def command(name: str, *args: str) -> str:
    """Render a LaTeX command with mandatory arguments, e.g. \\name{Jane}."""
    return f"\\{name}" + "".join(f"{{{arg}}}" for arg in args)


def itemize(items: Iterable[str]) -> str:
    """Render each item escaped and prefixed with \\item, one per line."""
    return "\n".join(f"\\item {escape(item)}" for item in items)


def comment(text: str) -> str:
    """Render a single-line LaTeX comment."""
    return f"% {text}"
