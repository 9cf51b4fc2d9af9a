"""
Resume section tags.

The closed set of array sections a JSON Resume document may carry. Each tag's
value is the key of that section in the resume document.
"""

from enum import Enum
from typing import List, Union

from jsonresume_latex.contexts.templating.exceptions import UnknownSectionError


class Section(str, Enum):
    WORK = "work"
    VOLUNTEER = "volunteer"
    EDUCATION = "education"
    AWARDS = "awards"
    PUBLICATIONS = "publications"
    SKILLS = "skills"
    LANGUAGES = "languages"
    INTERESTS = "interests"
    REFERENCES = "references"
    PROJECTS = "projects"

    @property
    def label(self) -> str:
        """Human-readable section name, e.g. "Work"."""
        return self.value.capitalize()

    @property
    def placeholder(self) -> str:
        """Comment emitted in place of an omitted section."""
        return f"% {self.label} section omitted."

    @classmethod
    def names(cls) -> List[str]:
        """All section keys in declaration order."""
        return [section.value for section in cls]

    @classmethod
    def parse(cls, name: Union[str, "Section"]) -> "Section":
        """
        Coerce a section name into a Section tag.

        Raises:
            UnknownSectionError: If the name is not a known section
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise UnknownSectionError(str(name), cls.names()) from None


# Default output order
DEFAULT_SECTIONS = tuple(Section)
