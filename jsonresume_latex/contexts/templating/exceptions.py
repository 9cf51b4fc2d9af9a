"""Custom exceptions for the templating context."""

from typing import Iterable, List, Optional


class InvalidResumeError(ValueError):
    """
    Exception raised when a resume document fails validation.

    Raised before any section is rendered, so no partial output exists.

    Attributes:
        errors: Error descriptions reported by the validator
    """

    def __init__(self, errors: Iterable[str]):
        self.errors: List[str] = list(errors)
        super().__init__("\n".join(self.errors))


class UnknownSectionError(ValueError):
    """
    Exception raised when render options name a section that does not exist.

    Attributes:
        section_name: The unrecognized section name
        valid_names: Section names that are accepted
    """

    def __init__(self, section_name: str, valid_names: Optional[List[str]] = None):
        self.section_name = section_name
        self.valid_names = valid_names or []

        message = f"Unknown resume section '{section_name}'"
        if self.valid_names:
            message += f". Valid sections: {self.valid_names}"

        super().__init__(message)
