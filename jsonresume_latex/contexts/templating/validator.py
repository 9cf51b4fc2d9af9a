"""
Resume document validation.

Structural checks mirroring the JSON Resume schema: value types of the known
fields and the partial ISO 8601 date format. Unknown fields are allowed, as in
the schema. Returns error descriptions instead of raising so the caller decides
how to fail.
"""

import re
from typing import Any, Dict, List, Tuple

from jsonresume_latex.contexts.templating.sections import Section

# Partial ISO 8601 date as defined by the JSON Resume schema
ISO8601_REGEX = re.compile(
    r"^([1-2][0-9]{3}-[0-1][0-9]-[0-3][0-9]|[1-2][0-9]{3}-[0-1][0-9]|[1-2][0-9]{3})$"
)

BASICS_STRING_FIELDS = ("name", "label", "image", "email", "phone", "url", "website", "summary")
LOCATION_STRING_FIELDS = ("address", "postalCode", "city", "countryCode", "region")
PROFILE_STRING_FIELDS = ("network", "username", "url")

# Section -> (string fields, date fields, string-array fields)
SECTION_FIELDS: Dict[Section, Tuple[Tuple[str, ...], Tuple[str, ...], Tuple[str, ...]]] = {
    Section.WORK: (
        ("name", "company", "location", "description", "position", "url", "summary"),
        ("startDate", "endDate"),
        ("highlights",),
    ),
    Section.VOLUNTEER: (
        ("organization", "position", "url", "summary", "location", "description"),
        ("startDate", "endDate"),
        ("highlights",),
    ),
    Section.EDUCATION: (
        ("institution", "url", "area", "studyType", "gpa", "score"),
        ("startDate", "endDate"),
        ("courses",),
    ),
    Section.AWARDS: (("title", "awarder", "summary"), ("date",), ()),
    Section.PUBLICATIONS: (("name", "publisher", "url", "summary"), ("releaseDate",), ()),
    Section.SKILLS: (("name", "level"), (), ("keywords",)),
    Section.LANGUAGES: (("language", "fluency"), (), ()),
    Section.INTERESTS: (("name",), (), ("keywords",)),
    Section.REFERENCES: (("name", "reference"), (), ()),
    Section.PROJECTS: (
        ("name", "description", "entity", "type", "url"),
        ("startDate", "endDate"),
        ("highlights", "keywords", "roles"),
    ),
}


def _type_name(value: Any) -> str:
    """JSON type name of a decoded value, for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _check_strings(record: Dict[str, Any], fields: Tuple[str, ...], path: str) -> List[str]:
    return [
        f"{path}.{field}: expected string, got {_type_name(record[field])}"
        for field in fields
        if field in record and not isinstance(record[field], str)
    ]


def _check_dates(record: Dict[str, Any], fields: Tuple[str, ...], path: str) -> List[str]:
    errors = []
    for field in fields:
        if field not in record:
            continue
        value = record[field]
        if not isinstance(value, str):
            errors.append(f"{path}.{field}: expected ISO 8601 date string, got {_type_name(value)}")
        elif not ISO8601_REGEX.match(value):
            errors.append(
                f"{path}.{field}: expected ISO 8601 date (YYYY, YYYY-MM or YYYY-MM-DD), got '{value}'"
            )
    return errors


def _check_string_arrays(record: Dict[str, Any], fields: Tuple[str, ...], path: str) -> List[str]:
    errors = []
    for field in fields:
        if field not in record:
            continue
        value = record[field]
        if not isinstance(value, list):
            errors.append(f"{path}.{field}: expected array, got {_type_name(value)}")
            continue
        for index, item in enumerate(value):
            if not isinstance(item, str):
                errors.append(f"{path}.{field}[{index}]: expected string, got {_type_name(item)}")
    return errors


def _validate_basics(basics: Any) -> List[str]:
    if not isinstance(basics, dict):
        return [f"basics: expected object, got {_type_name(basics)}"]

    errors = _check_strings(basics, BASICS_STRING_FIELDS, "basics")

    if "location" in basics:
        location = basics["location"]
        if isinstance(location, dict):
            errors += _check_strings(location, LOCATION_STRING_FIELDS, "basics.location")
        else:
            errors.append(f"basics.location: expected object, got {_type_name(location)}")

    if "profiles" in basics:
        profiles = basics["profiles"]
        if isinstance(profiles, list):
            for index, profile in enumerate(profiles):
                path = f"basics.profiles[{index}]"
                if isinstance(profile, dict):
                    errors += _check_strings(profile, PROFILE_STRING_FIELDS, path)
                else:
                    errors.append(f"{path}: expected object, got {_type_name(profile)}")
        else:
            errors.append(f"basics.profiles: expected array, got {_type_name(profiles)}")

    return errors


def _validate_section(section: Section, records: Any) -> List[str]:
    if not isinstance(records, list):
        return [f"{section.value}: expected array, got {_type_name(records)}"]

    string_fields, date_fields, array_fields = SECTION_FIELDS[section]
    errors = []
    for index, record in enumerate(records):
        path = f"{section.value}[{index}]"
        if not isinstance(record, dict):
            errors.append(f"{path}: expected object, got {_type_name(record)}")
            continue
        errors += _check_strings(record, string_fields, path)
        errors += _check_dates(record, date_fields, path)
        errors += _check_string_arrays(record, array_fields, path)
    return errors


def validate(resume: Any) -> List[str]:
    """
    Validate a resume document against the JSON Resume structure.

    Args:
        resume: Decoded resume document

    Returns:
        List of error descriptions (empty if the resume is valid)

    Example:
        >>> validate({"basics": {"name": "Jane Doe"}})
        []
        >>> validate({"work": {}})
        ['work: expected array, got object']
    """
    if not isinstance(resume, dict):
        return [f"resume: expected object, got {_type_name(resume)}"]

    errors = []
    if "basics" in resume:
        errors += _validate_basics(resume["basics"])

    for section in Section:
        if section.value in resume:
            errors += _validate_section(section, resume[section.value])

    return errors
