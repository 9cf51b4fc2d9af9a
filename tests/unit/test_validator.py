"""Unit tests for resume document validation."""

import pytest

from jsonresume_latex.contexts.templating.validator import ISO8601_REGEX, validate


class TestValidate:
    """Tests for validate function."""

    @pytest.mark.unit
    def test_complete_resume_is_valid(self, complete_resume):
        assert validate(complete_resume) == []

    @pytest.mark.unit
    @pytest.mark.parametrize("resume", [{}, {"basics": {"name": "Jane Doe"}}])
    def test_minimal_resumes_are_valid(self, resume):
        assert validate(resume) == []

    @pytest.mark.unit
    def test_unknown_fields_allowed(self):
        assert validate({"meta": {"theme": "latex"}, "work": [{"company": "Acme", "team": 4}]}) == []

    @pytest.mark.unit
    def test_resume_must_be_object(self):
        assert validate([]) == ["resume: expected object, got array"]

    @pytest.mark.unit
    def test_section_must_be_array(self):
        assert validate({"work": {}}) == ["work: expected array, got object"]

    @pytest.mark.unit
    def test_null_section(self):
        assert validate({"skills": None}) == ["skills: expected array, got null"]

    @pytest.mark.unit
    def test_section_entries_must_be_objects(self):
        assert validate({"awards": ["Pioneer"]}) == ["awards[0]: expected object, got string"]

    @pytest.mark.unit
    def test_invalid_date(self):
        errors = validate({"work": [{"company": "Acme", "startDate": "June 2020"}]})
        assert errors == [
            "work[0].startDate: expected ISO 8601 date (YYYY, YYYY-MM or YYYY-MM-DD), got 'June 2020'"
        ]

    @pytest.mark.unit
    def test_date_must_be_string(self):
        errors = validate({"awards": [{"date": 2014}]})
        assert errors == ["awards[0].date: expected ISO 8601 date string, got number"]

    @pytest.mark.unit
    def test_wrong_string_field_type(self):
        assert validate({"basics": {"name": 42}}) == ["basics.name: expected string, got number"]

    @pytest.mark.unit
    def test_string_array_items(self):
        errors = validate({"projects": [{"roles": ["Lead", 7], "keywords": "python"}]})
        assert "projects[0].roles[1]: expected string, got number" in errors
        assert "projects[0].keywords: expected array, got string" in errors

    @pytest.mark.unit
    def test_basics_location_and_profiles(self):
        errors = validate({"basics": {"location": "Tulsa", "profiles": [{"network": True}, "x"]}})
        assert errors == [
            "basics.location: expected object, got string",
            "basics.profiles[0].network: expected string, got boolean",
            "basics.profiles[1]: expected object, got string",
        ]

    @pytest.mark.unit
    def test_errors_collected_across_sections(self):
        errors = validate({"work": [{"position": 1}], "education": [{"endDate": "soon"}]})
        assert len(errors) == 2


class TestIsoDatePattern:
    """Tests for the partial ISO 8601 date pattern."""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["2014", "2014-06", "2014-06-29"])
    def test_accepted(self, value):
        assert ISO8601_REGEX.match(value)

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["14", "2014-6", "2014/06/29", "June 2014", "2014-06-29T00:00"])
    def test_rejected(self, value):
        assert not ISO8601_REGEX.match(value)
