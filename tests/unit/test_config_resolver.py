"""Unit tests for theme config loading and preamble resolution."""

import pytest

from jsonresume_latex.contexts.templating.config_resolver import (
    DEFAULT_THEME_CONFIG,
    load_preamble,
    load_theme_config,
    options_from_config,
)
from jsonresume_latex.contexts.templating.exceptions import UnknownSectionError
from jsonresume_latex.contexts.templating.sections import DEFAULT_SECTIONS, Section


@pytest.fixture
def theme_dir(tmp_path):
    (tmp_path / "custom_preamble.tex").write_text("\\usepackage{custom}\n\n", encoding="utf-8")
    return tmp_path


class TestLoadThemeConfig:
    """Tests for load_theme_config function."""

    @pytest.mark.unit
    def test_defaults_only(self, monkeypatch):
        monkeypatch.setattr(
            "jsonresume_latex.contexts.templating.config_resolver.THEME_CONFIG_PATH", None
        )
        assert load_theme_config() == DEFAULT_THEME_CONFIG

    @pytest.mark.unit
    def test_partial_config_merged_over_defaults(self, theme_dir):
        config_path = theme_dir / "theme.yaml"
        config_path.write_text("document_class: report\n", encoding="utf-8")

        config = load_theme_config(config_path)

        assert config["document_class"] == "report"
        assert config["sections"] == Section.names()
        assert config["preamble_path"] is None

    @pytest.mark.unit
    def test_sections_replaced_not_concatenated(self, theme_dir):
        config_path = theme_dir / "theme.yaml"
        config_path.write_text("sections: [education, work]\n", encoding="utf-8")

        assert load_theme_config(config_path)["sections"] == ["education", "work"]

    @pytest.mark.unit
    def test_relative_preamble_path(self, theme_dir):
        config_path = theme_dir / "theme.yaml"
        config_path.write_text("preamble_path: custom_preamble.tex\n", encoding="utf-8")

        config = load_theme_config(config_path)

        assert config["preamble_path"] == str(theme_dir / "custom_preamble.tex")

    @pytest.mark.unit
    def test_unknown_key(self, theme_dir):
        config_path = theme_dir / "theme.yaml"
        config_path.write_text("font_size: 11pt\n", encoding="utf-8")

        with pytest.raises(ValueError, match="font_size"):
            load_theme_config(config_path)

    @pytest.mark.unit
    def test_list_config_rejected(self, theme_dir):
        config_path = theme_dir / "theme.yaml"
        config_path.write_text("- work\n- skills\n", encoding="utf-8")

        with pytest.raises(ValueError, match="must be a mapping"):
            load_theme_config(config_path)

    @pytest.mark.unit
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_theme_config(tmp_path / "missing.yaml")


class TestLoadPreamble:
    """Tests for load_preamble function."""

    @pytest.mark.unit
    def test_packaged_preamble(self, monkeypatch):
        monkeypatch.setattr(
            "jsonresume_latex.contexts.templating.config_resolver.PREAMBLE_PATH", None
        )
        preamble = load_preamble()

        assert "\\newenvironment{work}" in preamble
        assert not preamble.endswith("\n")

    @pytest.mark.unit
    def test_explicit_path(self, theme_dir):
        assert load_preamble(theme_dir / "custom_preamble.tex") == "\\usepackage{custom}"

    @pytest.mark.unit
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_preamble(tmp_path / "missing.tex")


class TestOptionsFromConfig:
    """Tests for options_from_config function."""

    @pytest.mark.unit
    def test_config_applied(self, theme_dir):
        config = {
            "document_class": "report",
            "preamble_path": str(theme_dir / "custom_preamble.tex"),
            "sections": ["skills", "work"],
        }
        options = options_from_config(config)

        assert options.document_class == "report"
        assert options.preamble == "\\usepackage{custom}"
        assert options.sections == (Section.SKILLS, Section.WORK)

    @pytest.mark.unit
    def test_default_config(self, monkeypatch):
        monkeypatch.setattr(
            "jsonresume_latex.contexts.templating.config_resolver.PREAMBLE_PATH", None
        )
        options = options_from_config(dict(DEFAULT_THEME_CONFIG))

        assert options.sections == DEFAULT_SECTIONS
        assert "\\newenvironment{work}" in options.preamble

    @pytest.mark.unit
    def test_unknown_section(self):
        config = {"document_class": "article", "preamble_path": None, "sections": ["hobbies"]}

        with pytest.raises(UnknownSectionError):
            options_from_config(config)
