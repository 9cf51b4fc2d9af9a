"""Integration tests for the jsonresume-latex command line interface."""

import json

import pytest
from typer.testing import CliRunner

from jsonresume_latex.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Ignore any paths configured in the developer's .env."""
    monkeypatch.setattr("jsonresume_latex.cli.LOGS_PATH", None)
    monkeypatch.setattr(
        "jsonresume_latex.contexts.templating.config_resolver.THEME_CONFIG_PATH", None
    )
    monkeypatch.setattr(
        "jsonresume_latex.contexts.templating.config_resolver.PREAMBLE_PATH", None
    )


@pytest.fixture
def minimal_resume_path(tmp_path):
    path = tmp_path / "jane.json"
    path.write_text(json.dumps({"basics": {"name": "Jane Doe"}}), encoding="utf-8")
    return path


@pytest.fixture
def invalid_resume_path(tmp_path):
    path = tmp_path / "invalid.json"
    path.write_text(json.dumps({"work": [{"startDate": "June 2020"}]}), encoding="utf-8")
    return path


@pytest.mark.integration
def test_render_to_file(complete_resume_path, tmp_path):
    output = tmp_path / "out" / "resume.tex"

    result = runner.invoke(app, ["render", str(complete_resume_path), "-o", str(output)])

    assert result.exit_code == 0, result.output
    latex = output.read_text(encoding="utf-8")
    assert latex.startswith("\\documentclass{article}\n")
    assert "\\begin{work}" in latex
    assert latex.endswith("\\end{document}\n")


@pytest.mark.integration
def test_render_to_stdout(minimal_resume_path):
    result = runner.invoke(app, ["render", str(minimal_resume_path)])

    assert result.exit_code == 0, result.output
    assert "\\name{Jane Doe}" in result.stdout
    assert "% Projects section omitted." in result.stdout


@pytest.mark.integration
def test_render_selected_sections(complete_resume_path, tmp_path):
    output = tmp_path / "resume.tex"

    result = runner.invoke(
        app,
        ["render", str(complete_resume_path), "-o", str(output), "-s", "skills", "-s", "work"],
    )

    assert result.exit_code == 0, result.output
    latex = output.read_text(encoding="utf-8")
    assert latex.index("\\begin{skills}") < latex.index("\\begin{work}")
    assert "\\begin{education}" not in latex


@pytest.mark.integration
def test_render_with_config_and_preamble(minimal_resume_path, tmp_path):
    (tmp_path / "custom.tex").write_text("\\usepackage{custom}\n", encoding="utf-8")
    config = tmp_path / "theme.yaml"
    config.write_text(
        "document_class: report\npreamble_path: custom.tex\nsections: [education]\n",
        encoding="utf-8",
    )
    output = tmp_path / "resume.tex"

    result = runner.invoke(
        app, ["render", str(minimal_resume_path), "-c", str(config), "-o", str(output)]
    )

    assert result.exit_code == 0, result.output
    assert output.read_text(encoding="utf-8") == (
        "\\documentclass{report}\n\\usepackage{custom}\n\\begin{document}\n"
        "\\begin{header}\n  \\name{Jane Doe}\n\\end{header}\n"
        "% Summary section omitted.\n% Education section omitted.\n\\end{document}\n"
    )


@pytest.mark.integration
def test_render_document_class_overrides_config(minimal_resume_path, tmp_path):
    output = tmp_path / "resume.tex"

    result = runner.invoke(
        app,
        ["render", str(minimal_resume_path), "--document-class", "extarticle", "-o", str(output)],
    )

    assert result.exit_code == 0, result.output
    assert output.read_text(encoding="utf-8").startswith("\\documentclass{extarticle}\n")


@pytest.mark.integration
def test_render_unknown_section(minimal_resume_path):
    result = runner.invoke(app, ["render", str(minimal_resume_path), "-s", "hobbies"])

    assert result.exit_code == 1
    assert "hobbies" in result.output


@pytest.mark.integration
def test_render_invalid_resume(invalid_resume_path, tmp_path):
    output = tmp_path / "resume.tex"

    result = runner.invoke(app, ["render", str(invalid_resume_path), "-o", str(output)])

    assert result.exit_code == 1
    assert "work[0].startDate" in result.output
    assert not output.exists()


@pytest.mark.integration
def test_render_malformed_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    result = runner.invoke(app, ["render", str(path)])

    assert result.exit_code == 1
    assert "not valid JSON" in result.output


@pytest.mark.integration
@pytest.mark.parametrize("command", ["render", "validate"])
def test_non_utf8_resume(command, tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes('{"basics": {"name": "Renée"}}'.encode("latin-1"))

    result = runner.invoke(app, [command, str(path)])

    assert result.exit_code == 1
    assert "not valid JSON" in result.output


@pytest.mark.integration
def test_render_config_not_a_mapping(minimal_resume_path, tmp_path):
    config = tmp_path / "theme.yaml"
    config.write_text("- work\n- skills\n", encoding="utf-8")

    result = runner.invoke(app, ["render", str(minimal_resume_path), "-c", str(config)])

    assert result.exit_code == 1
    assert "must be a mapping" in result.output


@pytest.mark.integration
def test_render_writes_log_file(minimal_resume_path, tmp_path):
    log_dir = tmp_path / "logs"

    result = runner.invoke(
        app,
        ["render", str(minimal_resume_path), "--log-dir", str(log_dir), "-o", str(tmp_path / "r.tex")],
    )

    assert result.exit_code == 0, result.output
    log_text = (log_dir / "template.log").read_text(encoding="utf-8")
    assert "[template] Rendering jane" in log_text
    assert "Resume: " in log_text


@pytest.mark.integration
def test_validate_valid(complete_resume_path):
    result = runner.invoke(app, ["validate", str(complete_resume_path)])

    assert result.exit_code == 0
    assert "Resume is valid" in result.output


@pytest.mark.integration
def test_validate_invalid(invalid_resume_path):
    result = runner.invoke(app, ["validate", str(invalid_resume_path)])

    assert result.exit_code == 1
    assert "Resume has 1 errors" in result.output
    assert "work[0].startDate" in result.output


@pytest.mark.integration
def test_sections():
    result = runner.invoke(app, ["sections"])

    assert result.exit_code == 0
    assert result.output.split() == [
        "work",
        "volunteer",
        "education",
        "awards",
        "publications",
        "skills",
        "languages",
        "interests",
        "references",
        "projects",
    ]
