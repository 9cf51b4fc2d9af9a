"""
JSON Resume to LaTeX CLI

Renders JSON Resume documents to LaTeX source using the templating context.

Commands:
    render   - Render a resume JSON file to LaTeX
    validate - Check a resume JSON file against the JSON Resume structure
    sections - List the section names accepted by --section

Examples:\n

    jsonresume-latex render resume.json                        # LaTeX to stdout

    jsonresume-latex render resume.json -o resume.tex          # Write to file

    jsonresume-latex render resume.json -s work -s education   # Only these sections, in order

    jsonresume-latex render resume.json --config theme.yaml    # Theme config file

    jsonresume-latex validate resume.json                      # Report schema errors
"""

import json
import os
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from jsonresume_latex.contexts.templating import (
    InvalidResumeError,
    Section,
    UnknownSectionError,
    build_renderer,
    load_preamble,
    load_theme_config,
    options_from_config,
    validate,
)
from jsonresume_latex.contexts.templating.logger import (
    _log_error,
    log_render_result,
    log_render_start,
    setup_templating_logger,
)

load_dotenv()
LOGS_PATH = os.getenv("LOGS_PATH")

app = typer.Typer(
    help="Render JSON Resume documents to LaTeX",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def read_resume(resume_path: Path) -> Dict[str, Any]:
    """
    Read a resume JSON file.

    Raises:
        typer.Exit: If the file is not valid UTF-8 encoded JSON
    """
    try:
        return json.loads(resume_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        typer.secho(f"Error: {resume_path} is not valid JSON: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("render")
def render_command(
    resume_path: Annotated[
        Path,
        typer.Argument(
            help="Resume JSON file",
            exists=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Write LaTeX to this file instead of stdout",
            dir_okay=False,
        ),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="Theme config YAML (document_class, preamble_path, sections)",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    sections: Annotated[
        Optional[List[str]],
        typer.Option(
            "--section",
            "-s",
            help="Section to render, repeatable; order is kept (overrides the config)",
        ),
    ] = None,
    document_class: Annotated[
        Optional[str],
        typer.Option(
            "--document-class",
            help="LaTeX documentclass (overrides the config)",
        ),
    ] = None,
    preamble: Annotated[
        Optional[Path],
        typer.Option(
            "--preamble",
            help="Preamble file (overrides the config and the packaged preamble)",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--log-dir",
            help="Directory for the DEBUG log file (defaults to LOGS_PATH)",
            file_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug messages on the console",
        ),
    ] = False,
):
    """
    Render a resume JSON file to LaTeX.

    Examples:\n

        $ jsonresume-latex render resume.json -o resume.tex

        $ jsonresume-latex render resume.json --section work --section skills
    """
    if log_dir is None and LOGS_PATH:
        log_dir = Path(LOGS_PATH)
    log_file = setup_templating_logger(log_dir, resume_path=resume_path, verbose=verbose)
    log_render_start(resume_path.stem, resume_path, log_file)

    start_time = time.time()
    resume = read_resume(resume_path)

    try:
        options = options_from_config(load_theme_config(config))
        render_resume = build_renderer(
            options,
            sections=sections or None,
            document_class=document_class,
            preamble=load_preamble(preamble) if preamble else None,
        )
        latex = render_resume(resume)
    except InvalidResumeError as e:
        typer.secho(f"✗ Invalid resume ({len(e.errors)} errors):", fg=typer.colors.RED, err=True)
        for error in e.errors:
            typer.secho(f"  - {error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    except (UnknownSectionError, ValueError, FileNotFoundError) as e:
        _log_error(str(e))
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(latex, encoding="utf-8")
    else:
        typer.echo(latex, nl=False)

    log_render_result(resume_path.stem, output, time.time() - start_time, len(latex))


@app.command("validate")
def validate_command(
    resume_path: Annotated[
        Path,
        typer.Argument(
            help="Resume JSON file",
            exists=True,
            dir_okay=False,
            readable=True,
        ),
    ],
):
    """
    Validate a resume JSON file against the JSON Resume structure.

    Examples:\n

        $ jsonresume-latex validate resume.json
    """
    errors = validate(read_resume(resume_path))

    if not errors:
        typer.secho("✓ Resume is valid", fg=typer.colors.GREEN, bold=True)
        raise typer.Exit(code=0)

    typer.secho(f"✗ Resume has {len(errors)} errors", fg=typer.colors.RED, bold=True)
    for error in errors:
        typer.echo(f"  - {error}")
    raise typer.Exit(code=1)


@app.command("sections")
def sections_command():
    """List the section names accepted by --section, in default order."""
    for section in Section:
        typer.echo(section.value)


if __name__ == "__main__":
    app()
