"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from jsonresume_latex.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(
    log_dir: Optional[Path] = None, resume_path: Optional[Path] = None, verbose: bool = False
) -> Optional[Path]:
    """
    Setup logger for templating context.

    Args:
        log_dir: Directory for this templating session (None for console only)
        resume_path: Resume file being rendered, recorded in the provenance header
        verbose: Show DEBUG messages on the console

    Returns:
        Path to log file, or None when logging to the console only
    """
    return _setup_logger(
        context_name="template",
        log_dir=log_dir,
        extra_provenance={"Resume": resume_path} if resume_path else None,
        console_level="DEBUG" if verbose else "INFO",
    )


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [template] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_render_start(resume_name: str, input_path: Path, log_file: Optional[Path]) -> None:
    """Log start of a render with context."""
    _log_info(f"Rendering {resume_name}")
    if log_file:
        _log_info(f"Log file: {log_file}")
    _log_debug(f"Source: {input_path}")


def log_render_result(
    resume_name: str, output_path: Optional[Path], elapsed_time: float, num_chars: int
) -> None:
    """Log the outcome of a successful render."""
    _log_success(f"{resume_name}: render succeeded ({elapsed_time:.2f}s, {num_chars} chars)")
    if output_path:
        _log_info(f"  Output: {output_path}")


def log_validation_errors(errors: list) -> None:
    """Log each validation error reported for a resume."""
    _log_error(f"Resume failed validation with {len(errors)} error(s)")
    for error in errors:
        _log_error(f"  - {error}")
