"""Shared pytest fixtures."""

import copy
import json
from pathlib import Path

import pytest
from loguru import logger

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop loguru handlers added during a test (they may point at closed streams)."""
    yield
    logger.remove()


@pytest.fixture(scope="session")
def complete_resume_path():
    return FIXTURES_PATH / "complete_resume.json"


@pytest.fixture
def complete_resume(complete_resume_path):
    """Fresh copy of the complete resume fixture for each test."""
    return copy.deepcopy(json.loads(complete_resume_path.read_text(encoding="utf-8")))
