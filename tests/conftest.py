"""Pytest configuration and fixtures for papermeta tests."""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from papermeta.logging import set_log_level


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Set up logging for tests."""
    set_log_level("DEBUG")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_paper_text() -> str:
    """First page of a typical paper as a PDF-to-text tool returns it."""
    return """A Heuristic Approach to Protein Structure Prediction
John Smith
Jane Doe
Department of Biology, Example University

Abstract: We present a new method for predicting protein structures.
The method outperforms prior work.
Keywords: protein, structure prediction
Published in Nature Methods, 2021
DOI: 10.1038/s41592-021-01234-5
Received 2021-03-15
1. Introduction
Proteins fold into complex shapes.
"""
