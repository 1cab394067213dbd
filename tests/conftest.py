"""Shared test fixtures for chaindocs."""

from pathlib import Path

import pytest

from chaindocs.chains.loader import load_chains

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def chains():
    return load_chains(FIXTURES / "chains-minimal.yaml")


@pytest.fixture
def docs(tmp_path):
    """Empty docs root."""
    root = tmp_path / "docs"
    root.mkdir()
    return root
