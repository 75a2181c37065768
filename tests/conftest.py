"""Pytest fixtures for fuzzy matcher tests."""

from pathlib import Path

import pytest


@pytest.fixture
def fruits() -> list[str]:
    """Candidates from the README example."""
    return ["apple", "application", "banana", "appetite"]


@pytest.fixture
def write_config(tmp_path: Path):
    """Write YAML text to a config file and return its path."""

    def _write(text: str) -> Path:
        path = tmp_path / "fuzzy.yaml"
        path.write_text(text)
        return path

    return _write
