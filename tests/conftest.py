"""Shared pytest fixtures for the full trigramcount test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fixture_paths import text_fixture_path


@pytest.fixture
def files_dir() -> Path:
    """Provide the directory holding text fixtures."""

    return text_fixture_path("short.txt").parent
