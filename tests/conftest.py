"""Shared pytest fixtures for the full teiplain test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

_FILES_DIR = Path(__file__).parent / "files"


@pytest.fixture
def letter_xml_path() -> Path:
    """Provide the sample TEI letter used by reader and CLI tests."""

    return _FILES_DIR / "letter.xml"
