from __future__ import annotations

import shutil
from pathlib import Path

import pytest


FIXTURES = Path(__file__).parent / "fixtures"
MOCK_REPOSITORY = FIXTURES / "mock_repository"


@pytest.fixture
def standards_root(tmp_path: Path) -> Path:
    """A private copy of the mock standards repository."""

    root = tmp_path / "standards"
    shutil.copytree(MOCK_REPOSITORY, root)
    return root
