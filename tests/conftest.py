"""
Pytest configuration for the Grade Report pipeline.

Provides fixtures for:
- Sample student input files
- A fixed report timestamp
- Settings cache isolation
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Generator, List

import pytest

from grade_report.config import get_settings

SAMPLE_LINES: List[str] = [
    "101,Alice Smith,84",
    "102,Bob Johnson,76",
    "103,Carol Davis,92",
    "104,David Brown,58",
    "105,Emma Wilson,45",
    "106,Frank Miller,88",
    "107,Grace Lee,71",
]


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """
    Reset the cached Settings so environment overrides apply per test.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fixed_timestamp() -> datetime:
    return datetime(2024, 5, 17, 9, 30, 15)


@pytest.fixture
def sample_lines() -> List[str]:
    return list(SAMPLE_LINES)


@pytest.fixture
def sample_input(tmp_path: Path) -> Path:
    """
    Write the seven-student sample file and return its path.
    """
    path = tmp_path / "students.txt"
    path.write_text("\n".join(SAMPLE_LINES) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def write_input(tmp_path: Path):
    """
    Factory writing arbitrary content to an input file.
    """

    def _write(content: str, name: str = "students.txt") -> Path:
        path = tmp_path / name
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write
