"""
Shared fixtures for the email validation tests.
"""

import csv
import os
import tempfile
from pathlib import Path

# Keep module-level settings away from the repository tree
os.environ.setdefault("WORK_DIR", tempfile.mkdtemp(prefix="email-validation-work-"))
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="email-validation-logs-"))

import pytest  # noqa: E402
from openpyxl import Workbook  # noqa: E402

from email_validation.config import Settings  # noqa: E402


def write_csv(path: Path, rows: list[list[str]]) -> Path:
    """Write rows to a CSV file and return its path."""
    with path.open("w", encoding="utf-8", newline="") as handle:
        csv.writer(handle).writerows(rows)
    return path


def write_xlsx(path: Path, rows: list[list[object]]) -> Path:
    """Write rows to the first sheet of a new workbook and return its path."""
    workbook = Workbook()
    sheet = workbook.active
    for row in rows:
        sheet.append(row)
    workbook.save(path)
    return path


@pytest.fixture
def make_csv(tmp_path):
    """Factory fixture: make_csv("name.csv", rows) -> Path."""

    def _make(name: str, rows: list[list[str]]) -> Path:
        return write_csv(tmp_path / name, rows)

    return _make


@pytest.fixture
def make_xlsx(tmp_path):
    """Factory fixture: make_xlsx("name.xlsx", rows) -> Path."""

    def _make(name: str, rows: list[list[object]]) -> Path:
        return write_xlsx(tmp_path / name, rows)

    return _make


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings writing reports and logs below the test's tmp_path."""
    return Settings(work_dir=tmp_path / "work", log_dir=tmp_path / "logs")
