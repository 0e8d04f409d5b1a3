"""
Shared test fixtures and sample payloads for seqtext tests.

Sample texts are defined here as module-level constants for easy
discovery. The ``sample_files`` fixture writes them to ``tmp_path`` so
file-based tests never depend on files checked into the repo.
"""

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Sample payloads
# ---------------------------------------------------------------------------
DATED_CSV = "Time,Temp\n2024-01-01,10\n2024-01-02,12\n"
NUMERIC_CSV = "1,2\n3,4\n5,6\n"
SINGLE_COLUMN = "10\n20\n30\n"
HEADED_TSV = "Seconds\tVolts\n0.0\t1.25\n0.5\t1.30\n1.0\t1.41\n"
MIXED_DELIMITERS = "1,2\n3\t4\n"


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (reads and writes files on disk)",
    )


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def sample_files(tmp_path: Path) -> dict[str, Path]:
    """Write the sample payloads to disk and return name -> path."""
    files = {
        "dated": tmp_path / "dated.csv",
        "numeric": tmp_path / "numeric.csv",
        "single": tmp_path / "single.txt",
        "headed_tsv": tmp_path / "headed.tsv",
        "mixed": tmp_path / "mixed.csv",
    }
    files["dated"].write_text(DATED_CSV, encoding="utf-8")
    files["numeric"].write_text(NUMERIC_CSV, encoding="utf-8")
    files["single"].write_text(SINGLE_COLUMN, encoding="utf-8")
    files["headed_tsv"].write_text(HEADED_TSV, encoding="utf-8")
    files["mixed"].write_text(MIXED_DELIMITERS, encoding="utf-8")
    return files
