"""Shared pytest fixtures for evstats tests."""

from pathlib import Path

import pytest

SCENARIO_HEADER = "Make,Model Year,Electric Range,Electric Vehicle Type"


@pytest.fixture
def write_csv(tmp_path):
    """Return a helper that writes CSV text to a temp file and returns its path."""

    def _write(text: str, name: str = "ev.csv") -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode("utf-8"))
        return path

    return _write


@pytest.fixture
def scenario_csv(write_csv) -> Path:
    """Three-row dataset with two 2021 rows and one 2022 row."""
    return write_csv(
        "\n".join(
            [
                SCENARIO_HEADER,
                "Tesla,2021,250,BEV",
                "Nissan,2021,150,BEV",
                "Tesla,2022,,PHEV",
            ]
        )
    )


@pytest.fixture
def header_only_csv(write_csv) -> Path:
    """Dataset with a header and no rows."""
    return write_csv(SCENARIO_HEADER, name="header_only.csv")
