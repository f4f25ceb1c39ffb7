"""Dataset file access.

Adapter for the CSV file behind the aggregator. Every call checks that the
file exists and reads it fully; nothing is cached between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from evstats.core.errors import DatasetNotFoundError

logger = logging.getLogger(__name__)

FIELD_DELIMITER = ","
LINE_DELIMITER = "\n"


@dataclass
class DatasetLines:
    """Raw contents of the dataset split into lines.

    Attributes:
        header: First line, unsplit.
        lines: Every line including the header, in file order.
    """

    header: str
    lines: list[str]

    @property
    def header_fields(self) -> list[str]:
        """Header split into column names."""
        return split_fields(self.header)

    def data_rows(self) -> list[list[str]]:
        """Split every non-blank line after the header into fields."""
        return [split_fields(line) for line in self.lines[1:] if not is_blank(line)]


def is_blank(line: str) -> bool:
    """Check whether a line is empty after trimming whitespace."""
    return line.strip() == ""


def split_fields(line: str) -> list[str]:
    """Split a line on commas. Quoting is not supported."""
    return line.split(FIELD_DELIMITER)


def ensure_exists(path: Path) -> None:
    """Raise DatasetNotFoundError if path is not an existing regular file.

    Args:
        path: Dataset path.

    Raises:
        DatasetNotFoundError: If the file is missing or cannot be opened.
    """
    if not path.is_file():
        raise DatasetNotFoundError(path)


def read_lines(path: Path) -> DatasetLines:
    """Read the whole dataset and split it on newlines.

    Args:
        path: Dataset path.

    Returns:
        DatasetLines with the raw header and all lines.

    Raises:
        DatasetNotFoundError: If the file is missing or cannot be opened.
    """
    ensure_exists(path)

    # newline="" keeps "\r" intact; undecodable bytes become U+FFFD
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as f:
            text = f.read()
    except OSError as e:
        raise DatasetNotFoundError(path) from e

    lines = text.split(LINE_DELIMITER)
    logger.debug(f"Read {len(lines)} lines from {path}")
    return DatasetLines(header=lines[0], lines=lines)


def file_size(path: Path) -> int:
    """Return the dataset size in bytes.

    Raises:
        DatasetNotFoundError: If the file is missing or cannot be opened.
    """
    ensure_exists(path)
    return path.stat().st_size
