"""Adapter module for IO boundaries.

Adapters wrap file access behind domain-focused helpers.
Aggregation code should use adapters rather than opening files directly.

Structure:
- adapter/dataset.py - CSV existence checks, full reads, line splitting
"""

from evstats.adapter.dataset import (
    DatasetLines,
    ensure_exists,
    file_size,
    is_blank,
    read_lines,
    split_fields,
)

__all__ = [
    "DatasetLines",
    "ensure_exists",
    "file_size",
    "is_blank",
    "read_lines",
    "split_fields",
]
