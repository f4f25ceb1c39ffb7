"""Plain-text report over an EV registration dataset.

Renders dataset statistics, a preview, the top makes, the available model
years and a summary of the most recent year. A section that fails is
logged and marked unavailable; the remaining sections still render.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable

from evstats.aggregation.aggregator import (
    DEFAULT_DATASET_PATH,
    DEFAULT_PREVIEW_LIMIT,
    DEFAULT_TOP_LIMIT,
    Aggregator,
)
from evstats.core.errors import DatasetNotFoundError, EvStatsError

logger = logging.getLogger(__name__)

PREVIEW_ROW_WIDTH = 100


def _stats_section(aggregator: Aggregator) -> list[str]:
    stats = aggregator.get_dataset_stats()
    return [
        "Dataset Statistics:",
        f"Total Rows: {stats.total_rows}",
        f"File Size: {stats.file_size} bytes",
    ]


def _preview_section(aggregator: Aggregator, limit: int) -> list[str]:
    preview = aggregator.preview_data(limit)
    lines = ["Dataset Preview:", f"Header: {preview.header}", f"First {limit} rows:"]
    for index, row in enumerate(preview.rows, start=1):
        lines.append(f"{index}: {row[:PREVIEW_ROW_WIDTH]}...")
    return lines


def _top_makes_section(aggregator: Aggregator, limit: int) -> list[str]:
    lines = [f"Top {limit} EV Makes:"]
    for index, item in enumerate(aggregator.get_top_makes(limit), start=1):
        lines.append(f"{index}. {item.make}: {item.count} vehicles")
    return lines


def _years_section(aggregator: Aggregator) -> list[str]:
    years = aggregator.get_available_years()
    lines = ["Available Years:", ", ".join(str(year) for year in years)]
    if not years:
        return lines

    year = years[-1]
    yearly = aggregator.get_yearly_stats(year)
    lines += [
        "",
        f"Statistics for {year}:",
        f"Total EVs: {yearly.total_evs}",
        f"Average Range: {yearly.average_range} miles",
        "Top Makes:",
    ]
    for index, item in enumerate(yearly.top_makes, start=1):
        lines.append(f"  {index}. {item.make}: {item.count} vehicles")

    if yearly.ev_types:
        lines.append("Vehicle Types:")
        for item in yearly.ev_types:
            lines.append(f"  {item.type}: {item.count}")

    lines.append("Color Distribution (simulated):")
    for bucket in aggregator.get_color_distribution(year):
        lines.append(f"  {bucket.color} ({bucket.hex}): {bucket.count}")
    return lines


def _render_section(title: str, build: Callable[[], list[str]]) -> list[str]:
    """Run a section builder, degrading to a placeholder on domain errors."""
    try:
        return build()
    except EvStatsError as e:
        logger.warning(f"{title} unavailable: {e}")
        return [f"{title}: unavailable ({e})"]


def render_report(
    aggregator: Aggregator,
    preview_limit: int = DEFAULT_PREVIEW_LIMIT,
    top_limit: int = DEFAULT_TOP_LIMIT,
) -> str:
    """Render the full text report.

    Args:
        aggregator: Aggregator over the dataset.
        preview_limit: Number of lines after the header to preview.
        top_limit: Number of makes to rank.

    Returns:
        Report text, sections separated by blank lines.
    """
    sections = [
        _render_section("Dataset Statistics", lambda: _stats_section(aggregator)),
        _render_section("Dataset Preview", lambda: _preview_section(aggregator, preview_limit)),
        _render_section("Top EV Makes", lambda: _top_makes_section(aggregator, top_limit)),
        _render_section("Available Years", lambda: _years_section(aggregator)),
    ]
    return "\n\n".join("\n".join(section) for section in sections)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser for the report."""
    parser = argparse.ArgumentParser(
        prog="evstats-report",
        description="Print descriptive statistics for an EV registration CSV.",
    )
    parser.add_argument(
        "--dataset",
        default=str(DEFAULT_DATASET_PATH),
        help=f"Path to the dataset CSV (default: {DEFAULT_DATASET_PATH})",
    )
    parser.add_argument(
        "--preview-limit",
        type=int,
        default=DEFAULT_PREVIEW_LIMIT,
        help="Lines to preview after the header",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=DEFAULT_TOP_LIMIT,
        help="Number of makes to rank",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        0 on success, 1 if the dataset file is missing.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    aggregator = Aggregator(args.dataset)
    try:
        aggregator.get_dataset_stats()
    except DatasetNotFoundError as e:
        logger.error(str(e))
        return 1

    print(render_report(aggregator, preview_limit=args.preview_limit, top_limit=args.top))
    return 0


if __name__ == "__main__":
    sys.exit(main())
