#!/usr/bin/env python3
"""Print the EV registration report.

Usage:
    python scripts/run_report.py [--dataset data/ev_population_data.csv]

Exit codes:
    0: Report printed
    1: Dataset not found
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from evstats.report.console import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
