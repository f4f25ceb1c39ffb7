#!/usr/bin/env python3
"""Create a demo EV registration dataset.

Writes a small CSV with the same header layout as the public EV population
data so the report and API can be tried without downloading it.

Usage:
    python scripts/create_demo_dataset.py [rows]
"""

import random
import sys
from pathlib import Path

DEMO_DATASET_PATH = Path(__file__).parent.parent / "data" / "ev_population_data.csv"

HEADER = [
    "VIN (1-10)",
    "County",
    "City",
    "State",
    "Postal Code",
    "Model Year",
    "Make",
    "Model",
    "Electric Vehicle Type",
    "Electric Range",
    "Base MSRP",
]

# (make, model, type, range)
MODELS = [
    ("TESLA", "MODEL 3", "Battery Electric Vehicle (BEV)", 220),
    ("TESLA", "MODEL Y", "Battery Electric Vehicle (BEV)", 0),
    ("NISSAN", "LEAF", "Battery Electric Vehicle (BEV)", 149),
    ("CHEVROLET", "BOLT EV", "Battery Electric Vehicle (BEV)", 259),
    ("CHEVROLET", "VOLT", "Plug-in Hybrid Electric Vehicle (PHEV)", 53),
    ("FORD", "MUSTANG MACH-E", "Battery Electric Vehicle (BEV)", 0),
    ("KIA", "NIRO", "Plug-in Hybrid Electric Vehicle (PHEV)", 26),
    ("BMW", "X5", "Plug-in Hybrid Electric Vehicle (PHEV)", 30),
    ("TOYOTA", "PRIUS PRIME", "Plug-in Hybrid Electric Vehicle (PHEV)", 25),
    ("RIVIAN", "R1S", "Battery Electric Vehicle (BEV)", 0),
]

COUNTIES = [("King", "Seattle", "98101"), ("Snohomish", "Everett", "98201"), ("Pierce", "Tacoma", "98402")]


def build_rows(count: int, seed: int = 42) -> list[str]:
    """Build deterministic CSV lines."""
    rng = random.Random(seed)
    rows = []
    for _ in range(count):
        make, model, ev_type, electric_range = rng.choice(MODELS)
        county, city, postal = rng.choice(COUNTIES)
        vin = "".join(rng.choice("0123456789ABCDEFGHJKLMNPRSTUVWXYZ") for _ in range(10))
        rows.append(
            ",".join(
                [
                    vin,
                    county,
                    city,
                    "WA",
                    postal,
                    str(rng.randint(2015, 2024)),
                    make,
                    model,
                    ev_type,
                    str(electric_range),
                    "0",
                ]
            )
        )
    return rows


def main() -> int:
    """Write the demo dataset."""
    count = int(sys.argv[1]) if len(sys.argv) > 1 else 500

    DEMO_DATASET_PATH.parent.mkdir(parents=True, exist_ok=True)
    lines = [",".join(HEADER)] + build_rows(count)
    DEMO_DATASET_PATH.write_text("\n".join(lines) + "\n", encoding="utf-8")

    print(f"Demo dataset written: {DEMO_DATASET_PATH} ({count} rows)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
