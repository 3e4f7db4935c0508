"""profitchart.cli

Demo entry point: renders the sample profit dataset (or a CSV) and prints the summary.

Usage:
  profit-chart
  profit-chart --csv data.csv --output chart.png --renderer seaborn
"""

from __future__ import annotations

import argparse
import dataclasses
import sys
from typing import Optional, Sequence

from profitchart.config import RENDERERS, Settings
from profitchart.contracts.models import DataPoint
from profitchart.data.csv_loader import CsvLoader
from profitchart.env_loader import load_env
from profitchart.errors import AppError
from profitchart.main import build_generator

DEMO_FILENAME = "profit-analysis-chart.png"

SAMPLE_DATA = [
    DataPoint(1000, 150),
    DataPoint(2000, 280),
    DataPoint(3000, 450),
    DataPoint(4000, 580),
    DataPoint(5000, 750),
    DataPoint(6000, 820),
    DataPoint(7000, 950),
    DataPoint(8000, 1100),
    DataPoint(9000, 1180),
    DataPoint(10000, 1350),
]


def _parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="profit-chart", description="Render the profit analysis chart.")
    ap.add_argument("--output", default=DEMO_FILENAME, help="Output PNG filename")
    ap.add_argument("--width", type=int, default=1000)
    ap.add_argument("--height", type=int, default=700)
    ap.add_argument("--renderer", choices=RENDERERS, default=None, help="Overrides CHART_RENDERER")
    ap.add_argument("--csv", default=None, help="CSV with inputAmount,profit columns (default: sample data)")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parser().parse_args(argv)

    try:
        load_env()  # load .env if present
        settings = Settings.load()
        overrides = {"width": args.width, "height": args.height, "output_filename": args.output}
        if args.renderer:
            overrides["renderer"] = args.renderer
        settings = dataclasses.replace(settings, **overrides).validate()

        data = CsvLoader().load(args.csv) if args.csv else list(SAMPLE_DATA)

        print("🚀 Generating line chart...\n")
        generator = build_generator(settings)
        generator.generate_line_chart(data, settings.output_filename)
    except (AppError, OSError) as e:
        print(f"Failed to generate chart: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
