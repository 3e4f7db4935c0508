"""scripts.generate_profit_chart

Renders the sample profit analysis chart.

Usage:
  python scripts/generate_profit_chart.py [--output profit-analysis-chart.png] [--renderer matplotlib]
"""

from __future__ import annotations

from profitchart.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
