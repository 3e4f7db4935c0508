"""profitchart.viz.chart_description

Builds the declarative profit chart description from sorted points.
"""

from __future__ import annotations
from typing import Sequence

from profitchart.contracts.models import AxisSpec, ChartDescription, ChartSeries, DataPoint

CHART_TITLE = "Profit Analysis Chart"
SERIES_LABEL = "Profit vs Input Amount"
X_AXIS_LABEL = "Input Amount ($)"
Y_AXIS_LABEL = "Profit ($)"


def build_chart_description(points: Sequence[DataPoint], width: int, height: int) -> ChartDescription:
    """Describe a connected-line scatter plot of profit against input amount."""
    series = ChartSeries(
        label=SERIES_LABEL,
        x=tuple(p.input_amount for p in points),
        y=tuple(p.profit for p in points),
    )
    return ChartDescription(
        kind="line",
        title=CHART_TITLE,
        series=series,
        x_axis=AxisSpec(label=X_AXIS_LABEL),
        y_axis=AxisSpec(label=Y_AXIS_LABEL),
        width=width,
        height=height,
    )
