"""profitchart.data.preparer

Validates data points, sorts them by input amount and derives profit statistics.
"""

from __future__ import annotations
import math
from typing import Any, Iterable, Sequence

import pandas as pd

from profitchart.contracts.models import DataPoint, PreparedData
from profitchart.errors import ValidationError

COLUMNS = ["input_amount", "profit"]


def to_frame(points: Iterable[DataPoint]) -> pd.DataFrame:
    """Return points as a DataFrame with `input_amount` and `profit` columns."""
    return pd.DataFrame(
        [(p.input_amount, p.profit) for p in points],
        columns=COLUMNS,
        dtype="float64",
    )


def validate(data: Sequence[Any]) -> list[DataPoint]:
    """Coerce raw records into DataPoints; reject empty or non-finite input."""
    if data is None or len(data) == 0:
        raise ValidationError("empty dataset")

    points: list[DataPoint] = []
    for i, raw in enumerate(data):
        try:
            point = DataPoint.coerce(raw)
        except ValidationError as e:
            raise ValidationError(f"Invalid data point at index {i}: {e}") from e
        if not (math.isfinite(point.input_amount) and math.isfinite(point.profit)):
            raise ValidationError(f"Non-finite value in data point at index {i}: {point}")
        points.append(point)
    return points


def prepare(data: Sequence[Any]) -> PreparedData:
    """Sort by input amount (stable) and compute max/min/mean profit.

    The caller's sequence is left untouched; a new sorted tuple is returned.
    """
    points = validate(data)
    df = to_frame(points)

    # mergesort is stable: equal input amounts keep their input order
    order = df.sort_values("input_amount", kind="mergesort").index
    sorted_points = tuple(points[i] for i in order)

    profit = df["profit"]
    return PreparedData(
        points=sorted_points,
        max_profit=float(profit.max()),
        min_profit=float(profit.min()),
        avg_profit=float(profit.mean()),
    )
