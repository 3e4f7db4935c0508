"""profitchart.contracts.models

Shared models for the preparer, the report emitter and the renderers.
"""

from __future__ import annotations
import numbers
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Mapping

from profitchart.errors import ValidationError


def _as_number(value: Any, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(f"{what} must be a real number, got {value!r}")
    return float(value)


@dataclass(frozen=True)
class DataPoint:
    """One (input amount, profit) pair to be plotted."""
    input_amount: float
    profit: float

    @classmethod
    def coerce(cls, raw: Any) -> "DataPoint":
        """Accept a DataPoint, an {inputAmount, profit} mapping or an (x, y) pair."""
        if isinstance(raw, DataPoint):
            return cls(_as_number(raw.input_amount, "inputAmount"), _as_number(raw.profit, "profit"))
        if isinstance(raw, Mapping):
            x = raw.get("inputAmount", raw.get("input_amount"))
            if x is None or "profit" not in raw:
                raise ValidationError(f"Record is missing inputAmount/profit: {dict(raw)!r}")
            return cls(_as_number(x, "inputAmount"), _as_number(raw["profit"], "profit"))
        if isinstance(raw, (tuple, list)) and len(raw) == 2:
            return cls(_as_number(raw[0], "inputAmount"), _as_number(raw[1], "profit"))
        raise ValidationError(f"Unsupported data point: {raw!r}")


@dataclass(frozen=True)
class PreparedData:
    """Sorted points plus the profit statistics shown in the summary."""
    points: tuple[DataPoint, ...]
    max_profit: float
    min_profit: float
    avg_profit: float


@dataclass(frozen=True)
class AxisSpec:
    label: str
    font_size: int = 14
    scale: Literal["linear"] = "linear"


@dataclass(frozen=True)
class ChartSeries:
    """A single connected-line series."""
    label: str
    x: tuple[float, ...]
    y: tuple[float, ...]
    border_color: str = "rgb(75, 192, 192)"
    background_color: str = "rgba(75, 192, 192, 0.2)"
    point_border_color: str = "#fff"
    line_width: float = 3
    point_radius: float = 6
    point_border_width: float = 2
    tension: float = 0.1


@dataclass(frozen=True)
class ChartDescription:
    """Declarative, renderer-independent chart configuration."""
    kind: Literal["line"]
    title: str
    series: ChartSeries
    x_axis: AxisSpec
    y_axis: AxisSpec
    width: int
    height: int
    title_font_size: int = 18
    legend_position: Literal["top", "bottom", "none"] = "top"
    background: str = "white"
    grid: bool = True


@dataclass
class ChartReport:
    """Result of a successful chart generation."""
    output_path: Path
    summary: PreparedData
    traces: list[dict[str, Any]] = field(default_factory=list)
