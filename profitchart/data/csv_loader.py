"""profitchart.data.csv_loader

Loads data points from a CSV file.
"""

from __future__ import annotations
import pandas as pd

from profitchart.contracts.models import DataPoint
from profitchart.errors import ValidationError

# Accepted spellings, first match wins
X_COLUMNS = ["inputAmount", "input_amount", "Input Amount"]
Y_COLUMNS = ["profit", "Profit"]


class CsvLoader:
    """Reads a two-column CSV into DataPoints."""

    def load(self, path: str) -> list[DataPoint]:
        try:
            df = pd.read_csv(path)
        except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
            raise ValidationError(f"Cannot parse CSV '{path}': {e}") from e
        x_col = self._pick(df, X_COLUMNS)
        y_col = self._pick(df, Y_COLUMNS)

        try:
            xs = pd.to_numeric(df[x_col], errors="raise")
            ys = pd.to_numeric(df[y_col], errors="raise")
        except (ValueError, TypeError) as e:
            raise ValidationError(f"Non-numeric value in '{path}': {e}") from e

        return [DataPoint(float(x), float(y)) for x, y in zip(xs, ys)]

    @staticmethod
    def _pick(df: pd.DataFrame, candidates: list[str]) -> str:
        cols = {str(c).strip(): c for c in df.columns}
        for name in candidates:
            if name in cols:
                return cols[name]
        raise ValidationError(f"CSV missing required column, expected one of {candidates}; got {list(df.columns)}")
