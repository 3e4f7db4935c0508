"""profitchart.report.emitter

Writes the rendered chart to disk and prints the console data summary.
"""

from __future__ import annotations
import logging
import os
import sys
import tempfile
from pathlib import Path
from typing import TextIO

from profitchart.contracts.models import ChartDescription, PreparedData
from profitchart.contracts.renderer_base import ChartRenderer
from profitchart.errors import ChartIOError, RenderError
from profitchart.paths import output_path

# Value cells fill the 17-char column: "│ $" + value + " │"
COLUMN_WIDTH = 14


def format_summary(prepared: PreparedData) -> list[str]:
    """Return the data table and statistics block as printable lines."""
    lines = [
        "",
        "📊 Data Summary:",
        "┌─────────────────┬─────────────────┐",
        "│   Input Amount  │     Profit      │",
        "├─────────────────┼─────────────────┤",
    ]
    for p in prepared.points:
        amount = f"{p.input_amount:.2f}".rjust(COLUMN_WIDTH)
        profit = f"{p.profit:.2f}".rjust(COLUMN_WIDTH)
        lines.append(f"│ ${amount} │ ${profit} │")
    lines.append("└─────────────────┴─────────────────┘")

    lines += [
        "",
        "📈 Statistics:",
        f"   Max Profit: ${prepared.max_profit:.2f}",
        f"   Min Profit: ${prepared.min_profit:.2f}",
        f"   Avg Profit: ${prepared.avg_profit:.2f}",
    ]
    return lines


class ReportEmitter:
    """Renders + writes the chart image, then prints the text report."""

    def __init__(self, renderer: ChartRenderer, logger: logging.Logger, output_dir: str | Path | None = None, stream: TextIO | None = None):
        self.renderer = renderer
        self.logger = logger
        self.output_dir = output_dir
        self.stream = stream

    def _print(self, text: str) -> None:
        print(text, file=self.stream or sys.stdout)

    def render(self, description: ChartDescription) -> bytes:
        try:
            image = self.renderer.render_to_buffer(description)
        except Exception as e:
            self.logger.error(f"❌ Error generating chart: {self.renderer.name} renderer failed: {e}")
            raise RenderError(f"{self.renderer.name} renderer failed: {e}") from e
        if not image:
            self.logger.error(f"❌ Error generating chart: {self.renderer.name} renderer returned an empty buffer")
            raise RenderError(f"{self.renderer.name} renderer returned an empty buffer")
        return image

    def write_chart(self, description: ChartDescription, filename: str) -> Path:
        """Render `description` and write it to `filename`; returns the absolute path."""
        image = self.render(description)
        path = output_path(filename, self.output_dir)
        self._write_atomic(path, image)
        self.logger.info(f"Wrote {len(image)} bytes to {path}")
        self._print(f"✅ Chart saved successfully as: {path}")
        return path

    def _write_atomic(self, path: Path, data: bytes) -> None:
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            self.logger.error(f"❌ Error generating chart: cannot write {path}: {e}")
            raise ChartIOError(f"Cannot write chart to {path}: {e}") from e

    def print_summary(self, prepared: PreparedData) -> None:
        for line in format_summary(prepared):
            self._print(line)
