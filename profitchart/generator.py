"""profitchart.generator

Chart generation pipeline: validate -> sort -> render and write -> print summary.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Optional, Sequence, TextIO

from profitchart.contracts.models import ChartReport
from profitchart.contracts.renderer_base import ChartRenderer
from profitchart.data.preparer import prepare
from profitchart.errors import ConfigError
from profitchart.report.emitter import ReportEmitter
from profitchart.tracing import TraceCollector
from profitchart.viz.chart_description import build_chart_description
from profitchart.viz.matplotlib_renderer import MatplotlibRenderer

DEFAULT_FILENAME = "line-chart.png"


class ChartGenerator:
    """Creates the profit analysis chart and its console summary."""

    def __init__(
        self,
        width: int = 800,
        height: int = 600,
        renderer: Optional[ChartRenderer] = None,
        output_dir: str | Path | None = None,
        logger: Optional[logging.Logger] = None,
        stream: Optional[TextIO] = None,
    ):
        if width <= 0 or height <= 0:
            raise ConfigError(f"Canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.renderer = renderer or MatplotlibRenderer()
        self.logger = logger or logging.getLogger("profitchart")
        self.emitter = ReportEmitter(self.renderer, self.logger, output_dir=output_dir, stream=stream)

    def generate_line_chart(self, data: Sequence[Any], filename: str = DEFAULT_FILENAME) -> ChartReport:
        """Write the chart for `data` to `filename` and print the data summary.

        Raises ValidationError before rendering for empty/malformed data.
        RenderError and ChartIOError propagate after being logged; the summary
        is only printed once the image is on disk.
        """
        tracer = TraceCollector()
        prepared = prepare(data)
        tracer.add("prepare", {"points": len(prepared.points)})

        description = build_chart_description(prepared.points, self.width, self.height)
        path = self.emitter.write_chart(description, filename)
        tracer.add("render", {"renderer": self.renderer.name, "path": str(path)})

        self.emitter.print_summary(prepared)
        tracer.add("summary", {
            "max_profit": prepared.max_profit,
            "min_profit": prepared.min_profit,
            "avg_profit": prepared.avg_profit,
        })
        return ChartReport(output_path=path, summary=prepared, traces=tracer.traces)
