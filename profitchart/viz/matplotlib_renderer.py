"""profitchart.viz.matplotlib_renderer

Renders a chart description to PNG bytes with matplotlib's Agg backend.

Figures are built with the object API (no pyplot state), so the renderer
can be used from several generators in the same process.
"""

from __future__ import annotations
import io

from matplotlib.axes import Axes
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from profitchart.contracts.models import ChartDescription
from profitchart.contracts.renderer_base import ChartRenderer
from profitchart.viz.colors import to_mpl_color


class MatplotlibRenderer(ChartRenderer):
    """Default renderer: exact pixel size = description width x height."""

    name = "matplotlib"

    def __init__(self, dpi: int = 100):
        self.dpi = dpi

    def render_to_buffer(self, description: ChartDescription) -> bytes:
        fig = self.build_figure(description)
        buf = io.BytesIO()
        fig.savefig(buf, format="png", dpi=self.dpi, facecolor=fig.get_facecolor())
        return buf.getvalue()

    def build_figure(self, description: ChartDescription) -> Figure:
        bg = to_mpl_color(description.background)
        fig = Figure(figsize=(description.width / self.dpi, description.height / self.dpi), dpi=self.dpi, facecolor=bg)
        FigureCanvasAgg(fig)
        ax = self._add_axes(fig)
        ax.set_facecolor(bg)

        self._draw_series(ax, description)

        # Leave room for a legend placed above the plot area
        pad = 30 if description.legend_position == "top" else 6
        ax.set_title(description.title, fontsize=description.title_font_size, pad=pad)
        ax.set_xlabel(description.x_axis.label, fontsize=description.x_axis.font_size)
        ax.set_ylabel(description.y_axis.label, fontsize=description.y_axis.font_size)
        ax.set_xscale(description.x_axis.scale)
        if description.grid:
            ax.grid(True, linestyle="--", alpha=0.5)
        if description.legend_position != "none":
            if description.legend_position == "top":
                ax.legend(loc="lower center", bbox_to_anchor=(0.5, 1.0), frameon=False)
            else:
                ax.legend(loc="upper center", bbox_to_anchor=(0.5, -0.12), frameon=False)

        fig.tight_layout()
        return fig

    def _add_axes(self, fig: Figure) -> Axes:
        return fig.add_subplot(111)

    def _marker_size(self, radius: float) -> float:
        # Point radius is in pixels; markersize is a diameter in points
        return 2 * radius * 72.0 / self.dpi

    def _draw_series(self, ax: Axes, description: ChartDescription) -> None:
        s = description.series
        ax.plot(
            list(s.x),
            list(s.y),
            label=s.label,
            color=to_mpl_color(s.border_color),
            linewidth=s.line_width,
            marker="o",
            markersize=self._marker_size(s.point_radius),
            markerfacecolor=to_mpl_color(s.border_color),
            markeredgecolor=to_mpl_color(s.point_border_color),
            markeredgewidth=s.point_border_width,
        )
