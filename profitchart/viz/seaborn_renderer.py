"""profitchart.viz.seaborn_renderer

Seaborn styling on top of the matplotlib renderer.
"""

from __future__ import annotations
import seaborn as sns
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from profitchart.contracts.models import ChartDescription, DataPoint
from profitchart.data.preparer import to_frame
from profitchart.viz.colors import to_mpl_color
from profitchart.viz.matplotlib_renderer import MatplotlibRenderer


class SeabornRenderer(MatplotlibRenderer):
    name = "seaborn"

    def _add_axes(self, fig: Figure) -> Axes:
        # Style applies at axes creation; no global theme is set
        with sns.axes_style("whitegrid"):
            return fig.add_subplot(111)

    def _draw_series(self, ax: Axes, description: ChartDescription) -> None:
        s = description.series
        df = to_frame(DataPoint(x, y) for x, y in zip(s.x, s.y))
        # estimator=None plots raw points; duplicate x values are not averaged
        sns.lineplot(
            data=df,
            x="input_amount",
            y="profit",
            estimator=None,
            sort=False,
            legend=False,
            ax=ax,
            label=s.label,
            color=to_mpl_color(s.border_color),
            linewidth=s.line_width,
            marker="o",
            markersize=self._marker_size(s.point_radius),
            markeredgecolor=to_mpl_color(s.point_border_color),
            markeredgewidth=s.point_border_width,
        )
