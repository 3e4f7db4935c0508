"""profitchart.viz.plotly_renderer

Plotly renderer. Static PNG export goes through kaleido.
"""

from __future__ import annotations
import plotly.graph_objects as go

from profitchart.contracts.models import ChartDescription
from profitchart.contracts.renderer_base import ChartRenderer


class PlotlyRenderer(ChartRenderer):
    name = "plotly"

    def render_to_buffer(self, description: ChartDescription) -> bytes:
        fig = self.build_figure(description)
        return fig.to_image(format="png", width=description.width, height=description.height)

    def build_figure(self, description: ChartDescription) -> go.Figure:
        s = description.series
        line = {"color": s.border_color, "width": s.line_width}
        if s.tension > 0:
            line.update(shape="spline", smoothing=s.tension)

        fig = go.Figure(
            go.Scatter(
                x=list(s.x),
                y=list(s.y),
                mode="lines+markers",
                name=s.label,
                line=line,
                marker={
                    "size": 2 * s.point_radius,
                    "color": s.border_color,
                    "line": {"color": s.point_border_color, "width": s.point_border_width},
                },
            )
        )
        fig.update_layout(
            title={"text": description.title, "font": {"size": description.title_font_size}, "x": 0.5},
            width=description.width,
            height=description.height,
            paper_bgcolor=description.background,
            plot_bgcolor=description.background,
            showlegend=description.legend_position != "none",
            legend={"orientation": "h", "x": 0.5, "xanchor": "center",
                    "y": 1.02 if description.legend_position == "top" else -0.2, "yanchor": "bottom"},
        )
        fig.update_xaxes(
            title={"text": description.x_axis.label, "font": {"size": description.x_axis.font_size}},
            type=description.x_axis.scale,
            showgrid=description.grid,
        )
        fig.update_yaxes(
            title={"text": description.y_axis.label, "font": {"size": description.y_axis.font_size}},
            showgrid=description.grid,
        )
        return fig
