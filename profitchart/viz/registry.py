"""profitchart.viz.registry

Renderer lookup by name. Optional backends are imported lazily.
"""

from __future__ import annotations

from profitchart.config import RENDERERS
from profitchart.contracts.renderer_base import ChartRenderer
from profitchart.errors import ConfigError


def get_renderer(name: str = "matplotlib", dpi: int = 100) -> ChartRenderer:
    lib = (name or "matplotlib").strip().lower()

    if lib == "matplotlib":
        from profitchart.viz.matplotlib_renderer import MatplotlibRenderer

        return MatplotlibRenderer(dpi=dpi)

    if lib == "seaborn":
        from profitchart.viz.seaborn_renderer import SeabornRenderer

        return SeabornRenderer(dpi=dpi)

    if lib == "plotly":
        from profitchart.viz.plotly_renderer import PlotlyRenderer

        return PlotlyRenderer()

    raise ConfigError(f"Unknown renderer '{name}'. Expected one of {list(RENDERERS)}")
