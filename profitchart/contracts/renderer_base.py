"""profitchart.contracts.renderer_base

Renderer interface: turns a chart description into raster image bytes.
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from .models import ChartDescription


class ChartRenderer(ABC):
    name: str

    @abstractmethod
    def render_to_buffer(self, description: ChartDescription) -> bytes:
        """Render `description` and return PNG bytes."""
        raise NotImplementedError
