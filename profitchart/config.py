"""profitchart.config

Centralized configuration for chart generation.

Values come from environment variables (optionally loaded from .env).
"""

from __future__ import annotations
from dataclasses import dataclass
import os

from profitchart.errors import ConfigError

RENDERERS = ("matplotlib", "seaborn", "plotly")


def _env(name: str, default: str | None = None) -> str | None:
    val = os.getenv(name)
    return val if val is not None else default


def _env_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None:
        return default
    try:
        return int(v)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """Chart and logging settings loaded from environment variables."""

    # Canvas
    width: int
    height: int
    dpi: int

    # Output
    output_filename: str
    output_dir: str | None

    # Rendering backend: matplotlib|seaborn|plotly
    renderer: str

    # Logging
    log_dir: str
    log_level: str

    def validate(self) -> "Settings":
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"Canvas size must be positive, got {self.width}x{self.height}")
        if self.dpi <= 0:
            raise ConfigError(f"DPI must be positive, got {self.dpi}")
        if self.renderer not in RENDERERS:
            raise ConfigError(f"Unknown renderer '{self.renderer}'. Expected one of {list(RENDERERS)}")
        return self

    @staticmethod
    def load() -> "Settings":
        return Settings(
            width=_env_int("CHART_WIDTH", 800),
            height=_env_int("CHART_HEIGHT", 600),
            dpi=_env_int("CHART_DPI", 100),
            output_filename=_env("CHART_OUTPUT", "line-chart.png") or "line-chart.png",
            output_dir=_env("CHART_OUTPUT_DIR") or None,
            renderer=(_env("CHART_RENDERER", "matplotlib") or "matplotlib").strip().lower(),
            log_dir=_env("LOG_DIR", "logs") or "logs",
            log_level=(_env("LOG_LEVEL", "INFO") or "INFO").strip().upper(),
        ).validate()
