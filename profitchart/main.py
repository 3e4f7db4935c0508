"""profitchart.main

Wiring for settings + logger + renderer + generator.
"""

from __future__ import annotations

from profitchart.config import Settings
from profitchart.env_loader import load_env
from profitchart.generator import ChartGenerator
from profitchart.logging_utils import build_logger
from profitchart.viz.registry import get_renderer


def build_generator(settings: Settings | None = None) -> ChartGenerator:
    if settings is None:
        load_env()  # load .env if present
        settings = Settings.load()
    logger = build_logger(settings.log_dir, level=settings.log_level)

    return ChartGenerator(
        width=settings.width,
        height=settings.height,
        renderer=get_renderer(settings.renderer, dpi=settings.dpi),
        output_dir=settings.output_dir,
        logger=logger,
    )
