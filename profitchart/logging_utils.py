"""profitchart.logging_utils

Logging utilities:
- File logging for rendering failures and generated artifacts
- Console logging alongside the printed report
"""

from __future__ import annotations
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path


def build_logger(log_dir: str, name: str = "profitchart", level: str | int = logging.INFO) -> logging.Logger:
    Path(log_dir).mkdir(parents=True, exist_ok=True)
    logger = logging.getLogger(name)
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    # Avoid duplicate handlers when the CLI is invoked repeatedly in one process
    if logger.handlers:
        return logger

    log_path = Path(log_dir) / f"{name}.log"
    handler = RotatingFileHandler(str(log_path), maxBytes=2_000_000, backupCount=5, encoding="utf-8")
    fmt = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    handler.setFormatter(fmt)
    logger.addHandler(handler)

    console = logging.StreamHandler()
    console.setFormatter(fmt)
    logger.addHandler(console)
    return logger
