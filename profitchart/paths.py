"""profitchart.paths

Helpers for resolving output paths consistently.
"""

from __future__ import annotations
from pathlib import Path


def output_path(filename: str, output_dir: str | Path | None = None) -> Path:
    """Return the absolute path for `filename`, relative to `output_dir` (default: CWD)."""
    base = Path(output_dir) if output_dir else Path.cwd()
    return (base / filename).resolve()
