"""profitchart.env_loader

Loads CHART_* / LOG_* settings from a .env file before Settings.load().
Already-set environment variables win unless override=True.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import find_dotenv, load_dotenv


def load_env(dotenv_path: str | None = None, override: bool = False) -> str | None:
    """Load an explicit .env file, or the nearest one above the CWD.

    Returns the path that was loaded, or None when there is nothing to load.
    """
    if dotenv_path:
        path = str(Path(dotenv_path).expanduser())
        if not Path(path).is_file():
            return None
    else:
        path = find_dotenv(usecwd=True)
        if not path:
            return None

    load_dotenv(dotenv_path=path, override=override)
    return path
