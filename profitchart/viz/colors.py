"""profitchart.viz.colors

CSS color strings (rgb()/rgba()/hex) to matplotlib color tuples.
"""

from __future__ import annotations
import re
from typing import Union

_rgb_re = re.compile(r"^\s*rgba?\(\s*([^)]*)\)\s*$", re.IGNORECASE)

MplColor = Union[str, tuple[float, ...]]


def to_mpl_color(css: str) -> MplColor:
    """Convert `rgb(r, g, b)` / `rgba(r, g, b, a)` to an RGB(A) tuple; pass anything else through."""
    m = _rgb_re.match(css or "")
    if not m:
        return css
    parts = [p.strip() for p in m.group(1).split(",")]
    if len(parts) not in (3, 4):
        raise ValueError(f"Unsupported color: {css}")
    rgb = tuple(float(p) / 255.0 for p in parts[:3])
    if len(parts) == 4:
        return rgb + (float(parts[3]),)
    return rgb
