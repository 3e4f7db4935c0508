"""profitchart.tracing

Trace collection for debug output.
Each pipeline step appends a structured payload; callers can inspect the order of steps.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any


@dataclass
class TraceCollector:
    """Collects per-step traces for a single chart generation."""
    traces: list[dict[str, Any]] = field(default_factory=list)

    def add(self, step_name: str, payload: dict[str, Any]) -> None:
        self.traces.append({"step": step_name, "payload": payload})

    def steps(self) -> list[str]:
        return [t["step"] for t in self.traces]
