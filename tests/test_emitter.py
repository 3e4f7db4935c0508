import logging

import pytest

from profitchart.contracts.models import DataPoint
from profitchart.contracts.renderer_base import ChartRenderer
from profitchart.data.preparer import prepare
from profitchart.errors import ChartIOError, RenderError
from profitchart.report.emitter import ReportEmitter, format_summary
from profitchart.viz.chart_description import build_chart_description


class BytesRenderer(ChartRenderer):
    name = "fake"

    def __init__(self, payload=b"\x89PNG fake"):
        self.payload = payload

    def render_to_buffer(self, description):
        return self.payload


def _description():
    return build_chart_description([DataPoint(1, 1)], 100, 100)


def test_format_summary_rows_and_stats():
    lines = format_summary(prepare([(2000, 280), (1000, 150)]))
    assert "│ $       1000.00 │ $        150.00 │" in lines
    assert lines.index("│ $       1000.00 │ $        150.00 │") < lines.index("│ $       2000.00 │ $        280.00 │")
    assert "   Max Profit: $280.00" in lines
    assert "   Min Profit: $150.00" in lines
    assert "   Avg Profit: $215.00" in lines


def test_format_summary_rows_match_header_width():
    lines = format_summary(prepare([(1, -2.5)]))
    row = [l for l in lines if l.startswith("│ $")][0]
    assert len(row) == len("┌─────────────────┬─────────────────┐")
    assert "-2.50" in row


def test_write_chart_writes_bytes(tmp_path, capsys):
    em = ReportEmitter(BytesRenderer(), logging.getLogger("test"), output_dir=tmp_path)
    path = em.write_chart(_description(), "out.png")
    assert path == (tmp_path / "out.png").resolve()
    assert path.read_bytes() == b"\x89PNG fake"
    assert f"✅ Chart saved successfully as: {path}" in capsys.readouterr().out
    assert [p.name for p in tmp_path.iterdir()] == ["out.png"]


def test_empty_buffer_is_render_error(tmp_path):
    em = ReportEmitter(BytesRenderer(b""), logging.getLogger("test"), output_dir=tmp_path)
    with pytest.raises(RenderError):
        em.write_chart(_description(), "out.png")
    assert list(tmp_path.iterdir()) == []


def test_unwritable_directory_is_io_error(tmp_path):
    em = ReportEmitter(BytesRenderer(), logging.getLogger("test"), output_dir=tmp_path / "missing")
    with pytest.raises(ChartIOError) as exc:
        em.write_chart(_description(), "out.png")
    assert isinstance(exc.value, OSError)
