import logging
from pathlib import Path

import pytest

from profitchart.config import Settings
from profitchart.env_loader import load_env
from profitchart.errors import ConfigError
from profitchart.logging_utils import build_logger
from profitchart.main import build_generator

ENV_VARS = ["CHART_WIDTH", "CHART_HEIGHT", "CHART_DPI", "CHART_OUTPUT", "CHART_OUTPUT_DIR",
            "CHART_RENDERER", "LOG_DIR", "LOG_LEVEL"]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        # setenv first so values loaded from .env are undone at teardown
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


def test_defaults(clean_env):
    s = Settings.load()
    assert (s.width, s.height, s.dpi) == (800, 600, 100)
    assert s.output_filename == "line-chart.png"
    assert s.output_dir is None
    assert s.renderer == "matplotlib"
    assert s.log_level == "INFO"


def test_env_overrides_and_bad_int_fallback(clean_env):
    clean_env.setenv("CHART_WIDTH", "1000")
    clean_env.setenv("CHART_HEIGHT", "tall")
    clean_env.setenv("CHART_RENDERER", "Plotly")
    s = Settings.load()
    assert s.width == 1000
    assert s.height == 600
    assert s.renderer == "plotly"


def test_invalid_settings(clean_env):
    clean_env.setenv("CHART_RENDERER", "excel")
    with pytest.raises(ConfigError):
        Settings.load()
    clean_env.setenv("CHART_RENDERER", "matplotlib")
    clean_env.setenv("CHART_WIDTH", "0")
    with pytest.raises(ConfigError):
        Settings.load()


def test_load_env_does_not_override(tmp_path, clean_env):
    env_file = tmp_path / ".env"
    env_file.write_text("CHART_WIDTH=1234\nCHART_HEIGHT=321\n", encoding="utf-8")
    clean_env.setenv("CHART_HEIGHT", "500")
    assert load_env(str(env_file)) == str(env_file)
    s = Settings.load()
    assert (s.width, s.height) == (1234, 500)


def test_load_env_missing_file(tmp_path):
    assert load_env(str(tmp_path / "nope.env")) is None


def test_load_env_finds_file_above_cwd(tmp_path, clean_env):
    (tmp_path / ".env").write_text("CHART_RENDERER=seaborn\n", encoding="utf-8")
    work = tmp_path / "reports" / "q3"
    work.mkdir(parents=True)
    clean_env.chdir(work)
    found = load_env()
    assert found is not None
    assert Path(found).resolve() == (tmp_path / ".env").resolve()
    assert Settings.load().renderer == "seaborn"


def test_build_logger_adds_handlers_once(tmp_path):
    name = f"profitchart-test-{tmp_path.name}"
    a = build_logger(str(tmp_path), name=name, level="debug")
    b = build_logger(str(tmp_path), name=name)
    assert a is b
    assert len(a.handlers) == 2
    assert a.level == logging.DEBUG
    assert (tmp_path / f"{name}.log").exists()


def test_build_generator_from_settings(tmp_path, clean_env):
    clean_env.setenv("CHART_RENDERER", "seaborn")
    clean_env.setenv("CHART_OUTPUT_DIR", str(tmp_path))
    clean_env.setenv("LOG_DIR", str(tmp_path / "logs"))
    gen = build_generator(Settings.load())
    assert gen.renderer.name == "seaborn"
    assert (gen.width, gen.height) == (800, 600)
    assert gen.emitter.output_dir == str(tmp_path)
