"""Tests for the command line demo that writes the trajectory PPM."""

import pytest

from raytracer.color import Color
from raytracer.config import SimulationConfig
from raytracer.demo import DemoApp, build_config, main, parse_args


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    for key in ("RAYTRACER_OUTPUT", "RAYTRACER_WIDTH", "RAYTRACER_HEIGHT"):
        monkeypatch.delenv(key, raising=False)


def test_render_returns_ppm():
    app = DemoApp(SimulationConfig(width=60, height=40))
    ppm = app.render()
    assert ppm.startswith("P3\n60 40\n255\n")
    assert ppm.endswith("\n")
    assert app.ticks > 0
    assert "255 0 0" in ppm


def test_main_writes_file(tmp_path):
    out = tmp_path / "shot.ppm"
    status = main(["-o", str(out), "--width", "80", "--height", "50"])
    assert status == 0
    text = out.read_text(encoding="ascii")
    assert text.splitlines()[:3] == ["P3", "80 50", "255"]


def test_main_reports_write_failure(tmp_path):
    out = tmp_path / "missing" / "shot.ppm"
    assert main(["-o", str(out), "--width", "10", "--height", "10"]) == 1


def test_main_reports_unopenable_log_file(tmp_path):
    argv = ["-o", str(tmp_path / "shot.ppm"), "--width", "5", "--height", "5",
            "--log-file", str(tmp_path / "missing" / "run.log")]
    assert main(argv) == 1
    assert not (tmp_path / "shot.ppm").exists()


def test_render_twice_starts_from_a_clean_canvas():
    app = DemoApp(SimulationConfig(width=60, height=40))
    first = app.render()
    ticks = app.ticks
    assert app.render() == first
    assert app.ticks == ticks


def test_main_rejects_bad_config(tmp_path):
    assert main(["-o", str(tmp_path / "x.ppm"), "--width", "0"]) == 2


def test_parse_args_vectors_and_color():
    args = parse_args(["--wind=-0.02,0,0", "--color", "#00FF00"])
    assert args.wind == (-0.02, 0.0, 0.0)
    assert args.color == Color(0, 1, 0)


@pytest.mark.parametrize("argv", [["--wind", "1,2"], ["--color", "green"], ["--gravity", "a,b,c"]])
def test_parse_args_rejects_bad_values(argv):
    with pytest.raises(SystemExit):
        parse_args(argv)


def test_build_config_env_then_flags(monkeypatch):
    monkeypatch.setenv("RAYTRACER_WIDTH", "300")
    monkeypatch.setenv("RAYTRACER_OUTPUT", "/tmp/env.ppm")
    config = build_config(parse_args(["--width", "120", "--speed", "5"]))
    assert config.width == 120
    assert config.speed == 5.0
    assert config.output == "/tmp/env.ppm"
