"""Tests for the canvas-charts CLI."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from canvas_charts import __version__
from canvas_charts.cli.main import app

runner = CliRunner()

CHART_YAML = """
charts:
  departments_pie:
    kind: pie
    title: Complaints by Department
    data:
      - {label: Water, value: 30}
      - {label: Roads, value: 10}
  departments_bar:
    kind: bar
    data:
      - {label: A, value: 5}
      - {label: B, value: 10}
"""


@pytest.fixture
def chart_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    # The CLI writes its log file under ./logs
    monkeypatch.chdir(tmp_path)
    for name in ("CHARTS_PIXEL_RATIO", "CHARTS_WIDTH", "CHARTS_HEIGHT", "CHARTS_OUTPUT_DIR"):
        monkeypatch.delenv(name, raising=False)
    path = tmp_path / "charts.yaml"
    path.write_text(CHART_YAML, encoding="utf-8")
    return path


def test_version(chart_file: Path) -> None:
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_render_writes_one_png_per_chart(chart_file: Path, tmp_path: Path) -> None:
    out_dir = tmp_path / "out"
    result = runner.invoke(
        app, ["render", str(chart_file), "--output-dir", str(out_dir), "--pixel-ratio", "2"]
    )

    assert result.exit_code == 0, result.stdout
    assert (out_dir / "departments_pie.png").read_bytes().startswith(b"\x89PNG")
    assert (out_dir / "departments_bar.png").exists()
    assert "Chart written to" in result.stdout


def test_render_single_chart(chart_file: Path, tmp_path: Path) -> None:
    out_dir = tmp_path / "out"
    result = runner.invoke(
        app,
        ["render", str(chart_file), "--chart", "departments_bar", "--output-dir", str(out_dir)],
    )
    assert result.exit_code == 0, result.stdout
    assert (out_dir / "departments_bar.png").exists()
    assert not (out_dir / "departments_pie.png").exists()


def test_render_uses_output_dir_setting(
    chart_file: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("CHARTS_OUTPUT_DIR", str(tmp_path / "from_env"))
    result = runner.invoke(app, ["render", str(chart_file), "--chart", "departments_pie"])
    assert result.exit_code == 0, result.stdout
    assert (tmp_path / "from_env" / "departments_pie.png").exists()


def test_render_unknown_chart(chart_file: Path) -> None:
    result = runner.invoke(app, ["render", str(chart_file), "--chart", "nope"])
    assert result.exit_code == 1
    assert "not found" in result.stdout


def test_render_missing_file(chart_file: Path, tmp_path: Path) -> None:
    result = runner.invoke(app, ["render", str(tmp_path / "missing.yaml")])
    assert result.exit_code == 1
    assert "not found" in result.stdout


def test_inspect_prints_geometry(chart_file: Path) -> None:
    result = runner.invoke(app, ["inspect", str(chart_file)])

    assert result.exit_code == 0, result.stdout
    assert "departments_pie (pie)" in result.stdout
    assert "Water: 75.0% (270.0°)" in result.stdout
    assert "Roads: 25.0% (90.0°)" in result.stdout
    assert "Ticks: 0, 2, 4, 6, 8, 10" in result.stdout


def test_inspect_reports_zero_total(chart_file: Path, tmp_path: Path) -> None:
    path = tmp_path / "zero.yaml"
    path.write_text(
        "charts:\n  z:\n    kind: pie\n    data:\n      - {label: X, value: 0}\n"
        "  e:\n    kind: bar\n    data: []\n",
        encoding="utf-8",
    )
    result = runner.invoke(app, ["inspect", str(path)])
    assert result.exit_code == 0, result.stdout
    assert "No data (total is zero)" in result.stdout
    assert "No data (empty dataset)" in result.stdout
