"""Tests for CLI output formatting utilities."""

from __future__ import annotations

import pytest

from canvas_charts.cli import output


def test_success_has_checkmark(capsys: pytest.CaptureFixture[str]) -> None:
    output.success("Chart written")
    captured = capsys.readouterr()
    assert "✅ Chart written" in captured.out


def test_error_writes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    """Test error message writes to stderr by default."""
    output.error("Chart file not found")
    captured = capsys.readouterr()
    assert "❌ Chart file not found" in captured.err
    assert captured.out == ""


def test_error_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    output.error("Bad chart", err=False)
    captured = capsys.readouterr()
    assert "❌ Bad chart" in captured.out


def test_warning_and_info(capsys: pytest.CaptureFixture[str]) -> None:
    output.warning("No charts defined")
    output.info("Rendering 2 charts")
    captured = capsys.readouterr()
    assert "⚠️  No charts defined" in captured.out
    assert "ℹ️  Rendering 2 charts" in captured.out


def test_chart_report_lines(capsys: pytest.CaptureFixture[str]) -> None:
    output.chart_heading("departments", "pie")
    output.detail("Water: 75.0% (270.0°)")
    output.no_data("total is zero")
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "📊 departments (pie)",
        "  Water: 75.0% (270.0°)",
        "  No data (total is zero)",
    ]
