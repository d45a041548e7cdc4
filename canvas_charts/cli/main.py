from __future__ import annotations

import math
from pathlib import Path

import typer

from .. import __version__
from ..core.chart_files import ChartDefinition, load_chart_file
from ..core.config import get_settings
from ..core.enums import ChartKind
from ..core.errors import ChartFileError, SurfaceError
from ..core.logging_config import get_logger, setup_logging
from ..core.models import BoundingBox
from ..surfaces.matplotlib_surface import MatplotlibSurface
from ..visuals.bar import BarChart
from ..visuals.factory import CHART_TYPES
from ..visuals.layout import compute_bars, compute_slices, format_value, truncate_label
from ..visuals.pie import PieChart
from . import output as cli_output

app = typer.Typer(help="Canvas charts CLI")

logger = get_logger(__name__)


@app.callback()
def callback(
    json_logs: bool = typer.Option(False, "--json-logs", help="Output logs in JSON format"),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)"),
) -> None:
    """Configure global CLI options."""
    setup_logging(json_output=json_logs, log_level=log_level)
    logger.debug("CLI initialized", extra={"json_logs": json_logs, "log_level": log_level})


@app.command()
def version() -> None:
    """Print version."""
    typer.echo(__version__)


def _select_charts(chart_file: Path, chart: str | None) -> list[ChartDefinition]:
    try:
        definitions = load_chart_file(chart_file)
    except ChartFileError as e:
        cli_output.error(str(e), err=False)
        raise typer.Exit(code=1) from e

    if chart is not None:
        definitions = [d for d in definitions if d.name == chart]
        if not definitions:
            cli_output.error(f"Chart '{chart}' not found in {chart_file}", err=False)
            raise typer.Exit(code=1)
    if not definitions:
        cli_output.warning(f"No charts defined in {chart_file}")
    return definitions


@app.command()
def render(
    chart_file: Path = typer.Argument(..., help="YAML or JSON file with a 'charts' mapping"),  # noqa: B008
    chart: str | None = typer.Option(None, "--chart", help="Render only this chart"),  # noqa: B008
    output_dir: Path | None = typer.Option(  # noqa: B008
        None, "--output-dir", help="Directory for PNG files (default: CHARTS_OUTPUT_DIR or ./charts)"
    ),
    width: float | None = typer.Option(None, min=1, help="Logical width in pixels"),  # noqa: B008
    height: float | None = typer.Option(None, min=1, help="Logical height in pixels"),  # noqa: B008
    pixel_ratio: float | None = typer.Option(  # noqa: B008
        None, "--pixel-ratio", min=0.1, help="Device pixel ratio (physical pixels per logical pixel)"
    ),
) -> None:
    """Render charts from a chart file to PNG images.

    Each chart is written to ``<output-dir>/<chart name>.png``. Options fall back to
    the CHARTS_* settings (environment or .env) when omitted.
    """
    settings = get_settings()
    out_dir = output_dir or settings.output_dir
    width = width or settings.width
    height = height or settings.height
    ratio = pixel_ratio or settings.pixel_ratio

    definitions = _select_charts(chart_file, chart)
    if definitions:
        cli_output.info(f"Rendering {len(definitions)} chart(s) at {width:g}x{height:g} (ratio {ratio:g})")

    written = 0
    for definition in definitions:
        surface = MatplotlibSurface(width=width, height=height, pixel_ratio=ratio)
        chart_type = CHART_TYPES[definition.kind]
        if not chart_type(surface, definition.dataset, definition.config).render():
            cli_output.warning(f"Chart '{definition.name}' could not be drawn")
            continue
        try:
            path = surface.save(out_dir / f"{definition.name}.png")
        except SurfaceError as e:
            cli_output.error(str(e), err=False)
            raise typer.Exit(code=1) from e
        written += 1
        cli_output.success(f"Chart written to {path}")

    logger.info("Render complete", extra={"chart_file": str(chart_file), "written": written})


@app.command()
def inspect(
    chart_file: Path = typer.Argument(..., help="YAML or JSON file with a 'charts' mapping"),  # noqa: B008
    chart: str | None = typer.Option(None, "--chart", help="Inspect only this chart"),  # noqa: B008
    width: float | None = typer.Option(None, min=1, help="Logical width in pixels"),  # noqa: B008
    height: float | None = typer.Option(None, min=1, help="Logical height in pixels"),  # noqa: B008
) -> None:
    """Print the computed slice or bar geometry of each chart."""
    settings = get_settings()
    box = BoundingBox(width or settings.width, height or settings.height)

    for definition in _select_charts(chart_file, chart):
        cli_output.chart_heading(definition.name, definition.kind.value)
        if definition.kind == ChartKind.PIE:
            _print_pie(definition, box)
        else:
            _print_bar(definition, box)


def _print_pie(definition: ChartDefinition, box: BoundingBox) -> None:
    padding = definition.config.padding
    if padding is None:
        padding = PieChart.DEFAULT_PADDING
    slices = compute_slices(definition.dataset, box, padding)
    if not slices:
        cli_output.no_data("total is zero")
        return
    for geometry in slices:
        point = definition.dataset[geometry.index]
        degrees = math.degrees(geometry.sweep)
        cli_output.detail(f"{point.label}: {geometry.percentage_text} ({degrees:.1f}°)")


def _print_bar(definition: ChartDefinition, box: BoundingBox) -> None:
    padding = definition.config.padding
    if padding is None:
        padding = BarChart.DEFAULT_PADDING
    layout = compute_bars(definition.dataset, box, padding)
    if not layout.bars:
        cli_output.no_data("empty dataset")
        return
    for bar in layout.bars:
        point = definition.dataset[bar.index]
        cli_output.detail(
            f"{truncate_label(point.label)}: {format_value(point.value)} (height {bar.height:.1f}px)"
        )
    cli_output.detail("Ticks: " + ", ".join(str(tick.value) for tick in layout.ticks))


if __name__ == "__main__":
    app()
