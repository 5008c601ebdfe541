"""Typer CLI for timeseries-chart.

Commands:
  render      Build renderer-ready panel data from a panel file
  validate    Strictly validate a panel file's options
  axis-min    Evaluate the dynamic y-axis minimum for an observed value
  round-down  Round a value down to one significant digit
"""

from __future__ import annotations

import json
import logging
from pathlib import Path  # noqa: TC003 — Typer evaluates type hints at runtime
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from timeseries_chart.axis import dynamic_min_rule, round_down
from timeseries_chart.models import VisualOptions
from timeseries_chart.panel import build_panel_data
from timeseries_chart.panel_file import PanelFile, PanelSpecError, load_panel_file
from timeseries_chart.settings import ChartSettings
from timeseries_chart.validation import OptionsValidator

app = typer.Typer(
    name="timeseries-chart",
    help="Series and axis parameterization for time-series chart panels",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def _load(panel_file: Path) -> PanelFile:
    try:
        return load_panel_file(panel_file)
    except PanelSpecError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from e


@app.callback()
def main() -> None:
    settings = ChartSettings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def render(
    panel_file: Annotated[Path, typer.Argument(help="Panel file (YAML or JSON)")],
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write JSON here instead of stdout")
    ] = None,
    summary: Annotated[
        bool, typer.Option("--summary", help="Print a table of series instead of JSON")
    ] = False,
) -> None:
    """Build series descriptors, legend, x axis, and y axis for a panel file."""
    panel = _load(panel_file)
    defaults = ChartSettings().to_defaults()
    data = build_panel_data(
        panel.queries,
        panel.visual_options(),
        panel.y_axis,
        panel.thresholds,
        defaults=defaults,
    )

    if data.is_empty:
        err_console.print("[yellow]No query has data yet; nothing to render.[/yellow]")

    if summary:
        table = Table(title=f"Panel: {panel_file.name}")
        table.add_column("Series", style="cyan")
        table.add_column("Points", justify="right")
        table.add_column("Color")
        table.add_column("Symbols")
        table.add_column("Stack")
        for series in data.time_series:
            table.add_row(
                series.name,
                str(len(series.data)),
                series.color or "-",
                "yes" if series.show_symbol else "no",
                series.stack or "-",
            )
        console.print(table)
        return

    payload = data.model_dump_json(by_alias=True, indent=2)
    if output:
        output.write_text(payload + "\n")
        console.print(f"[green]Wrote panel data to {output}[/green]")
    else:
        typer.echo(payload)


@app.command()
def validate(
    panel_file: Annotated[Path, typer.Argument(help="Panel file (YAML or JSON)")],
    format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: text or json")
    ] = "text",
) -> None:
    """Strictly validate panel options. Exits 1 if any rule reports an error."""
    panel = _load(panel_file)
    try:
        visual = VisualOptions.model_validate(panel.visual)
    except ValueError as e:
        console.print(f"[red]Malformed visual options:[/red] {e}")
        raise typer.Exit(1) from e

    results = OptionsValidator().evaluate(
        visual=visual, y_axis=panel.y_axis, thresholds=panel.thresholds
    )

    if format == "json":
        typer.echo(json.dumps([r.model_dump(mode="json") for r in results], indent=2))
    elif not results:
        console.print("[green]Options are valid.[/green]")
    else:
        for r in results:
            style = "red" if r.severity == "error" else "yellow"
            console.print(f"[{style}]{r.severity.upper()}[/{style}] {r.rule_name}: {r.message}")

    if any(r.severity == "error" for r in results):
        raise typer.Exit(1)


@app.command("axis-min")
def axis_min(
    observed_min: Annotated[float, typer.Argument(help="Observed minimum data value")],
) -> None:
    """Show the y-axis minimum the dynamic rule picks for an observed minimum."""
    rule = dynamic_min_rule(ChartSettings().to_defaults())
    typer.echo(f"{rule.evaluate(observed_min):g}")


@app.command("round-down")
def round_down_cmd(
    value: Annotated[float, typer.Argument(help="Value to round")],
) -> None:
    """Round a value down to one significant digit."""
    typer.echo(f"{round_down(value):g}")


if __name__ == "__main__":
    app()
