# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from taskprism import configuration
from taskprism.repository.configuration import CONFIGURATION_REPO
from taskprism.service.status import resolve_layouts
from taskprism.terminal.custom_typer import AliasedTyperGroup
from taskprism.terminal.validate import (
    validate_log_level,
    validate_threshold,
    validate_timezone,
)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("timezone", config["timezone"])
    table.add_row(
        "milestone_threshold_percent", str(config["milestone_threshold_percent"])
    )
    table.add_row("default_column_layout", config["default_column_layout"])
    table.add_row("log_level", config["log_level"])
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)

    try:
        layouts = resolve_layouts(config.get("column_layouts"))
    except ValueError as e:
        console.print(f"\n[red]Invalid column layout configuration: {e}[/red]")
        return

    console.print("\n[bold]Column Layouts[/bold]")
    layouts_table = Table()
    layouts_table.add_column("Name", style="cyan")
    layouts_table.add_column("Columns", style="magenta")
    layouts_table.add_column("Folded")
    for name, layout in layouts.items():
        layouts_table.add_row(
            name,
            ", ".join(layout["columns"]),
            ", ".join(f"{status} → {column}" for status, column in layout["fold"].items()),
        )
    console.print(layouts_table)


@app.command("set, s")
def set(
    timezone: Annotated[
        Optional[str],
        typer.Option(
            "--timezone",
            "-tz",
            callback=validate_timezone,
            help="Timezone used for date-only values and windows, e.g. Europe/Istanbul",
        ),
    ] = None,
    milestone_threshold_percent: Annotated[
        Optional[float],
        typer.Option(
            "--milestone-threshold",
            "-mt",
            callback=validate_threshold,
            help="Bars narrower than this share of the window are milestones",
        ),
    ] = None,
    default_column_layout: Annotated[
        Optional[str],
        typer.Option("--default-layout", "-dl", help="Column layout used by default"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            "-ll",
            callback=validate_log_level,
            help="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        ),
    ] = None,
) -> None:
    """Update configuration settings."""
    if default_column_layout is not None:
        layouts = resolve_layouts(CONFIGURATION_REPO.get_config().get("column_layouts"))
        if default_column_layout not in layouts:
            raise typer.BadParameter(
                f"Unknown layout '{default_column_layout}', choose from {', '.join(layouts)}"
            )

    CONFIGURATION_REPO.update_config(
        timezone=timezone,
        milestone_threshold_percent=milestone_threshold_percent,
        default_column_layout=default_column_layout,
        log_level=log_level,
    )
    CONFIGURATION_REPO.flush()

    view()
