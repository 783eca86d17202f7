# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from taskprism.logger import configure_logging
from taskprism.terminal import configuration, view
from taskprism.terminal.custom_typer import AliasedTyperGroup
from taskprism.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="taskprism - Task timeline and status projections",
    no_args_is_help=True,
)
app.command(name="window, w")(view.window)
app.command(name="gantt, g")(view.gantt)
app.command(name="kanban, k")(view.kanban)
app.command(name="planner, p")(view.planner)
app.command(name="overdue, o")(view.overdue)
app.command(name="summary, s")(view.summary)
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-V", help="Log debug diagnostics to stderr"),
    ] = False,
) -> None:
    """
    taskprism - Task timeline and status projections

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if verbose:
        configure_logging("DEBUG")


def run() -> None:
    app()
