# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.padding import Padding

from taskprism.view.state import get_show_header


def header(console: Console, report_name: str, sub_header: Optional[str] = None) -> None:
    """Print the application header for a report.

    Args:
        console: Console to print to
        report_name: The name of the report
        sub_header: Optional detail such as the window being shown
    """
    if not get_show_header():
        return

    console.print(Padding("[dark_orange]taskprism[/dark_orange]", (1, 0, 0, 1)))
    console.print(Padding(f"[sandy_brown]{report_name}[/sandy_brown]", (0, 1)))
    if sub_header is not None:
        console.print(Padding(f"[plum1]{sub_header}[/plum1]", (0, 1)))
