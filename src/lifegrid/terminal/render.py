# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from lifegrid.color import ERROR_COLOR
from lifegrid.repository.configuration import CONFIGURATION_REPO
from lifegrid.terminal.session import committed_session, error_console, report_errors
from lifegrid.terminal.validate import validate_viewport_size
from lifegrid.view.image import save_layout_png


def render(
    out: Annotated[
        Path,
        typer.Option("--out", "-o", help="PNG file to write"),
    ] = Path("lifegrid.png"),
    width: Annotated[
        Optional[int],
        typer.Option(
            "--width",
            "-w",
            callback=validate_viewport_size,
            help="Image width in pixels (defaults to the configured width)",
        ),
    ] = None,
    height: Annotated[
        Optional[int],
        typer.Option(
            "--height",
            "-H",
            callback=validate_viewport_size,
            help="Image height in pixels (defaults to the configured height)",
        ),
    ] = None,
) -> None:
    """Render the lifespan grid to a PNG image."""
    config = CONFIGURATION_REPO.get_config()
    if width is None:
        width = config["viewport_width"]
    if height is None:
        height = config["viewport_height"]

    with report_errors():
        session = committed_session()
        layout = session.layout(width, height)

    try:
        save_layout_png(
            layout, width, height, session.config["colors"]["background"], out
        )
    except OSError as e:
        error_console.print(
            f"[{ERROR_COLOR}]Could not write {out}: {e}[/{ERROR_COLOR}]"
        )
        raise typer.Exit(code=1)

    console = Console()
    console.print(
        f"[green]Rendered {len(layout['placements'])} days "
        f"({layout['grid']['columns']} x {layout['grid']['rows']} grid) to {out}[/green]"
    )
