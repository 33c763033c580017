# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from lifegrid.repository.configuration import CONFIGURATION_REPO
from lifegrid.terminal.custom_typer import AliasedTyperGroup
from lifegrid.terminal.session import committed_session, report_errors
from lifegrid.terminal.validate import validate_viewport_size
from lifegrid.view.view.views.summary import summary_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("summary, s")
def summary(
    width: Annotated[
        Optional[int],
        typer.Option(
            "--width",
            "-w",
            callback=validate_viewport_size,
            help="Viewport width (defaults to the configured width)",
        ),
    ] = None,
    height: Annotated[
        Optional[int],
        typer.Option(
            "--height",
            "-H",
            callback=validate_viewport_size,
            help="Viewport height (defaults to the configured height)",
        ),
    ] = None,
) -> None:
    """Show lifespan statistics and the grid for a viewport."""
    config = CONFIGURATION_REPO.get_config()
    if width is None:
        width = config["viewport_width"]
    if height is None:
        height = config["viewport_height"]

    with report_errors():
        session = committed_session()
        layout = session.layout(width, height)
        summary_view(
            session.timeline,
            session.elapsed_date(),
            layout=layout,
            viewport=(width, height),
        )
