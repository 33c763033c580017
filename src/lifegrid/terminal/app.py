# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from lifegrid.log import configure_logging
from lifegrid.terminal import configuration, view
from lifegrid.terminal.custom_typer import OrderedAliasedTyperGroup
from lifegrid.terminal.render import render
from lifegrid.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="lifegrid - Your lifespan, one cell per day",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")
app.add_typer(view.app, name="view, v")
app.command(name="render, r")(render)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            help="Log debug details to stderr",
        ),
    ] = False,
) -> None:
    """
    lifegrid - Your lifespan, one cell per day

    Global options that apply to all commands.
    """
    configure_logging(verbose)
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
