# SPDX-License-Identifier: MIT

from contextlib import contextmanager
from typing import Iterator

import typer
from rich.console import Console

from lifegrid.color import ERROR_COLOR
from lifegrid.error import LifegridError, RangeOverflow
from lifegrid.repository.configuration import CONFIGURATION_REPO
from lifegrid.service.session import LifespanSession

error_console = Console(stderr=True)


@contextmanager
def report_errors() -> Iterator[None]:
    """Print lifespan errors for the user and exit with status 1."""
    try:
        yield
    except RangeOverflow as e:
        error_console.print(
            f"[{ERROR_COLOR}]{e} ({len(e.days)} days generated)[/{ERROR_COLOR}]"
        )
        raise typer.Exit(code=1)
    except LifegridError as e:
        error_console.print(f"[{ERROR_COLOR}]{e}[/{ERROR_COLOR}]")
        raise typer.Exit(code=1)


def committed_session() -> LifespanSession:
    """Commit the stored configuration into a new session."""
    session = LifespanSession()
    session.commit(CONFIGURATION_REPO.get_lifespan_config())
    return session
