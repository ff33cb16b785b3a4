from __future__ import annotations

import typer

from arraystore.cli.identifier import check, uuid
from arraystore.cli.shell import shell
from arraystore.config import STORE_OPTIONS
from arraystore.logging import configure_logger
from arraystore.version import __version__

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="arraystore: in-memory key-value store utilities.",
)


@app.callback()
def main(
    verbose: int = typer.Option(
        0,
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity (-v info, -vv debug).",
    ),
) -> None:
    STORE_OPTIONS.verbose = verbose
    if verbose:
        configure_logger(force=True)


@app.command()
def version() -> None:
    """Print version and exit."""
    typer.echo(__version__)


app.command()(uuid)
app.command()(check)
app.command()(shell)
