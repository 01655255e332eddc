import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from modulepreload.cli.graph import graph
from modulepreload.cli.serve import serve

app = typer.Typer(
    name="modulepreload",
    help="Serve ES modules with their import graph as modulepreload link headers.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


@app.callback()
def _main(
    log_level: Annotated[str, typer.Option("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...).")] = "INFO",
) -> None:
    _configure_logging(log_level)


app.command("serve")(serve)
app.command("graph")(graph)


def main() -> None:
    app()
