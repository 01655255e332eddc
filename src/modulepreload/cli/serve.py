from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console

from modulepreload.config import ServerConfig

console = Console()


def serve(
    root: Annotated[
        Path | None, typer.Option(help="Static root directory (default: $MODULEPRELOAD_STATIC_ROOT or ./packages).")
    ] = None,
    host: Annotated[str | None, typer.Option(help="Interface to bind.")] = None,
    port: Annotated[int | None, typer.Option(help="Port to listen on.")] = None,
) -> None:
    """Start the static module server."""
    import uvicorn

    from modulepreload.api.app import create_app

    try:
        config = ServerConfig.from_env(static_root=root, host=host, port=port)
    except ValidationError as exc:
        console.print(f"[red]Invalid configuration:[/red] {exc}")
        raise typer.Exit(code=2) from None

    app = create_app(config)
    console.print(f"[green]Serving {config.static_root} on http://{config.host}:{config.port}[/green]")
    uvicorn.run(app, host=config.host, port=config.port, log_config=None)
