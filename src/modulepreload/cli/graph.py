import asyncio
from pathlib import Path
from typing import Annotated
from urllib.parse import quote

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from modulepreload.config import ServerConfig
from modulepreload.core.graph import ResolutionFailure, resolve_graph
from modulepreload.core.preload import LINK_HEADER, build_link_header, preload_paths
from modulepreload.core.specifiers import relative_path
from modulepreload.loader.filesystem import FileSystemModuleLoader

console = Console()


def graph(
    entry: Annotated[Path, typer.Argument(help="Script to resolve, e.g. packages/app/main.js.")],
    root: Annotated[
        Path | None, typer.Option(help="Static root directory (default: $MODULEPRELOAD_STATIC_ROOT or ./packages).")
    ] = None,
    origin: Annotated[str, typer.Option(help="Origin used for the preload URLs.")] = "http://localhost:8000",
) -> None:
    """Resolve a script's import graph and print the link header it would be served with."""
    try:
        config = ServerConfig.from_env(static_root=root)
    except ValidationError as exc:
        console.print(f"[red]Invalid configuration:[/red] {exc}")
        raise typer.Exit(code=2) from None

    try:
        rel = entry.expanduser().resolve().relative_to(config.static_root)
    except ValueError:
        console.print(f"[red]{entry} is not inside the static root {config.static_root}[/red]", soft_wrap=True)
        raise typer.Exit(code=2) from None

    base_uri = config.base_uri
    entry_uri = f"{base_uri}/{quote(rel.as_posix())}"
    resolution = asyncio.run(resolve_graph(entry_uri, base_uri, FileSystemModuleLoader()))
    if isinstance(resolution, ResolutionFailure):
        console.print(f"[red]Resolution failed[/red] at {resolution.specifier}: {resolution.reason}", soft_wrap=True)
        raise typer.Exit(code=1)

    request_path = relative_path(entry_uri, base_uri)
    by_path = {relative_path(m.specifier, base_uri): m for m in resolution.graph.modules}

    table = Table(show_lines=False)
    table.add_column("module")
    table.add_column("imports", justify="right")
    for path in preload_paths(resolution.graph, base_uri, request_path):
        table.add_row(path, str(len(by_path[path].dependencies)))
    console.print(table)
    console.print(f"({len(by_path) - 1} dependencies)")

    value = build_link_header(resolution.graph, base_uri, request_path, origin.rstrip("/"))
    if value is None:
        console.print(f"[yellow]No {LINK_HEADER} header: {request_path} has no dependencies.[/yellow]")
    else:
        console.print(f"{LINK_HEADER}: {value}", soft_wrap=True, highlight=False, markup=False)
