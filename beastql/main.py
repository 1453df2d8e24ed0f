from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from beastql.api.schema import print_schema_sdl
from beastql.config import get_settings
from beastql.domain.models import Beast
from beastql.store.memory import InMemoryBeastStore
from beastql.utils.logging import configure_logging

app = typer.Typer(help="BeastQL GraphQL API CLI.")


def _render_beasts(beasts: list[Beast], console: Console) -> None:
    """Render beasts as a rich table in store order."""
    if not beasts:
        console.print("[yellow]No beasts loaded.[/yellow]")
        return

    table = Table(title="Beasts", box=box.ROUNDED, caption=f"{len(beasts)} record(s)")
    table.add_column("ID", justify="right", style="magenta", no_wrap=True)
    table.add_column("Name", style="cyan")
    table.add_column("Other Names", style="green")
    table.add_column("Description")
    table.add_column("Image URL", style="dim")

    for beast in beasts:
        table.add_row(
            str(beast.id),
            beast.name,
            ", ".join(beast.other_names),
            beast.description,
            beast.image_url,
        )
    console.print(table)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | seed={settings.beast_seed_path} "
        f"id_start={settings.beast_id_start} | "
        f"http://{settings.host}:{settings.port}{settings.graphql_path} "
        f"graphiql={'on' if settings.graphiql_enabled else 'off'}"
    )


@app.command()
def beasts(
    seed: Optional[Path] = typer.Option(
        None,
        "--seed",
        "-s",
        help="Seed JSON document to load (default from settings).",
    ),
) -> None:
    """
    Load the seed document and print the resulting store.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    store = InMemoryBeastStore(id_start=settings.beast_id_start)
    store.seed(seed or settings.beast_seed_path)
    _render_beasts(store.all(), Console())


@app.command()
def schema() -> None:
    """
    Print the GraphQL schema as SDL.
    """
    typer.echo(print_schema_sdl())


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address (default from settings)."),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port (default from settings)."),
) -> None:
    """
    Serve the GraphQL endpoint over HTTP.
    """
    import uvicorn

    from beastql.api.app import create_app

    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    bind_host = host or settings.host
    bind_port = port or settings.port
    typer.echo(f"Serving BeastQL at http://{bind_host}:{bind_port}{settings.graphql_path}")
    uvicorn.run(
        create_app(settings=settings),
        host=bind_host,
        port=bind_port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
