"""Database management CLI commands."""

from pathlib import Path

import typer
import yaml
from rich.console import Console
from rich.table import Table

from src.catalog_api.runtime.context import get_config

console = Console()

db_app = typer.Typer(help="Database management commands", no_args_is_help=True)


@db_app.command("init")
def init() -> None:
    """Create every table of the catalog schema."""
    from src.catalog_api.runtime.init_db import init_db

    console.print(f"[blue]Creating tables in[/blue] {get_config().database.url}")
    init_db()
    console.print("[green]Database initialized[/green]")


@db_app.command("seed")
def seed(
    file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="YAML file with 'categories' and 'products' lists",
    ),
) -> None:
    """Load categories and products from a seed file."""
    from src.catalog_api.runtime.init_db import seed_db

    try:
        counts = seed_db(file)
    except (ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Invalid seed file:[/red] {e}")
        raise typer.Exit(code=1) from e

    table = Table(title=f"Seeded from {file}")
    table.add_column("Records", style="cyan")
    table.add_column("Count", justify="right", style="green")
    for name, count in counts.items():
        table.add_row(name, str(count))
    console.print(table)
