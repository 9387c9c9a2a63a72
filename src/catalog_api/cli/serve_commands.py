"""Server CLI command."""

import typer
from rich.console import Console

from src.catalog_api.runtime.context import get_config

console = Console()


def serve(
    host: str | None = typer.Option(None, help="Bind address (default: config app.host)"),
    port: int | None = typer.Option(None, help="Bind port (default: config app.port)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    config = get_config()
    bind_host = host or config.app.host
    bind_port = port or config.app.port
    console.print(
        f"[blue]Serving catalog API on[/blue] http://{bind_host}:{bind_port} "
        f"([cyan]{config.app.environment}[/cyan])"
    )
    # Access logs are emitted by the request middleware
    uvicorn.run(
        "src.catalog_api.api.http.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        access_log=False,
    )
