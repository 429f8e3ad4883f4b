import asyncio

import typer
import uvicorn

from backend.app.config import settings

app = typer.Typer(help="Feature Board - feature requests and voting")


@app.command()
def start(
    host: str = typer.Option(settings.host, help="Interface to bind"),
    port: int = typer.Option(settings.port, help="Port to listen on"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Start the feature board server."""
    typer.echo(f"Starting Feature Board on {host}:{port}...")
    uvicorn.run(
        "backend.app.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command("init-db")
def init_db() -> None:
    """Create the database schema without starting the server."""
    from backend.app.db import init_db as _init_db

    asyncio.run(_init_db())
    typer.echo(f"Database ready at {settings.database_url}")


if __name__ == "__main__":
    app()
