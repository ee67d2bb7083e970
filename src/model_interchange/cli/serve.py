import os
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

serve_app = typer.Typer(help="Start servers.")
console = Console()


@serve_app.command("api")
def api(
    host: str = "127.0.0.1",
    port: int = 8000,
    seed: Annotated[
        Path | None,
        typer.Option(help="Seed file loaded on startup; overrides MODEL_INTERCHANGE_SEED_FILE.", dir_okay=False),
    ] = None,
) -> None:
    """Serve the element and conversion API with uvicorn."""
    import uvicorn

    from model_interchange.api.app import create_app

    if seed is not None:
        # The lifespan hook reads the seed file from the environment.
        os.environ["MODEL_INTERCHANGE_SEED_FILE"] = str(seed)

    console.print(f"[green]Serving model-interchange on {host}:{port}[/green]")
    uvicorn.run(create_app(), host=host, port=port)
