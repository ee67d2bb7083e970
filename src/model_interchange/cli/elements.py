import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from model_interchange.cli.convert import print_json
from model_interchange.config import get_settings
from model_interchange.core.elements import JmiFormat, find_elements
from model_interchange.core.errors import JmiError
from model_interchange.db.memory import InMemoryElementStore
from model_interchange.db.seed import load_seed_file

err_console = Console(stderr=True)


def elements(
    org: Annotated[str, typer.Argument(help="Organization id.")],
    project: Annotated[str, typer.Argument(help="Project id.")],
    branch: Annotated[str, typer.Argument(help="Branch id.")],
    format: Annotated[JmiFormat, typer.Option("--format", help="Output format.")] = JmiFormat.JMI1,
    seed: Annotated[Path | None, typer.Option(help="Seed file to load; defaults to MODEL_INTERCHANGE_SEED_FILE.")] = None,
    ids: Annotated[list[str] | None, typer.Option("--id", help="Only these element ids (repeatable).")] = None,
    minified: Annotated[bool, typer.Option(help="Print compact JSON.")] = False,
) -> None:
    """Print the elements of a branch from a seed file."""
    seed_file = seed or get_settings().seed_file
    if seed_file is None:
        err_console.print("[red]No seed file given.[/red]")
        raise typer.Exit(code=1)

    store = InMemoryElementStore()

    async def _run() -> None:
        try:
            await load_seed_file(store, seed_file)
            data = await find_elements(store, org, project, branch, ids or None, format)
            print_json(data, minified)
        finally:
            await store.dispose()

    try:
        asyncio.run(_run())
    except JmiError as exc:
        err_console.print(f"[red]{exc.message}[/red]")
        raise typer.Exit(code=1) from exc
