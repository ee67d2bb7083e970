import json
from enum import StrEnum
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console

from model_interchange.config import get_settings
from model_interchange.core.errors import JmiError
from model_interchange.core.jmi import JmiType, convert_jmi

err_console = Console(stderr=True)


class Shape(StrEnum):
    flat = "flat"
    map = "map"
    tree = "tree"

    @property
    def jmi_type(self) -> JmiType:
        return JmiType[self.name.upper()]


def print_json(data: Any, minified: bool) -> None:
    typer.echo(json.dumps(data) if minified else json.dumps(data, indent=2))


def convert(
    file: Annotated[Path, typer.Argument(help="JSON file holding a list of records.", exists=True, dir_okay=False)],
    to: Annotated[Shape, typer.Option("--to", help="Target shape.")] = Shape.tree,
    from_: Annotated[Shape, typer.Option("--from", help="Source shape.")] = Shape.flat,
    key_field: Annotated[str | None, typer.Option(help="Record field used as the map key.")] = None,
    unique_field: Annotated[str | None, typer.Option(help="Field read from embedded parent objects.")] = None,
    minified: Annotated[bool, typer.Option(help="Print compact JSON.")] = False,
) -> None:
    """Convert a JSON file between JMI shapes."""
    settings = get_settings()
    try:
        data = json.loads(file.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        err_console.print(f"[red]Cannot read JSON from {file}:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    try:
        result = convert_jmi(
            from_.jmi_type,
            to.jmi_type,
            data,
            key_field=key_field or settings.key_field,
            unique_field=unique_field or settings.unique_field,
        )
    except JmiError as exc:
        err_console.print(f"[red]{exc.message}[/red]")
        raise typer.Exit(code=1) from exc

    print_json(result, minified)
