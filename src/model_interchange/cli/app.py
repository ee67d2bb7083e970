from typing import Annotated

import typer

from model_interchange.cli.convert import convert
from model_interchange.cli.elements import elements
from model_interchange.cli.serve import serve_app
from model_interchange.config import get_settings
from model_interchange.logging_setup import configure_logging

app = typer.Typer(
    name="model-interchange",
    help="Model Interchange CLI: convert and serve JMI element data.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    configure_logging("DEBUG" if verbose else get_settings().log_level)


app.command("convert")(convert)
app.command("elements")(elements)
app.add_typer(serve_app, name="serve")


def main() -> None:
    app()
