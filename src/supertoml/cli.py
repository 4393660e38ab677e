"""Command-line interface.

Resolves one table of a document and prints it in the requested format:

    supertoml app.toml prod --output json
"""

import logging
import sys

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .exceptions import SuperTomlError
from .formatters import FORMATTERS, get_formatter
from .resolver import Resolver
from .settings import Settings

console = Console(stderr=True, soft_wrap=True)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _fail(message: str) -> None:
    console.print(f"[red]Error:[/red] {escape(message)}")
    sys.exit(1)


@click.command()
@click.version_option(version=__version__, prog_name="supertoml")
@click.argument("file_path", type=click.Path(dir_okay=False))
@click.argument("table_name")
@click.option(
    "--output",
    "-o",
    "output_format",
    type=click.Choice(sorted(FORMATTERS)),
    default=None,
    help="Output format (default: toml, or $SUPERTOML_OUTPUT)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log resolution details to stderr")
def cli(file_path: str, table_name: str, output_format: str | None, verbose: bool):
    """Resolve TABLE_NAME from FILE_PATH and print the resulting values."""
    try:
        settings = Settings.from_env()
    except SuperTomlError as e:
        _fail(str(e))
        return

    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    output_format = output_format or settings.output_format
    try:
        formatter = get_formatter(output_format)
        values = Resolver(settings=settings).resolve(file_path, table_name, output_format=output_format)
        output = formatter(values)
    except SuperTomlError as e:
        _fail(str(e))
        return

    click.echo(output.rstrip("\n"))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
