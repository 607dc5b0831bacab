"""CLI entry point."""

import typer

app = typer.Typer(
    name="ts-npm-lint",
    help="ts-npm-lint - checks TypeScript packages for npm consumption problems",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import the command module to register it
from .lint import main as _main  # noqa: F401, E402
