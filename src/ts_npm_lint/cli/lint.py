"""The lint command: analyze by default, rewrite declarations with --fix-typings."""

from pathlib import Path
from typing import Optional

import typer
from typer.core import TyperCommand

from ..analyzer import analyze
from ..exceptions import LintError
from ..fixer import fix_typings
from ..logging_config import setup_logging
from . import app
from ._common import console, make_reporter, resolve_config


FIX_FLAG = "--fix-typings"


class LintCommand(TyperCommand):
    """Keeps the raw argument list; fix mode depends on the final argument."""

    def parse_args(self, ctx, args):
        ctx.meta["raw_args"] = list(args)
        return super().parse_args(ctx, args)


@app.command(
    cls=LintCommand,
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def main(
    ctx: typer.Context,
    fix: bool = typer.Option(
        False,
        FIX_FLAG,
        help=(
            "Comment out '/// <reference path' directives in the generated .d.ts files "
            "(must be the final argument)"
        ),
    ),
    path: Optional[Path] = typer.Option(
        None,
        "-C",
        "--path",
        help="Package root to check (default: current directory)",
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log which files are read and rewritten",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Check that a TypeScript package is ready to be consumed through npm.

    Without options every check runs and prints hints; nothing is changed.
    With [bold]--fix-typings[/bold] as the final argument the declaration
    files in the compiler's outDir are rewritten so they no longer carry triple-slash references.

    [bold cyan]Examples:[/bold cyan]

      ts-npm-lint

      ts-npm-lint --fix-typings

      ts-npm-lint -C packages/core --verbose
    """
    from .. import __version__

    if version:
        console.print(f"[bold cyan]ts-npm-lint[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    target = path.resolve() if path else Path.cwd()
    reporter = make_reporter()

    try:
        lint_config = resolve_config(target, config=config, verbose=verbose)
        logger = setup_logging(
            verbose=lint_config.verbosity == "verbose",
            quiet=lint_config.verbosity == "quiet",
        )
        if ctx.args:
            logger.debug(f"Ignoring extra arguments: {' '.join(ctx.args)}")

        raw_args = ctx.meta.get("raw_args", [])
        if fix and raw_args and raw_args[-1] == FIX_FLAG:
            fix_typings(target, reporter=reporter, config=lint_config)
        else:
            if fix:
                logger.debug(f"{FIX_FLAG} is not the final argument, analyzing instead")
            analyze(target, reporter=reporter, config=lint_config)

    except LintError as e:
        reporter.fatal(str(e))
        raise typer.Exit(e.exit_code)

    except KeyboardInterrupt:
        reporter.fatal("Interrupted")
        raise typer.Exit(130)
