"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import LintConfig, load_config
from ..reporter import Reporter

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def make_reporter() -> Reporter:
    return Reporter(console=console, err_console=err_console)


def resolve_config(
    root: Path,
    config: Optional[Path] = None,
    verbose: bool = False,
) -> LintConfig:
    """Build settings from CLI options."""
    overrides = {}
    if verbose:
        overrides["verbose"] = True
    return load_config(root=root, config_file=config, **overrides)
