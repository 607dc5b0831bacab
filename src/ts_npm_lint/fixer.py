"""Typings fixer: comments out triple-slash references in generated declarations."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from .config import DEFAULT_CONFIG, LintConfig
from .exceptions import NoDeclarationFilesError
from .file_ops import display_path, find_declaration_files, load_json, read_text, write_text
from .logging_config import get_logger
from .models import BuildConfig
from .references import disable_references
from .reporter import Reporter

logger = get_logger(__name__)


@dataclass
class FixReport:
    """Files rewritten by a fixer run and the references removed from them."""

    out_dir: str = "."
    files: List[Path] = field(default_factory=list)
    removed: List[Tuple[Path, str]] = field(default_factory=list)


def resolve_out_dir(root: Path, config: LintConfig) -> str:
    """``compilerOptions.outDir`` from the build config, or the package root."""
    config_path = root / config.build_config_file
    if not config_path.exists():
        return "."
    return BuildConfig.from_json(load_json(config_path)).out_dir or "."


def fix_file(path: Path, display: str, reporter: Reporter) -> List[str]:
    """Rewrite one declaration file in place; returns the removed reference paths."""
    contents, removed = disable_references(read_text(path), reporter.tag)
    for reference in removed:
        reporter.info(f"Removed reference to '{reference}' in {display}")
    write_text(path, contents)
    return removed


def fix_typings(
    root: Optional[Path] = None,
    reporter: Optional[Reporter] = None,
    config: Optional[LintConfig] = None,
) -> FixReport:
    """Disable reference directives in every declaration file under outDir.

    Running this twice is harmless: once a directive is commented out the
    pattern no longer matches it.

    Raises:
        NoDeclarationFilesError: If the output directory holds no ``*.d.ts``
    """
    root = root if root is not None else Path.cwd()
    reporter = reporter or Reporter()
    config = config or DEFAULT_CONFIG

    out_dir = resolve_out_dir(root, config)
    dts_files = find_declaration_files(root / out_dir, config)
    if not dts_files:
        raise NoDeclarationFilesError(out_dir)

    report = FixReport(out_dir=out_dir, files=dts_files)
    for dts_file in dts_files:
        display = display_path(dts_file, root)
        for reference in fix_file(dts_file, display, reporter):
            report.removed.append((dts_file, reference))

    logger.debug(
        f"Rewrote {len(dts_files)} declaration file(s), removed {len(report.removed)} reference(s)"
    )
    return report
