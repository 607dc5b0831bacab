"""
File operations for ts-npm-lint.

Reading project JSON files, rewriting declaration files in place and
locating ``*.d.ts`` files under a compiler output directory.
"""

import json
from pathlib import Path
from typing import Any, List, Optional

from .config import DEFAULT_CONFIG, LintConfig
from .exceptions import FileAccessError, MalformedJsonError
from .logging_config import get_logger

logger = get_logger(__name__)

DECLARATION_SUFFIX = ".d.ts"


def read_text(filepath: Path, encoding: str = "utf-8") -> str:
    """
    Read a text file without newline translation.

    Raises:
        FileAccessError: If file cannot be read
    """
    try:
        with open(filepath, encoding=encoding, newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FileAccessError(filepath, f"Encoding error: {e}")
    except OSError as e:
        raise FileAccessError(filepath, f"OS error: {e}")


def write_text(filepath: Path, content: str, encoding: str = "utf-8") -> None:
    """
    Overwrite a file with ``content``, keeping line endings as given.

    Raises:
        FileAccessError: If file cannot be written
    """
    try:
        with open(filepath, "w", encoding=encoding, newline="") as f:
            f.write(content)
    except OSError as e:
        raise FileAccessError(filepath, f"Write failed: {e}")


def load_json(filepath: Path) -> Any:
    """
    Parse a JSON file.

    Raises:
        FileAccessError: If file cannot be read
        MalformedJsonError: If the content is not valid JSON
    """
    content = read_text(filepath)
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise MalformedJsonError(filepath, str(e))


def find_declaration_files(root_dir: Path, config: Optional[LintConfig] = None) -> List[Path]:
    """
    Find every ``*.d.ts`` file below ``root_dir``.

    The vendored typings directory and the installed-packages directory
    directly under ``root_dir`` are skipped, as are hidden files and
    directories. Only regular files are returned, sorted by path.

    Args:
        root_dir: Directory to scan (usually the compiler's outDir)
        config: Supplies the names of the excluded directories
    """
    config = config or DEFAULT_CONFIG
    excluded = set(config.excluded_dirs)

    if not root_dir.is_dir():
        logger.debug(f"Declaration root {root_dir} does not exist")
        return []

    found: List[Path] = []
    for path in root_dir.rglob(f"*{DECLARATION_SUFFIX}"):
        rel_parts = path.relative_to(root_dir).parts
        if len(rel_parts) > 1 and rel_parts[0] in excluded:
            continue
        if any(part.startswith(".") for part in rel_parts):
            continue
        if not path.is_file():
            continue
        found.append(path)

    logger.debug(f"Found {len(found)} declaration file(s) under {root_dir}")
    return sorted(found)


def display_path(path: Path, root: Path) -> str:
    """``path`` relative to ``root`` with forward slashes, when it lies below it."""
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path)
