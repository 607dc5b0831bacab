"""Project exceptions: manifest, declaration files, file access."""

from pathlib import Path

from .base import LintError


class ManifestNotFoundError(LintError):
    """Raised when the package manifest is missing from the project root."""

    exit_code = 1

    def __init__(self, filename: str):
        super().__init__(
            f"Expected a file '{filename}' in the current directory. "
            "Please run ts-npm-lint in the root of a package"
        )
        self.filename = filename


class NoDeclarationFilesError(LintError):
    """Raised when the fixer finds nothing to rewrite."""

    exit_code = 2

    def __init__(self, out_dir: str):
        super().__init__(f"No .d.ts files found in dir: {out_dir}")
        self.out_dir = out_dir


class FileAccessError(LintError):
    """Raised when a file cannot be read or written."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class MalformedJsonError(LintError):
    """Raised when a JSON file consulted by the linter cannot be parsed."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Failed to parse JSON file: {filepath}",
            details={"reason": reason},
        )
        self.filepath = filepath
        self.reason = reason
