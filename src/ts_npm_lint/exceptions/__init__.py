"""Exception hierarchy for ts-npm-lint."""

from .base import LintError
from .config import ConfigurationError, InvalidConfigError
from .project import (
    FileAccessError,
    MalformedJsonError,
    ManifestNotFoundError,
    NoDeclarationFilesError,
)

__all__ = [
    "LintError",
    "ConfigurationError",
    "InvalidConfigError",
    "FileAccessError",
    "MalformedJsonError",
    "ManifestNotFoundError",
    "NoDeclarationFilesError",
]
