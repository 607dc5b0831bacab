"""Root of the ts-npm-lint error hierarchy."""

from typing import Dict, Optional


class LintError(Exception):
    """An error that ends a lint or fix run.

    The CLI prints ``str(error)`` after the red tag and exits with
    ``exit_code``; subclasses override it (a missing package.json is 1,
    an outDir without declarations is 2). ``details`` carries extra
    context, such as the parser's reason for rejecting a JSON file.
    """

    exit_code = 1

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({extra})"
