"""Console output for lint runs.

Hints go to stdout with a dim ``[ts-npm-lint]`` tag followed by a blank
line; fatal errors go to stderr with a red tag. Messages are rendered as
``rich.text.Text`` so brackets and quotes in them are never read as markup.
"""

from typing import List, Optional

from rich.console import Console
from rich.text import Text

from .references import DEFAULT_TAG


class Reporter:
    """Writes hints and errors, and remembers the hints it wrote."""

    def __init__(
        self,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
        tag: str = DEFAULT_TAG,
    ):
        self.console = console or Console(soft_wrap=True)
        self.err_console = err_console or Console(stderr=True, soft_wrap=True)
        self.tag = tag
        self.hints: List[str] = []

    def hint(self, message: str) -> None:
        self.hints.append(message)
        self.console.print(Text.assemble((self.tag, "dim"), " ", message), soft_wrap=True)
        self.console.print()

    def line(self, text: str) -> None:
        """Write ``text`` verbatim; tabs and control characters are kept."""
        self.console.file.write(text + "\n")

    def blank(self) -> None:
        self.console.print()

    def info(self, message: str) -> None:
        """Print a plain tagged status line (no trailing blank line)."""
        self.line(f"{self.tag} {message}")

    def fatal(self, message: str) -> None:
        self.err_console.print(Text.assemble((f"{self.tag} ", "red"), message), soft_wrap=True)
