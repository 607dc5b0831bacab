"""Triple-slash reference directives in declaration files.

A generated ``.d.ts`` that starts with ``/// <reference path="..." />``
drags the referenced typings into every consumer of the package, where they
tend to collide with the consumer's own copies. The analyzer reports such
lines and the fixer comments them out.
"""

import re
from typing import List, Tuple

REFERENCE_MARKER = "/// <reference path="

REFERENCE_PATTERN = re.compile(r'^/// <reference path="(.*)" />', re.MULTILINE)

DEFAULT_TAG = "[ts-npm-lint]"


def find_reference_lines(text: str) -> List[str]:
    """Return every line of ``text`` containing a reference-path marker."""
    return [line.rstrip("\r") for line in text.split("\n") if REFERENCE_MARKER in line]


def disabled_reference_comment(path: str, tag: str = DEFAULT_TAG) -> str:
    return f"// {tag} disabled triple slash reference to '{path}'"


def disable_references(text: str, tag: str = DEFAULT_TAG) -> Tuple[str, List[str]]:
    """Comment out every reference directive that starts a line.

    Returns:
        The rewritten text and the referenced paths, in file order.
        Text without directives comes back unchanged.
    """
    removed: List[str] = []

    def _replace(match: "re.Match[str]") -> str:
        removed.append(match.group(1))
        return disabled_reference_comment(match.group(1), tag)

    return REFERENCE_PATTERN.sub(_replace, text), removed
