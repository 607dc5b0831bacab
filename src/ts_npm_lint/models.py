"""Data models for ts-npm-lint.

Thin records over the JSON files the linter consults. Only the fields the
checks look at are lifted out; everything else in the files is ignored.
Truthiness follows the npm tooling: an empty string or ``false`` counts as
"not declared".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

JsonObject = Dict[str, Any]


def _as_object(value: Any) -> Optional[JsonObject]:
    """Return ``value`` when it is a JSON object, else ``None``."""
    return value if isinstance(value, dict) else None


@dataclass
class Manifest:
    """Fields of ``package.json`` consulted by the analyzer."""

    main: Any = None
    typings: Any = None
    dependencies: Optional[List[str]] = None
    dev_dependencies: JsonObject = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Any) -> Manifest:
        data = _as_object(data) or {}
        deps = _as_object(data.get("dependencies"))
        return cls(
            main=data.get("main"),
            typings=data.get("typings"),
            dependencies=list(deps) if deps is not None else None,
            dev_dependencies=_as_object(data.get("devDependencies")) or {},
        )

    @property
    def has_typings(self) -> bool:
        return bool(self.typings)

    def has_dev_dependency(self, name: str) -> bool:
        return bool(self.dev_dependencies.get(name))


@dataclass
class CompilerOptions:
    """The ``compilerOptions`` section of ``tsconfig.json``."""

    declaration: Any = None
    module: Any = None
    out_dir: Any = None

    @classmethod
    def from_json(cls, data: JsonObject) -> CompilerOptions:
        return cls(
            declaration=data.get("declaration"),
            module=data.get("module"),
            out_dir=data.get("outDir"),
        )

    def resolved_out_dir(self) -> Optional[str]:
        """``outDir`` with one trailing path separator stripped, if set."""
        if not self.out_dir:
            return None
        out_dir = str(self.out_dir)
        if out_dir.endswith(("/", "\\")):
            out_dir = out_dir[:-1]
        return out_dir


@dataclass
class BuildConfig:
    """Fields of ``tsconfig.json`` consulted by the analyzer and fixer."""

    compiler_options: Optional[CompilerOptions] = None

    @classmethod
    def from_json(cls, data: Any) -> BuildConfig:
        data = _as_object(data) or {}
        options = _as_object(data.get("compilerOptions"))
        if options is None:
            return cls()
        return cls(compiler_options=CompilerOptions.from_json(options))

    @property
    def out_dir(self) -> Optional[str]:
        if self.compiler_options is None:
            return None
        return self.compiler_options.resolved_out_dir()


@dataclass(frozen=True)
class DependencyTyping:
    """Whether a runtime dependency ships its own type declarations."""

    name: str
    has_own_typings: bool


@dataclass
class TypingRegistry:
    """The legacy ``tsd.json`` registry of installed typings."""

    installed: List[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> TypingRegistry:
        data = _as_object(data) or {}
        installed = _as_object(data.get("installed")) or {}
        return cls(installed=list(installed))

    def installed_packages(self) -> List[str]:
        """Package short names, e.g. ``node/node.d.ts`` -> ``node``."""
        names: List[str] = []
        for entry in self.installed:
            name = entry.split("/")[0]
            if name not in names:
                names.append(name)
        return names
