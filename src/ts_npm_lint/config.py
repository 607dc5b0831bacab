"""Configuration loading and management for ts-npm-lint.

Configuration sources are merged in priority order:
    1. Defaults (defined in LintConfig)
    2. Project config (<root>/ts-npm-lint.toml)
    3. Explicit config file (--config)
    4. Environment variables (TS_NPM_LINT_* prefix)
    5. CLI overrides (passed as kwargs)

The defaults describe a classic npm + TypeScript layout, so most projects
never need a config file.

Example:
    >>> config = load_config(verbose=True)
    >>> config.verbosity
    'verbose'
    >>> config.manifest_file
    'package.json'
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

PROJECT_CONFIG_NAME = "ts-npm-lint.toml"
ENV_PREFIX = "TS_NPM_LINT_"

_VERBOSITY_LEVELS = ("quiet", "normal", "verbose")


@dataclass(frozen=True)
class LintConfig:
    """Settings for a lint or fix run.

    Attributes:
        Project files:
            manifest_file: Package descriptor read by the analyzer
            build_config_file: Compiler configuration (compilerOptions)
            registry_file: Legacy tsd registry of installed typings

        Directories:
            modules_dir: Installed-packages directory, skipped by the locator
            vendor_typings_dir: Vendored typings directory, skipped by the locator

        Dependency typings:
            runtime_typings_package: Platform typings always recommended

        Output control:
            verbosity: Logging verbosity level
    """

    # Project files
    manifest_file: str = "package.json"
    build_config_file: str = "tsconfig.json"
    registry_file: str = "tsd.json"

    # Directories
    modules_dir: str = "node_modules"
    vendor_typings_dir: str = "typings"

    # Dependency typings
    runtime_typings_package: str = "node"

    # Output control
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        for field_name in (
            "manifest_file",
            "build_config_file",
            "registry_file",
            "modules_dir",
            "vendor_typings_dir",
            "runtime_typings_package",
        ):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.strip():
                raise InvalidConfigError(field_name, value, "must be a non-empty string")

        # Excluded directories are matched against the first path component
        for field_name in ("modules_dir", "vendor_typings_dir"):
            value = getattr(self, field_name)
            if "/" in value or "\\" in value:
                raise InvalidConfigError(field_name, value, "must be a single directory name")

        if self.verbosity not in _VERBOSITY_LEVELS:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"must be one of {', '.join(_VERBOSITY_LEVELS)}"
            )

    @property
    def excluded_dirs(self) -> tuple[str, str]:
        """Directories under an output root the locator never descends into."""
        return (self.vendor_typings_dir, self.modules_dir)


DEFAULT_CONFIG = LintConfig()


def load_config(
    root: Optional[Path] = None, config_file: Optional[Path] = None, **overrides
) -> LintConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        root: Project root searched for ts-npm-lint.toml (default: cwd)
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated LintConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    project_root = root if root is not None else Path.cwd()
    project_config = project_root / PROJECT_CONFIG_NAME
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    # Convert verbosity boolean flags to string
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update(overrides)

    try:
        return LintConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from TS_NPM_LINT_* environment variables.

    Every LintConfig field is a string, so values are taken as-is, e.g.
    TS_NPM_LINT_MODULES_DIR=vendor_modules.
    """
    result: dict[str, Any] = {}
    for field_name in LintConfig.__dataclass_fields__:
        env_value = os.environ.get(f"{ENV_PREFIX}{field_name.upper()}")
        if env_value is None:
            continue
        result[field_name] = env_value

    return result


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    A ``[tool.ts-npm-lint]`` table is honoured as well as top-level keys.
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            # Fallback to tomli for Python 3.9-3.10
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        data = tomllib.load(f)

    tool_section = data.get("tool", {}).get("ts-npm-lint")
    if isinstance(tool_section, dict):
        return dict(tool_section)
    return {key: value for key, value in data.items() if key != "tool"}
