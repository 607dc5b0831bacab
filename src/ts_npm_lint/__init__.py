"""
ts-npm-lint - checks that a TypeScript package can be consumed through npm

Inspects package.json and tsconfig.json for settings that break downstream
use of the generated declaration files, and can strip triple-slash
references from those declarations.
"""

__version__ = "0.2.0"

from .analyzer import AnalysisReport, analyze
from .config import LintConfig, load_config
from .fixer import FixReport, fix_typings

__all__ = [
    "analyze",
    "fix_typings",
    "AnalysisReport",
    "FixReport",
    "LintConfig",
    "load_config",
]
