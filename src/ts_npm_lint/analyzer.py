"""Package analyzer: checks that a TypeScript package is consumable via npm.

Runs a fixed checklist against ``package.json``, ``tsconfig.json``, the
installed dependencies, the legacy ``tsd.json`` registry and the generated
declaration files. Every problem becomes a hint; the only fatal condition
is a missing manifest. Files are never modified here.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from .config import DEFAULT_CONFIG, LintConfig
from .exceptions import ManifestNotFoundError
from .file_ops import display_path, find_declaration_files, load_json, read_text
from .logging_config import get_logger
from .models import BuildConfig, DependencyTyping, Manifest, TypingRegistry
from .references import find_reference_lines
from .reporter import Reporter

logger = get_logger(__name__)

DEFAULT_OUT_DIR = "."


@dataclass
class AnalysisReport:
    """Everything a single analyzer run observed."""

    out_dir: str = DEFAULT_OUT_DIR
    hints: List[str] = field(default_factory=list)
    dependencies: List[DependencyTyping] = field(default_factory=list)
    declaration_files: List[Path] = field(default_factory=list)
    reference_lines: List[str] = field(default_factory=list)


def check_manifest(manifest: Manifest, reporter: Reporter) -> None:
    """Entry point, typings entry and the compiler as a dev dependency."""
    if not manifest.main:
        reporter.hint(
            "package.json didn't declare a 'main' entry file. "
            'Please include an entry file, e.g: "main": "lib/index.js"'
        )
    if not manifest.has_typings:
        reporter.hint(
            "package.json doesn't declare a 'typings' entry file. "
            'Please include an entry file (without extension), e.g: "typings": "lib/index"'
        )
    if not manifest.has_dev_dependency("typescript"):
        reporter.hint(
            "typescript is not registered as build dependency, "
            "please install it using 'npm install typescript --save-dev'"
        )


def check_build_config(root: Path, reporter: Reporter, config: LintConfig) -> str:
    """Validate the compiler options and return the output directory to scan."""
    config_path = root / config.build_config_file
    if not config_path.exists():
        reporter.hint(
            f"No '{config.build_config_file}' was found. "
            "Please use it to define the default build parameters. "
            "See: https://github.com/Microsoft/TypeScript/wiki/tsconfig.json"
        )
        return DEFAULT_OUT_DIR

    build_config = BuildConfig.from_json(load_json(config_path))
    options = build_config.compiler_options
    if options is None:
        reporter.hint(
            f"'{config.build_config_file}' doesn't contain a 'compilerOptions' section. "
            "Please add it to define default compile parameters"
        )
        return DEFAULT_OUT_DIR

    if not options.declaration:
        reporter.hint(
            f"Set the {config.build_config_file} compiler option "
            "'\"declaration\": true' so that module consumers can use your typings"
        )
    if not options.module:
        reporter.hint(
            "It is strongly recommended to set the compiler option "
            "'\"module\": \"commonjs\"' so that your module can be consumed by other npm packages"
        )

    out_dir = options.resolved_out_dir()
    if out_dir is None:
        reporter.hint(
            'It is recommended to set the compiler output directory using the "outDir" option, '
            "so that the typescript sources can be put into .npmignore, and the output files "
            "and declaration files in .gitignore. e.g: '\"outDir\": \"lib/\"'"
        )
        return DEFAULT_OUT_DIR

    logger.debug(f"Using compiler output directory '{out_dir}'")
    return out_dir


def collect_dependency_typings(
    root: Path, dependencies: List[str], reporter: Reporter, config: LintConfig
) -> List[DependencyTyping]:
    """Read each installed dependency's manifest and note whether it ships typings.

    Dependencies that are not installed are reported and left out. The
    platform runtime typings are always appended as untyped.
    """
    records: List[DependencyTyping] = []
    for name in dependencies:
        dep_manifest = root / config.modules_dir / name / config.manifest_file
        if not dep_manifest.exists():
            reporter.hint(
                f"Failed to read {config.manifest_file} of dependency '{name}', "
                "please run 'npm install'"
            )
            continue
        sub_package = Manifest.from_json(load_json(dep_manifest))
        records.append(DependencyTyping(name, sub_package.has_typings))

    # recommend the runtime typings as well
    records.append(DependencyTyping(config.runtime_typings_package, False))
    return records


def check_typing_registry(
    root: Path, records: List[DependencyTyping], reporter: Reporter, config: LintConfig
) -> None:
    """Compare dependency typings against the legacy tsd registry."""
    untyped = [record.name for record in records if not record.has_own_typings]
    registry_path = root / config.registry_file

    if not registry_path.exists():
        if untyped:
            reporter.hint(
                "Some dependencies of this package don't ship with their own typings. "
                "You can install the 'tsd' tool to manage these. Use 'npm install -g tsd'. "
                "For more info see: http://definitelytyped.org/tsd/. "
                "Packages without typings:\n  " + ", ".join(untyped)
            )
        return

    installed = TypingRegistry.from_json(load_json(registry_path)).installed_packages()
    for record in records:
        if record.has_own_typings and record.name in installed:
            reporter.hint(
                f"A tsd typing for the package '{record.name}' was installed, "
                "yet it ships with its own typing!"
            )
        if not record.has_own_typings and record.name not in installed:
            reporter.hint(
                f"No tsd typing were installed for package '{record.name}', "
                f"try to use 'tsd install {record.name} --save' "
                "to be able to use strongly typed package imports."
            )

    reporter.hint(
        "Please mention in the documentation of your package that the following typings "
        "might need to be installed using 'tsd install <package> --save':\n  "
        + ", ".join(installed)
    )


def check_declaration_files(
    root: Path, out_dir: str, reporter: Reporter, config: LintConfig
) -> Tuple[List[Path], List[str]]:
    """Look for generated declarations and the reference directives inside them."""
    dts_files = find_declaration_files(root / out_dir, config)
    if not dts_files:
        reporter.hint(
            f"No *.d.ts files where found in the compilers output directory ({out_dir}). "
            "Please run the typescript compiler first and make sure the 'declaration' "
            "option is enabled."
        )
        return [], []

    found: List[str] = []
    for dts_file in dts_files:
        display = display_path(dts_file, root)
        for line in find_reference_lines(read_text(dts_file)):
            found.append(f"  {display}: {line}")

    if found:
        reporter.hint(
            "Found '/// <reference path' d.ts file includes in the following .d.ts files:"
        )
        for line in found:
            reporter.line(line)
        reporter.blank()
        reporter.hint(
            "Please remove those references to make your typings usable for package consumers. "
            "Keeping triple slash references might collide with typings used in consuming "
            "packages. Remove triple slash references by running 'ts-npm-lint --fix-typings' "
            "as part of your build process."
        )

    return dts_files, found


def analyze(
    root: Optional[Path] = None,
    reporter: Optional[Reporter] = None,
    config: Optional[LintConfig] = None,
) -> AnalysisReport:
    """Run every check against the package at ``root``.

    Args:
        root: Package root (default: current directory)
        reporter: Output sink for hints (default: stdout/stderr consoles)
        config: File and directory names (default: npm layout)

    Returns:
        AnalysisReport with the hints that were printed

    Raises:
        ManifestNotFoundError: If the package manifest does not exist
        MalformedJsonError: If a consulted JSON file cannot be parsed
    """
    root = root if root is not None else Path.cwd()
    reporter = reporter or Reporter()
    config = config or DEFAULT_CONFIG

    manifest_path = root / config.manifest_file
    if not manifest_path.exists():
        raise ManifestNotFoundError(config.manifest_file)

    logger.debug(f"Analyzing package at {root}")
    start = len(reporter.hints)
    report = AnalysisReport()

    manifest = Manifest.from_json(load_json(manifest_path))
    check_manifest(manifest, reporter)

    report.out_dir = check_build_config(root, reporter, config)

    if manifest.dependencies is not None:
        report.dependencies = collect_dependency_typings(
            root, manifest.dependencies, reporter, config
        )
        check_typing_registry(root, report.dependencies, reporter, config)

    report.declaration_files, report.reference_lines = check_declaration_files(
        root, report.out_dir, reporter, config
    )

    report.hints = reporter.hints[start:]
    logger.debug(f"Analysis finished with {len(report.hints)} hint(s)")
    return report
