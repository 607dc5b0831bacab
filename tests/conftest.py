"""Shared test fixtures for ts-npm-lint."""

import io
import json

import pytest
from rich.console import Console

from ts_npm_lint.reporter import Reporter


@pytest.fixture
def write_json():
    """Write ``data`` as JSON to ``path``, creating parent directories."""

    def _write(path, data):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_file():
    """Write raw text to ``path`` without newline translation."""

    def _write(path, text):
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        return path

    return _write


@pytest.fixture
def reporter():
    """Reporter writing to in-memory consoles."""
    return Reporter(
        console=Console(file=io.StringIO(), soft_wrap=True),
        err_console=Console(file=io.StringIO(), soft_wrap=True),
    )


@pytest.fixture
def stdout_of():
    """Everything a fixture reporter printed on its stdout console."""

    def _read(rep):
        return rep.console.file.getvalue()

    return _read


@pytest.fixture
def clean_package(tmp_path, write_json, write_file):
    """A package that passes every check.

    The only hint left is the documentation reminder printed whenever a
    tsd registry exists.
    """
    write_json(
        tmp_path / "package.json",
        {
            "name": "clean",
            "main": "lib/index.js",
            "typings": "lib/index",
            "dependencies": {"typed-dep": "^1.0.0"},
            "devDependencies": {"typescript": "^1.8.0"},
        },
    )
    write_json(
        tmp_path / "node_modules" / "typed-dep" / "package.json",
        {"name": "typed-dep", "typings": "index"},
    )
    write_json(
        tmp_path / "tsconfig.json",
        {"compilerOptions": {"declaration": True, "module": "commonjs", "outDir": "lib/"}},
    )
    write_json(tmp_path / "tsd.json", {"installed": {"node/node.d.ts": {"commit": "abc"}}})
    write_file(tmp_path / "lib" / "index.d.ts", "export declare function hello(): string;\n")
    return tmp_path
