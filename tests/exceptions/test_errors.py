"""Tests for the exception hierarchy and exit codes."""

from pathlib import Path

from ts_npm_lint.exceptions import (
    ConfigurationError,
    FileAccessError,
    InvalidConfigError,
    LintError,
    MalformedJsonError,
    ManifestNotFoundError,
    NoDeclarationFilesError,
)


class TestExitCodes:
    def test_missing_manifest_exits_1(self):
        assert ManifestNotFoundError("package.json").exit_code == 1

    def test_no_declarations_exits_2(self):
        assert NoDeclarationFilesError("lib").exit_code == 2

    def test_other_errors_exit_1(self):
        assert MalformedJsonError(Path("x.json"), "bad").exit_code == 1
        assert FileAccessError(Path("x"), "gone").exit_code == 1
        assert ConfigurationError("broken").exit_code == 1


class TestHierarchy:
    def test_all_derive_from_lint_error(self):
        for exc in (
            ManifestNotFoundError("package.json"),
            NoDeclarationFilesError("."),
            MalformedJsonError(Path("a"), "b"),
            FileAccessError(Path("a"), "b"),
            InvalidConfigError("k", "v", "r"),
        ):
            assert isinstance(exc, LintError)

    def test_invalid_config_is_configuration_error(self):
        assert isinstance(InvalidConfigError("k", "v", "r"), ConfigurationError)


class TestMessages:
    def test_details_appended(self):
        err = MalformedJsonError(Path("tsconfig.json"), "Expecting value: line 1")
        assert str(err) == "Failed to parse JSON file: tsconfig.json (reason=Expecting value: line 1)"

    def test_plain_message(self):
        err = ManifestNotFoundError("package.json")
        assert str(err).startswith("Expected a file 'package.json' in the current directory.")
        assert err.details == {}
