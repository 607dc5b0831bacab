"""Tests for the typings fixer."""

import pytest

from ts_npm_lint.exceptions import NoDeclarationFilesError
from ts_npm_lint.fixer import fix_typings, resolve_out_dir
from ts_npm_lint.config import LintConfig

TSD_REFERENCE = '/// <reference path="../typings/tsd.d.ts" />'


@pytest.fixture
def referencing_package(clean_package, write_file):
    """The clean package with two declarations carrying references."""
    write_file(
        clean_package / "lib" / "index.d.ts",
        f"{TSD_REFERENCE}\nexport declare function hello(): string;\n",
    )
    write_file(
        clean_package / "lib" / "util" / "strings.d.ts",
        '/// <reference path="../../typings/node/node.d.ts" />\r\n'
        "export declare function pad(s: string): string;\r\n",
    )
    return clean_package


class TestResolveOutDir:
    def test_reads_out_dir(self, clean_package):
        assert resolve_out_dir(clean_package, LintConfig()) == "lib"

    def test_no_build_config(self, tmp_path):
        assert resolve_out_dir(tmp_path, LintConfig()) == "."

    def test_no_compiler_options(self, tmp_path, write_json):
        write_json(tmp_path / "tsconfig.json", {"files": []})
        assert resolve_out_dir(tmp_path, LintConfig()) == "."

    def test_declaration_flag_not_checked(self, tmp_path, write_json):
        write_json(tmp_path / "tsconfig.json", {"compilerOptions": {"outDir": "dist"}})
        assert resolve_out_dir(tmp_path, LintConfig()) == "dist"


class TestFixTypings:
    def test_rewrites_references(self, referencing_package, reporter):
        report = fix_typings(referencing_package, reporter=reporter)

        index = (referencing_package / "lib" / "index.d.ts").read_text()
        assert index == (
            "// [ts-npm-lint] disabled triple slash reference to '../typings/tsd.d.ts'\n"
            "export declare function hello(): string;\n"
        )
        assert [ref for _, ref in report.removed] == [
            "../typings/tsd.d.ts",
            "../../typings/node/node.d.ts",
        ]

    def test_other_bytes_untouched(self, referencing_package, reporter):
        fix_typings(referencing_package, reporter=reporter)

        strings = (referencing_package / "lib" / "util" / "strings.d.ts").read_bytes()
        assert strings == (
            b"// [ts-npm-lint] disabled triple slash reference to '../../typings/node/node.d.ts'\r\n"
            b"export declare function pad(s: string): string;\r\n"
        )

    def test_reports_each_removal(self, referencing_package, reporter, stdout_of):
        fix_typings(referencing_package, reporter=reporter)

        output = stdout_of(reporter)
        assert (
            "[ts-npm-lint] Removed reference to '../typings/tsd.d.ts' in lib/index.d.ts\n" in output
        )
        assert "Removed reference to '../../typings/node/node.d.ts' in lib/util/strings.d.ts" in output

    def test_second_run_changes_nothing(self, referencing_package, reporter, stdout_of):
        fix_typings(referencing_package, reporter=reporter)
        after_first = (referencing_package / "lib" / "index.d.ts").read_bytes()
        first_output = stdout_of(reporter)

        report = fix_typings(referencing_package, reporter=reporter)

        assert report.removed == []
        assert stdout_of(reporter) == first_output
        assert (referencing_package / "lib" / "index.d.ts").read_bytes() == after_first

    def test_clean_files_rewritten_unchanged(self, clean_package, reporter):
        path = clean_package / "lib" / "index.d.ts"
        before = path.read_bytes()

        report = fix_typings(clean_package, reporter=reporter)

        assert report.files == [path]
        assert report.removed == []
        assert path.read_bytes() == before

    def test_vendor_typings_left_alone(self, referencing_package, reporter, write_file):
        vendored = write_file(
            referencing_package / "lib" / "typings" / "tsd.d.ts",
            '/// <reference path="node/node.d.ts" />\n',
        )
        fix_typings(referencing_package, reporter=reporter)
        assert vendored.read_text() == '/// <reference path="node/node.d.ts" />\n'

    def test_no_declarations_is_fatal(self, clean_package, reporter):
        (clean_package / "lib" / "index.d.ts").unlink()

        with pytest.raises(NoDeclarationFilesError) as exc_info:
            fix_typings(clean_package, reporter=reporter)

        assert exc_info.value.exit_code == 2
        assert str(exc_info.value) == "No .d.ts files found in dir: lib"

    def test_missing_manifest_not_required(self, tmp_path, reporter, write_file):
        """The fixer only needs declaration files, not a package.json."""
        write_file(tmp_path / "index.d.ts", f"{TSD_REFERENCE}\n")
        report = fix_typings(tmp_path, reporter=reporter)

        assert report.out_dir == "."
        assert len(report.removed) == 1
