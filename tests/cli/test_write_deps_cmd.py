"""Tests for ``buildproducts write-deps`` command.

Verifies:
    - The manifest is written next to the declaration file by default.
    - Custom output path and package name work.
    - Unsatisfied or duplicate products exit 1 without writing anything.
"""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from buildproducts.cli.main import cli


class TestWriteDeps:
    def test_default_output_path(self, runner: CliRunner, satisfied_decl: Path) -> None:
        result = runner.invoke(cli, ["write-deps", str(satisfied_decl)])
        assert result.exit_code == 0
        deps = satisfied_decl.parent / "deps.py"
        assert deps.is_file()
        assert "Manifest written to:" in result.output

    def test_manifest_contents(
        self, runner: CliRunner, satisfied_decl: Path, installed_prefix: Path
    ) -> None:
        runner.invoke(cli, ["write-deps", str(satisfied_decl)])
        text = (satisfied_decl.parent / "deps.py").read_text()
        assert f"libfoo = {str(installed_prefix / 'lib' / 'libfoo.so.1')!r}" in text
        assert f"fooifier = {str(installed_prefix / 'bin' / 'fooifier')!r}" in text
        assert f"foo_data = {str(installed_prefix / 'share' / 'foo.dat')!r}" in text
        assert 'Please re-run the build for "foopkg"' in text

    def test_custom_output_and_package_name(
        self, runner: CliRunner, satisfied_decl: Path, tmp_path: Path
    ) -> None:
        out = tmp_path / "elsewhere" / "deps.py"
        result = runner.invoke(
            cli,
            ["write-deps", str(satisfied_decl), "-o", str(out), "--package-name", "Foo"],
        )
        assert result.exit_code == 0
        assert 'build for "Foo"' in out.read_text()
        assert not (satisfied_decl.parent / "deps.py").exists()


class TestWriteDepsFailures:
    def test_unsatisfied_exits_1(self, runner: CliRunner, unsatisfied_decl: Path) -> None:
        result = runner.invoke(cli, ["write-deps", str(unsatisfied_decl)])
        assert result.exit_code == 1
        assert "missing_data" in result.output
        assert "not satisfied" in result.output
        assert not (unsatisfied_decl.parent / "deps.py").exists()

    def test_duplicate_variable_exits_1(self, runner: CliRunner, duplicate_decl: Path) -> None:
        result = runner.invoke(cli, ["write-deps", str(duplicate_decl)])
        assert result.exit_code == 1
        assert "Duplicate variable name" in result.output
        assert not (duplicate_decl.parent / "deps.py").exists()

    def test_reserved_variable_exits_1(
        self, runner: CliRunner, installed_prefix: Path
    ) -> None:
        decl = installed_prefix.parent / "products.yaml"
        decl.write_text(
            "prefix: usr\n"
            "products:\n"
            "  - {type: file, path: share/foo.dat, variable: check_deps}\n"
        )
        result = runner.invoke(cli, ["write-deps", str(decl)])
        assert result.exit_code == 1
        assert "reserved" in result.output
        assert not (decl.parent / "deps.py").exists()

    def test_broken_yaml_exits_2(self, runner: CliRunner, broken_decl: Path) -> None:
        result = runner.invoke(cli, ["write-deps", str(broken_decl)])
        assert result.exit_code == 2

    def test_unwritable_output_exits_2(
        self, runner: CliRunner, satisfied_decl: Path, tmp_path: Path, make_file
    ) -> None:
        blocker = make_file(tmp_path / "blocker")
        result = runner.invoke(
            cli, ["write-deps", str(satisfied_decl), "-o", str(blocker / "deps.py")]
        )
        assert result.exit_code == 2
