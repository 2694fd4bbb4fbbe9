"""Tests for the command-line interface."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from vanity_imports.cli import cli


@pytest.fixture
def config_file(tmp_path: Path, sample_yaml: str) -> Path:
    path = tmp_path / "vanity.yaml"
    path.write_text(sample_yaml)
    return path


@pytest.mark.unit
class TestCLI:
    """Tests for the click commands."""

    def test_check(self, config_file: Path) -> None:
        result = CliRunner().invoke(cli, ["check", str(config_file)])
        assert result.exit_code == 0
        assert "go.example.com" in result.output
        assert "Paths:         4" in result.output
        assert "https://bitbucket.org/org/tool" in result.output

    def test_check_invalid(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("paths:\n  /x:\n    repo: https://github.com/org/x\n    vcs: foo\n")
        result = CliRunner().invoke(cli, ["check", str(path)])
        assert result.exit_code == 1
        assert "unknown VCS foo" in result.output

    def test_check_missing_file(self, tmp_path: Path) -> None:
        result = CliRunner().invoke(cli, ["check", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 1

    def test_resolve_match(self, config_file: Path) -> None:
        result = CliRunner().invoke(cli, ["resolve", str(config_file), "/lib/sub/pkg"])
        assert result.exit_code == 0
        assert "Kind:    match" in result.output
        assert "Import:  go.example.com/lib/sub" in result.output
        assert "Subpath: pkg" in result.output

    def test_resolve_index(self, config_file: Path) -> None:
        result = CliRunner().invoke(cli, ["resolve", str(config_file), "/"])
        assert result.exit_code == 0
        assert "Kind:    index" in result.output
        assert "  - go.example.com/tool" in result.output

    def test_resolve_not_found(self, config_file: Path) -> None:
        result = CliRunner().invoke(cli, ["resolve", str(config_file), "/nope"])
        assert result.exit_code == 1
        assert "Kind:    not-found" in result.output

    def test_check_undecodable(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_bytes(b"paths:\n  /x:\n    repo: https://github.com/org/\xff\n")
        result = CliRunner().invoke(cli, ["check", str(path)])
        assert result.exit_code == 1
        assert "Error: could not parse config" in result.output
