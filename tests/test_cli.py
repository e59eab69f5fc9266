"""
Tests for CLI commands — select, catalog, config check and global options.
"""

import json
import textwrap
from pathlib import Path

import pytest
from click.testing import CliRunner

from proofkit.main import cli

STORED = textwrap.dedent("""\
    target_adapters: [circom]
    target_platforms: [ios]
    ios: [aarch64-apple-ios-sim]
""")


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch, restore_root_logger):
    monkeypatch.chdir(tmp_path)


class TestCLIGlobal:
    def test_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "adapters, platforms and architectures" in result.output

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestCatalogCommand:
    def test_json(self):
        result = CliRunner().invoke(cli, ["catalog", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["adapters"] == ["circom", "halo2"]
        assert data["platforms"]["web"] == []
        assert "aarch64-apple-ios" in data["platforms"]["ios"]

    def test_text(self):
        result = CliRunner().invoke(cli, ["catalog"])
        assert result.exit_code == 0
        assert "halo2" in result.output
        assert "armv7-linux-androideabi" in result.output


class TestSelectCommand:
    def test_interactive(self):
        # adapters: circom; platforms: ios + web; ios archs: accept all
        result = CliRunner().invoke(cli, ["select"], input="1\n1,3\n\n")
        assert result.exit_code == 0, result.output
        assert "Adapters:  circom" in result.output
        assert "Platforms: ios, web" in result.output
        assert "aarch64-apple-ios-sim" in result.output
        assert "Platforms differ" in result.output

    def test_empty_pick_reprompts(self):
        result = CliRunner().invoke(cli, ["select"], input="\n2\n3\n")
        assert result.exit_code == 0, result.output
        assert "No adapters selected" in result.output
        assert "Adapters:  halo2" in result.output

    def test_defaults_from_config(self, tmp_path: Path):
        config = tmp_path / "proofkit.yml"
        config.write_text(STORED)
        # Enter keeps ios pre-checked, then all ios archs
        result = CliRunner().invoke(cli, ["--config", str(config), "select"], input="1\n\n\n")
        assert result.exit_code == 0, result.output
        assert "Platforms: ios" in result.output
        assert "Platforms unchanged" in result.output

    def test_new_config_path(self, tmp_path: Path):
        config = tmp_path / "new.yml"
        result = CliRunner().invoke(cli, ["--config", str(config), "select"], input="2\n3\n")
        assert result.exit_code == 0, result.output
        assert "Platforms: web" in result.output

    def test_reuse_json(self, tmp_path: Path):
        config = tmp_path / "proofkit.yml"
        config.write_text(STORED)
        result = CliRunner().invoke(cli, ["--config", str(config), "select", "--reuse", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["adapter_indices"] == [0]
        assert data["platforms"] == ["ios"]
        assert data["archs"] == {"ios": ["aarch64-apple-ios-sim"]}
        assert data["platforms_changed"] is False

    def test_reuse_error(self, tmp_path: Path):
        config = tmp_path / "proofkit.yml"
        config.write_text("target_adapters: [circom]\ntarget_platforms: [linux]\n")
        result = CliRunner().invoke(cli, ["--config", str(config), "select", "--reuse"])
        assert result.exit_code == 1
        assert "linux" in result.output


class TestConfigCheckCommand:
    def test_valid(self, tmp_path: Path):
        config = tmp_path / "proofkit.yml"
        config.write_text(STORED)
        result = CliRunner().invoke(cli, ["--config", str(config), "config", "check"])
        assert result.exit_code == 0
        assert "Configuration is valid" in result.output

    def test_invalid_json(self, tmp_path: Path):
        config = tmp_path / "proofkit.yml"
        config.write_text("target_platforms: [linux]\n")
        result = CliRunner().invoke(cli, ["--config", str(config), "config", "check", "--json"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["valid"] is False
        assert any("linux" in e for e in data["errors"])

    def test_valid_json_exit_zero(self, tmp_path: Path):
        config = tmp_path / "proofkit.yml"
        config.write_text(STORED)
        result = CliRunner().invoke(cli, ["--config", str(config), "config", "check", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["valid"] is True

    def test_missing(self):
        result = CliRunner().invoke(cli, ["config", "check"])
        assert result.exit_code == 1
        assert "No proofkit.yml" in result.output
