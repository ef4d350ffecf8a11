"""Tests for the installsim command line interface."""

import json
from collections.abc import Callable
from pathlib import Path

from click.testing import CliRunner

from installsim.cli import exit_codes
from installsim.cli.cli import cli

FixtureWriter = Callable[..., Path]


def test_help_lists_commands() -> None:
    result = CliRunner().invoke(cli, ["-h"])

    assert result.exit_code == 0
    for command in ("run", "stats", "validate", "search", "simulate", "release", "export"):
        assert command in result.output


def test_run_json_report(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["run", "--json", "--quiet", "--temp-dir", str(tmp_path)])

    assert result.exit_code == 0, result.output
    report = json.loads(result.stdout)
    assert report["success"] is True
    assert [p["name"] for p in report["phases"]] == [
        "prerequisites",
        "fixtures",
        "simulate",
        "cleanup",
    ]


def test_run_human_summary_goes_to_stderr(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["run", "-q", "--temp-dir", str(tmp_path)])

    assert result.exit_code == 0
    assert result.stdout == ""
    assert "All phases passed" in result.stderr


def test_run_missing_fixtures_exit_code(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        cli,
        ["run", "-j", "-q", "--fixtures", str(tmp_path / "absent"), "--temp-dir", str(tmp_path)],
    )

    assert result.exit_code == exit_codes.MISSING_FIXTURES
    assert json.loads(result.stdout)["exit_code"] == exit_codes.MISSING_FIXTURES


def test_run_invalid_config_exit_code(tmp_path: Path) -> None:
    config = tmp_path / "installsim.toml"
    config.write_text("max_findings = -5\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["run", "--config", str(config)])

    assert result.exit_code == exit_codes.INVALID_CONFIG
    assert "max_findings" in result.stderr


def test_run_invalid_config_json_error(tmp_path: Path) -> None:
    config = tmp_path / "installsim.toml"
    config.write_text("scenario = [\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["run", "--json", "--config", str(config)])

    assert result.exit_code == exit_codes.INVALID_CONFIG
    error = json.loads(result.stdout)
    assert error["error_type"] == "ValueError"
    assert error["exit_code"] == exit_codes.INVALID_CONFIG


def test_run_uses_config_scenario(tmp_path: Path) -> None:
    config = tmp_path / "installsim.toml"
    config.write_text('scenario = ["fd", "com.spotify.Client"]\ntemp_dir = "roots"\n')

    result = CliRunner().invoke(cli, ["run", "-j", "-q", "--config", str(config)])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["installed"] == ["fd", "com.spotify.Client"]


def test_stats() -> None:
    result = CliRunner().invoke(cli, ["stats"])

    assert result.exit_code == 0
    stats = json.loads(result.stdout)
    assert stats["total_packages"] == 22
    assert stats["by_method"]["release"] == 3


def test_validate_clean_fixtures() -> None:
    result = CliRunner().invoke(cli, ["validate"])

    assert result.exit_code == 0
    assert result.stdout == ""


def test_validate_reports_findings(write_fixtures: FixtureWriter) -> None:
    root = write_fixtures(packages={"app": {"version": "1", "dependencies": ["ghost"]}})

    result = CliRunner().invoke(cli, ["validate", "--fixtures", str(root)])

    assert result.exit_code == 1
    assert result.stdout == "Package app depends on missing package ghost\n"

    tolerant = CliRunner().invoke(cli, ["validate", "--fixtures", str(root), "--max-findings", "1"])
    assert tolerant.exit_code == 0


def test_validate_corrupt_fixtures_is_clean_error(write_fixtures: FixtureWriter) -> None:
    root = write_fixtures()
    (root / "packages" / "apt_cache" / "available_packages.json").write_text("[]")

    result = CliRunner().invoke(cli, ["validate", "--fixtures", str(root)])

    assert result.exit_code == 1
    assert result.stderr.startswith("Error: failed to load fixture")


def test_search_with_method_filter() -> None:
    result = CliRunner().invoke(cli, ["search", "vim", "--method", "repository"])

    assert result.exit_code == 0
    names = [line.split("\t")[0] for line in result.stdout.splitlines()]
    assert names == ["neovim", "neovim-runtime", "vim", "vim-common", "vim-runtime"]


def test_search_rejects_unknown_method() -> None:
    result = CliRunner().invoke(cli, ["search", "vim", "--method", "snap"])

    assert result.exit_code == 2


def test_search_without_matches() -> None:
    result = CliRunner().invoke(cli, ["search", "zzz-nothing"])

    assert result.exit_code == 0
    assert result.stdout == ""
    assert "No packages match" in result.stderr


def test_release_lookup() -> None:
    result = CliRunner().invoke(cli, ["release", "jesseduffield/lazygit"])

    assert result.exit_code == 0
    tag, url = result.stdout.splitlines()
    assert tag == "v0.40.2"
    assert url.endswith("lazygit_0.40.2_Linux_x86_64.tar.gz")


def test_release_unknown_repo() -> None:
    result = CliRunner().invoke(cli, ["release", "nobody/nothing"])

    assert result.exit_code == 1
    assert "Error: release not found: nobody/nothing" in result.stderr


def test_simulate_keep_leaves_root(tmp_path: Path) -> None:
    root = tmp_path / "root"

    result = CliRunner().invoke(cli, ["simulate", "btop", "typora", "--root", str(root), "--keep"])

    assert result.exit_code == 0, result.output
    assert "btop" in result.stdout.splitlines()
    assert (root / "etc" / "dpkg" / "status").is_file()
    assert (root / "home" / "testuser" / ".config" / "Typora" / "themes").is_dir()


def test_simulate_removes_root_by_default(tmp_path: Path) -> None:
    root = tmp_path / "root"

    result = CliRunner().invoke(cli, ["simulate", "vim", "--root", str(root)])

    assert result.exit_code == 0
    assert not root.exists()


def test_simulate_unknown_package(tmp_path: Path) -> None:
    root = tmp_path / "root"

    result = CliRunner().invoke(cli, ["simulate", "ghost", "--root", str(root)])

    assert result.exit_code == 1
    assert "Error: package not found: ghost" in result.stderr
    assert not root.exists()


def test_export(tmp_path: Path) -> None:
    output = tmp_path / "db.json"

    result = CliRunner().invoke(cli, ["export", str(output)])

    assert result.exit_code == 0
    assert json.loads(output.read_text(encoding="utf-8"))["statistics"]["bundles"] == 3
