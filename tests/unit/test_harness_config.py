"""Tests for harness configuration loading."""

from pathlib import Path

import pytest

from installsim.config import DEFAULT_SCENARIO, HarnessConfig, load_harness_config
from installsim.fixtures import bundled_fixtures_dir


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "installsim.toml"
    path.write_text(content, encoding="utf-8")
    return path


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_harness_config(tmp_path / "installsim.toml")


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    config = load_harness_config(_write(tmp_path, ""))

    assert config == HarnessConfig()
    assert config.fixtures_dir == bundled_fixtures_dir()
    assert config.scenario == DEFAULT_SCENARIO
    assert config.temp_dir is None


def test_full_file(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        'fixtures_dir = "fixtures"\n'
        'temp_dir = "scratch"\n'
        'scenario = ["lazygit", "org.gimp.GIMP"]\n'
        "max_findings = 2\n"
        'platform = "darwin"\n'
        'home_user = "alice"\n',
    )

    config = load_harness_config(path)

    assert config.fixtures_dir == (tmp_path / "fixtures").resolve()
    assert config.temp_dir == (tmp_path / "scratch").resolve()
    assert config.scenario == ("lazygit", "org.gimp.GIMP")
    assert config.max_findings == 2
    assert config.platform == "darwin"
    assert config.home_user == "alice"


def test_invalid_toml(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Invalid TOML"):
        load_harness_config(_write(tmp_path, "scenario = [\n"))


@pytest.mark.parametrize(
    "content",
    [
        'scenario = "vim"\n',
        "scenario = [1, 2]\n",
        "max_findings = -1\n",
        "max_findings = true\n",
        'platform = ""\n',
        "fixtures_dir = 3\n",
    ],
)
def test_invalid_values(tmp_path: Path, content: str) -> None:
    with pytest.raises(ValueError):
        load_harness_config(_write(tmp_path, content))
