"""Harness configuration data structures and loading.

Provides immutable configuration loaded from an `installsim.toml` file. The
CLI loads it once at the entry point and applies flag overrides on top.
"""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from installsim.filesystem.layout import DEFAULT_HOME_USER
from installsim.fixtures import bundled_fixtures_dir

DEFAULT_CONFIG_FILENAME = "installsim.toml"
DEFAULT_SCENARIO = ("vim", "git", "btop", "neovim")


@dataclass(frozen=True)
class HarnessConfig:
    """Immutable harness configuration.

    Attributes:
        fixtures_dir: Fixture directory the package database is loaded from
        temp_dir: Parent directory for scenario roots (None = system temp dir)
        scenario: Packages installed by the simulate phase, in order
        max_findings: Validator findings tolerated before the fixtures phase fails
        platform: Substring release assets must contain
        home_user: Home directory name inside virtual roots
    """

    fixtures_dir: Path = field(default_factory=bundled_fixtures_dir)
    temp_dir: Path | None = None
    scenario: tuple[str, ...] = DEFAULT_SCENARIO
    max_findings: int = 0
    platform: str = "linux"
    home_user: str = DEFAULT_HOME_USER


def load_harness_config(config_path: Path) -> HarnessConfig:
    """Load harness config from a TOML file.

    Relative paths in the file are resolved against the file's directory.

    Returns:
        HarnessConfig with loaded values (unset keys keep their defaults)

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If the file is not valid TOML or a value has the wrong type
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Harness config not found at {config_path}")

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

    base = config_path.parent
    defaults = HarnessConfig()

    scenario = data.get("scenario", list(defaults.scenario))
    if not isinstance(scenario, list) or not all(isinstance(p, str) for p in scenario):
        raise ValueError(f"'scenario' must be a list of package names in {config_path}")

    max_findings = data.get("max_findings", defaults.max_findings)
    if not isinstance(max_findings, int) or isinstance(max_findings, bool) or max_findings < 0:
        raise ValueError(f"'max_findings' must be a non-negative integer in {config_path}")

    return HarnessConfig(
        fixtures_dir=_path(data, "fixtures_dir", base, config_path) or defaults.fixtures_dir,
        temp_dir=_path(data, "temp_dir", base, config_path),
        scenario=tuple(scenario),
        max_findings=max_findings,
        platform=_str(data, "platform", defaults.platform, config_path),
        home_user=_str(data, "home_user", defaults.home_user, config_path),
    )


def _path(data: dict, key: str, base: Path, config_path: Path) -> Path | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value:
        raise ValueError(f"'{key}' must be a non-empty path string in {config_path}")
    return (base / Path(value).expanduser()).resolve()


def _str(data: dict, key: str, default: str, config_path: Path) -> str:
    value = data.get(key, default)
    if not isinstance(value, str) or not value:
        raise ValueError(f"'{key}' must be a non-empty string in {config_path}")
    return value
