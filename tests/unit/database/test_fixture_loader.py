"""Tests for fixture file parsing."""

from pathlib import Path

import pytest

from installsim.database.loader import (
    find_fixture,
    load_bundle_catalog,
    load_release,
    load_repository_catalog,
    read_structured_file,
    repo_from_release_filename,
)
from installsim.errors import FixtureLoadError


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("jesseduffield_lazygit_latest.json", "jesseduffield/lazygit"),
        ("zellij-org_zellij_latest.yaml", "zellij-org/zellij"),
        ("owner_my_tool_latest.yml", "owner/my_tool"),
        ("lazygit_latest.json", None),
        ("owner_repo.json", None),
        ("owner_repo_latest.txt", None),
        ("README.md", None),
    ],
)
def test_repo_from_release_filename(filename: str, expected: str | None) -> None:
    assert repo_from_release_filename(filename) == expected


def test_find_fixture_prefers_json(tmp_path: Path) -> None:
    (tmp_path / "catalog.yaml").write_text("packages: {}\n", encoding="utf-8")
    (tmp_path / "catalog.json").write_text("{}", encoding="utf-8")

    assert find_fixture(tmp_path, "catalog") == tmp_path / "catalog.json"
    assert find_fixture(tmp_path, "missing") is None


def test_read_structured_file_accepts_yaml(tmp_path: Path) -> None:
    path = tmp_path / "data.yaml"
    path.write_text("packages:\n  vim:\n    version: '9.0'\n", encoding="utf-8")

    assert read_structured_file(path) == {"packages": {"vim": {"version": "9.0"}}}


def test_read_structured_file_rejects_invalid_syntax(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text('{"packages": [unclosed', encoding="utf-8")

    with pytest.raises(FixtureLoadError) as exc_info:
        read_structured_file(path)

    assert exc_info.value.path == path


def test_read_structured_file_rejects_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    with pytest.raises(FixtureLoadError, match="mapping"):
        read_structured_file(path)


def test_read_structured_file_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FixtureLoadError) as exc_info:
        read_structured_file(tmp_path / "absent.json")

    assert isinstance(exc_info.value.__cause__, OSError)


def test_repository_catalog_forces_method_and_source(tmp_path: Path) -> None:
    path = tmp_path / "available_packages.yaml"
    path.write_text(
        "packages:\n"
        "  vim:\n"
        "    version: '9.0'\n"
        "    method: bundle\n"
        "    source: elsewhere\n"
        "    dependencies: [libc6]\n"
        "repositories:\n"
        "  main:\n"
        "    url: http://archive.example.invalid/ubuntu\n"
        "    components: [main]\n",
        encoding="utf-8",
    )

    packages, repositories = load_repository_catalog(path)

    vim = packages["vim"]
    assert vim.method == "repository"
    assert vim.source == "vim"
    assert vim.dependencies == ("libc6",)
    assert vim.available is True
    assert repositories["main"].components == ("main",)


def test_repository_catalog_rejects_bad_size(tmp_path: Path) -> None:
    path = tmp_path / "available_packages.yaml"
    path.write_text("packages:\n  vim:\n    size: big\n", encoding="utf-8")

    with pytest.raises(FixtureLoadError, match="non-integer size"):
        load_repository_catalog(path)


def test_bundle_catalog_defaults(tmp_path: Path) -> None:
    path = tmp_path / "available_flatpaks.yaml"
    path.write_text("flatpaks:\n  org.example.App:\n    version: '1.0'\n", encoding="utf-8")

    bundles, remotes = load_bundle_catalog(path)

    bundle = bundles["org.example.App"]
    assert bundle.name == "org.example.App"
    assert bundle.id == "org.example.App"
    assert bundle.branch == "stable"
    assert bundle.permissions == ()
    assert remotes == {}


def test_load_release_requires_tag_name(tmp_path: Path) -> None:
    path = tmp_path / "owner_repo_latest.json"
    path.write_text('{"name": "untagged", "assets": []}', encoding="utf-8")

    with pytest.raises(FixtureLoadError, match="tag_name"):
        load_release(path)


def test_load_release_parses_assets(tmp_path: Path) -> None:
    path = tmp_path / "owner_repo_latest.yaml"
    path.write_text(
        "tag_name: v2.1.0\n"
        "assets:\n"
        "  - id: 7\n"
        "    name: repo-2.1.0-Linux-x86_64.tar.gz\n"
        "    size: 1024\n",
        encoding="utf-8",
    )

    release = load_release(path)

    assert release.tag_name == "v2.1.0"
    assert release.name == "v2.1.0"
    assert release.find_asset("LINUX") == release.assets[0]
    assert release.find_asset("windows") is None
