"""End-to-end install scenarios against the bundled fixtures."""

from pathlib import Path

from installsim.database import PackageDatabase, PackageMetadata
from installsim.filesystem import VirtualRoot

SCENARIO = ["vim", "git", "btop", "neovim"]


def test_scenario_installs_into_fresh_root(virtual_root: VirtualRoot) -> None:
    for package in SCENARIO:
        virtual_root.simulate_install(package)
        virtual_root.validate_installation(package)

    installed = virtual_root.get_installed_packages()

    assert set(SCENARIO) <= set(installed)
    assert virtual_root.status_path.read_text(encoding="ascii").count("Package: ") == 4


def test_every_bundled_package_installs(tmp_path: Path, database: PackageDatabase) -> None:
    with VirtualRoot(tmp_path / "root", create_binaries=False, database=database) as vroot:
        for name in sorted(database.get_all_packages()):
            vroot.simulate_install(name)
            vroot.validate_installation(name)


def test_missing_dependency_gives_single_finding(database: PackageDatabase) -> None:
    database.add_package(
        PackageMetadata(
            name="orphan-tool",
            version="0.1",
            method="repository",
            source="orphan-tool",
            dependencies=("libc6", "libmissing1"),
        )
    )

    findings = database.validate()

    assert len(findings) == 1
    assert "libmissing1" in findings[0]


def test_cleanup_removes_everything(tmp_path: Path, database: PackageDatabase) -> None:
    vroot = VirtualRoot(tmp_path / "root", database=database)
    for package in SCENARIO:
        vroot.simulate_install(package)

    vroot.cleanup()

    assert not (tmp_path / "root").exists()
    assert list(tmp_path.iterdir()) == []
    vroot.cleanup()
