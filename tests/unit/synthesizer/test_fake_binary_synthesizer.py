"""Tests for FakeBinarySynthesizer file management."""

import os
from pathlib import Path

import pytest

from installsim.errors import BinaryNotFoundError, NotExecutableError, SynthesisError
from installsim.synthesizer import (
    APPLICATION_PROFILES,
    COMMON_PROFILES,
    DESKTOP_ENTRIES,
    BinaryProfile,
    FakeBinarySynthesizer,
    is_executable,
)


def test_create_binary_writes_executable_stub(tmp_path: Path) -> None:
    synth = FakeBinarySynthesizer(tmp_path / "bin")

    path = synth.create_binary(BinaryProfile(name="tool", version="1.0"))

    assert path == tmp_path / "bin" / "tool"
    assert path.read_text(encoding="utf-8").startswith("#!/bin/sh")
    assert is_executable(path)
    assert path.stat().st_mode & 0o777 == 0o755


def test_create_binary_overwrites_existing_stub(tmp_path: Path) -> None:
    synth = FakeBinarySynthesizer(tmp_path / "bin")
    synth.create_binary(BinaryProfile(name="tool", version="1.0"))

    path = synth.create_binary(BinaryProfile(name="tool", version="2.0"))

    assert "version 2.0" in path.read_text(encoding="utf-8")


def test_create_binary_reports_write_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "bin"
    blocker.write_text("not a directory", encoding="utf-8")
    synth = FakeBinarySynthesizer(blocker)

    with pytest.raises(SynthesisError) as exc_info:
        synth.create_binary(BinaryProfile(name="tool", version="1.0"))

    assert exc_info.value.name == "tool"


def test_catalogs_create_every_profile(tmp_path: Path) -> None:
    synth = FakeBinarySynthesizer(tmp_path / "bin")

    synth.create_common_binaries()
    synth.create_application_binaries()

    expected = {p.name for p in COMMON_PROFILES} | {p.name for p in APPLICATION_PROFILES}
    assert set(synth.list_created_binaries()) == expected


def test_list_created_binaries_is_sorted_and_skips_plain_files(tmp_path: Path) -> None:
    synth = FakeBinarySynthesizer(tmp_path / "bin")
    synth.create_binary(BinaryProfile(name="zeta", version="1"))
    synth.create_binary(BinaryProfile(name="alpha", version="1"))
    (tmp_path / "bin" / "README").write_text("docs", encoding="utf-8")

    assert synth.list_created_binaries() == ["alpha", "zeta"]


def test_list_created_binaries_without_directory(tmp_path: Path) -> None:
    assert FakeBinarySynthesizer(tmp_path / "missing").list_created_binaries() == []


def test_validate_binary(tmp_path: Path) -> None:
    synth = FakeBinarySynthesizer(tmp_path / "bin")
    path = synth.create_binary(BinaryProfile(name="tool", version="1.0"))

    synth.validate_binary("tool")

    with pytest.raises(BinaryNotFoundError):
        synth.validate_binary("other")

    os.chmod(path, 0o644)
    with pytest.raises(NotExecutableError) as exc_info:
        synth.validate_binary("tool")
    assert exc_info.value.path == path


def test_create_desktop_entries(tmp_path: Path) -> None:
    synth = FakeBinarySynthesizer(tmp_path / "bin")
    desktop_dir = tmp_path / "applications"

    written = synth.create_desktop_entries(desktop_dir)

    assert sorted(p.name for p in written) == sorted(DESKTOP_ENTRIES)
    code = (desktop_dir / "code.desktop").read_text(encoding="utf-8")
    assert code.startswith("[Desktop Entry]")
    assert "Name=Visual Studio Code" in code


def test_cleanup_removes_directory_and_is_repeatable(tmp_path: Path) -> None:
    synth = FakeBinarySynthesizer(tmp_path / "bin")
    synth.create_binary(BinaryProfile(name="tool", version="1.0"))

    synth.cleanup()
    synth.cleanup()

    assert not (tmp_path / "bin").exists()
    assert synth.list_created_binaries() == []
