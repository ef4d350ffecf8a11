"""Tests for fake-binary script rendering."""

from installsim.synthesizer import BinaryProfile, render_stub


def test_stub_is_posix_shell_script() -> None:
    script = render_stub(BinaryProfile(name="tool", version="1.0"))

    assert script.startswith("#!/bin/sh\n")
    assert script.endswith("\n")
    assert "# Fake tool binary (version 1.0)" in script


def test_default_banner_and_help() -> None:
    script = render_stub(BinaryProfile(name="tool", version="1.0"))

    assert "printf '%s\\n' 'Fake tool version 1.0'" in script
    assert "--help|-h) printf '%s\\n' 'Usage: tool [options]' ;;" in script
    assert "*) printf 'Unknown option: %s\\n' \"$1\" ;;" in script


def test_empty_output_key_replaces_banner() -> None:
    script = render_stub(
        BinaryProfile(name="fetch", version="2.0", outputs={"": "System info"})
    )

    assert "'System info'" in script
    assert "Fake fetch version" not in script


def test_exit_codes_checked_before_outputs() -> None:
    script = render_stub(
        BinaryProfile(
            name="gh",
            version="2.0",
            outputs={"auth status": "Logged in"},
            exit_codes={"auth status --hostname bad": 4},
        )
    )

    exit_check = "if [ \"$*\" = 'auth status --hostname bad' ]; then exit 4; fi"
    assert exit_check in script
    assert script.index(exit_check) < script.index("'auth status') ")


def test_profile_text_is_shell_quoted() -> None:
    script = render_stub(
        BinaryProfile(name="tool", version="1.0", flags={"--name": "it's $(rm -rf /)"})
    )

    assert "'it'\"'\"'s $(rm -rf /)'" in script
