"""Tests for the JSON output models."""

import pytest
from pydantic import ValidationError

from installsim.cli.json_output import ErrorResponse, PhaseResult


def test_error_response_rejects_out_of_range_exit_code() -> None:
    with pytest.raises(ValidationError):
        ErrorResponse(error="boom", error_type="RuntimeError", exit_code=300)


def test_phase_result_is_strict() -> None:
    with pytest.raises(ValidationError):
        PhaseResult(name="fixtures", success="yes", duration_seconds=0.5)


def test_phase_result_defaults() -> None:
    phase = PhaseResult(name="cleanup", success=True, duration_seconds=0.0)

    assert phase.model_dump(mode="json") == {
        "name": "cleanup",
        "success": True,
        "duration_seconds": 0.0,
        "message": "",
        "exit_code": 0,
    }
