"""JSON output models for `installsim run --json`."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from installsim.cli.output import machine_output


class PhaseResult(BaseModel):
    """Outcome of one runner phase.

    Attributes:
        name: Phase name (prerequisites, fixtures, simulate, cleanup)
        success: Whether the phase completed without error
        duration_seconds: Wall-clock duration measured by the injected clock
        message: Summary or error message
        exit_code: Exit code the phase contributes when it fails
    """

    model_config = ConfigDict(strict=True)

    name: str
    success: bool
    duration_seconds: float = Field(ge=0)
    message: str = ""
    exit_code: int = Field(default=0, ge=0, le=255)


class RunReport(BaseModel):
    """Full report of a harness run."""

    model_config = ConfigDict(strict=True)

    success: bool
    exit_code: int = Field(ge=0, le=255)
    started_at: datetime
    finished_at: datetime
    phases: list[PhaseResult]
    findings: list[str] = Field(default_factory=list)
    installed: list[str] = Field(default_factory=list)
    root_dir: str | None = None


class ErrorResponse(BaseModel):
    """Pydantic model for error JSON responses.

    Attributes:
        error: Error message
        error_type: Error class name (e.g., "FixtureLoadError")
        exit_code: Exit code for the process
    """

    model_config = ConfigDict(strict=True)

    error: str
    error_type: str
    exit_code: int = Field(default=1, ge=0, le=255)


def _serialize_for_json(obj: Any) -> Any:
    if isinstance(obj, Path):
        return str(obj)
    if isinstance(obj, datetime):
        return obj.isoformat()
    if isinstance(obj, dict):
        return {key: _serialize_for_json(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_serialize_for_json(item) for item in obj]
    return obj


def emit_json(data: dict[str, Any]) -> None:
    """Output JSON data to stdout for machine consumption.

    For Pydantic models, call model.model_dump(mode="json") before passing
    to this function.
    """
    machine_output(json.dumps(_serialize_for_json(data), indent=2))


def emit_json_error(error: str, error_type: str, exit_code: int = 1) -> None:
    """Output an error as JSON and exit with exit_code.

    Raises:
        SystemExit: Always
    """
    response = ErrorResponse(error=error, error_type=error_type, exit_code=exit_code)
    emit_json(response.model_dump(mode="json"))
    raise SystemExit(exit_code)
