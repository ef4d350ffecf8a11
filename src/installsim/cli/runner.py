"""Phase runner behind `installsim run`.

Runs prerequisites -> fixtures -> simulate -> cleanup. The first failing
phase decides the exit code and skips the phases after it, except cleanup,
which always runs once a scenario root exists.
"""

import logging
import shutil
import tempfile
from collections.abc import Callable
from pathlib import Path

from installsim.cli import exit_codes
from installsim.cli.json_output import PhaseResult, RunReport
from installsim.config import HarnessConfig
from installsim.database import PackageDatabase
from installsim.database.loader import (
    BUNDLE_CATALOG_DIR,
    BUNDLE_CATALOG_STEM,
    REPOSITORY_CATALOG_DIR,
    REPOSITORY_CATALOG_STEM,
    find_fixture,
)
from installsim.errors import FixtureLoadError, SimulationError
from installsim.filesystem import VirtualRoot
from installsim.integrations.command import CommandExecutor
from installsim.integrations.time import Time

logger = logging.getLogger(__name__)

ROOT_DIR_PREFIX = "installsim-"


class PhaseFailedError(Exception):
    """Raised inside a phase to stop the run with a specific exit code."""

    def __init__(self, message: str, exit_code: int) -> None:
        self.exit_code = exit_code
        super().__init__(message)


class PhaseRunner:
    """Runs the harness phases against one configuration.

    The clock and the command executor are injected so tests can run the
    whole pipeline deterministically.
    """

    def __init__(self, config: HarnessConfig, *, time: Time, executor: CommandExecutor) -> None:
        self._config = config
        self._time = time
        self._executor = executor
        self._phases: list[PhaseResult] = []
        self._database: PackageDatabase | None = None
        self._findings: list[str] = []
        self._installed: list[str] = []
        self._root_dir: Path | None = None
        self._vroot: VirtualRoot | None = None

    def run(self) -> RunReport:
        started_at = self._time.now()

        exit_code = exit_codes.SUCCESS
        try:
            for name, phase in (
                ("prerequisites", self._check_prerequisites),
                ("fixtures", self._load_fixtures),
                ("simulate", self._simulate_scenario),
            ):
                if not self._run_phase(name, phase):
                    exit_code = self._phases[-1].exit_code
                    break
        finally:
            if self._root_dir is not None:
                cleaned = self._run_phase("cleanup", self._cleanup)
                if not cleaned and exit_code == exit_codes.SUCCESS:
                    exit_code = self._phases[-1].exit_code

        return RunReport(
            success=exit_code == exit_codes.SUCCESS,
            exit_code=exit_code,
            started_at=started_at,
            finished_at=self._time.now(),
            phases=list(self._phases),
            findings=list(self._findings),
            installed=list(self._installed),
            root_dir=str(self._root_dir) if self._root_dir is not None else None,
        )

    def _run_phase(self, name: str, phase: Callable[[], str]) -> bool:
        logger.info(f"Phase {name}: starting")
        start = self._time.now()
        try:
            message = phase()
        except PhaseFailedError as e:
            duration = (self._time.now() - start).total_seconds()
            logger.error(f"Phase {name} failed: {e}")
            self._phases.append(
                PhaseResult(
                    name=name,
                    success=False,
                    duration_seconds=duration,
                    message=str(e),
                    exit_code=e.exit_code,
                )
            )
            return False

        duration = (self._time.now() - start).total_seconds()
        logger.info(f"Phase {name}: {message}")
        self._phases.append(
            PhaseResult(name=name, success=True, duration_seconds=duration, message=message)
        )
        return True

    def _check_prerequisites(self) -> str:
        try:
            response = self._executor.execute("sh", "-c", "exit 0")
        except RuntimeError as e:
            raise PhaseFailedError(
                f"POSIX shell unavailable: {e}", exit_codes.PREREQUISITES_FAILED
            ) from e
        if not response.success:
            raise PhaseFailedError(
                f"POSIX shell check exited with {response.exit_code}",
                exit_codes.PREREQUISITES_FAILED,
            )
        return "POSIX shell available"

    def _load_fixtures(self) -> str:
        fixtures_dir = self._config.fixtures_dir
        if not fixtures_dir.is_dir():
            raise PhaseFailedError(
                f"Fixture directory not found: {fixtures_dir}", exit_codes.MISSING_FIXTURES
            )
        for directory, stem in (
            (REPOSITORY_CATALOG_DIR, REPOSITORY_CATALOG_STEM),
            (BUNDLE_CATALOG_DIR, BUNDLE_CATALOG_STEM),
        ):
            if find_fixture(fixtures_dir / directory, stem) is None:
                raise PhaseFailedError(
                    f"Required catalog missing: {fixtures_dir / directory / stem}.*",
                    exit_codes.MISSING_FIXTURES,
                )

        try:
            self._database = PackageDatabase.from_fixtures(fixtures_dir)
        except FixtureLoadError as e:
            if isinstance(e.__cause__, OSError):
                raise PhaseFailedError(str(e), exit_codes.FIXTURE_LOAD_FAILED) from e
            raise PhaseFailedError(str(e), exit_codes.CORRUPTED_FIXTURES) from e

        self._findings = self._database.validate(self._config.platform)
        for finding in self._findings:
            logger.warning(finding)
        if len(self._findings) > self._config.max_findings:
            raise PhaseFailedError(
                f"{len(self._findings)} validation findings exceed the threshold of "
                f"{self._config.max_findings}",
                exit_codes.VALIDATION_THRESHOLD_EXCEEDED,
            )

        total = self._database.statistics()["total_packages"]
        return f"loaded {total} packages with {len(self._findings)} findings"

    def _simulate_scenario(self) -> str:
        assert self._database is not None

        parent = self._config.temp_dir
        try:
            if parent is not None:
                parent.mkdir(parents=True, exist_ok=True)
            self._root_dir = Path(tempfile.mkdtemp(prefix=ROOT_DIR_PREFIX, dir=parent))

            self._vroot = VirtualRoot(
                self._root_dir,
                database=self._database,
                home_user=self._config.home_user,
            )
            for package in self._config.scenario:
                self._vroot.simulate_install(package)
                self._vroot.validate_installation(package)
                self._installed.append(package)
        except SimulationError as e:
            raise PhaseFailedError(str(e), exit_codes.SIMULATION_FAILED) from e
        except PermissionError as e:
            raise PhaseFailedError(
                f"Permission denied during simulation: {e}", exit_codes.PERMISSION_DENIED
            ) from e
        except OSError as e:
            raise PhaseFailedError(
                f"Filesystem error during simulation: {e}", exit_codes.RESOURCES_EXHAUSTED
            ) from e

        return f"installed {len(self._installed)} packages into {self._root_dir}"

    def _cleanup(self) -> str:
        assert self._root_dir is not None
        try:
            if self._vroot is not None:
                self._vroot.cleanup()
            elif self._root_dir.exists():
                shutil.rmtree(self._root_dir)
        except OSError as e:
            raise PhaseFailedError(
                f"Failed to remove {self._root_dir}: {e}", exit_codes.CLEANUP_FAILED
            ) from e
        return f"removed {self._root_dir}"
