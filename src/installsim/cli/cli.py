from pathlib import Path

import click

from installsim.cli import exit_codes
from installsim.cli.error_boundary import cli_error_boundary
from installsim.cli.json_output import emit_json, emit_json_error
from installsim.cli.output import configure_logging, machine_output, user_output
from installsim.cli.runner import PhaseRunner
from installsim.config import DEFAULT_CONFIG_FILENAME, HarnessConfig, load_harness_config
from installsim.database import INSTALL_METHODS, PackageDatabase
from installsim.database.types import validate_install_method
from installsim.filesystem import VirtualRoot
from installsim.fixtures import bundled_fixtures_dir
from installsim.integrations.command import RealCommandExecutor
from installsim.integrations.releases import OfflineReleaseClient
from installsim.integrations.time import RealTime

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

fixtures_option = click.option(
    "--fixtures",
    "fixtures_dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Fixture directory (default: the bundled fixture set).",
)


def _database(fixtures_dir: Path | None) -> PackageDatabase:
    return PackageDatabase.from_fixtures(fixtures_dir or bundled_fixtures_dir())


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="installsim")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """Offline simulation harness for package-installation tooling."""
    configure_logging(verbose=verbose)


@cli.command("run")
@click.option("-q", "--quiet", is_flag=True, help="Only log warnings and errors.")
@click.option("-j", "--json", "as_json", is_flag=True, help="Print a JSON report to stdout.")
@fixtures_option
@click.option(
    "--temp-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Parent directory for the scenario root.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help=f"Harness config file (default: ./{DEFAULT_CONFIG_FILENAME} if present).",
)
def run_cmd(
    quiet: bool,
    as_json: bool,
    fixtures_dir: Path | None,
    temp_dir: Path | None,
    config_path: Path | None,
) -> None:
    """Run prerequisites, fixture, simulation and cleanup phases."""
    if quiet:
        configure_logging(quiet=True)

    if config_path is None and Path(DEFAULT_CONFIG_FILENAME).is_file():
        config_path = Path(DEFAULT_CONFIG_FILENAME)

    config = HarnessConfig()
    if config_path is not None:
        try:
            config = load_harness_config(config_path)
        except (FileNotFoundError, ValueError) as e:
            if as_json:
                emit_json_error(str(e), type(e).__name__, exit_code=exit_codes.INVALID_CONFIG)
            user_output(click.style(f"Error: {e}", fg="red"))
            raise SystemExit(exit_codes.INVALID_CONFIG) from None

    config = HarnessConfig(
        fixtures_dir=fixtures_dir or config.fixtures_dir,
        temp_dir=temp_dir or config.temp_dir,
        scenario=config.scenario,
        max_findings=config.max_findings,
        platform=config.platform,
        home_user=config.home_user,
    )

    runner = PhaseRunner(config, time=RealTime(), executor=RealCommandExecutor())
    report = runner.run()

    if as_json:
        emit_json(report.model_dump(mode="json"))
    else:
        for phase in report.phases:
            if phase.success:
                status = click.style("PASS", fg="green")
            else:
                status = click.style("FAIL", fg="red")
            user_output(f"{status} {phase.name} ({phase.duration_seconds:.2f}s): {phase.message}")
        if report.success:
            user_output(click.style("All phases passed", fg="green", bold=True))
        else:
            user_output(click.style(f"Run failed with exit code {report.exit_code}", fg="red"))

    raise SystemExit(report.exit_code)


@cli.command("stats")
@fixtures_option
@cli_error_boundary
def stats_cmd(fixtures_dir: Path | None) -> None:
    """Print database statistics as JSON."""
    emit_json(_database(fixtures_dir).statistics())


@cli.command("validate")
@fixtures_option
@click.option("--platform", default="linux", show_default=True, help="Required asset platform.")
@click.option("--max-findings", type=click.IntRange(min=0), default=0, show_default=True)
@cli_error_boundary
def validate_cmd(fixtures_dir: Path | None, platform: str, max_findings: int) -> None:
    """Check fixtures for missing dependencies and platform-less releases."""
    findings = _database(fixtures_dir).validate(platform)
    for finding in findings:
        machine_output(finding)

    if len(findings) > max_findings:
        user_output(click.style(f"{len(findings)} findings (allowed: {max_findings})", fg="red"))
        raise SystemExit(1)
    user_output(click.style(f"{len(findings)} findings", fg="green"))


@cli.command("search")
@click.argument("query")
@fixtures_option
@click.option("--method", type=click.Choice(INSTALL_METHODS), default=None)
@cli_error_boundary
def search_cmd(query: str, fixtures_dir: Path | None, method: str | None) -> None:
    """Search packages by name or description."""
    matches = _database(fixtures_dir).search_packages(query)
    if method is not None:
        wanted = validate_install_method(method)
        matches = [pkg for pkg in matches if pkg.method == wanted]

    for pkg in sorted(matches, key=lambda p: p.name):
        machine_output(f"{pkg.name}\t{pkg.version}\t{pkg.method}")
    if not matches:
        user_output(f"No packages match '{query}'")


@cli.command("release")
@click.argument("repo")
@fixtures_option
@click.option("--platform", default="linux", show_default=True)
@cli_error_boundary
def release_cmd(repo: str, fixtures_dir: Path | None, platform: str) -> None:
    """Show the latest release of OWNER/REPO from fixtures."""
    release = OfflineReleaseClient(_database(fixtures_dir)).get_latest_release(repo)
    machine_output(release.tag_name)
    asset = release.find_asset(platform)
    if asset is None:
        user_output(f"No {platform} asset in {repo} {release.tag_name}")
        return
    machine_output(asset.browser_download_url)


@cli.command("simulate")
@click.argument("packages", nargs=-1, required=True)
@click.option(
    "--root",
    "root_dir",
    type=click.Path(path_type=Path, file_okay=False),
    required=True,
    help="Directory to use as the virtual root.",
)
@fixtures_option
@click.option("--keep", is_flag=True, help="Leave the root in place afterwards.")
@cli_error_boundary
def simulate_cmd(
    packages: tuple[str, ...], root_dir: Path, fixtures_dir: Path | None, keep: bool
) -> None:
    """Simulate installing PACKAGES into a virtual root."""
    vroot = VirtualRoot(root_dir, database=_database(fixtures_dir))
    try:
        for package in packages:
            vroot.simulate_install(package)
            vroot.validate_installation(package)
            user_output(f"Installed {package}")
        for name in vroot.get_installed_packages():
            machine_output(name)
    finally:
        if not keep:
            vroot.cleanup()


@cli.command("export")
@click.argument("output", type=click.Path(path_type=Path, dir_okay=False))
@fixtures_option
@cli_error_boundary
def export_cmd(output: Path, fixtures_dir: Path | None) -> None:
    """Write every database index to OUTPUT as JSON."""
    _database(fixtures_dir).export_json(output)
    user_output(f"Exported database to {output}")


def main() -> None:
    """CLI entry point used by the `installsim` console script."""
    cli()
