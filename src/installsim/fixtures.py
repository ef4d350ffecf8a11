"""Location of the fixture set bundled with the package."""

from pathlib import Path


def bundled_fixtures_dir() -> Path:
    """Return the directory holding the bundled `packages/` fixture tree."""
    return Path(__file__).parent / "data" / "fixtures"
