"""Offline simulation harness for package-installation tooling."""
