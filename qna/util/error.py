"""Errors raised while assembling the application, before any request runs."""

from pathlib import Path


class UtilError(Exception):
    """Base utility error."""


class ConfigurationError(UtilError):
    """Settings are present but unusable."""


class SeedFileError(ConfigurationError):
    """The seed file for the memory store could not be loaded."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Seed file {path}: {reason}")


class DependencyInjectionError(UtilError):
    """No provider matches the requested component and mode."""
