"""Errors raised while running the Doxygen task."""

from __future__ import annotations

from pathlib import Path


class DoxygenTaskError(Exception):
    """Base class for classified task failures."""


class GeneratorNotFoundError(DoxygenTaskError):
    """Raised when the doxygen executable cannot be invoked."""

    def __init__(self, executable: str) -> None:
        super().__init__(
            f"Doxygen not found: '{executable}' is not installed or not in PATH"
        )
        self.executable = executable


class MissingCustomConfigPathError(DoxygenTaskError):
    """Raised when custom configuration is requested without a path."""

    def __init__(self) -> None:
        super().__init__(
            "Custom Doxyfile path is required when using custom configuration file option"
        )


class ConfigFileNotFoundError(DoxygenTaskError):
    """Raised when the custom Doxyfile does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Custom Doxyfile not found: {path}")
        self.path = path


class GenerationFailedError(DoxygenTaskError):
    """Raised when the doxygen run itself fails."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Failed to generate documentation: {detail}")
        self.detail = detail


class PublishFailedError(DoxygenTaskError):
    """Raised when the host rejects the artifact upload."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Failed to publish artifacts: {detail}")
        self.detail = detail
