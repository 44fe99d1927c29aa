"""Domain models for the Doxygen task configuration and outcome."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PROJECT_NAME = "My Project"
DEFAULT_PROJECT_VERSION = "1.0"
DEFAULT_FILE_PATTERN = "*.c *.cpp *.h *.hpp"
DEFAULT_DOXYGEN = "doxygen"
ARTIFACT_NAME = "documentation"


class TaskResult(str, Enum):
    """Terminal task states understood by the pipeline host."""

    SUCCEEDED = "Succeeded"
    FAILED = "Failed"


class TaskConfig(BaseModel):
    """Inputs for a single task run, resolved once and never mutated."""

    model_config = ConfigDict(frozen=True)

    source_directory: Path = Field(..., description="Root of the sources to document")
    output_directory: Path = Field(..., description="Where doxygen writes its output")
    project_name: str = Field(default=DEFAULT_PROJECT_NAME)
    project_version: str = Field(default=DEFAULT_PROJECT_VERSION)
    source_file_pattern: str = Field(
        default=DEFAULT_FILE_PATTERN, description="Space separated glob list"
    )
    use_custom_config: bool = Field(default=False)
    custom_config_path: Path | None = Field(
        default=None, description="User Doxyfile, relative to source_directory"
    )
    doxygen_executable: str = Field(default=DEFAULT_DOXYGEN)

    @field_validator("source_directory", "output_directory")
    @classmethod
    def _absolute_directory(cls, value: Path) -> Path:
        # Pinned to the cwd at construction; doxygen later runs from source_directory.
        return value.absolute()

    def resolved_custom_config_path(self) -> Path | None:
        if self.custom_config_path is None:
            return None
        return (self.source_directory / self.custom_config_path).resolve()
