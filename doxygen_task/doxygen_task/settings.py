"""Task inputs as exposed by the pipeline agent and their resolution."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.models import (
    DEFAULT_DOXYGEN,
    DEFAULT_FILE_PATTERN,
    DEFAULT_PROJECT_NAME,
    DEFAULT_PROJECT_VERSION,
    TaskConfig,
)

logger = logging.getLogger(__name__)


class TaskInputs(BaseSettings):
    """Raw task inputs.

    The agent exports every task input ``Name`` as ``INPUT_NAME``. Values are
    kept as strings here; defaults and coercion happen in ``resolve_config``.
    """

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")

    source_directory: str | None = Field(
        default=None, validation_alias="INPUT_SOURCEDIRECTORY"
    )
    output_directory: str | None = Field(
        default=None, validation_alias="INPUT_OUTPUTDIRECTORY"
    )
    project_name: str | None = Field(default=None, validation_alias="INPUT_PROJECTNAME")
    project_version: str | None = Field(
        default=None, validation_alias="INPUT_PROJECTVERSION"
    )
    source_file_pattern: str | None = Field(
        default=None, validation_alias="INPUT_SOURCEFILEPATTERN"
    )
    use_custom_doxyfile: str | None = Field(
        default=None, validation_alias="INPUT_USECUSTOMDOXYFILE"
    )
    custom_doxyfile_path: str | None = Field(
        default=None, validation_alias="INPUT_CUSTOMDOXYFILEPATH"
    )
    doxygen_path: str | None = Field(default=None, validation_alias="INPUT_DOXYGENPATH")


def parse_bool_input(value: str | None) -> bool:
    """Only a case-insensitive ``true`` counts, as in the agent task library."""
    return (value or "").strip().upper() == "TRUE"


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def _resolve_dir(value: str | None, cwd: Path, default: Path) -> Path:
    cleaned = _clean(value)
    if cleaned is None:
        return default
    path = Path(cleaned)
    return path if path.is_absolute() else cwd / path


def resolve_config(inputs: TaskInputs, cwd: Path | None = None) -> TaskConfig:
    """Fill in defaults for every blank input and build the task configuration."""
    base = cwd if cwd is not None else Path.cwd()

    custom_path = _clean(inputs.custom_doxyfile_path)
    config = TaskConfig(
        source_directory=_resolve_dir(inputs.source_directory, base, base),
        output_directory=_resolve_dir(inputs.output_directory, base, base / "docs"),
        project_name=_clean(inputs.project_name) or DEFAULT_PROJECT_NAME,
        project_version=_clean(inputs.project_version) or DEFAULT_PROJECT_VERSION,
        source_file_pattern=_clean(inputs.source_file_pattern) or DEFAULT_FILE_PATTERN,
        use_custom_config=parse_bool_input(inputs.use_custom_doxyfile),
        custom_config_path=Path(custom_path) if custom_path else None,
        doxygen_executable=_clean(inputs.doxygen_path) or DEFAULT_DOXYGEN,
    )
    logger.debug(f"Resolved task configuration: {config}")
    return config
