"""CLI option handling."""

from __future__ import annotations

from pathlib import Path

import typer

from ..settings import TaskInputs


def parse_directory(value: str | None) -> str | None:
    """Reject paths that exist but are not directories."""
    if value is None:
        return None
    if Path(value).exists() and not Path(value).is_dir():
        raise typer.BadParameter(f"Not a directory: {value!r}")
    return value


def merge_inputs(
    base: TaskInputs,
    *,
    source_dir: str | None = None,
    output_dir: str | None = None,
    project_name: str | None = None,
    project_version: str | None = None,
    file_pattern: str | None = None,
    custom_doxyfile: str | None = None,
    doxygen: str | None = None,
) -> TaskInputs:
    """Overlay command-line options on the environment-provided inputs.

    Passing a custom Doxyfile switches custom configuration mode on.
    """
    overrides: dict[str, str] = {}
    for field, value in (
        ("source_directory", parse_directory(source_dir)),
        ("output_directory", parse_directory(output_dir)),
        ("project_name", project_name),
        ("project_version", project_version),
        ("source_file_pattern", file_pattern),
        ("custom_doxyfile_path", custom_doxyfile),
        ("doxygen_path", doxygen),
    ):
        if value is not None:
            overrides[field] = value

    if custom_doxyfile is not None:
        overrides["use_custom_doxyfile"] = "true"

    return base.model_copy(update=overrides)
