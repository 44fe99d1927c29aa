from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from doxygen_task.settings import TaskInputs, parse_bool_input, resolve_config


def test_defaults_when_no_inputs(tmp_path):
    config = resolve_config(TaskInputs(), cwd=tmp_path)

    assert config.source_directory == tmp_path
    assert config.output_directory == tmp_path / "docs"
    assert config.project_name == "My Project"
    assert config.project_version == "1.0"
    assert config.source_file_pattern == "*.c *.cpp *.h *.hpp"
    assert config.use_custom_config is False
    assert config.custom_config_path is None
    assert config.doxygen_executable == "doxygen"


def test_reads_agent_input_variables(tmp_path, monkeypatch):
    monkeypatch.setenv("INPUT_SOURCEDIRECTORY", "/test/source")
    monkeypatch.setenv("INPUT_OUTPUTDIRECTORY", "/test/output")
    monkeypatch.setenv("INPUT_PROJECTNAME", "Test Project")
    monkeypatch.setenv("INPUT_PROJECTVERSION", "1.0.0")
    monkeypatch.setenv("INPUT_SOURCEFILEPATTERN", "*.cpp *.h")
    monkeypatch.setenv("INPUT_USECUSTOMDOXYFILE", "True")
    monkeypatch.setenv("INPUT_CUSTOMDOXYFILEPATH", "config/Doxyfile")

    config = resolve_config(TaskInputs(), cwd=tmp_path)

    assert config.source_directory == Path("/test/source")
    assert config.output_directory == Path("/test/output")
    assert config.project_name == "Test Project"
    assert config.project_version == "1.0.0"
    assert config.source_file_pattern == "*.cpp *.h"
    assert config.use_custom_config is True
    assert config.custom_config_path == Path("config/Doxyfile")


def test_ignores_variables_outside_input_prefix(tmp_path, monkeypatch):
    monkeypatch.setenv("PROJECT_NAME", "Leaked")
    monkeypatch.setenv("PROJECT_VERSION", "9.9")
    monkeypatch.setenv("SOURCE_FILE_PATTERN", "*.py")
    monkeypatch.setenv("DOXYGEN_PATH", "/leaked/doxygen")
    monkeypatch.setenv("OUTPUT_DIRECTORY", "/leaked/out")

    config = resolve_config(TaskInputs(), cwd=tmp_path)

    assert config.project_name == "My Project"
    assert config.project_version == "1.0"
    assert config.source_file_pattern == "*.c *.cpp *.h *.hpp"
    assert config.doxygen_executable == "doxygen"
    assert config.output_directory == tmp_path / "docs"


@pytest.mark.parametrize("version", [None, "", "   "])
def test_blank_version_falls_back_to_default(tmp_path, version):
    config = resolve_config(TaskInputs(INPUT_PROJECTVERSION=version), cwd=tmp_path)

    assert config.project_version == "1.0"


def test_relative_directories_resolve_against_cwd(tmp_path):
    inputs = TaskInputs(INPUT_SOURCEDIRECTORY="src", INPUT_OUTPUTDIRECTORY="build/docs")

    config = resolve_config(inputs, cwd=tmp_path)

    assert config.source_directory == tmp_path / "src"
    assert config.output_directory == tmp_path / "build" / "docs"


def test_resolved_config_is_immutable(tmp_path):
    config = resolve_config(TaskInputs(), cwd=tmp_path)

    with pytest.raises(ValidationError):
        config.project_name = "Other"  # type: ignore[misc]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("true", True), ("TRUE", True), (" True ", True), ("false", False), ("yes", False), ("", False), (None, False)],
)
def test_parse_bool_input(raw, expected):
    assert parse_bool_input(raw) is expected
