"""Shared fixtures for doxygen-task tests."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import Mock

import pytest

from doxygen_task.core.models import TaskConfig
from doxygen_task.host import PipelineHost

INPUT_VARIABLES = (
    "INPUT_SOURCEDIRECTORY",
    "INPUT_OUTPUTDIRECTORY",
    "INPUT_PROJECTNAME",
    "INPUT_PROJECTVERSION",
    "INPUT_SOURCEFILEPATTERN",
    "INPUT_USECUSTOMDOXYFILE",
    "INPUT_CUSTOMDOXYFILEPATH",
    "INPUT_DOXYGENPATH",
    "TF_BUILD",
)


class FakeDoxygen:
    """Stand-in for ``run_logged`` that records doxygen invocations."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.version_error: Exception | None = None
        self.run_error: Exception | None = None
        self.stdout = "Generating docs...\n"
        self.stderr = ""
        self.doxyfile_text: str | None = None
        self.doxyfile_path: Path | None = None
        self.cwd_during_run: Path | None = None

    def __call__(self, cmd, **kwargs) -> subprocess.CompletedProcess[str]:
        cmd_list = list(cmd)
        self.calls.append(cmd_list)
        if cmd_list[1:] == ["--version"]:
            if self.version_error is not None:
                raise self.version_error
            return subprocess.CompletedProcess(cmd_list, 0, stdout="1.9.8\n", stderr="")

        self.doxyfile_path = Path(cmd_list[1])
        self.doxyfile_text = self.doxyfile_path.read_text(encoding="utf-8")
        self.cwd_during_run = Path.cwd()
        if self.run_error is not None:
            raise self.run_error
        return subprocess.CompletedProcess(
            cmd_list, 0, stdout=self.stdout, stderr=self.stderr
        )

    @property
    def generation_calls(self) -> list[list[str]]:
        return [call for call in self.calls if call[1:] != ["--version"]]


@pytest.fixture(autouse=True)
def clean_task_env(monkeypatch):
    """Keep agent variables from the surrounding environment out of tests."""
    for name in INPUT_VARIABLES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """A scratch working directory the tests start in."""
    path = tmp_path / "work"
    path.mkdir()
    monkeypatch.chdir(path)
    return path


@pytest.fixture
def source_dir(tmp_path):
    path = tmp_path / "source"
    path.mkdir()
    (path / "main.cpp").write_text("/** Entry point. */\nint main() { return 0; }\n")
    return path


@pytest.fixture
def output_dir(tmp_path):
    return tmp_path / "output" / "docs"


@pytest.fixture
def config(source_dir, output_dir):
    return TaskConfig(
        source_directory=source_dir,
        output_directory=output_dir,
        project_name="Test Project",
        project_version="1.0.0",
        source_file_pattern="*.cpp *.h",
    )


@pytest.fixture
def host():
    return Mock(spec=PipelineHost)


@pytest.fixture
def fake_doxygen(monkeypatch):
    fake = FakeDoxygen()
    monkeypatch.setattr("doxygen_task.task.run_logged", fake)
    return fake
