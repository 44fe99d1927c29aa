"""Pipeline host adapters.

The task talks to its host through three calls: report the terminal result,
upload an artifact folder, and surface warnings/errors. On an Azure Pipelines
agent these become ``##vso[...]`` logging commands on stdout; elsewhere they
are plain log records.
"""

from __future__ import annotations

import logging
import os
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Literal, Mapping

from .core.models import TaskResult

logger = logging.getLogger(__name__)

IssueType = Literal["warning", "error"]


def escape_data(value: str) -> str:
    return value.replace("%", "%AZP25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    return escape_data(value).replace("]", "%5D").replace(";", "%3B")


def format_command(
    command: str, properties: Mapping[str, str] | None = None, message: str = ""
) -> str:
    """Format an agent logging command, e.g. ``##vso[task.complete result=Failed;]msg``."""
    props = ""
    if properties:
        props = " " + "".join(
            f"{key}={escape_property(value)};" for key, value in properties.items()
        )
    return f"##vso[{command}{props}]{escape_data(message)}"


class PipelineHost(ABC):
    """Interface the task uses to reach its host."""

    @abstractmethod
    def set_result(self, result: TaskResult, message: str) -> None:
        """Report the terminal task result."""

    @abstractmethod
    def upload_artifact(
        self, container_folder: str, path: Path, artifact_name: str
    ) -> None:
        """Publish the folder at ``path`` as a named artifact."""

    @abstractmethod
    def log_issue(self, issue_type: IssueType, message: str) -> None:
        """Surface a warning or error on the host."""


class AzurePipelinesHost(PipelineHost):
    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream = stream

    def _emit(
        self, command: str, properties: Mapping[str, str] | None, message: str
    ) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(format_command(command, properties, message) + "\n")
        stream.flush()

    def set_result(self, result: TaskResult, message: str) -> None:
        if result is TaskResult.FAILED and message:
            self.log_issue("error", message)
        self._emit("task.complete", {"result": result.value}, message)

    def upload_artifact(
        self, container_folder: str, path: Path, artifact_name: str
    ) -> None:
        self._emit(
            "artifact.upload",
            {"containerfolder": container_folder, "artifactname": artifact_name},
            str(path),
        )

    def log_issue(self, issue_type: IssueType, message: str) -> None:
        self._emit("task.logissue", {"type": issue_type}, message)


class LocalHost(PipelineHost):
    """Host used when running outside a pipeline agent."""

    def __init__(self) -> None:
        self.result: TaskResult | None = None
        self.message: str | None = None

    def set_result(self, result: TaskResult, message: str) -> None:
        self.result = result
        self.message = message
        level = logging.INFO if result is TaskResult.SUCCEEDED else logging.ERROR
        logger.log(level, f"Task result: {result.value}: {message}")

    def upload_artifact(
        self, container_folder: str, path: Path, artifact_name: str
    ) -> None:
        if not path.is_dir():
            raise FileNotFoundError(f"Artifact folder not found: {path}")
        logger.info(f"Artifact '{artifact_name}' available at {path}")

    def log_issue(self, issue_type: IssueType, message: str) -> None:
        level = logging.WARNING if issue_type == "warning" else logging.ERROR
        logger.log(level, message)


def detect_host(environ: Mapping[str, str] | None = None) -> PipelineHost:
    """Pick the Azure Pipelines host when running on an agent (``TF_BUILD`` set)."""
    env = environ if environ is not None else os.environ
    if env.get("TF_BUILD"):
        logger.debug("Azure Pipelines agent detected")
        return AzurePipelinesHost()
    return LocalHost()
