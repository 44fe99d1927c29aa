"""Doxygen documentation task: validate, generate, publish."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from ._utils import run_logged, working_directory
from .core.errors import (
    ConfigFileNotFoundError,
    DoxygenTaskError,
    GenerationFailedError,
    GeneratorNotFoundError,
    MissingCustomConfigPathError,
    PublishFailedError,
)
from .core.models import ARTIFACT_NAME, TaskConfig, TaskResult
from .host import PipelineHost, detect_host
from .rendering.engine import build_config_text
from .rendering.io import temporary_doxyfile
from .settings import TaskInputs, resolve_config

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Documentation generated successfully"


class DoxygenTask:
    """One run of the documentation task against a pipeline host."""

    def __init__(
        self, config: TaskConfig | None = None, host: PipelineHost | None = None
    ) -> None:
        self.config = config if config is not None else resolve_config(TaskInputs())
        self.host = host if host is not None else detect_host()

    def check_doxygen_installation(self) -> bool:
        executable = self.config.doxygen_executable
        try:
            result = run_logged([executable, "--version"])
        except (OSError, subprocess.CalledProcessError) as exc:
            logger.error(f"Doxygen not found in PATH: {exc}")
            return False
        logger.info(f"Doxygen found and available: {result.stdout.strip()}")
        return True

    def validate_inputs(self) -> None:
        """Check every precondition before anything runs.

        Raises:
            GeneratorNotFoundError: doxygen cannot be invoked
            MissingCustomConfigPathError: custom mode without a Doxyfile path
            ConfigFileNotFoundError: the custom Doxyfile does not exist
        """
        if not self.check_doxygen_installation():
            raise GeneratorNotFoundError(self.config.doxygen_executable)

        if self.config.use_custom_config:
            config_path = self.config.resolved_custom_config_path()
            if config_path is None:
                raise MissingCustomConfigPathError()
            if not config_path.is_file():
                raise ConfigFileNotFoundError(config_path)

        self.config.output_directory.mkdir(parents=True, exist_ok=True)

    def generate_documentation(self) -> None:
        config = self.config
        logger.info(f"Generating documentation for project: {config.project_name}")
        logger.info(f"Project version: {config.project_version}")
        logger.info(f"Source directory: {config.source_directory}")
        logger.info(f"Output directory: {config.output_directory}")
        logger.info(f"Source file pattern: {config.source_file_pattern}")

        try:
            with working_directory(config.source_directory):
                config_text = build_config_text(config)
                with temporary_doxyfile(Path.cwd(), config_text) as doxyfile:
                    result = run_logged([config.doxygen_executable, str(doxyfile)])
        except subprocess.CalledProcessError as exc:
            detail = str(exc)
            if exc.stderr:
                detail = f"{detail}\n{exc.stderr.strip()}"
            raise GenerationFailedError(detail) from exc
        except OSError as exc:
            raise GenerationFailedError(str(exc)) from exc

        if result.stdout:
            logger.info(f"Doxygen output:\n{result.stdout}")
        if result.stderr:
            message = f"Doxygen warnings:\n{result.stderr}"
            logger.warning(message)
            self.host.log_issue("warning", message)

        logger.info(f"Documentation generated in {config.output_directory}")

    def publish_artifacts(self) -> bool:
        """Upload the output directory; failures are logged, never raised."""
        logger.info(f"Publishing artifacts as: {ARTIFACT_NAME}")
        try:
            self.host.upload_artifact(
                ARTIFACT_NAME, self.config.output_directory, ARTIFACT_NAME
            )
        except Exception as exc:  # noqa: BLE001
            message = str(PublishFailedError(str(exc)))
            logger.warning(message)
            self.host.log_issue("warning", message)
            return False

        logger.info(
            f"Documentation artifacts published successfully as: {ARTIFACT_NAME}"
        )
        return True

    def run(self) -> TaskResult:
        """Run all steps and report exactly one result to the host."""
        try:
            logger.info("Starting Doxygen documentation generation task...")
            self.validate_inputs()
            self.generate_documentation()
            self.publish_artifacts()
        except DoxygenTaskError as exc:
            return self._fail(exc)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Unhandled error in documentation task")
            return self._fail(exc)

        logger.info("Documentation generation task completed successfully")
        self.host.set_result(TaskResult.SUCCEEDED, SUCCESS_MESSAGE)
        return TaskResult.SUCCEEDED

    def _fail(self, exc: Exception) -> TaskResult:
        message = f"Task failed: {exc}"
        logger.error(message)
        self.host.set_result(TaskResult.FAILED, message)
        return TaskResult.FAILED
