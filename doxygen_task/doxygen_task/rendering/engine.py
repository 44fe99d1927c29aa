"""Doxyfile rendering and patching."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template

from ..core.errors import MissingCustomConfigPathError
from ..core.models import DEFAULT_PROJECT_VERSION, TaskConfig

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
AUTO_DOXYFILE_TEMPLATE = "Doxyfile.j2"

_OUTPUT_DIRECTORY_PATTERN = re.compile(r"^OUTPUT_DIRECTORY\s*=.*$", re.MULTILINE)


def load_template(name: str = AUTO_DOXYFILE_TEMPLATE) -> Template:
    """Load a bundled Jinja2 template by name.

    Args:
        name: Template file name inside the templates directory

    Returns:
        Compiled Jinja2 template
    """
    template_path = TEMPLATES_DIR / name
    if not template_path.exists():
        raise FileNotFoundError(f"Template not found: {template_path}")

    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        undefined=StrictUndefined,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    return env.get_template(name)


def render_auto_doxyfile(config: TaskConfig) -> str:
    """Render the complete Doxyfile used when no custom file is supplied.

    Args:
        config: Resolved task configuration

    Returns:
        Doxyfile text
    """
    template = load_template()
    return template.render(
        project_name=config.project_name,
        project_version=config.project_version or DEFAULT_PROJECT_VERSION,
        source_file_pattern=config.source_file_pattern,
        source_directory=config.source_directory,
        output_directory=config.output_directory,
    )


def patch_output_directory(content: str, output_directory: Path) -> str:
    """Point the first OUTPUT_DIRECTORY directive at ``output_directory``.

    Every other line is left as is. Content without the directive is returned
    unchanged.
    """
    replacement = f"OUTPUT_DIRECTORY = {output_directory}"
    # Callable replacement keeps backslashes in Windows paths literal.
    patched, count = _OUTPUT_DIRECTORY_PATTERN.subn(
        lambda _match: replacement, content, count=1
    )
    if count == 0:
        logger.warning(
            "Custom Doxyfile has no OUTPUT_DIRECTORY directive; "
            f"doxygen will not write to {output_directory}"
        )
    return patched


def load_custom_doxyfile(path: Path, output_directory: Path) -> str:
    """Read a user Doxyfile and redirect its output directory.

    Args:
        path: Doxyfile to read
        output_directory: Directory the task publishes

    Returns:
        Patched Doxyfile text
    """
    logger.info(f"Using custom Doxyfile: {path}")
    content = path.read_text(encoding="utf-8")
    return patch_output_directory(content, output_directory)


def build_config_text(config: TaskConfig) -> str:
    """Produce the Doxyfile text for the configured mode."""
    if config.use_custom_config:
        custom_path = config.resolved_custom_config_path()
        if custom_path is None:
            raise MissingCustomConfigPathError()
        return load_custom_doxyfile(custom_path, config.output_directory)

    logger.info("Generating automatic Doxygen configuration...")
    return render_auto_doxyfile(config)
