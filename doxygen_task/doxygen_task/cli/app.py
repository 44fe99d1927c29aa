"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.errors import DoxygenTaskError
from ..core.models import TaskResult
from ..rendering import engine
from ..rendering.io import atomic_write_text
from ..settings import TaskInputs, resolve_config
from ..task import DoxygenTask
from .parsers import merge_inputs

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="doxygen-task",
    help="Generate Doxygen documentation and publish it as a pipeline artifact.",
    no_args_is_help=True,
)

SourceDirOption = Annotated[
    Optional[str],
    typer.Option(
        "--source-dir",
        help="Directory to document (default: INPUT_SOURCEDIRECTORY or cwd).",
        metavar="DIR",
    ),
]
OutputDirOption = Annotated[
    Optional[str],
    typer.Option(
        "--output-dir",
        help="Documentation output directory (default: INPUT_OUTPUTDIRECTORY or ./docs).",
        metavar="DIR",
    ),
]
ProjectNameOption = Annotated[
    Optional[str], typer.Option("--project-name", help="Project name.")
]
ProjectVersionOption = Annotated[
    Optional[str], typer.Option("--project-version", help="Project version.")
]
FilePatternOption = Annotated[
    Optional[str],
    typer.Option(
        "--file-pattern",
        help='Space separated source globs (default: "*.c *.cpp *.h *.hpp").',
        metavar="GLOBS",
    ),
]
CustomDoxyfileOption = Annotated[
    Optional[str],
    typer.Option(
        "--custom-doxyfile",
        help="Use this Doxyfile (relative to the source directory) instead of the generated one.",
        metavar="FILE",
    ),
]
DoxygenOption = Annotated[
    Optional[str],
    typer.Option("--doxygen", help="Doxygen executable (default: doxygen).", metavar="PATH"),
]
VerboseOption = Annotated[
    bool, typer.Option("--verbose", "-v", help="Enable verbose logging.")
]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )


@app.command()
def run(
    source_dir: SourceDirOption = None,
    output_dir: OutputDirOption = None,
    project_name: ProjectNameOption = None,
    project_version: ProjectVersionOption = None,
    file_pattern: FilePatternOption = None,
    custom_doxyfile: CustomDoxyfileOption = None,
    doxygen: DoxygenOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Validate inputs, run doxygen and publish the output directory."""
    _configure_logging(verbose)

    inputs = merge_inputs(
        TaskInputs(),
        source_dir=source_dir,
        output_dir=output_dir,
        project_name=project_name,
        project_version=project_version,
        file_pattern=file_pattern,
        custom_doxyfile=custom_doxyfile,
        doxygen=doxygen,
    )
    task = DoxygenTask(resolve_config(inputs))

    if task.run() is not TaskResult.SUCCEEDED:
        raise typer.Exit(code=1)


@app.command()
def render(
    source_dir: SourceDirOption = None,
    output_dir: OutputDirOption = None,
    project_name: ProjectNameOption = None,
    project_version: ProjectVersionOption = None,
    file_pattern: FilePatternOption = None,
    custom_doxyfile: CustomDoxyfileOption = None,
    output: Annotated[
        Optional[str],
        typer.Option(
            "--output",
            "-o",
            help="Write the Doxyfile here instead of stdout.",
            metavar="FILE",
        ),
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the Doxyfile the task would use, without running doxygen."""
    _configure_logging(verbose)

    inputs = merge_inputs(
        TaskInputs(),
        source_dir=source_dir,
        output_dir=output_dir,
        project_name=project_name,
        project_version=project_version,
        file_pattern=file_pattern,
        custom_doxyfile=custom_doxyfile,
    )
    config = resolve_config(inputs)

    try:
        text = engine.build_config_text(config)
    except (DoxygenTaskError, OSError) as exc:
        logger.error(f"Unable to build Doxyfile: {exc}")
        raise typer.Exit(code=1) from exc

    if output:
        atomic_write_text(Path(output), text)
        logger.info(f"Wrote Doxyfile to {output}")
    else:
        typer.echo(text, nl=False)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
