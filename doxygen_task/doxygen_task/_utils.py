from __future__ import annotations

import logging
import os
import subprocess
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)


def run_logged(cmd: Iterable[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
    """
    Run a subprocess with stdout/stderr captured as text.
    Raises CalledProcessError on a non-zero exit.
    """
    cmd_list = list(cmd)
    logger.debug("Running: %s", " ".join(cmd_list))
    result = subprocess.run(
        cmd_list,
        capture_output=True,
        text=True,
        **kwargs,  # type: ignore[arg-type]
    )
    if result.returncode != 0:
        raise subprocess.CalledProcessError(
            result.returncode, result.args, output=result.stdout, stderr=result.stderr
        )
    return result


@contextmanager
def working_directory(path: Path) -> Iterator[Path]:
    """Change into ``path`` and restore the previous directory on exit."""
    previous = Path.cwd()
    os.chdir(path)
    logger.debug("Changed working directory to %s", path)
    try:
        yield path
    finally:
        os.chdir(previous)
        logger.debug("Restored working directory to %s", previous)
