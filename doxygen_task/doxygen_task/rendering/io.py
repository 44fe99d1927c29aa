"""File I/O operations for rendering."""

from __future__ import annotations

import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)


def ensure_parent(path: Path) -> None:
    """Ensure parent directories exist for the given path.

    Args:
        path: Path whose parent directories should be created
    """
    path.parent.mkdir(parents=True, exist_ok=True)


def atomic_write_text(path: Path, text: str, mode: int = 0o644) -> None:
    """Write text to a file atomically using a temporary file.

    Args:
        path: Destination file path
        text: Text content to write
        mode: File permissions (octal)
    """
    ensure_parent(path)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
        os.chmod(path, mode)
    finally:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)


@contextmanager
def temporary_doxyfile(directory: Path, text: str) -> Iterator[Path]:
    """Write ``text`` to a uniquely named Doxyfile in ``directory``.

    The file is removed when the block exits, whether or not it raised.
    """
    fd, tmp_name = tempfile.mkstemp(prefix="Doxyfile.", suffix=".tmp", dir=str(directory))
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
        logger.debug(f"Wrote temporary Doxyfile {tmp_path}")
        yield tmp_path
    finally:
        tmp_path.unlink(missing_ok=True)
        logger.debug(f"Removed temporary Doxyfile {tmp_path}")
