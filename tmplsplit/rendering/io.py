"""File I/O operations for writing rendered segments."""

from __future__ import annotations

import contextlib
import logging
import os
import shutil
import tempfile
from pathlib import Path

from ..core.errors import WriteError

logger = logging.getLogger(__name__)


def ensure_parent(path: Path) -> None:
    """Ensure parent directories exist for the given path.

    Args:
        path: Path whose parent directories should be created
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WriteError(path.parent, e) from e


def write_text(path: Path, text: str, mode: int = 0o644) -> None:
    """Write text durably, replacing any existing file at ``path``.

    The content goes to a temporary file in the destination directory, is
    flushed and fsynced, then moved over the destination.

    Args:
        path: Destination file path
        text: Text content to write
        mode: File permissions (octal)
    """
    ensure_parent(path)

    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    except OSError as e:
        raise WriteError(path, e) from e

    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as tmp:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
        os.chmod(path, mode)
    except OSError as e:
        raise WriteError(path, e) from e
    finally:
        with contextlib.suppress(FileNotFoundError):
            os.remove(tmp_name)

    logger.info(f"Wrote {path}")


def clean_dir(path: Path) -> None:
    """Remove ``path`` and recreate it as an empty directory."""
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        elif path.exists() or path.is_symlink():
            path.unlink()
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WriteError(path, e) from e

    logger.debug(f"Cleaned output directory {path}")
