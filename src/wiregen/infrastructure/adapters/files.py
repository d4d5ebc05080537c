"""File system helpers shared by adapters."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def atomic_write_text(target: Path, text: str) -> None:
    """Write text to target through a temp file in the same directory.

    Readers see either the old or the new content, never a partial file.
    Parent directories are created as needed.

    Args:
        target: Destination path
        text: Content, written as UTF-8

    Raises:
        OSError: If the directory or file cannot be written
    """
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as tmp:
            tmp.write(text)
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
