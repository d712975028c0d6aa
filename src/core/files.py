"""
File output helpers.

- Atomic writes: temp file in the target directory → os.replace
- Parent directory created if absent
- fsync failure is logged and ignored
"""

import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def atomic_write_text(path: Path, text: str) -> None:
    """
    Write text atomically.

    Readers never see a half-written report: the content goes to a temp
    file next to `path` and is renamed over it. On failure the temp file
    is removed and any existing file is left untouched.

    Args:
        path: Destination file
        text: Content (written as UTF-8)
    """
    dir_path = path.parent
    dir_path.mkdir(parents=True, exist_ok=True)

    temp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=dir_path,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
            newline="\n",
        ) as f:
            temp_path = Path(f.name)
            f.write(text)
            f.flush()
            try:
                os.fsync(f.fileno())
            except OSError as e:
                logger.warning(f"File fsync failed for {path}: {e}")

        os.replace(temp_path, path)

    except Exception:
        if temp_path and temp_path.exists():
            try:
                temp_path.unlink()
            except OSError:
                logger.warning(f"Could not remove temp file {temp_path}")
        raise
