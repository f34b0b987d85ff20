"""
Directory-scoped file access used by the playlist storage.

Every name is resolved relative to one base directory chosen at construction
(MARQUEE_STORAGE_DIR by default). Errors are raised to the caller; the
playlist storage decides how to report them.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from marquee.core.config import get_settings

logger = logging.getLogger(__name__)


class FileStorage:
    """Read/write UTF-8 text files inside a single directory."""

    def __init__(self, base_dir: str | Path | None = None) -> None:
        if base_dir is None:
            base_dir = get_settings().storage_dir
        self._base_dir = Path(base_dir).expanduser()
        self._base_dir.mkdir(parents=True, exist_ok=True)
        logger.debug("Using storage directory %s", self._base_dir)

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def get_file_path(self, name: str) -> Path:
        return self._base_dir / name

    def file_exists(self, name: str) -> bool:
        return self.get_file_path(name).is_file()

    def read_file(self, name: str) -> str:
        return self.get_file_path(name).read_text(encoding="utf-8")

    def write_file(self, name: str, text: str) -> None:
        """Replace the file atomically so readers never see a half-written document."""
        path = self.get_file_path(name)
        fd, tmp = tempfile.mkstemp(prefix=f".{name}.", dir=self._base_dir)
        try:
            try:
                f = os.fdopen(fd, "w", encoding="utf-8")
            except Exception:
                os.close(fd)
                raise
            with f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, path)
        finally:
            if os.path.exists(tmp):
                os.unlink(tmp)
