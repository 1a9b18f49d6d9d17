"""Local archive holding the raw text of every fetched page for one run."""

from __future__ import annotations

import logging
import os
from pathlib import Path


class PageArchive:
    """
    Append-only text file of page bodies.

    Filesystem errors are logged and swallowed so the crawl keeps going;
    ``append`` reports them as ``False``. Text goes through UTF-8 with
    ``surrogateescape``, so undecodable page bytes come back unchanged.
    """

    def __init__(self, path: str | Path, logger: logging.Logger | None = None):
        self.path = Path(path)
        self.logger = logger or logging.getLogger(__name__)

    def remove_stale(self) -> None:
        if not self.path.is_file():
            return
        try:
            os.remove(self.path)
        except OSError as e:
            self.logger.error(f"Could not remove old archive {self.path}: {e}")

    def append(self, text: str) -> bool:
        try:
            with open(self.path, "a", encoding="utf-8", errors="surrogateescape") as f:
                f.write(text + "\n")
        except OSError as e:
            self.logger.error(f"Could not append to archive {self.path}: {e}")
            return False
        return True

    def read(self) -> str:
        try:
            with open(self.path, "r", encoding="utf-8", errors="surrogateescape") as f:
                return f.read()
        except OSError as e:
            self.logger.error(f"Could not read archive {self.path}: {e}")
            return ""
