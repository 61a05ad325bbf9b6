"""Run-scoped file writers.

Several producers write into the same generated file (all operations of a
module, or the barrel of a split module). Within one run the first write to
a destination truncates it and emits the destination's header; every later
write appends. The state lives in an ``OutputSession`` and is discarded with
it, so a re-run starts from scratch whatever is already on disk.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import OutputWriteError

logger = logging.getLogger(__name__)


class Destination:
    """Writer handle for one generated file."""

    def __init__(self, path: Path, header: str = "") -> None:
        self.path = path
        self.header = header
        self.touched = False

    def write(self, content: str) -> None:
        """Truncate and write header + content the first time, append afterwards."""
        if self.touched:
            mode, text = "a", content
        else:
            mode, text = "w", self.header + content
            logger.debug("truncate %s", self.path)
        try:
            if not self.touched:
                self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, mode, encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            raise OutputWriteError(f"cannot write {self.path}: {e}") from e
        self.touched = True


class OutputSession:
    """Owns one ``Destination`` per path for the duration of a run."""

    def __init__(self) -> None:
        self._destinations: dict[Path, Destination] = {}

    def destination(self, path: Path, header: str = "") -> Destination:
        """Return the handle for ``path``, creating it on first request.

        ``header`` is fixed by the first request for a path.
        """
        dest = self._destinations.get(path)
        if dest is None:
            dest = Destination(path, header)
            self._destinations[path] = dest
        return dest

    def write(self, path: Path, content: str, header: str = "") -> None:
        self.destination(path, header).write(content)

    def is_touched(self, path: Path) -> bool:
        dest = self._destinations.get(path)
        return dest is not None and dest.touched

    @property
    def paths(self) -> list[Path]:
        """Destinations written during this run, in first-write order."""
        return [p for p, d in self._destinations.items() if d.touched]


def write_file(path: Path, content: str) -> None:
    """Fully rewrite a file outside of any session."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"cannot write {path}: {e}") from e


def write_file_if_missing(path: Path, content: str) -> bool:
    """Create a file only when nothing exists at ``path``. Returns True if written."""
    if path.exists():
        return False
    write_file(path, content)
    return True
