"""Executable hints: every program reachable through the search path."""

from __future__ import annotations

import logging
import os
from functools import cached_property

from hintline.hints import Hint

logger = logging.getLogger(__name__)

# Cache key for executable hints; there is only one scope.
EXECUTABLES_SCOPE = "<executables>"


class ExecutableIndex:
    """Lists the executables on a search path once and keeps the result.

    On Windows the ``PATHEXT`` extensions decide what is executable and are
    stripped from the names, so ``python.exe`` is offered as ``python``.
    """

    def __init__(self, search_path: str | None = None, path_ext: str | None = None) -> None:
        self._search_path = search_path if search_path is not None else os.environ.get("PATH", "")
        if path_ext is None and os.name == "nt":
            path_ext = os.environ.get("PATHEXT", ".COM;.EXE;.BAT;.CMD")
        self._extensions: tuple[str, ...] = tuple(
            ext.lower() for ext in (path_ext or "").split(";") if ext
        )

    @property
    def directories(self) -> list[str]:
        return [d for d in self._search_path.split(os.pathsep) if d]

    @cached_property
    def names(self) -> list[str]:
        found: set[str] = set()
        for directory in self.directories:
            try:
                entries = list(os.scandir(directory))
            except OSError as e:
                logger.debug("Skipping search path entry %s: %s", directory, e)
                continue
            for entry in entries:
                name = self._executable_name(entry)
                if name:
                    found.add(name)
        logger.debug("Found %d executables on the search path", len(found))
        return sorted(found)

    def _executable_name(self, entry: os.DirEntry[str]) -> str | None:
        try:
            if not entry.is_file():
                return None
        except OSError:
            return None

        if self._extensions:
            stem, ext = os.path.splitext(entry.name)
            return stem if ext.lower() in self._extensions else None
        return entry.name if os.access(entry.path, os.X_OK) else None


def make_executables_hint(index: ExecutableIndex, arg: str, inlay: str | None = None) -> Hint:
    # The index's list is shared, never copied: hints only read it.
    hint = Hint(index.names, inlay, EXECUTABLES_SCOPE)
    hint.closest_match(arg)
    return hint


def update_executables_hint(index: ExecutableIndex, arg: str, hint: Hint) -> None:
    if hint.cache_key != EXECUTABLES_SCOPE:
        hint.selection = index.names
        hint.cache_key = EXECUTABLES_SCOPE
    hint.disregard = 0
    hint.closest_match(arg)
