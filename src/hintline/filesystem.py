"""Path hints: resolve a raw argument against the working directory and list it."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from hintline.hints import Hint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathTarget:
    """Where a path argument's candidates come from.

    ``disregard`` is the length of the argument text before ``partial``.
    """

    directory: Path
    disregard: int
    partial: str


def list_directory(directory: Path) -> list[str]:
    """Sorted entry names of ``directory``; empty if it cannot be read."""
    try:
        names = [entry.name for entry in os.scandir(directory)]
    except OSError as e:
        logger.debug("Cannot list %s: %s", directory, e)
        return []
    names.sort()
    return names


def _last_separator(text: str) -> int:
    cut = text.rfind("/")
    if os.sep != "/":
        cut = max(cut, text.rfind(os.sep))
    return cut


def _normalize(cwd: Path, text: str) -> Path:
    if text == "~" or text.startswith("~/"):
        text = str(Path.home()) + text[1:]
    path = Path(text)
    if not path.is_absolute():
        path = cwd / path

    # ".." pops the previous component instead of following symlinks.
    parts: list[str] = []
    for part in path.parts:
        if part == "..":
            if len(parts) > 1:
                parts.pop()
        elif part != ".":
            parts.append(part)
    return Path(*parts)


def resolve_arg_path(arg: str, cwd: Path) -> PathTarget | None:
    """Split ``arg`` into a directory to list and the partial name being typed.

    Falls back to the parent directory when the typed directory does not
    exist yet; returns None when neither exists.
    """
    lead = 1 if arg.startswith('"') else 0
    body = arg[lead:]
    if body.endswith('"'):
        body = body[:-1]

    cut = _last_separator(body)
    partial = body[cut + 1 :]
    disregard = lead + cut + 1

    directory = _normalize(cwd, body[: cut + 1])
    if directory.is_dir():
        return PathTarget(directory, disregard, partial)
    if directory.parent.is_dir():
        return PathTarget(directory.parent, disregard, partial)
    return None


def make_directory_hint(target: PathTarget | None, inlay: str | None = None) -> Hint:
    if target is None:
        hint = Hint(inlay=inlay)
        hint.closest_match("")
        return hint
    hint = Hint(list_directory(target.directory), inlay, target.directory, target.disregard)
    hint.closest_match(target.partial)
    return hint


def update_directory_hint(target: PathTarget | None, hint: Hint) -> None:
    """Refresh ``hint`` for a new keystroke.

    The directory is only listed again when it differs from the one the
    candidates were built from.
    """
    if target is None:
        hint.selection = []
        hint.cache_key = None
        hint.disregard = 0
        hint.closest_match("")
        return

    hint.disregard = target.disregard
    if hint.cache_key != target.directory:
        logger.debug("Listing %s (was %s)", target.directory, hint.cache_key)
        hint.selection = list_directory(target.directory)
        hint.cache_key = target.directory
    hint.closest_match(target.partial)
