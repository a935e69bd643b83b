"""Per-argument completion candidates.

A Hint remembers where its candidates came from (the cache key) so a
provider can tell whether a keystroke changed the scope or only the
partial text being matched.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class Hint:
    """Completion state for a single argument.

    ``selection`` is assumed to be sorted, so the first prefix match is
    also the alphabetically closest one.
    """

    def __init__(
        self,
        selection: list[str] | None = None,
        inlay: str | None = None,
        cache_key: Any = None,
        disregard: int = 0,
    ) -> None:
        self.selection: list[str] = selection if selection is not None else []
        self.inlay: str | None = inlay or None
        self.cache_key: Any = cache_key
        # Offset into the argument text that takes no part in matching,
        # e.g. the directory portion of a path.
        self.disregard: int = disregard
        self.last_closest_match: str | None = None

    def closest_match(self, partial: str) -> str | None:
        """Find the best candidate for ``partial`` and remember it."""
        if not partial:
            if self.inlay is not None:
                match: str | None = self.inlay
            else:
                match = self.selection[0] if self.selection else None
        else:
            match = next((s for s in self.selection if s.startswith(partial)), None)
        self.last_closest_match = match
        return match

    def filtered_items(self, partial: str) -> Iterator[str]:
        """Yield every candidate that starts with ``partial``."""
        return (s for s in self.selection if s.startswith(partial))

    def __repr__(self) -> str:
        return (
            f"Hint(selection={len(self.selection)} items, inlay={self.inlay!r}, "
            f"cache_key={self.cache_key!r}, disregard={self.disregard}, "
            f"last_closest_match={self.last_closest_match!r})"
        )
