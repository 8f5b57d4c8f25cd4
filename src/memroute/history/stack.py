"""History stack — the ordered list of visited locations.

Pure data plus the five mutation operations.  No rendering awareness.

Differences from browser history are intentional:

- ``push_state`` appends at the tail without truncating entries past the
  current position.
- ``go`` jumps to an absolute index rather than a relative offset.

"""

from __future__ import annotations

from collections.abc import Iterable


class HistoryStack:
    """Ordered locations plus a current-position index.

    Every mutation returns ``True`` when the stack actually changed (entries
    or position) and ``False`` for a no-op, so callers only propagate real
    changes.

    Args:
        entries: Initial locations, copied on construction.
        position: Initial index, clamped into range.

    """

    __slots__ = ("_entries", "_position")

    def __init__(self, entries: Iterable[str] = (), position: int = 0) -> None:
        self._entries: list[str] = list(entries)
        self._position = self._clamp(position)

    @property
    def entries(self) -> tuple[str, ...]:
        """Snapshot of the stored locations."""
        return tuple(self._entries)

    @property
    def position(self) -> int:
        return self._position

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"HistoryStack(entries={self._entries!r}, position={self._position})"

    def _clamp(self, index: int) -> int:
        # An empty stack pins position at 0.
        return max(min(index, len(self._entries) - 1), 0)

    def _move_to(self, index: int) -> bool:
        index = self._clamp(index)
        if index == self._position:
            return False
        self._position = index
        return True

    # ----- Navigation -----

    def back(self) -> bool:
        return self._move_to(self._position - 1)

    def forward(self) -> bool:
        return self._move_to(self._position + 1)

    def go(self, delta: int) -> bool:
        """Jump to *delta* as an absolute index.

        ``delta >= len`` lands on the last entry and ``delta <= 0`` on the
        first.  This is not the relative offset a browser uses.
        """
        if delta >= len(self._entries):
            return self._move_to(len(self._entries) - 1)
        if delta <= 0:
            return self._move_to(0)
        return self._move_to(delta)

    def push_state(self, path: str) -> bool:
        """Append *path* and move to it, unless it is already current."""
        if self._entries and path == self.location():
            return False
        self._entries.append(path)
        self._position = len(self._entries) - 1
        return True

    def replace_state(self, path: str) -> bool:
        """Overwrite the current entry with *path*, unless it is already current."""
        if not self._entries:
            self._entries.append(path)
            self._position = 0
            return True
        if path == self.location():
            return False
        self._entries[self._position] = path
        return True

    def location(self) -> str | None:
        """The current entry, or ``None`` when the stack is empty."""
        if not self._entries:
            return None
        return self._entries[self._position]
