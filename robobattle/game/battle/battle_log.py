"""Bounded battle message log shown to the player."""
from collections import deque


class BattleLog:
    """Sliding window of the most recent battle messages.

    Appending beyond capacity evicts the oldest entry.
    """

    def __init__(self, capacity: int = 12):
        if capacity < 1:
            raise ValueError("Battle log capacity must be at least 1")
        self.capacity = capacity
        self._entries: deque[str] = deque(maxlen=capacity)

    def add(self, turn: int, message: str) -> str:
        """Append a message tagged with its round number and return the entry."""
        entry = f"Turn {turn}: {message}"
        self._entries.append(entry)
        return entry

    def lines(self) -> list[str]:
        """Entries oldest first."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
