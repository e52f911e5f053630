"""Game logic: robots, equipment, combat, battle sessions and the match."""

from .match import Match

__all__ = ["Match"]
