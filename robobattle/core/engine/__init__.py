"""Core engine state.

- game_state.py: Match phase and the selection/battle substates
"""

from .game_state import GameState, SelectionState, BattleState, MatchPhase, SelectionStep

__all__ = [
    "GameState",
    "SelectionState",
    "BattleState",
    "MatchPhase",
    "SelectionStep",
]
