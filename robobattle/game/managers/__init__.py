"""Manager systems for match coordination.

This package contains the manager classes that coordinate different aspects
of the match through the event-driven architecture.
"""

from .log_manager import LogCategory, LogEntry, LogLevel, LogManager
from .phase_manager import MatchPhaseTransitionRule, PhaseManager
from .selection_manager import SelectionManager

__all__ = [
    "LogCategory",
    "LogEntry",
    "LogLevel",
    "LogManager",
    "MatchPhaseTransitionRule",
    "PhaseManager",
    "SelectionManager",
]
