"""Core data structures and definitions.

This package contains fundamental data types and game definitions:
- data_structures.py: StatBlock and StatDelta
- game_enums.py: Centralized enums for teams, equipment, commands and outcomes
"""

from .data_structures import StatBlock, StatDelta, STAT_FIELDS
from .game_enums import (
    Team,
    EquipmentSlot,
    EquipmentId,
    BattleMode,
    BattleCommand,
    BattleStatus,
    AttackOutcome,
    EQUIPMENT_SLOT_NAMES,
    SELECTION_ORDER,
    COMMAND_ORDER,
)

__all__ = [
    "StatBlock",
    "StatDelta",
    "STAT_FIELDS",
    "Team",
    "EquipmentSlot",
    "EquipmentId",
    "BattleMode",
    "BattleCommand",
    "BattleStatus",
    "AttackOutcome",
    "EQUIPMENT_SLOT_NAMES",
    "SELECTION_ORDER",
    "COMMAND_ORDER",
]
