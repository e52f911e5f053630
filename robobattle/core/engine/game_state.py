"""Match state management with structured substates.

This module defines the top-level :class:`GameState` along with focused
dataclasses for equipment selection and battle bookkeeping. The phase itself
is only ever changed by the PhaseManager.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Optional

from ..data.game_enums import (
    BattleCommand,
    COMMAND_ORDER,
    EquipmentSlot,
    SELECTION_ORDER,
)


class MatchPhase(Enum):
    """High level match phases."""

    TITLE = auto()
    EQUIPMENT_SELECTION = auto()
    BATTLE = auto()
    POST_BATTLE_EQUIP = auto()
    BATTLE_END = auto()


class SelectionStep(Enum):
    """Sub-phases of equipment selection."""

    WEAPON = auto()
    ARMOR = auto()
    ACCESSORY = auto()
    READY = auto()  # Pre-battle confirm gate (timed cadence only)


_STEP_SLOTS = {
    SelectionStep.WEAPON: EquipmentSlot.WEAPON,
    SelectionStep.ARMOR: EquipmentSlot.ARMOR,
    SelectionStep.ACCESSORY: EquipmentSlot.ACCESSORY,
}


@dataclass
class SelectionState:
    """Cursor positions for equipment selection."""

    step: SelectionStep = SelectionStep.WEAPON
    cursors: dict[EquipmentSlot, int] = field(
        default_factory=lambda: {slot: 0 for slot in SELECTION_ORDER}
    )
    rematch_cursor: int = 0

    @property
    def current_slot(self) -> Optional[EquipmentSlot]:
        return _STEP_SLOTS.get(self.step)

    def current_cursor(self) -> int:
        slot = self.current_slot
        return self.cursors[slot] if slot is not None else 0

    def move_cursor(self, direction: int, item_count: int) -> None:
        """Move the active cursor, wrapping in both directions."""
        slot = self.current_slot
        if slot is None or item_count <= 0:
            return
        self.cursors[slot] = (self.cursors[slot] + direction) % item_count

    def move_rematch_cursor(self, direction: int, item_count: int) -> None:
        if item_count > 0:
            self.rematch_cursor = (self.rematch_cursor + direction) % item_count

    def advance(self) -> None:
        """Step to the next sub-phase."""
        order = list(SelectionStep)
        index = order.index(self.step)
        if index < len(order) - 1:
            self.step = order[index + 1]

    def is_loadout_complete(self) -> bool:
        return self.step is SelectionStep.READY


@dataclass
class BattleState:
    """Holds battle bookkeeping shared with the view."""

    command_cursor: int = 0
    player_won: Optional[bool] = None
    wins: int = 0

    def move_command_cursor(self, direction: int) -> None:
        self.command_cursor = (self.command_cursor + direction) % len(COMMAND_ORDER)

    def selected_command(self) -> BattleCommand:
        return COMMAND_ORDER[self.command_cursor]

    def reset_for_rematch(self) -> None:
        self.command_cursor = 0
        self.player_won = None


@dataclass
class GameState:
    """Top-level match state."""

    phase: MatchPhase = MatchPhase.TITLE
    selection: SelectionState = field(default_factory=SelectionState)
    battle: BattleState = field(default_factory=BattleState)

    # Formatted diagnostic log, maintained by the LogManager
    log_data: dict[str, Any] = field(default_factory=dict)

    def reset_substates(self) -> None:
        """Clear selection and battle bookkeeping. The phase is left to the PhaseManager."""
        self.selection = SelectionState()
        self.battle = BattleState()

    def reset_for_rematch(self) -> None:
        """Clear per-battle cursors. Wins and loadout picks carry over."""
        self.battle.reset_for_rematch()
        self.selection.rematch_cursor = 0
