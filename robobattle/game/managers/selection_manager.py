"""Equipment selection and cursor management.

This module owns the cursor logic for the two equipment phases:
- Initial selection: weapon, armor and accessory sub-phases in order
- Post-battle re-equip: one pick from the whole catalog before a rematch

Cursors always move modulo the item count, so an out-of-range selection
cannot occur.
"""

from typing import TYPE_CHECKING, Optional

from ...core.config import MatchConfig
from ...core.events import EquipmentEquipped, LoadoutCompleted, LogMessage, RematchRequested
from ...core.data import EquipmentId, EquipmentSlot

if TYPE_CHECKING:
    from ...core.events import EventManager
    from ...core.engine.game_state import GameState
    from ...core.input import InputEvent
    from ..entities.robot import Robot
    from ..equipment.catalog import EquipmentCatalog, EquipmentEntry


class SelectionManager:
    """Applies cursor and confirm inputs during the equipment phases."""

    def __init__(
        self,
        catalog: "EquipmentCatalog",
        game_state: "GameState",
        event_manager: "EventManager",
        config: Optional[MatchConfig] = None,
    ):
        self.catalog = catalog
        self.state = game_state
        self.event_manager = event_manager
        self.config = config or MatchConfig()

    def _emit_log(self, message: str, category: str = "EQUIPMENT", level: str = "INFO") -> None:
        """Emit a log message event."""
        self.event_manager.publish(
            LogMessage(
                turn=0,
                message=message,
                category=category,
                level=level,
                source="SelectionManager",
            ),
            source="SelectionManager",
        )

    # ============== Initial selection ==============

    def highlighted_item(self) -> Optional[EquipmentId]:
        """Item under the cursor in the current sub-phase (None at the ready gate)."""
        slot = self.state.selection.current_slot
        if slot is None:
            return None
        return self.catalog.items(slot)[self.state.selection.current_cursor()]

    def handle_selection_input(self, event: "InputEvent", player: "Robot") -> None:
        selection = self.state.selection

        if selection.is_loadout_complete():
            # Pre-battle gate: only a confirm does anything
            if event.is_confirm():
                self._publish_loadout(player)
            return

        slot = selection.current_slot
        assert slot is not None
        if event.is_cursor():
            selection.move_cursor(event.direction, len(self.catalog.items(slot)))
            return

        if event.is_confirm():
            item_id = self.catalog.items(slot)[selection.current_cursor()]
            self.equip(player, slot, item_id)
            selection.advance()
            if selection.is_loadout_complete() and not self.config.is_timed:
                # Command cadence has no pre-battle gate
                self._publish_loadout(player)

    def _publish_loadout(self, player: "Robot") -> None:
        self.event_manager.publish(
            LoadoutCompleted(turn=0, loadout=dict(player.equipment)),
            source="SelectionManager",
        )

    # ============== Post-battle re-equip ==============

    def rematch_items(self) -> list[EquipmentId]:
        return self.catalog.all_items()

    def highlighted_rematch_item(self) -> EquipmentId:
        return self.rematch_items()[self.state.selection.rematch_cursor]

    def handle_rematch_input(self, event: "InputEvent", player: "Robot") -> None:
        selection = self.state.selection
        items = self.rematch_items()

        if event.is_cursor():
            selection.move_rematch_cursor(event.direction, len(items))
            return

        if event.is_confirm():
            entry = self.catalog.get(items[selection.rematch_cursor])
            self.equip(player, entry.category, entry.item_id)
            self.event_manager.publish(
                RematchRequested(turn=0, item_id=entry.item_id),
                source="SelectionManager",
            )

    # ============== Shared ==============

    def equip(self, robot: "Robot", slot: EquipmentSlot, item_id: EquipmentId) -> Optional["EquipmentEntry"]:
        """Equip an item on a robot and report it."""
        entry = robot.equip(slot, item_id, self.catalog)
        if entry is None:
            self._emit_log(f"Ignored unknown {slot.value} '{item_id}' for {robot.name}", level="DEBUG")
            return None

        self.event_manager.publish(
            EquipmentEquipped(turn=0, robot_name=robot.name, slot=slot, item_id=entry.item_id),
            source="SelectionManager",
        )
        self._emit_log(f"{robot.name} equipped {entry.name} ({entry.stats.describe()})")
        return entry
