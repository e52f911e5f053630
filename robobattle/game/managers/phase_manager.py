"""
Phase Management System with Event-Driven State Machine.

This module implements a centralized phase manager that handles MatchPhase
transitions based on events, following a state machine pattern. All phase
assignments happen here; other components only publish the events that
request a transition.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List, Optional

from ...core.config import MatchConfig
from ...core.engine.game_state import MatchPhase
from ...core.events import BattleEnded, EventType, GameEvent, LogMessage, MatchPhaseChanged

if TYPE_CHECKING:
    from ...core.events import EventManager
    from ...core.engine.game_state import GameState


@dataclass
class MatchPhaseTransitionRule:
    """Defines a match phase transition rule."""

    from_phase: MatchPhase
    event_type: EventType
    to_phase: MatchPhase
    description: str
    condition: Optional[Callable[[GameEvent], bool]] = None

    def matches(self, current_phase: MatchPhase, event: GameEvent) -> bool:
        """Check if this rule matches the current conditions."""
        if self.from_phase != current_phase or self.event_type != event.event_type:
            return False
        return self.condition is None or self.condition(event)


class PhaseManager:
    """Centralized phase management with event-driven state machine.

    Rules are checked in order and the first match wins. Events that match
    no rule for the current phase are ignored, which makes repeated requests
    (for example a second title confirm) harmless.
    """

    def __init__(
        self,
        game_state: "GameState",
        event_manager: "EventManager",
        config: Optional[MatchConfig] = None,
    ):
        self.state = game_state
        self.event_manager = event_manager
        self.config = config or MatchConfig()

        self.phase_rules: List[MatchPhaseTransitionRule] = []
        self._setup_phase_transitions()
        self._subscribe_to_events()

    def _emit_log(self, message: str, category: str = "PHASE", level: str = "INFO") -> None:
        """Emit a log message event."""
        self.event_manager.publish(
            LogMessage(
                turn=0,
                message=message,
                category=category,
                level=level,
                source="PhaseManager",
            ),
            source="PhaseManager",
        )

    def _setup_phase_transitions(self) -> None:
        """Define MatchPhase transition rules."""
        self.phase_rules = [
            MatchPhaseTransitionRule(
                from_phase=MatchPhase.TITLE,
                event_type=EventType.MATCH_STARTED,
                to_phase=MatchPhase.EQUIPMENT_SELECTION,
                description="Open equipment selection from the title screen",
            ),
            MatchPhaseTransitionRule(
                from_phase=MatchPhase.EQUIPMENT_SELECTION,
                event_type=EventType.LOADOUT_COMPLETED,
                to_phase=MatchPhase.BATTLE,
                description="Start battle once the loadout is complete",
            ),
            MatchPhaseTransitionRule(
                from_phase=MatchPhase.BATTLE,
                event_type=EventType.BATTLE_ENDED,
                to_phase=MatchPhase.POST_BATTLE_EQUIP,
                description="Offer a re-equip rematch after a victory",
                condition=self._offers_rematch,
            ),
            MatchPhaseTransitionRule(
                from_phase=MatchPhase.BATTLE,
                event_type=EventType.BATTLE_ENDED,
                to_phase=MatchPhase.BATTLE_END,
                description="Show the outcome when the battle concludes",
            ),
            MatchPhaseTransitionRule(
                from_phase=MatchPhase.POST_BATTLE_EQUIP,
                event_type=EventType.REMATCH_REQUESTED,
                to_phase=MatchPhase.BATTLE,
                description="Fight a fresh opponent after re-equipping",
            ),
            MatchPhaseTransitionRule(
                from_phase=MatchPhase.BATTLE_END,
                event_type=EventType.MATCH_RESTARTED,
                to_phase=MatchPhase.TITLE,
                description="Restart the whole match",
            ),
        ]

    def _offers_rematch(self, event: GameEvent) -> bool:
        return (
            self.config.post_battle_equip
            and isinstance(event, BattleEnded)
            and event.player_won
        )

    def _subscribe_to_events(self) -> None:
        for event_type in {rule.event_type for rule in self.phase_rules}:
            self.event_manager.subscribe(
                event_type,
                self._handle_phase_event,
                subscriber_name=f"PhaseManager.{event_type.name.lower()}",
            )

    def _handle_phase_event(self, event: GameEvent) -> None:
        for rule in self.phase_rules:
            if rule.matches(self.state.phase, event):
                self._transition(rule)
                return
        self._emit_log(
            f"No transition for {event.event_type.name} in {self.state.phase.name}",
            level="DEBUG",
        )

    def _transition(self, rule: MatchPhaseTransitionRule) -> None:
        old_phase = self.state.phase
        self.state.phase = rule.to_phase
        self._emit_log(f"{old_phase.name} -> {rule.to_phase.name}: {rule.description}")
        self.event_manager.publish(
            MatchPhaseChanged(turn=0, old_phase=old_phase, new_phase=rule.to_phase),
            source="PhaseManager",
        )
