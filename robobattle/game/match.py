"""
Main match orchestration class.

This module coordinates all engine systems and managers. The host drives it
through three calls:

- ``handle_input(event)`` for abstract cursor/confirm inputs
- ``advance(seconds)`` for elapsed time
- ``get_view()`` for a read-only snapshot to render

Every call drains the event queue before returning, so phase changes caused
by an input are visible immediately afterwards.
"""

from typing import Callable, Optional

from ..core.config import MatchConfig, load_match_config
from ..core.data import COMMAND_ORDER, Team
from ..core.engine.game_state import GameState, MatchPhase
from ..core.events import (
    BattleEnded,
    EventManager,
    EventType,
    GameEvent,
    LogMessage,
    MatchPhaseChanged,
    MatchRestarted,
    MatchStarted,
)
from ..core.game_view import MatchView, RobotView, SelectionView
from ..core.input import InputEvent
from ..core.random_source import RandomSource, create_rng
from .battle.battle_session import BattleSession
from .combat.battle_calculator import BattleCalculator
from .combat.combat_resolver import CombatResolver
from .entities.robot import Robot
from .entities.robot_templates import RobotTemplate, load_robot_templates
from .equipment.catalog import EquipmentCatalog
from .managers.log_manager import LogManager
from .managers.phase_manager import PhaseManager
from .managers.selection_manager import SelectionManager

RandomFactory = Callable[[], RandomSource]


class Match:
    """Top-level state machine: title, selection, battle, re-equip, end."""

    def __init__(
        self,
        config: Optional[MatchConfig] = None,
        catalog: Optional[EquipmentCatalog] = None,
        templates: Optional[dict[Team, RobotTemplate]] = None,
        rng_factory: Optional[RandomFactory] = None,
        event_manager: Optional[EventManager] = None,
    ):
        """Load definitions and build a fresh match on the title screen.

        Args:
            config: Match settings (defaults to the bundled match.yaml)
            catalog: Equipment catalog (defaults to the bundled equipment.yaml)
            templates: Robot templates by team (defaults to the bundled robots.yaml)
            rng_factory: Builds the random source for each new match; defaults
                to a numpy generator seeded from ``config.seed``

        Raises:
            CatalogError: If definitions are missing or malformed
            ConfigError: If the configuration is invalid
        """
        self.config = config or load_match_config()
        self.catalog = catalog or EquipmentCatalog.load()
        self.templates = templates or load_robot_templates()
        self._rng_factory: RandomFactory = rng_factory or (lambda: create_rng(self.config.seed))

        self.state = GameState(phase=MatchPhase.TITLE)
        self.event_manager = event_manager or EventManager(enable_debug_logging=False)

        self.log_manager = LogManager(self.event_manager, self.state)
        self.phase_manager = PhaseManager(self.state, self.event_manager, self.config)
        self.selection_manager = SelectionManager(self.catalog, self.state, self.event_manager, self.config)
        self.resolver = CombatResolver(self.event_manager, self.config)
        self.calculator = BattleCalculator(self.config)

        self.event_manager.subscribe(
            EventType.MATCH_PHASE_CHANGED,
            self._handle_phase_changed,
            subscriber_name="Match.phase_changed",
        )
        self.event_manager.subscribe(
            EventType.BATTLE_ENDED,
            self._handle_battle_ended,
            subscriber_name="Match.battle_ended",
        )

        self._new_match()
        self.event_manager.process_events()

    def _emit_log(self, message: str, category: str = "SYSTEM", level: str = "INFO") -> None:
        """Emit a log message event."""
        self.event_manager.publish(
            LogMessage(
                turn=self.session.turn if self.state.phase is MatchPhase.BATTLE else 0,
                message=message,
                category=category,
                level=level,
                source="Match",
            ),
            source="Match",
        )

    # ============== Match construction ==============

    def _build_robot(self, team: Team) -> Robot:
        return self.templates[team].build(self.catalog, hp_max=self.config.max_hp)

    def _new_session(self) -> BattleSession:
        return BattleSession(
            self.player,
            self.enemy,
            self.resolver,
            self.rng,
            self.event_manager,
            self.config,
        )

    def _new_match(self) -> None:
        """Reset robots, RNG and per-phase data to their initial values."""
        self.rng = self._rng_factory()
        self.player = self._build_robot(Team.PLAYER)
        self.enemy = self._build_robot(Team.ENEMY)
        self.session = self._new_session()
        self.state.reset_substates()
        self._emit_log(f"New match: {self.player.name} vs {self.enemy.name} ({self.config.battle_mode.value} mode)")

    def _start_rematch(self) -> None:
        """Fresh opponent, cleared log, turn counter and timer; the player keeps HP and gear."""
        self.enemy = self._build_robot(Team.ENEMY)
        self.session = self._new_session()
        self.state.reset_for_rematch()
        self._emit_log(f"Rematch {self.state.battle.wins + 1}: {self.player.name} vs a fresh {self.enemy.name}")

    # ============== Host interface ==============

    def handle_input(self, event: Optional[InputEvent]) -> None:
        """Apply one abstract input event. None (an unbound key) is ignored."""
        if event is not None:
            phase = self.state.phase
            if phase is MatchPhase.TITLE:
                if event.is_confirm():
                    self.event_manager.publish(MatchStarted(turn=0), source="Match")
            elif phase is MatchPhase.EQUIPMENT_SELECTION:
                self.selection_manager.handle_selection_input(event, self.player)
            elif phase is MatchPhase.BATTLE:
                self._handle_battle_input(event)
            elif phase is MatchPhase.POST_BATTLE_EQUIP:
                self.selection_manager.handle_rematch_input(event, self.player)
            elif phase is MatchPhase.BATTLE_END:
                if event.is_confirm():
                    self._new_match()
                    self.event_manager.publish(MatchRestarted(turn=0), source="Match")

        self.event_manager.process_events()

    def _handle_battle_input(self, event: InputEvent) -> None:
        if self.config.is_timed:
            # Timed battles are driven by advance(); inputs only pace the presentation
            return
        if event.is_cursor():
            self.state.battle.move_command_cursor(event.direction)
        elif event.is_confirm():
            self.session.resolve_round(self.state.battle.selected_command())
            self.session.check_finished()

    def advance(self, seconds: float) -> int:
        """Advance time; resolves timed rounds while a battle is running.

        Returns:
            Number of round ticks processed
        """
        ticks = 0
        if self.state.phase is MatchPhase.BATTLE and self.config.is_timed:
            ticks = self.session.advance(seconds)
        self.event_manager.process_events()
        return ticks

    # ============== Event handlers ==============

    def _handle_phase_changed(self, event: GameEvent) -> None:
        if not isinstance(event, MatchPhaseChanged):
            return
        if event.new_phase is MatchPhase.BATTLE:
            if event.old_phase is MatchPhase.POST_BATTLE_EQUIP:
                self._start_rematch()
            self.session.start()

    def _handle_battle_ended(self, event: GameEvent) -> None:
        if not isinstance(event, BattleEnded):
            return
        self.state.battle.player_won = event.player_won
        if event.player_won:
            self.state.battle.wins += 1

    # ============== View ==============

    def get_view(self) -> MatchView:
        """Snapshot of everything the presentation layer draws."""
        phase = self.state.phase
        show_forecast = phase in (MatchPhase.EQUIPMENT_SELECTION, MatchPhase.BATTLE, MatchPhase.POST_BATTLE_EQUIP)
        return MatchView(
            phase=phase,
            player=RobotView.from_robot(self.player),
            enemy=RobotView.from_robot(self.enemy),
            selection=self._selection_view(),
            battle_log=tuple(self.session.log.lines()),
            turn=self.session.turn,
            command_cursor=self.state.battle.command_cursor,
            commands=COMMAND_ORDER,
            forecast=self.calculator.forecast(self.player, self.enemy) if show_forecast else None,
            player_won=self.state.battle.player_won,
            wins=self.state.battle.wins,
        )

    def _selection_view(self) -> Optional[SelectionView]:
        selection = self.state.selection
        if self.state.phase is MatchPhase.EQUIPMENT_SELECTION:
            slot = selection.current_slot
            if slot is None:
                return SelectionView(
                    step=selection.step, category=None, items=(), cursor=0,
                    details="Press confirm to start the battle!", image_path=None,
                )
            item_id = self.selection_manager.highlighted_item()
            return SelectionView(
                step=selection.step,
                category=slot,
                items=tuple(self.catalog.items(slot)),
                cursor=selection.current_cursor(),
                details=self.catalog.get_details(slot, item_id),
                image_path=self.catalog.image_path(slot, item_id),
            )
        if self.state.phase is MatchPhase.POST_BATTLE_EQUIP:
            entry = self.catalog.get(self.selection_manager.highlighted_rematch_item())
            return SelectionView(
                step=None,
                category=entry.category,
                items=tuple(self.selection_manager.rematch_items()),
                cursor=selection.rematch_cursor,
                details=entry.description,
                image_path=self.catalog.image_path(entry.category, entry.item_id),
            )
        return None
