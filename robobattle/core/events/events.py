"""Event-driven system events.

This module defines all match events that managers can subscribe to.

Event Design Principles:
- Events are immutable dataclasses
- All events carry the battle turn they were raised on (0 outside battle)
- Events use proper enums instead of magic strings
- Keep event types focused and avoid over-granular events
"""

from abc import ABC
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional

from ..data.game_enums import AttackOutcome, EquipmentId, EquipmentSlot

if TYPE_CHECKING:
    from ..engine.game_state import MatchPhase


class EventType(Enum):
    """Types of events that managers can subscribe to."""
    # Match flow events
    MATCH_STARTED = auto()         # Title screen confirmed
    LOADOUT_COMPLETED = auto()     # All selection sub-phases confirmed
    BATTLE_STARTED = auto()
    BATTLE_ENDED = auto()
    REMATCH_REQUESTED = auto()     # Post-battle re-equip confirmed
    MATCH_RESTARTED = auto()
    MATCH_PHASE_CHANGED = auto()

    # Equipment events
    EQUIPMENT_EQUIPPED = auto()

    # Combat events
    ATTACK_RESOLVED = auto()
    ROUND_RESOLVED = auto()

    # Logging events
    LOG_MESSAGE = auto()


@dataclass(frozen=True)
class GameEvent(ABC):
    """Base class for all match events."""
    turn: int
    event_type: EventType = field(init=False)


@dataclass(frozen=True)
class MatchStarted(GameEvent):
    """Event emitted when the title screen is confirmed."""

    def __post_init__(self):
        # Set event_type since dataclass frozen=True prevents normal assignment
        object.__setattr__(self, 'event_type', EventType.MATCH_STARTED)


@dataclass(frozen=True)
class LoadoutCompleted(GameEvent):
    """Event emitted when the player has chosen all three equipment pieces."""
    loadout: dict[EquipmentSlot, Optional[EquipmentId]]

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOADOUT_COMPLETED)


@dataclass(frozen=True)
class BattleStarted(GameEvent):
    """Event emitted when a battle session begins."""
    player_name: str
    enemy_name: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.BATTLE_STARTED)


@dataclass(frozen=True)
class BattleEnded(GameEvent):
    """Event emitted when a battle session reaches its end."""
    player_won: bool
    rounds: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.BATTLE_ENDED)


@dataclass(frozen=True)
class RematchRequested(GameEvent):
    """Event emitted when the post-battle re-equip is confirmed."""
    item_id: EquipmentId

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.REMATCH_REQUESTED)


@dataclass(frozen=True)
class MatchRestarted(GameEvent):
    """Event emitted when the whole match is reset from the end screen."""

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.MATCH_RESTARTED)


@dataclass(frozen=True)
class MatchPhaseChanged(GameEvent):
    """Event emitted after the phase manager performs a transition."""
    old_phase: "MatchPhase"
    new_phase: "MatchPhase"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.MATCH_PHASE_CHANGED)


@dataclass(frozen=True)
class EquipmentEquipped(GameEvent):
    """Event emitted when a catalog item is applied to a robot."""
    robot_name: str
    slot: EquipmentSlot
    item_id: EquipmentId

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.EQUIPMENT_EQUIPPED)


@dataclass(frozen=True)
class AttackResolved(GameEvent):
    """Event emitted after a single attack has been resolved."""
    attacker_name: str
    defender_name: str
    damage: int
    outcome: AttackOutcome

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ATTACK_RESOLVED)


@dataclass(frozen=True)
class RoundResolved(GameEvent):
    """Event emitted after both robots have acted in a round."""
    messages: tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ROUND_RESOLVED)


@dataclass(frozen=True)
class LogMessage(GameEvent):
    """Event for centralized logging."""
    message: str
    category: str = "SYSTEM"
    level: str = "INFO"
    source: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_MESSAGE)

