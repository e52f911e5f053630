"""Read-only match snapshots for the presentation layer.

The host renders from these views and never touches engine objects directly.

Design Principles:
- Snapshots are frozen copies, so rendering cannot mutate match state
- HP is clamped at zero for display even when the engine holds a negative value
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .data.game_enums import BattleCommand, EquipmentId, EquipmentSlot
from .engine.game_state import MatchPhase, SelectionStep

if TYPE_CHECKING:
    from ..game.combat.battle_calculator import AttackForecast
    from ..game.entities.robot import Robot


@dataclass(frozen=True)
class RobotView:
    """Read-only view of a robot's stat block and equipment."""
    name: str
    hp: int
    hp_max: int
    attack: int
    defense: int
    speed: int
    critical_rate: float
    evasion_rate: float
    hit_rate: float
    weapon: Optional[EquipmentId]
    armor: Optional[EquipmentId]
    accessory: Optional[EquipmentId]

    @classmethod
    def from_robot(cls, robot: "Robot") -> "RobotView":
        return cls(
            name=robot.name,
            hp=max(0, robot.hp),
            hp_max=robot.hp_max,
            attack=robot.attack,
            defense=robot.defense,
            speed=robot.speed,
            critical_rate=robot.critical_rate,
            evasion_rate=robot.evasion_rate,
            hit_rate=robot.hit_rate,
            weapon=robot.weapon,
            armor=robot.armor,
            accessory=robot.accessory,
        )


@dataclass(frozen=True)
class SelectionView:
    """Equipment menu contents for the active selection phase."""
    step: Optional[SelectionStep]
    category: Optional[EquipmentSlot]
    items: tuple[EquipmentId, ...]
    cursor: int
    details: str
    image_path: Optional[str]


@dataclass(frozen=True)
class MatchView:
    """Everything the presentation layer needs to draw one frame."""
    phase: MatchPhase
    player: RobotView
    enemy: RobotView
    selection: Optional[SelectionView]
    battle_log: tuple[str, ...]
    turn: int
    command_cursor: int
    commands: tuple[BattleCommand, ...]
    forecast: Optional["AttackForecast"]
    player_won: Optional[bool]
    wins: int
