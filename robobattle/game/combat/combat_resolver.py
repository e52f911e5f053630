"""
Combat resolution system for executing attacks and auxiliary actions.

This module handles the actual combat execution and damage application,
separate from turn ordering and battle flow.
"""
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from ...core.config import MatchConfig
from ...core.data import AttackOutcome
from ...core.events import AttackResolved, LogMessage
from ...core.random_source import RandomSource, draw_offset

if TYPE_CHECKING:
    from ...core.events import EventManager
    from ..entities.robot import Robot


@dataclass(frozen=True)
class AttackResult:
    """Result of a single attack."""
    damage: int
    outcome: AttackOutcome
    message: str


class CombatResolver:
    """Handles attack resolution and the defend/heal actions.

    Each attack consumes up to four uniform draws from the supplied random
    source, in order: hit check, evasion check, critical check, damage
    offset. A miss stops drawing early.
    """

    def __init__(self, event_manager: "EventManager", config: Optional[MatchConfig] = None):
        self.event_manager = event_manager
        self.config = config or MatchConfig()

    def _emit_log(self, message: str, turn: int = 0, category: str = "BATTLE", level: str = "INFO") -> None:
        """Emit a log message event."""
        self.event_manager.publish(
            LogMessage(
                turn=turn,
                message=message,
                category=category,
                level=level,
                source="CombatResolver"
            ),
            source="CombatResolver"
        )

    def resolve_attack(
        self,
        attacker: "Robot",
        defender: "Robot",
        rng: RandomSource,
        turn: int = 0,
    ) -> AttackResult:
        """
        Resolve one attack and apply its damage to the defender.

        Args:
            attacker: The robot performing the attack
            defender: The robot being attacked
            rng: Source of uniform floats in [0, 1)
            turn: Current round, used for event metadata

        Returns:
            AttackResult with damage, outcome and the display message
        """
        if self.config.use_hit_rate and rng.random() > attacker.hit_rate:
            result = self._miss(attacker, defender, AttackOutcome.MISSED)
        elif rng.random() < defender.evasion_rate:
            result = self._miss(attacker, defender, AttackOutcome.EVADED)
        else:
            critical = rng.random() < attacker.critical_rate
            multiplier = self.config.critical_multiplier if critical else 1.0
            offset = draw_offset(rng, self.config.damage_spread)

            damage = max(0, math.floor((attacker.attack - defender.defense + offset) * multiplier))
            defender.take_damage(damage)

            message = f"{attacker.name} attacks {defender.name} for {damage} damage."
            if critical:
                message += "\nIt's a critical hit!"
            outcome = AttackOutcome.CRITICAL if critical else AttackOutcome.HIT
            result = AttackResult(damage=damage, outcome=outcome, message=message)

            self._emit_log(
                f"{attacker.name} -> {defender.name}: offset {offset:+d}, x{multiplier:g}, "
                f"{damage} damage (HP {defender.hp})",
                turn=turn, level="DEBUG"
            )

        self.event_manager.publish(
            AttackResolved(
                turn=turn,
                attacker_name=attacker.name,
                defender_name=defender.name,
                damage=result.damage,
                outcome=result.outcome,
            ),
            source="CombatResolver"
        )
        return result

    def _miss(self, attacker: "Robot", defender: "Robot", outcome: AttackOutcome) -> AttackResult:
        return AttackResult(
            damage=0,
            outcome=outcome,
            message=f"{attacker.name} attacks {defender.name} but misses!",
        )

    def defend(self, robot: "Robot", turn: int = 0) -> str:
        """Raise the robot's defense by the configured bonus."""
        bonus = self.config.defend_bonus
        robot.raise_defense(bonus)
        self._emit_log(f"{robot.name} defense now {robot.defense}", turn=turn, level="DEBUG")
        return f"{robot.name} takes a defensive stance. Defense +{bonus}."

    def heal(self, robot: "Robot", turn: int = 0) -> str:
        """Restore HP by the configured amount, capped at the robot's maximum."""
        restored = robot.heal(self.config.heal_amount)
        self._emit_log(f"{robot.name} HP now {robot.hp}/{robot.hp_max}", turn=turn, level="DEBUG")
        return f"{robot.name} repairs itself for {restored} HP."
