"""
Battle calculation system for damage prediction and forecasting.

This module provides attack forecasts separate from actual combat resolution,
allowing the view to show hit/crit/damage predictions without drawing random
numbers or affecting match state.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import numpy as np

from ...core.config import MatchConfig

if TYPE_CHECKING:
    from ..entities.robot import Robot


@dataclass(frozen=True)
class AttackForecast:
    """Predicted outcome of one attack."""
    attacker_name: str
    defender_name: str
    hit_chance: float        # Probability the attack connects (hit and not evaded)
    crit_chance: float       # Probability a connecting attack is critical
    min_damage: int          # Lowest non-critical damage
    max_damage: int          # Highest critical damage
    expected_damage: float   # Mean damage per attack, misses included


class BattleCalculator:
    """Calculates attack forecasts from current robot stats."""

    def __init__(self, config: Optional[MatchConfig] = None):
        self.config = config or MatchConfig()

    def forecast(self, attacker: "Robot", defender: "Robot") -> AttackForecast:
        """
        Calculate the complete attack forecast between two robots.

        Args:
            attacker: The attacking robot
            defender: The defending robot

        Returns:
            AttackForecast with all prediction values
        """
        hit_chance = self._calculate_hit_chance(attacker, defender)
        crit_chance = float(np.clip(attacker.critical_rate, 0.0, 1.0))

        normal, critical = self._damage_table(attacker, defender)
        expected_connected = (1.0 - crit_chance) * normal.mean() + crit_chance * critical.mean()
        # Only tables that can actually occur bound the damage range
        outcomes = ((normal, 1.0 - crit_chance), (critical, crit_chance))
        reachable = np.concatenate([table for table, chance in outcomes if chance > 0])

        return AttackForecast(
            attacker_name=attacker.name,
            defender_name=defender.name,
            hit_chance=hit_chance,
            crit_chance=crit_chance,
            min_damage=int(reachable.min()),
            max_damage=int(reachable.max()),
            expected_damage=float(hit_chance * expected_connected),
        )

    def _calculate_hit_chance(self, attacker: "Robot", defender: "Robot") -> float:
        """Probability of clearing both the hit check and the evasion check."""
        # Hit check fails when the draw exceeds hit_rate, so P(pass) = hit_rate
        hit = np.clip(attacker.hit_rate, 0.0, 1.0) if self.config.use_hit_rate else 1.0
        evade = np.clip(defender.evasion_rate, 0.0, 1.0)
        return float(hit * (1.0 - evade))

    def _damage_table(self, attacker: "Robot", defender: "Robot") -> tuple[np.ndarray, np.ndarray]:
        """Damage for every equally likely offset, without and with a critical."""
        spread = self.config.damage_spread
        offsets = np.arange(-spread, spread + 1)
        base = attacker.attack - defender.defense + offsets
        normal = np.maximum(0, np.floor(base * 1.0)).astype(np.int64)
        critical = np.maximum(0, np.floor(base * self.config.critical_multiplier)).astype(np.int64)
        return normal, critical
