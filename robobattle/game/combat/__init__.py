"""Combat resolution and forecasting.

- combat_resolver.py: Attack, defend and heal resolution
- battle_calculator.py: Pure attack forecasts for display
"""

from .battle_calculator import AttackForecast, BattleCalculator
from .combat_resolver import AttackResult, CombatResolver

__all__ = ["AttackForecast", "AttackResult", "BattleCalculator", "CombatResolver"]
