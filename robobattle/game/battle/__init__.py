"""Battle flow: the bounded battle log and the round-by-round session."""

from .battle_log import BattleLog
from .battle_session import BattleSession

__all__ = ["BattleLog", "BattleSession"]
