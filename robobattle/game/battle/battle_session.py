"""
Battle session: one fight between the player and an enemy robot.

The session owns both robots for the duration of the battle and lends them to
the CombatResolver one attack at a time. Rounds are resolved either on a
fixed real-time interval (:meth:`BattleSession.advance`) or one per player
command (:meth:`BattleSession.resolve_round`).
"""

from typing import TYPE_CHECKING, Optional

from ...core.config import MatchConfig
from ...core.data import BattleCommand, BattleStatus
from ...core.errors import BattleStalledError
from ...core.events import BattleEnded, BattleStarted, LogMessage, RoundResolved
from .battle_log import BattleLog

if TYPE_CHECKING:
    from ...core.events import EventManager
    from ...core.random_source import RandomSource
    from ..combat.combat_resolver import CombatResolver
    from ..entities.robot import Robot


class BattleSession:
    """Turn loop between two robots.

    Lifecycle: NOT_STARTED -> IN_PROGRESS -> ENDED.

    Round rules:
    - If either robot has HP <= 0 when a round begins, the battle ends
      instead of resolving attacks.
    - The robot with speed greater than or equal to the other's acts first.
      The player is compared first, so ties go to the player.
    - The second robot only acts if it is still alive.
    - The round counter increments after the actions.

    The player is also checked first when deciding the winner, so a
    simultaneous defeat counts as a player loss.
    """

    def __init__(
        self,
        player: "Robot",
        enemy: "Robot",
        resolver: "CombatResolver",
        rng: "RandomSource",
        event_manager: "EventManager",
        config: Optional[MatchConfig] = None,
        log: Optional[BattleLog] = None,
    ):
        self.player = player
        self.enemy = enemy
        self.resolver = resolver
        self.rng = rng
        self.event_manager = event_manager
        self.config = config or MatchConfig()
        self.log = log if log is not None else BattleLog(self.config.log_capacity)

        self.status = BattleStatus.NOT_STARTED
        self.turn = 1
        self.player_won: Optional[bool] = None
        self._elapsed = 0.0

    def _emit_log(self, message: str, category: str = "BATTLE", level: str = "INFO") -> None:
        """Emit a log message event."""
        self.event_manager.publish(
            LogMessage(
                turn=self.turn,
                message=message,
                category=category,
                level=level,
                source="BattleSession"
            ),
            source="BattleSession"
        )

    @property
    def is_over(self) -> bool:
        return self.status is BattleStatus.ENDED

    @property
    def rounds_played(self) -> int:
        return self.turn - 1

    def start(self) -> None:
        """Begin the battle. Starting twice has no effect."""
        if self.status is not BattleStatus.NOT_STARTED:
            return
        self.status = BattleStatus.IN_PROGRESS
        self._elapsed = 0.0
        self.event_manager.publish(
            BattleStarted(turn=self.turn, player_name=self.player.name, enemy_name=self.enemy.name),
            source="BattleSession"
        )
        self._emit_log(f"Battle start: {self.player.name} vs {self.enemy.name}")

    def check_finished(self) -> bool:
        """Apply the round-start termination rule without resolving a round.

        Returns:
            True if the battle has ended
        """
        if self.status is BattleStatus.IN_PROGRESS and not (self.player.is_alive and self.enemy.is_alive):
            self._finish()
        return self.is_over

    def resolve_round(self, player_command: BattleCommand = BattleCommand.ATTACK) -> list[str]:
        """Resolve exactly one round.

        Args:
            player_command: Action the player takes this round (the enemy always attacks)

        Returns:
            Log entries produced this round (empty if the battle ended instead)
        """
        if self.status is BattleStatus.NOT_STARTED:
            self.start()
        if self.check_finished():
            return []

        if self.player.speed >= self.enemy.speed:
            order = ((self.player, self.enemy), (self.enemy, self.player))
        else:
            order = ((self.enemy, self.player), (self.player, self.enemy))

        entries: list[str] = []
        for actor, opponent in order:
            if not actor.is_alive:
                break
            message = self._perform(actor, opponent, player_command)
            entries.append(self.log.add(self.turn, message))

        self.event_manager.publish(
            RoundResolved(turn=self.turn, messages=tuple(entries)),
            source="BattleSession"
        )
        self.turn += 1
        return entries

    def _perform(self, actor: "Robot", opponent: "Robot", player_command: BattleCommand) -> str:
        command = player_command if actor is self.player else BattleCommand.ATTACK
        if command is BattleCommand.DEFEND:
            return self.resolver.defend(actor, turn=self.turn)
        if command is BattleCommand.HEAL:
            return self.resolver.heal(actor, turn=self.turn)
        return self.resolver.resolve_attack(actor, opponent, self.rng, turn=self.turn).message

    def advance(self, seconds: float) -> int:
        """Accumulate elapsed time and resolve one round per full interval.

        The tick that finds a defeated robot ends the battle and counts as an
        interval, mirroring the round-start check.

        Zero and negative durations are ignored.

        Returns:
            Number of ticks processed
        """
        if self.status is not BattleStatus.IN_PROGRESS or seconds <= 0:
            return 0

        self._elapsed += seconds
        ticks = 0
        interval = self.config.round_interval
        while self._elapsed >= interval and not self.is_over:
            self._elapsed -= interval
            self.resolve_round()
            ticks += 1
        return ticks

    def run_to_completion(self, max_rounds: int = 1000) -> bool:
        """Resolve rounds back-to-back until the battle ends.

        Returns:
            True if the player won

        Raises:
            BattleStalledError: If the battle is still running after max_rounds
        """
        if self.status is BattleStatus.NOT_STARTED:
            self.start()
        while not self.check_finished():
            if self.rounds_played >= max_rounds:
                raise BattleStalledError(
                    f"Battle between {self.player.name} and {self.enemy.name} "
                    f"did not finish within {max_rounds} rounds"
                )
            self.resolve_round()
        return bool(self.player_won)

    def _finish(self) -> None:
        self.status = BattleStatus.ENDED
        # Player is checked first: simultaneous defeat is a loss
        if not self.player.is_alive:
            self.player_won = False
        else:
            self.player_won = not self.enemy.is_alive

        winner = self.player if self.player_won else self.enemy
        self._emit_log(f"{winner.name} wins after {self.rounds_played} rounds")
        self.event_manager.publish(
            BattleEnded(turn=self.turn, player_won=self.player_won, rounds=self.rounds_played),
            source="BattleSession"
        )
