"""
Test utilities and helper functions for the robobattle test suite.

This module provides scripted randomness, robot builders and small
helpers that drive a Match through its phases.
"""
from itertools import cycle
from typing import Iterable, Optional

from robobattle.core.data import StatBlock, Team
from robobattle.core.input import InputEvent
from robobattle.game.entities.robot import Robot


class ScriptedRandom:
    """Random source that replays a fixed sequence of floats, cycling forever."""

    def __init__(self, values: Iterable[float]):
        self.values = list(values)
        if not self.values:
            raise ValueError("ScriptedRandom needs at least one value")
        self._iter = cycle(self.values)
        self.draws = 0

    def random(self) -> float:
        self.draws += 1
        return next(self._iter)


class RobotTestBuilder:
    """Builder for robots with specific stats."""

    def __init__(self, name: str = "TestBot", team: Team = Team.PLAYER):
        self.name = name
        self.team = team
        self.stats = dict(
            attack=20,
            defense=10,
            speed=5,
            critical_rate=0.0,
            evasion_rate=0.0,
            hit_rate=1.0,
        )
        self.hp: Optional[int] = None
        self.hp_max = 100

    def with_stats(self, **stats) -> "RobotTestBuilder":
        self.stats.update(stats)
        return self

    def with_hp(self, hp: Optional[int]) -> "RobotTestBuilder":
        self.hp = hp
        return self

    def build(self) -> Robot:
        return Robot(self.name, StatBlock(**self.stats), team=self.team, hp_max=self.hp_max, hp=self.hp)


def make_robot(name: str = "TestBot", team: Team = Team.PLAYER, hp: Optional[int] = None, **stats) -> Robot:
    """Shortcut for RobotTestBuilder(...).with_stats(...).build()."""
    return RobotTestBuilder(name, team).with_stats(**stats).with_hp(hp).build()


def confirm(match, times: int = 1) -> None:
    for _ in range(times):
        match.handle_input(InputEvent.confirm())


def cursor_down(match, times: int = 1) -> None:
    for _ in range(times):
        match.handle_input(InputEvent.cursor_down())


def cursor_up(match, times: int = 1) -> None:
    for _ in range(times):
        match.handle_input(InputEvent.cursor_up())
