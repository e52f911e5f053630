"""Exceptions raised by the engine.

Gameplay operations are total and never raise. These errors cover startup
definition loading and misuse of the headless driver.
"""


class RoboBattleError(Exception):
    """Base exception for the engine."""


class CatalogError(RoboBattleError):
    """Raised when equipment or robot definitions are missing or malformed."""


class ConfigError(RoboBattleError):
    """Raised when the match configuration is invalid."""


class BattleStalledError(RoboBattleError):
    """Raised when a headless battle exceeds its round limit."""
