"""Centralized game enums and constants.

This module contains all core game enums that are used across multiple modules,
eliminating duplication and providing a single source of truth.
"""

from enum import Enum, auto


class Team(Enum):
    """Side a robot fights for."""
    PLAYER = 0
    ENEMY = 1


class EquipmentSlot(Enum):
    """Equipment categories, in selection order."""
    WEAPON = "weapon"
    ARMOR = "armor"
    ACCESSORY = "accessory"


class EquipmentId(Enum):
    """Stable identifiers for every catalog item."""
    SWORD = "Sword"
    GUN = "Gun"
    LASER = "Laser"
    SHIELD = "Shield"
    ARMOR = "Armor"
    NANO_SUIT = "NanoSuit"
    BOOTS = "Boots"
    HELMET = "Helmet"
    GLOVES = "Gloves"

    @classmethod
    def parse(cls, value: "EquipmentId | str") -> "EquipmentId | None":
        """Resolve a raw identifier, returning None for unknown ids."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class BattleMode(Enum):
    """Cadence that drives round resolution."""
    TIMED = "timed"      # One round per elapsed interval
    COMMAND = "command"  # One round per player command


class BattleCommand(Enum):
    """Actions available to the player in command mode."""
    ATTACK = auto()
    DEFEND = auto()
    HEAL = auto()


class BattleStatus(Enum):
    """Lifecycle of a single battle."""
    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    ENDED = auto()


class AttackOutcome(Enum):
    """Result category of a single attack."""
    HIT = auto()
    CRITICAL = auto()
    MISSED = auto()   # Failed the attacker's hit check
    EVADED = auto()   # Passed the hit check but the defender dodged


# Convenience mappings for display
EQUIPMENT_SLOT_NAMES = {
    EquipmentSlot.WEAPON: "Weapon",
    EquipmentSlot.ARMOR: "Armor",
    EquipmentSlot.ACCESSORY: "Accessory",
}

SELECTION_ORDER = (EquipmentSlot.WEAPON, EquipmentSlot.ARMOR, EquipmentSlot.ACCESSORY)
COMMAND_ORDER = (BattleCommand.ATTACK, BattleCommand.DEFEND, BattleCommand.HEAL)
