"""Robot combatant model.

A Robot owns a :class:`StatBlock` and three equipment slots. Frequently used
stats are exposed as direct properties (``robot.attack``, ``robot.hp``) while
the full block stays reachable through ``robot.stats``.
"""

from typing import TYPE_CHECKING, Optional, Union

from ...core.data import EquipmentId, EquipmentSlot, StatBlock, Team

if TYPE_CHECKING:
    from ..equipment.catalog import EquipmentCatalog, EquipmentEntry


class Robot:
    """Combat participant with stats and equipment.

    Property Access Patterns:
    1. **Core properties**: robot.hp, robot.attack, robot.is_alive
    2. **Stat block access**: robot.stats.critical_rate, robot.stats.copy()

    HP subtraction from damage is unclamped so a defeated robot may hold a
    negative value; healing never exceeds ``hp_max``.
    """

    def __init__(
        self,
        name: str,
        stats: StatBlock,
        team: Team = Team.PLAYER,
        hp_max: int = 100,
        hp: Optional[int] = None,
    ):
        self.name = name
        self.team = team
        self.stats = stats
        self.hp_max = hp_max
        self.hp = hp_max if hp is None else min(hp, hp_max)

        self.equipment: dict[EquipmentSlot, Optional[EquipmentId]] = {
            EquipmentSlot.WEAPON: None,
            EquipmentSlot.ARMOR: None,
            EquipmentSlot.ACCESSORY: None,
        }

    # ============== Core Properties ==============

    @property
    def attack(self) -> int:
        return self.stats.attack

    @attack.setter
    def attack(self, value: int) -> None:
        self.stats.attack = value

    @property
    def defense(self) -> int:
        return self.stats.defense

    @defense.setter
    def defense(self, value: int) -> None:
        self.stats.defense = value

    @property
    def speed(self) -> int:
        return self.stats.speed

    @speed.setter
    def speed(self, value: int) -> None:
        self.stats.speed = value

    @property
    def critical_rate(self) -> float:
        return self.stats.critical_rate

    @property
    def evasion_rate(self) -> float:
        return self.stats.evasion_rate

    @property
    def hit_rate(self) -> float:
        return self.stats.hit_rate

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    @property
    def weapon(self) -> Optional[EquipmentId]:
        return self.equipment[EquipmentSlot.WEAPON]

    @property
    def armor(self) -> Optional[EquipmentId]:
        return self.equipment[EquipmentSlot.ARMOR]

    @property
    def accessory(self) -> Optional[EquipmentId]:
        return self.equipment[EquipmentSlot.ACCESSORY]

    # ============== Equipment ==============

    def equip(
        self,
        slot: EquipmentSlot,
        item_id: Union[EquipmentId, str],
        catalog: "EquipmentCatalog",
    ) -> Optional["EquipmentEntry"]:
        """Apply a catalog item's deltas to this robot.

        Deltas stack: equipping the same item twice applies it twice. An id
        that is unknown, or that belongs to another category, changes nothing.

        Returns:
            The applied entry, or None when nothing was applied
        """
        entry = catalog.lookup(slot, item_id)
        if entry is None:
            return None
        self.equipment[slot] = entry.item_id
        self.stats.apply(entry.stats)
        return entry

    def equip_weapon(self, item_id: Union[EquipmentId, str], catalog: "EquipmentCatalog") -> Optional["EquipmentEntry"]:
        return self.equip(EquipmentSlot.WEAPON, item_id, catalog)

    def equip_armor(self, item_id: Union[EquipmentId, str], catalog: "EquipmentCatalog") -> Optional["EquipmentEntry"]:
        return self.equip(EquipmentSlot.ARMOR, item_id, catalog)

    def equip_accessory(self, item_id: Union[EquipmentId, str], catalog: "EquipmentCatalog") -> Optional["EquipmentEntry"]:
        return self.equip(EquipmentSlot.ACCESSORY, item_id, catalog)

    # ============== Combat Mutations ==============

    def take_damage(self, amount: int) -> None:
        """Subtract damage from HP without clamping at zero."""
        if amount < 0:
            raise ValueError("Damage amount cannot be negative")
        self.hp -= amount

    def heal(self, amount: int) -> int:
        """Restore HP up to the maximum.

        Returns:
            HP actually restored
        """
        if amount < 0:
            raise ValueError("Heal amount cannot be negative")
        old_hp = self.hp
        self.hp = min(self.hp_max, self.hp + amount)
        return self.hp - old_hp

    def raise_defense(self, amount: int) -> None:
        self.stats.defense += amount

    def __repr__(self) -> str:
        return (
            f"Robot({self.name!r}, hp={self.hp}/{self.hp_max}, atk={self.attack}, "
            f"def={self.defense}, spd={self.speed})"
        )
