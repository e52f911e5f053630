"""Equipment catalog definitions."""

from .catalog import EquipmentCatalog, EquipmentEntry, NO_DETAILS

__all__ = ["EquipmentCatalog", "EquipmentEntry", "NO_DETAILS"]
