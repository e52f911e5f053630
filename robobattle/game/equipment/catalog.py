"""Equipment catalog loaded from YAML definitions.

The catalog maps each :class:`EquipmentId` to its category, stat deltas and
description text. It is loaded once at startup; a missing or malformed file is
fatal and raises :class:`CatalogError`.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

import yaml

from ...core.config import ASSETS_DIR
from ...core.data import EQUIPMENT_SLOT_NAMES, SELECTION_ORDER, EquipmentId, EquipmentSlot, StatDelta
from ...core.errors import CatalogError

DEFAULT_CATALOG_PATH = ASSETS_DIR / "data" / "equipment.yaml"
NO_DETAILS = "No details available."


@dataclass(frozen=True)
class EquipmentEntry:
    """Static definition of one equipment item."""

    item_id: EquipmentId
    category: EquipmentSlot
    stats: StatDelta
    description: str

    @property
    def name(self) -> str:
        return self.item_id.value


class EquipmentCatalog:
    """Lookup table of equipment entries grouped by category."""

    def __init__(self, entries: list[EquipmentEntry]):
        self._entries: dict[EquipmentId, EquipmentEntry] = {}
        self._by_category: dict[EquipmentSlot, list[EquipmentId]] = {
            slot: [] for slot in SELECTION_ORDER
        }
        for entry in entries:
            if entry.item_id in self._entries:
                raise CatalogError(f"Duplicate equipment id: {entry.item_id.value}")
            self._entries[entry.item_id] = entry
            self._by_category[entry.category].append(entry.item_id)

        empty = [slot.value for slot, items in self._by_category.items() if not items]
        if empty:
            raise CatalogError(f"Catalog has no items for categories: {empty}")

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "EquipmentCatalog":
        """Load the catalog from a YAML file.

        Args:
            path: YAML file path (defaults to the bundled equipment.yaml)

        Raises:
            CatalogError: If the file is missing or any entry is malformed
        """
        yaml_path = Path(path) if path is not None else DEFAULT_CATALOG_PATH
        try:
            with open(yaml_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise CatalogError(f"Equipment catalog file not found: {yaml_path}")
        except yaml.YAMLError as e:
            raise CatalogError(f"Invalid YAML in {yaml_path}: {e}")

        return cls.from_dict(data, source=str(yaml_path))

    @classmethod
    def from_dict(cls, data: object, source: str = "<memory>") -> "EquipmentCatalog":
        """Build a catalog from already-parsed definition data."""
        if not isinstance(data, dict) or not isinstance(data.get("equipment"), dict):
            raise CatalogError(f"Missing 'equipment' section in {source}")

        entries: list[EquipmentEntry] = []
        for category_name, items in data["equipment"].items():
            try:
                category = EquipmentSlot(category_name)
            except ValueError:
                raise CatalogError(f"Unknown equipment category '{category_name}' in {source}")
            if not isinstance(items, dict):
                raise CatalogError(f"Category '{category_name}' must map ids to entries in {source}")

            for raw_id, payload in items.items():
                entries.append(_parse_entry(category, raw_id, payload, source))

        return cls(entries)

    def get(self, item_id: EquipmentId) -> EquipmentEntry:
        return self._entries[item_id]

    def lookup(self, category: EquipmentSlot, item_id: Union[EquipmentId, str]) -> Optional[EquipmentEntry]:
        """Return the entry for an id in a category, or None if unknown there."""
        parsed = EquipmentId.parse(item_id)
        if parsed is None:
            return None
        entry = self._entries.get(parsed)
        if entry is None or entry.category is not category:
            return None
        return entry

    def items(self, category: EquipmentSlot) -> list[EquipmentId]:
        """Ordered identifiers for a category (selection order)."""
        return list(self._by_category[category])

    def all_items(self) -> list[EquipmentId]:
        """Every identifier, category by category."""
        return [item_id for slot in SELECTION_ORDER for item_id in self._by_category[slot]]

    def get_details(self, category: EquipmentSlot, item_id: Union[EquipmentId, str]) -> str:
        """Description text for an item, or a default for unknown entries."""
        entry = self.lookup(category, item_id)
        return entry.description if entry is not None else NO_DETAILS

    def image_path(self, category: EquipmentSlot, item_id: Union[EquipmentId, str]) -> str:
        """Relative image asset path for display layers."""
        name = item_id.value if isinstance(item_id, EquipmentId) else item_id
        return f"images/{EQUIPMENT_SLOT_NAMES[category]}_{name}.jpg"

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[EquipmentEntry]:
        return (self._entries[item_id] for item_id in self.all_items())


def _parse_entry(category: EquipmentSlot, raw_id: object, payload: object, source: str) -> EquipmentEntry:
    item_id = EquipmentId.parse(str(raw_id))
    if item_id is None:
        raise CatalogError(f"Unknown equipment id '{raw_id}' in {source}")
    if not isinstance(payload, dict):
        raise CatalogError(f"Equipment '{raw_id}' must be a mapping in {source}")

    unknown = set(payload) - {"stats", "description"}
    if unknown:
        raise CatalogError(f"Equipment '{raw_id}' has unknown fields {sorted(unknown)} in {source}")

    raw_stats = payload.get("stats", {}) or {}
    if not isinstance(raw_stats, dict):
        raise CatalogError(f"Equipment '{raw_id}' stats must be a mapping in {source}")
    try:
        stats = StatDelta.from_dict(raw_stats)
    except ValueError as e:
        raise CatalogError(f"Equipment '{raw_id}' in {source}: {e}")

    description = payload.get("description")
    if description is None:
        description = f"{item_id.value}: {stats.describe()}"
    elif not isinstance(description, str):
        raise CatalogError(f"Equipment '{raw_id}' description must be a string in {source}")

    return EquipmentEntry(item_id=item_id, category=category, stats=stats, description=description)
