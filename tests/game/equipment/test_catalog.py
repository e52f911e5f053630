"""
Tests for the equipment catalog.
"""
import pytest

from robobattle.core.data import EquipmentId, EquipmentSlot, StatDelta
from robobattle.core.errors import CatalogError
from robobattle.game.equipment.catalog import NO_DETAILS, EquipmentCatalog, EquipmentEntry


class TestBundledCatalog:
    """Test the shipped equipment definitions."""

    def test_category_order(self, catalog):
        assert catalog.items(EquipmentSlot.WEAPON) == [EquipmentId.SWORD, EquipmentId.GUN, EquipmentId.LASER]
        assert catalog.items(EquipmentSlot.ARMOR) == [EquipmentId.SHIELD, EquipmentId.ARMOR, EquipmentId.NANO_SUIT]
        assert catalog.items(EquipmentSlot.ACCESSORY) == [EquipmentId.BOOTS, EquipmentId.HELMET, EquipmentId.GLOVES]

    def test_all_items_and_len(self, catalog):
        assert len(catalog) == 9
        assert catalog.all_items()[0] is EquipmentId.SWORD
        assert catalog.all_items()[-1] is EquipmentId.GLOVES
        assert [entry.item_id for entry in catalog] == catalog.all_items()

    @pytest.mark.parametrize("item_id, expected", [
        (EquipmentId.SWORD, StatDelta(attack=10, hit_rate=0.10)),
        (EquipmentId.GUN, StatDelta(attack=15, speed=-2, hit_rate=0.05)),
        (EquipmentId.LASER, StatDelta(attack=20, critical_rate=0.05, hit_rate=0.15)),
        (EquipmentId.SHIELD, StatDelta(defense=10)),
        (EquipmentId.ARMOR, StatDelta(defense=15, speed=-3)),
        (EquipmentId.NANO_SUIT, StatDelta(defense=20, evasion_rate=0.05)),
        (EquipmentId.BOOTS, StatDelta(speed=5)),
        (EquipmentId.HELMET, StatDelta(defense=5, speed=-1)),
        (EquipmentId.GLOVES, StatDelta(attack=5, critical_rate=0.05)),
    ])
    def test_stat_deltas(self, catalog, item_id, expected):
        assert catalog.get(item_id).stats == expected

    def test_get_details(self, catalog):
        assert catalog.get_details(EquipmentSlot.WEAPON, "Sword") == "Sword: Attack +10, Hit Rate +10%"
        assert catalog.get_details(EquipmentSlot.ACCESSORY, EquipmentId.GLOVES) == (
            "Gloves: Critical Rate +5%, Attack +5"
        )

    def test_get_details_unknown(self, catalog):
        assert catalog.get_details(EquipmentSlot.WEAPON, "Rocket") == NO_DETAILS
        assert catalog.get_details(EquipmentSlot.WEAPON, "Boots") == NO_DETAILS

    def test_lookup(self, catalog):
        entry = catalog.lookup(EquipmentSlot.ARMOR, "NanoSuit")
        assert isinstance(entry, EquipmentEntry)
        assert entry.category is EquipmentSlot.ARMOR
        assert entry.name == "NanoSuit"
        assert catalog.lookup(EquipmentSlot.WEAPON, "NanoSuit") is None

    def test_image_path(self, catalog):
        assert catalog.image_path(EquipmentSlot.WEAPON, EquipmentId.SWORD) == "images/Weapon_Sword.jpg"
        assert catalog.image_path(EquipmentSlot.ACCESSORY, "Boots") == "images/Accessory_Boots.jpg"


class TestCatalogLoading:
    """Test YAML validation."""

    def _write(self, tmp_path, text):
        path = tmp_path / "equipment.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    def _minimal(self, weapon_block="    Sword: {stats: {attack: 1}}\n"):
        return (
            "equipment:\n"
            "  weapon:\n" + weapon_block +
            "  armor:\n    Shield: {stats: {defense: 1}}\n"
            "  accessory:\n    Boots: {stats: {speed: 1}}\n"
        )

    def test_minimal_catalog(self, tmp_path):
        catalog = EquipmentCatalog.load(self._write(tmp_path, self._minimal()))
        assert len(catalog) == 3

    def test_description_defaults_to_stat_summary(self, tmp_path):
        catalog = EquipmentCatalog.load(self._write(tmp_path, self._minimal()))
        assert catalog.get_details(EquipmentSlot.WEAPON, "Sword") == "Sword: Attack +1"

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError, match="not found"):
            EquipmentCatalog.load(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        with pytest.raises(CatalogError, match="Invalid YAML"):
            EquipmentCatalog.load(self._write(tmp_path, "equipment: {weapon: [\n"))

    def test_missing_section(self, tmp_path):
        with pytest.raises(CatalogError, match="equipment"):
            EquipmentCatalog.load(self._write(tmp_path, "items: {}\n"))

    def test_unknown_category(self, tmp_path):
        text = self._minimal() + "  gadget:\n    Sword: {stats: {}}\n"
        with pytest.raises(CatalogError, match="gadget"):
            EquipmentCatalog.load(self._write(tmp_path, text))

    def test_unknown_id(self, tmp_path):
        text = self._minimal("    Rocket: {stats: {attack: 1}}\n")
        with pytest.raises(CatalogError, match="Rocket"):
            EquipmentCatalog.load(self._write(tmp_path, text))

    def test_unknown_stat(self, tmp_path):
        text = self._minimal("    Sword: {stats: {luck: 1}}\n")
        with pytest.raises(CatalogError, match="luck"):
            EquipmentCatalog.load(self._write(tmp_path, text))

    def test_unknown_field(self, tmp_path):
        text = self._minimal("    Sword: {stats: {attack: 1}, price: 3}\n")
        with pytest.raises(CatalogError, match="price"):
            EquipmentCatalog.load(self._write(tmp_path, text))

    def test_duplicate_id_across_categories(self, tmp_path):
        text = (
            "equipment:\n"
            "  weapon:\n    Sword: {stats: {attack: 1}}\n"
            "  armor:\n    Sword: {stats: {defense: 1}}\n"
            "  accessory:\n    Boots: {stats: {speed: 1}}\n"
        )
        with pytest.raises(CatalogError, match="Duplicate"):
            EquipmentCatalog.load(self._write(tmp_path, text))

    def test_empty_category(self, tmp_path):
        text = (
            "equipment:\n"
            "  weapon:\n    Sword: {stats: {attack: 1}}\n"
            "  armor:\n    Shield: {stats: {defense: 1}}\n"
            "  accessory: {}\n"
        )
        with pytest.raises(CatalogError, match="accessory"):
            EquipmentCatalog.load(self._write(tmp_path, text))

    def test_from_dict(self):
        catalog = EquipmentCatalog.from_dict({
            "equipment": {
                "weapon": {"Laser": {"stats": {"attack": 3}, "description": "Pew"}},
                "armor": {"Armor": {"stats": {"defense": 3}}},
                "accessory": {"Gloves": {}},
            }
        })
        assert catalog.get_details(EquipmentSlot.WEAPON, "Laser") == "Pew"
        assert catalog.get(EquipmentId.GLOVES).stats == StatDelta()
