"""
Unit tests for stat data structures and shared enums.
"""
import pytest

from robobattle.core.data import (
    COMMAND_ORDER,
    EquipmentId,
    SELECTION_ORDER,
    EquipmentSlot,
    StatBlock,
    StatDelta,
)


class TestStatDelta:
    """Test the StatDelta value type."""

    def test_defaults_are_zero(self):
        delta = StatDelta()
        assert delta == StatDelta.from_dict({})
        assert delta.describe() == ""

    def test_from_dict(self):
        delta = StatDelta.from_dict({"attack": 15, "speed": -2, "hit_rate": 0.05})

        assert delta.attack == 15
        assert delta.speed == -2
        assert delta.hit_rate == pytest.approx(0.05)
        assert delta.defense == 0
        assert isinstance(delta.attack, int)

    def test_from_dict_accepts_integral_floats(self):
        delta = StatDelta.from_dict({"defense": 10.0})
        assert delta.defense == 10
        assert isinstance(delta.defense, int)

    def test_from_dict_rejects_unknown_stats(self):
        with pytest.raises(ValueError, match="Unknown stat"):
            StatDelta.from_dict({"luck": 3})

    def test_from_dict_rejects_fractional_integer_stat(self):
        with pytest.raises(ValueError, match="integer"):
            StatDelta.from_dict({"attack": 1.5})

    @pytest.mark.parametrize("bad_value", ["ten", True, None])
    def test_from_dict_rejects_non_numeric(self, bad_value):
        with pytest.raises(ValueError, match="numeric"):
            StatDelta.from_dict({"attack": bad_value})

    def test_describe(self):
        delta = StatDelta(attack=15, speed=-2, hit_rate=0.05)
        assert delta.describe() == "Attack +15, Speed -2, Hit Rate +5%"


class TestStatBlock:
    """Test the mutable StatBlock."""

    def _block(self):
        return StatBlock(attack=20, defense=10, speed=5, critical_rate=0.1, evasion_rate=0.1, hit_rate=0.8)

    def test_apply_adds_every_field(self):
        block = self._block()
        block.apply(StatDelta(attack=15, speed=-2, hit_rate=0.05))

        assert block.attack == 35
        assert block.defense == 10
        assert block.speed == 3
        assert block.hit_rate == pytest.approx(0.85)

    def test_apply_stacks(self):
        block = self._block()
        delta = StatDelta(attack=10, hit_rate=0.1)
        block.apply(delta)
        block.apply(delta)

        assert block.attack == 40
        assert block.hit_rate == pytest.approx(1.0)

    def test_copy_is_independent(self):
        block = self._block()
        clone = block.copy()
        clone.attack = 99

        assert block.attack == 20
        assert clone == StatBlock(attack=99, defense=10, speed=5, critical_rate=0.1, evasion_rate=0.1, hit_rate=0.8)


class TestEnums:
    """Test shared enum helpers."""

    def test_equipment_id_parse(self):
        assert EquipmentId.parse("Sword") is EquipmentId.SWORD
        assert EquipmentId.parse(EquipmentId.GUN) is EquipmentId.GUN
        assert EquipmentId.parse("NanoSuit") is EquipmentId.NANO_SUIT

    def test_equipment_id_parse_unknown(self):
        assert EquipmentId.parse("Rocket") is None
        assert EquipmentId.parse("sword") is None

    def test_selection_order(self):
        assert SELECTION_ORDER == (EquipmentSlot.WEAPON, EquipmentSlot.ARMOR, EquipmentSlot.ACCESSORY)

    def test_command_order_starts_with_attack(self):
        assert COMMAND_ORDER[0].name == "ATTACK"
        assert len(COMMAND_ORDER) == 3
