"""Robot templates for match initialization.

Templates are loaded from YAML and describe a robot's base stats and any
default loadout it equips when built. The player template ships without a
loadout because the player picks equipment during selection.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

import yaml

from ...core.config import ASSETS_DIR
from ...core.data import STAT_FIELDS, EquipmentId, EquipmentSlot, StatBlock, Team
from ...core.errors import CatalogError
from ..equipment.catalog import EquipmentCatalog
from .robot import Robot

DEFAULT_TEMPLATES_PATH = ASSETS_DIR / "data" / "robots.yaml"


@dataclass(frozen=True)
class RobotTemplate:
    """Base definition a Robot is built from."""

    name: str
    team: Team
    base_stats: tuple[tuple[str, float], ...]
    loadout: dict[EquipmentSlot, EquipmentId] = field(default_factory=dict)

    def stat_block(self) -> StatBlock:
        """Fresh mutable copy of the base stats."""
        return StatBlock(**dict(self.base_stats))

    def build(self, catalog: EquipmentCatalog, hp_max: int = 100) -> Robot:
        """Create a robot at full HP with the default loadout applied."""
        robot = Robot(self.name, self.stat_block(), team=self.team, hp_max=hp_max)
        for slot, item_id in self.loadout.items():
            robot.equip(slot, item_id, catalog)
        return robot


def load_robot_templates(path: Optional[Union[str, Path]] = None) -> dict[Team, RobotTemplate]:
    """Load player and enemy templates from a YAML file.

    Returns:
        Dictionary mapping Team to its RobotTemplate

    Raises:
        CatalogError: If the file is missing or the structure is invalid
    """
    yaml_path = Path(path) if path is not None else DEFAULT_TEMPLATES_PATH

    try:
        with open(yaml_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise CatalogError(f"Robot templates file not found: {yaml_path}")
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid YAML in {yaml_path}: {e}")

    if not isinstance(data, dict) or not isinstance(data.get("robots"), dict):
        raise CatalogError(f"Missing 'robots' section in {yaml_path}")

    templates: dict[Team, RobotTemplate] = {}
    for team_name, template_data in data["robots"].items():
        try:
            team = Team[str(team_name).upper()]
        except KeyError:
            raise CatalogError(f"Unknown team '{team_name}' in {yaml_path}")
        templates[team] = _parse_template(team, template_data, yaml_path)

    missing = [team.name.lower() for team in Team if team not in templates]
    if missing:
        raise CatalogError(f"Missing robot templates for {missing} in {yaml_path}")

    return templates


def _parse_template(team: Team, template_data: object, yaml_path: Path) -> RobotTemplate:
    if not isinstance(template_data, dict):
        raise CatalogError(f"Template '{team.name.lower()}' must be a mapping in {yaml_path}")

    try:
        name = template_data["name"]
        raw_stats = template_data["stats"]
    except KeyError as e:
        raise CatalogError(f"Invalid template structure in {yaml_path}: missing {e}")

    if not isinstance(raw_stats, dict) or set(raw_stats) != set(STAT_FIELDS):
        raise CatalogError(
            f"Template '{name}' must define exactly {list(STAT_FIELDS)} in {yaml_path}"
        )

    base_stats = []
    for stat in STAT_FIELDS:
        value = raw_stats[stat]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise CatalogError(f"Template '{name}' stat '{stat}' must be numeric in {yaml_path}")
        base_stats.append((stat, int(value) if stat in ("attack", "defense", "speed") else float(value)))

    loadout: dict[EquipmentSlot, EquipmentId] = {}
    for slot_name, raw_id in (template_data.get("loadout") or {}).items():
        try:
            slot = EquipmentSlot(slot_name)
        except ValueError:
            raise CatalogError(f"Unknown loadout slot '{slot_name}' for '{name}' in {yaml_path}")
        item_id = EquipmentId.parse(str(raw_id))
        if item_id is None:
            raise CatalogError(f"Unknown equipment '{raw_id}' in loadout of '{name}' in {yaml_path}")
        loadout[slot] = item_id

    return RobotTemplate(name=str(name), team=team, base_stats=tuple(base_stats), loadout=loadout)
