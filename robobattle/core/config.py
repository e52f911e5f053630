"""
Configuration loader for match settings.

This module handles loading and validating the YAML match configuration
(battle cadence, log size, combat constants and RNG seeding).
"""
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .data.game_enums import BattleMode
from .errors import ConfigError

ASSETS_DIR = Path(__file__).resolve().parent.parent / "assets"
DEFAULT_CONFIG_PATH = ASSETS_DIR / "config" / "match.yaml"


@dataclass(frozen=True)
class MatchConfig:
    """Tunable match settings."""
    battle_mode: BattleMode = BattleMode.TIMED
    round_interval: float = 1.0
    log_capacity: int = 12
    max_hp: int = 100
    use_hit_rate: bool = True
    post_battle_equip: bool = False
    defend_bonus: int = 5
    heal_amount: int = 10
    damage_spread: int = 3
    critical_multiplier: float = 2.0
    seed: Optional[int] = None

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            checked = _validate_setting(f.name, value)
            if checked is not value:
                object.__setattr__(self, f.name, checked)

        if self.round_interval <= 0:
            raise ConfigError(f"round_interval must be positive, got {self.round_interval}")
        if self.log_capacity < 1:
            raise ConfigError(f"log_capacity must be at least 1, got {self.log_capacity}")
        if self.max_hp < 1:
            raise ConfigError(f"max_hp must be at least 1, got {self.max_hp}")
        if self.damage_spread < 0:
            raise ConfigError(f"damage_spread cannot be negative, got {self.damage_spread}")

    @property
    def is_timed(self) -> bool:
        return self.battle_mode is BattleMode.TIMED

    def with_overrides(self, **overrides: Any) -> "MatchConfig":
        """Return a copy with the given settings replaced."""
        unknown = set(overrides) - {f.name for f in fields(self)}
        if unknown:
            raise ConfigError(f"Unknown config keys: {sorted(unknown)}")
        return replace(self, **overrides)


_EXPECTED_TYPES: dict[str, tuple[type, ...]] = {
    "round_interval": (int, float),
    "log_capacity": (int,),
    "max_hp": (int,),
    "use_hit_rate": (bool,),
    "post_battle_equip": (bool,),
    "defend_bonus": (int,),
    "heal_amount": (int,),
    "damage_spread": (int,),
    "critical_multiplier": (int, float),
}


def _parse_mode(value: str) -> BattleMode:
    try:
        return BattleMode(value.lower())
    except ValueError:
        raise ConfigError(f"Unknown battle_mode '{value}' (expected 'timed' or 'command')")


def _validate_setting(key: str, value: Any) -> Any:
    """Check one setting against its expected type, returning the stored value.

    Battle mode names are parsed into BattleMode.
    """
    if key == "battle_mode":
        if isinstance(value, BattleMode):
            return value
        if not isinstance(value, str):
            raise ConfigError(f"battle_mode must be a string, got {value!r}")
        return _parse_mode(value)
    if key == "seed":
        if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
            raise ConfigError(f"seed must be an integer or null, got {value!r}")
        return value

    expected = _EXPECTED_TYPES[key]
    # bool is an int subclass; only accept it where bool is expected
    if isinstance(value, bool) and bool not in expected:
        raise ConfigError(f"{key} has invalid type, got {value!r}")
    if not isinstance(value, expected):
        raise ConfigError(f"{key} has invalid type, got {value!r}")
    return value


def load_match_config(
    config_path: Optional[Union[str, Path]] = None,
    **overrides: Any,
) -> MatchConfig:
    """Load match configuration from a YAML file.

    Args:
        config_path: Path to the YAML file (defaults to the bundled match.yaml)
        **overrides: Settings that take precedence over the file

    Returns:
        Validated MatchConfig

    Raises:
        ConfigError: If the file is missing, unparsable or has invalid settings
    """
    path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        raise ConfigError(f"Match config file not found: {path}")
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}")

    section = data.get("match", data) if isinstance(data, dict) else None
    if not isinstance(section, dict):
        raise ConfigError(f"Expected a mapping of settings in {path}")

    known = {f.name for f in fields(MatchConfig)}
    unknown = set(section) - known
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {sorted(unknown)}")

    values: dict[str, Any] = {}
    for key, value in section.items():
        try:
            values[key] = _validate_setting(key, value)
        except ConfigError as e:
            raise ConfigError(f"{e} in {path}")

    return MatchConfig(**values).with_overrides(**overrides)
