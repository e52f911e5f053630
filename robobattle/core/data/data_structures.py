"""Stat data structures shared by robots, equipment and forecasts.

StatDelta is the additive change an equipment entry applies. StatBlock is the
full set of combat stats a robot carries.
"""

from dataclasses import dataclass, fields
from typing import Any


STAT_FIELDS = (
    "attack",
    "defense",
    "speed",
    "critical_rate",
    "evasion_rate",
    "hit_rate",
)

INTEGER_STATS = frozenset({"attack", "defense", "speed"})


@dataclass(frozen=True)
class StatDelta:
    """Additive stat change. Every field may be zero."""
    attack: int = 0
    defense: int = 0
    speed: int = 0
    critical_rate: float = 0.0
    evasion_rate: float = 0.0
    hit_rate: float = 0.0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StatDelta":
        """Build a delta from a mapping, rejecting unknown stat names."""
        unknown = set(data) - set(STAT_FIELDS)
        if unknown:
            raise ValueError(f"Unknown stat names: {sorted(unknown)}")

        values: dict[str, Any] = {}
        for name, raw in data.items():
            if isinstance(raw, bool) or not isinstance(raw, (int, float)):
                raise ValueError(f"Stat '{name}' must be numeric, got {raw!r}")
            if name in INTEGER_STATS:
                if not float(raw).is_integer():
                    raise ValueError(f"Stat '{name}' must be an integer, got {raw!r}")
                values[name] = int(raw)
            else:
                values[name] = float(raw)
        return cls(**values)

    def describe(self) -> str:
        """Short signed summary such as 'Attack +15, Speed -2'."""
        parts = []
        for f in fields(self):
            value = getattr(self, f.name)
            if not value:
                continue
            label = f.name.replace("_", " ").title()
            if f.name in INTEGER_STATS:
                parts.append(f"{label} {value:+d}")
            else:
                parts.append(f"{label} {value * 100:+.0f}%")
        return ", ".join(parts)


@dataclass
class StatBlock:
    """Mutable combat stats of a robot."""
    attack: int
    defense: int
    speed: int
    critical_rate: float
    evasion_rate: float
    hit_rate: float

    def apply(self, delta: StatDelta) -> None:
        """Add a delta in place. Deltas stack."""
        for name in STAT_FIELDS:
            setattr(self, name, getattr(self, name) + getattr(delta, name))

    def copy(self) -> "StatBlock":
        return StatBlock(**{name: getattr(self, name) for name in STAT_FIELDS})
