from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union


class MatchInput(Enum):
    """Abstract inputs the engine understands."""
    CURSOR_UP = auto()
    CURSOR_DOWN = auto()
    CONFIRM = auto()


class Key(Enum):
    """Host keys a presentation layer may forward."""
    UP = auto()
    DOWN = auto()
    ENTER = auto()
    SPACE = auto()
    Z = auto()


KEY_BINDINGS: dict[Key, MatchInput] = {
    Key.UP: MatchInput.CURSOR_UP,
    Key.DOWN: MatchInput.CURSOR_DOWN,
    Key.Z: MatchInput.CONFIRM,
    Key.ENTER: MatchInput.CONFIRM,
    Key.SPACE: MatchInput.CONFIRM,
}


@dataclass(frozen=True)
class InputEvent:
    action: MatchInput

    @classmethod
    def cursor_up(cls) -> "InputEvent":
        return cls(MatchInput.CURSOR_UP)

    @classmethod
    def cursor_down(cls) -> "InputEvent":
        return cls(MatchInput.CURSOR_DOWN)

    @classmethod
    def confirm(cls) -> "InputEvent":
        return cls(MatchInput.CONFIRM)

    @classmethod
    def from_key(cls, key: Union[Key, str]) -> Optional["InputEvent"]:
        """Translate a host key or key name ('z', 'Enter'), or None when the key is unbound."""
        if isinstance(key, str):
            key = Key.__members__.get(key.upper())
        action = KEY_BINDINGS.get(key)
        return cls(action) if action is not None else None

    def is_confirm(self) -> bool:
        return self.action is MatchInput.CONFIRM

    def is_cursor(self) -> bool:
        return self.action in {MatchInput.CURSOR_UP, MatchInput.CURSOR_DOWN}

    @property
    def direction(self) -> int:
        """Cursor step for this input (-1 up, +1 down, 0 otherwise)."""
        if self.action is MatchInput.CURSOR_UP:
            return -1
        if self.action is MatchInput.CURSOR_DOWN:
            return 1
        return 0
