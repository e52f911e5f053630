"""
Log management system for engine diagnostics.

This module provides centralized logging with categorization, filtering,
and bounded in-memory storage. It is separate from the player-facing
BattleLog: every component reports through LogMessage events and the
LogManager collects them for debugging views.
"""
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Optional, TYPE_CHECKING

from ...core.events import EventType
from ...core.events import LogMessage as LogEvent

if TYPE_CHECKING:
    from ...core.events import EventManager, GameEvent
    from ...core.engine.game_state import GameState


class LogCategory(Enum):
    """Categories for log messages."""
    SYSTEM = auto()     # Initialization, loading, restarts
    BATTLE = auto()     # Combat-related messages
    EQUIPMENT = auto()  # Equip operations
    PHASE = auto()      # Phase transitions


class LogLevel(Enum):
    """Log levels for filtering."""
    DEBUG = 0
    INFO = 1


_CATEGORY_TAGS = {
    LogCategory.SYSTEM: "SYS",
    LogCategory.BATTLE: "BTL",
    LogCategory.EQUIPMENT: "EQP",
    LogCategory.PHASE: "PHS",
}


@dataclass
class LogEntry:
    """A single log message with metadata."""
    text: str
    category: LogCategory
    level: LogLevel = LogLevel.INFO
    turn: int = 0
    timestamp: datetime = field(default_factory=datetime.now)

    def format(self, include_timestamp: bool = False, include_category: bool = True) -> str:
        """Format the message for display."""
        parts = []

        if include_timestamp:
            parts.append(f"[{self.timestamp.strftime('%H:%M:%S')}]")

        if include_category:
            parts.append(f"[{_CATEGORY_TAGS.get(self.category, '???')}]")

        parts.append(self.text)
        return " ".join(parts)


class LogManager:
    """Collects LogMessage events with categorization and filtering."""

    def __init__(
        self,
        event_manager: "EventManager",
        game_state: "GameState",
        max_messages: int = 1000,
        default_level: LogLevel = LogLevel.INFO
    ):
        """Initialize the log manager.

        Args:
            event_manager: Event manager for event-driven logging
            game_state: Game state to update with log data
            max_messages: Maximum number of messages to store in the buffer
            default_level: Minimum level returned by get_messages
        """
        self.messages: deque[LogEntry] = deque(maxlen=max_messages)
        self.log_level = default_level
        self.event_manager = event_manager
        self.game_state = game_state

        self._setup_event_subscriptions()
        self._update_game_state_log_data()

    def _setup_event_subscriptions(self) -> None:
        self.event_manager.subscribe(
            EventType.LOG_MESSAGE,
            self._handle_log_message_event,
            subscriber_name="LogManager.log_message"
        )

    def _update_game_state_log_data(self) -> None:
        """Publish the filtered, formatted messages on the game state."""
        visible = self.get_messages()
        self.game_state.log_data = {
            'messages': [msg.format() for msg in visible],
            'debug_enabled': self.is_debug_enabled(),
            'total_messages': len(self.messages)
        }

    def _handle_log_message_event(self, event: "GameEvent") -> None:
        if not isinstance(event, LogEvent):
            return
        try:
            category = LogCategory[event.category.upper()]
        except KeyError:
            category = LogCategory.SYSTEM
        try:
            level = LogLevel[event.level.upper()]
        except KeyError:
            level = LogLevel.INFO
        self.log(event.message, category, level, turn=event.turn)

    def log(
        self,
        text: str,
        category: LogCategory = LogCategory.SYSTEM,
        level: LogLevel = LogLevel.INFO,
        turn: int = 0,
    ) -> None:
        """Add a message to the log. All messages are stored; filtering happens on read."""
        self.messages.append(LogEntry(text=text, category=category, level=level, turn=turn))
        self._update_game_state_log_data()

    def get_messages(self, count: Optional[int] = None) -> list[LogEntry]:
        """Get recent messages at or above the current log level.

        Args:
            count: Maximum number of messages to return (None for all)

        Returns:
            List of recent messages, oldest first
        """
        filtered = [msg for msg in self.messages if msg.level.value >= self.log_level.value]

        if count is not None and count < len(filtered):
            return filtered[-count:]
        return filtered

    def set_log_level(self, level: LogLevel) -> None:
        self.log_level = level
        self._update_game_state_log_data()

    def is_debug_enabled(self) -> bool:
        return self.log_level == LogLevel.DEBUG

    def toggle_debug(self) -> None:
        """Toggle debug message visibility."""
        self.set_log_level(LogLevel.INFO if self.is_debug_enabled() else LogLevel.DEBUG)
