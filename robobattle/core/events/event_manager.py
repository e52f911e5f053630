"""
Event management system for decoupled manager communication.

This module provides a central event bus that allows the match, the phase
manager and the log manager to communicate through events instead of direct
dependencies, following the publisher-subscriber pattern.
"""

from collections import defaultdict, deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .events import GameEvent, EventType


class EventPriority(Enum):
    """Event processing priorities (lower value is processed first)."""
    CRITICAL = 0
    HIGH = 1
    NORMAL = 2
    LOW = 3


@dataclass
class QueuedEvent:
    """An event in the processing queue with metadata."""
    event: "GameEvent"
    priority: EventPriority = EventPriority.NORMAL
    sequence: int = 0
    source: Optional[str] = None  # For debugging

    def __lt__(self, other: "QueuedEvent") -> bool:
        """Compare events for priority queue ordering."""
        if self.priority.value != other.priority.value:
            return self.priority.value < other.priority.value
        # Same priority keeps publication order
        return self.sequence < other.sequence


EventSubscriber = Callable[["GameEvent"], None]


class EventManager:
    """Central event bus for match system communication.

    The engine is single-threaded: events are queued with :meth:`publish`
    and drained by :meth:`process_events`, which the match calls at the end
    of every host call.
    """

    def __init__(self, enable_debug_logging: bool = False):
        """Initialize the event manager.

        Args:
            enable_debug_logging: Whether to enable detailed event logging
        """
        self.enable_debug_logging = enable_debug_logging

        # Event subscribers by event type
        self._subscribers: dict["EventType", list[EventSubscriber]] = defaultdict(list)

        self._event_queue: deque[QueuedEvent] = deque()

        # Publication counter, used as the tie-breaking sequence
        self._events_published = 0

        self._debug_callback: Optional[Callable[[str], None]] = None

    def set_debug_callback(self, callback: Optional[Callable[[str], None]]) -> None:
        """Set a callback function for debug logging."""
        self._debug_callback = callback

    def _debug_log(self, message: str) -> None:
        if self.enable_debug_logging and self._debug_callback:
            self._debug_callback(f"[EVENT] {message}")

    def subscribe(
        self,
        event_type: "EventType",
        subscriber: EventSubscriber,
        subscriber_name: Optional[str] = None
    ) -> None:
        """Subscribe to events of a specific type.

        Args:
            event_type: The type of events to subscribe to
            subscriber: Callback function to handle events
            subscriber_name: Optional name for debugging
        """
        self._subscribers[event_type].append(subscriber)

        subscriber_display = subscriber_name or getattr(subscriber, '__name__', 'anonymous')
        self._debug_log(f"Subscribed {subscriber_display} to {event_type.name} events")

    def publish(
        self,
        event: "GameEvent",
        priority: EventPriority = EventPriority.NORMAL,
        source: Optional[str] = None
    ) -> None:
        """Queue an event for processing.

        Args:
            event: The event to publish
            priority: Processing priority for the event
            source: Optional source identifier for debugging
        """
        self._events_published += 1
        queued_event = QueuedEvent(
            event=event,
            priority=priority,
            sequence=self._events_published,
            source=source or "unknown"
        )
        self._event_queue.append(queued_event)

        self._debug_log(
            f"Published {event.__class__.__name__} (priority: {priority.name}, source: {queued_event.source})"
        )

    def process_events(self, max_events: Optional[int] = None) -> int:
        """Process queued events, including any published while processing.

        Args:
            max_events: Maximum number of events to process (None for all)

        Returns:
            Number of events processed
        """
        processed_count = 0

        while self._event_queue:
            sorted_events = sorted(self._event_queue)
            self._event_queue.clear()

            for index, queued_event in enumerate(sorted_events):
                if max_events is not None and processed_count >= max_events:
                    # Put remaining events back in queue
                    self._event_queue.extendleft(reversed(sorted_events[index:]))
                    return processed_count

                try:
                    self._process_event(queued_event)
                except Exception:
                    # Undelivered events stay queued for the next call
                    self._event_queue.extendleft(reversed(sorted_events[index + 1:]))
                    raise
                processed_count += 1

        return processed_count

    def _process_event(self, queued_event: QueuedEvent) -> None:
        """Notify all subscribers of a single event.

        Subscriber exceptions propagate to the caller: the engine has no
        recoverable error surface, so a failing handler is a bug.
        """
        event = queued_event.event

        self._debug_log(
            f"Processing {event.__class__.__name__} from {queued_event.source} "
            f"(turn: {event.turn})"
        )

        # Slices guard against subscription changes during delivery
        for subscriber in self._subscribers.get(event.event_type, [])[:]:
            subscriber(event)

