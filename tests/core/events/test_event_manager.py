"""
Tests for the EventManager pub/sub system.
"""
import pytest
from unittest.mock import Mock

from robobattle.core.engine.game_state import MatchPhase
from robobattle.core.events import (
    BattleEnded,
    EventManager,
    EventPriority,
    EventType,
    LogMessage,
    MatchPhaseChanged,
    MatchStarted,
    QueuedEvent,
)


class TestEventTypes:
    """Test that events carry their type."""

    def test_event_type_is_set(self):
        assert MatchStarted(turn=0).event_type == EventType.MATCH_STARTED
        assert BattleEnded(turn=4, player_won=True, rounds=3).event_type == EventType.BATTLE_ENDED

    def test_events_are_immutable(self):
        event = BattleEnded(turn=4, player_won=True, rounds=3)
        with pytest.raises(Exception):
            event.player_won = False  # type: ignore[misc]

    def test_log_message_defaults(self):
        event = LogMessage(turn=0, message="hello")
        assert event.category == "SYSTEM"
        assert event.level == "INFO"
        assert event.source is None


class TestEventManager:
    """Test subscription, queuing and delivery."""

    def test_publish_is_queued_until_processed(self, event_manager):
        handler = Mock()
        event_manager.subscribe(EventType.MATCH_STARTED, handler)

        event = MatchStarted(turn=0)
        event_manager.publish(event)

        handler.assert_not_called()

        assert event_manager.process_events() == 1
        handler.assert_called_once_with(event)
        assert event_manager.process_events() == 0

    def test_only_matching_subscribers_receive(self, event_manager):
        started = Mock()
        ended = Mock()
        event_manager.subscribe(EventType.MATCH_STARTED, started)
        event_manager.subscribe(EventType.BATTLE_ENDED, ended)

        event_manager.publish(MatchStarted(turn=0))
        event_manager.process_events()

        started.assert_called_once()
        ended.assert_not_called()

    def test_priority_ordering(self, event_manager):
        received = []
        event_manager.subscribe(EventType.MATCH_STARTED, lambda event: received.append(event.turn))

        event_manager.publish(MatchStarted(turn=1), priority=EventPriority.LOW)
        event_manager.publish(MatchStarted(turn=2), priority=EventPriority.NORMAL)
        event_manager.publish(MatchStarted(turn=3), priority=EventPriority.CRITICAL)
        event_manager.publish(MatchStarted(turn=4), priority=EventPriority.NORMAL)
        event_manager.process_events()

        assert received == [3, 2, 4, 1]

    def test_events_published_during_processing_are_drained(self, event_manager):
        received = []

        def on_start(event):
            received.append("started")
            event_manager.publish(
                MatchPhaseChanged(turn=0, old_phase=MatchPhase.TITLE, new_phase=MatchPhase.EQUIPMENT_SELECTION)
            )

        event_manager.subscribe(EventType.MATCH_STARTED, on_start)
        event_manager.subscribe(EventType.MATCH_PHASE_CHANGED, lambda event: received.append("changed"))

        event_manager.publish(MatchStarted(turn=0))
        assert event_manager.process_events() == 2
        assert received == ["started", "changed"]

    def test_max_events_requeues_remainder(self, event_manager):
        handler = Mock()
        event_manager.subscribe(EventType.MATCH_STARTED, handler)
        for turn in range(3):
            event_manager.publish(MatchStarted(turn=turn))

        assert event_manager.process_events(max_events=2) == 2
        assert event_manager.process_events() == 1
        assert [call.args[0].turn for call in handler.call_args_list] == [0, 1, 2]

    def test_subscriber_errors_propagate(self, event_manager):
        event_manager.subscribe(EventType.MATCH_STARTED, Mock(side_effect=RuntimeError("boom")))
        event_manager.publish(MatchStarted(turn=0))

        with pytest.raises(RuntimeError, match="boom"):
            event_manager.process_events()

    def test_failing_subscriber_keeps_rest_of_batch(self, event_manager):
        received = []

        def on_start(event):
            if event.turn == 1:
                raise RuntimeError("boom")
            received.append(event.turn)

        event_manager.subscribe(EventType.MATCH_STARTED, on_start)
        for turn in range(4):
            event_manager.publish(MatchStarted(turn=turn))

        with pytest.raises(RuntimeError, match="boom"):
            event_manager.process_events()
        assert received == [0]

        assert event_manager.process_events() == 2
        assert received == [0, 2, 3]

    def test_debug_callback(self):
        messages = []
        manager = EventManager(enable_debug_logging=True)
        manager.set_debug_callback(messages.append)

        manager.publish(MatchStarted(turn=0))

        assert any(message.startswith("[EVENT] Published MatchStarted") for message in messages)


class TestQueuedEvent:
    """Test queue ordering of QueuedEvent."""

    def test_sequence_breaks_priority_ties(self):
        first = QueuedEvent(event=MatchStarted(turn=0), sequence=1)
        second = QueuedEvent(event=MatchStarted(turn=0), sequence=2)
        assert first < second
        assert not second < first
