"""
test_event_manager.py
---------------------
Tests for the pub-sub EventManager.
"""

import pytest

from neon_invaders.core.services.event_manager import (
    EventManager,
    GameOverEvent,
    ScoreChangedEvent,
)


@pytest.fixture
def events():
    return EventManager()


def test_dispatch_reaches_subscribers_of_that_type_only(events):
    scores, overs = [], []
    events.subscribe(ScoreChangedEvent, scores.append)
    events.subscribe(GameOverEvent, overs.append)

    events.dispatch(ScoreChangedEvent(score=10, delta=10))

    assert scores == [ScoreChangedEvent(score=10, delta=10)]
    assert overs == []


def test_duplicate_subscription_is_ignored(events):
    received = []
    events.subscribe(GameOverEvent, received.append)
    events.subscribe(GameOverEvent, received.append)

    events.dispatch(GameOverEvent(final_score=5))

    assert len(received) == 1
    assert events.get_subscriber_count(GameOverEvent) == 1


def test_unsubscribe(events):
    received = []
    events.subscribe(GameOverEvent, received.append)
    events.unsubscribe(GameOverEvent, received.append)
    events.unsubscribe(GameOverEvent, received.append)

    events.dispatch(GameOverEvent(final_score=5))

    assert received == []


def test_failing_callback_does_not_block_others(events):
    received = []

    def broken(event):
        raise RuntimeError("boom")

    events.subscribe(GameOverEvent, broken)
    events.subscribe(GameOverEvent, received.append)

    events.dispatch(GameOverEvent(final_score=1))

    assert received == [GameOverEvent(final_score=1)]


def test_subscriber_counts(events):
    events.subscribe(GameOverEvent, lambda e: None)
    events.subscribe(ScoreChangedEvent, lambda e: None)
    assert events.get_subscriber_count() == 2
    assert events.get_subscriber_count(GameOverEvent) == 1


def test_events_are_immutable():
    event = GameOverEvent(final_score=1)
    with pytest.raises(AttributeError):
        event.final_score = 2
