"""
event_manager.py
----------------
Pub-sub dispatcher that lets the presentation layer react to session
changes without polling.

Each GameSession owns its own EventManager; there is no global instance.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type

from neon_invaders.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class GameStartedEvent(BaseEvent):
    """Dispatched when a fresh session enters PLAYING."""
    lives: int


@dataclass(frozen=True)
class ScoreChangedEvent(BaseEvent):
    """Dispatched after score increases."""
    score: int
    delta: int


@dataclass(frozen=True)
class WaveClearedEvent(BaseEvent):
    """Dispatched when the formation is emptied and a new wave spawns."""
    wave: int
    formation_speed: float


@dataclass(frozen=True)
class GameOverEvent(BaseEvent):
    """Dispatched when the session transitions to GAME_OVER."""
    final_score: int


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Central event dispatcher using pub-sub pattern."""

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}

    # ===========================================================
    # Subscription
    # ===========================================================

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """
        Register a callback for an event type. Duplicate registrations are ignored.

        Args:
            event_type: Event class to listen for
            callback: Function to call when event fires
        """
        callbacks = self._subscribers.setdefault(event_type, [])
        if callback in callbacks:
            return

        callbacks.append(callback)
        callback_name = getattr(callback, '__name__', repr(callback))
        DebugLogger.system(
            f"Subscribed '{callback_name}' to '{event_type.__name__}'",
            category="event_manager"
        )

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """Remove a callback from an event type."""
        callbacks = self._subscribers.get(event_type, [])
        if callback in callbacks:
            callbacks.remove(callback)

    # ===========================================================
    # Dispatch
    # ===========================================================

    def dispatch(self, event: BaseEvent) -> None:
        """
        Send event to all registered callbacks.

        A failing callback is logged and skipped so one broken listener
        cannot stall the simulation tick.
        """
        for callback in list(self._subscribers.get(type(event), [])):
            try:
                callback(event)
            except Exception as e:
                callback_name = getattr(callback, '__name__', repr(callback))
                DebugLogger.warn(f"Error in event callback {callback_name}: {e}",
                                 category="event_manager")

    # ===========================================================
    # Queries
    # ===========================================================

    def get_subscriber_count(self, event_type: Type[BaseEvent] = None) -> int:
        """Count subscribers for one event type, or all of them."""
        if event_type:
            return len(self._subscribers.get(event_type, []))
        return sum(len(subs) for subs in self._subscribers.values())
