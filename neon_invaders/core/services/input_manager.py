"""
input_manager.py
----------------
Turns pygame keyboard and mouse events into the leveled input the
simulation core consumes.

Provides:
- Action bindings (move_left, move_right, fire) with several keys each
- Held-state tracking per action, independent of which bound key is down
- Start/restart requests from the fire keys or a click outside PLAYING
- Click-to-shoot during PLAYING, auto-released after a short tap
"""

import pygame

from neon_invaders.core.debug.debug_logger import DebugLogger
from neon_invaders.core.runtime.game_settings import Physics
from neon_invaders.entities.player import PlayerInput


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "move_left": [pygame.K_LEFT, pygame.K_a],
    "move_right": [pygame.K_RIGHT, pygame.K_d],
    "fire": [pygame.K_SPACE, pygame.K_RETURN],
}


class InputManager:
    """
    Event-driven input tracker.

    Usage:
        for event in pygame.event.get():
            if input_manager.handle_event(event, session.state):
                session.start_game()
        input_manager.update(frame_ms)
        session.inputs = input_manager.sample()
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, key_bindings=None, tap_duration=Physics.TAP_FIRE_MS):
        """
        Args:
            key_bindings: {action: [key, ...]}. Uses DEFAULT_KEY_BINDINGS if None.
            tap_duration: How long (ms) a mouse click keeps fire held.
        """
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self.tap_duration = tap_duration

        self._key_to_action = {}
        for action, keys in self.key_bindings.items():
            for key in keys:
                self._key_to_action[key] = action

        # Keys currently down, grouped by action
        self._held_keys = {action: set() for action in self.key_bindings}
        self._tap_fire_remaining = 0.0

        DebugLogger.init_entry("InputManager")
        DebugLogger.init_sub(f"Bound {len(self._key_to_action)} keys to {len(self.key_bindings)} actions")

    # ===========================================================
    # Event Handling
    # ===========================================================

    def handle_event(self, event, game_state) -> bool:
        """
        Process one pygame event.

        Args:
            event: pygame event.
            game_state (GameState): Current session state, used to decide
                whether the fire keys / clicks mean "start" or "shoot".

        Returns:
            bool: True when the event requests a new game.
        """
        if event.type == pygame.KEYDOWN:
            action = self._key_to_action.get(event.key)
            if action is None:
                return False
            if action == "fire" and game_state.can_start:
                DebugLogger.action("Start requested from keyboard", category="input")
                return True
            self._held_keys[action].add(event.key)
            return False

        if event.type == pygame.KEYUP:
            action = self._key_to_action.get(event.key)
            if action is not None:
                self._held_keys[action].discard(event.key)
            return False

        if event.type == pygame.MOUSEBUTTONDOWN:
            if game_state.can_start:
                DebugLogger.action("Start requested from mouse", category="input")
                return True
            self._tap_fire_remaining = self.tap_duration
            return False

        return False

    def update(self, dt: float):
        """Advance the tap-fire timer by dt milliseconds."""
        if self._tap_fire_remaining > 0:
            self._tap_fire_remaining = max(0.0, self._tap_fire_remaining - dt)

    def release_all(self):
        """Forget every held key, e.g. when the window loses focus."""
        for keys in self._held_keys.values():
            keys.clear()
        self._tap_fire_remaining = 0.0

    # ===========================================================
    # Queries
    # ===========================================================

    def action_held(self, action: str) -> bool:
        if action == "fire" and self._tap_fire_remaining > 0:
            return True
        return bool(self._held_keys.get(action))

    def sample(self) -> PlayerInput:
        """Current leveled input for the session."""
        return PlayerInput(
            move_left=self.action_held("move_left"),
            move_right=self.action_held("move_right"),
            fire=self.action_held("fire"),
        )
