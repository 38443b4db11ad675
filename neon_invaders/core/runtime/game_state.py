"""
game_state.py
-------------
Top-level session states.

    MENU --start_game--> PLAYING --trigger_game_over--> GAME_OVER
                           ^                                |
                           +----------start_game------------+
"""

from enum import Enum


class GameState(Enum):
    """Lifecycle states of a game session."""
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"

    @property
    def can_start(self) -> bool:
        """True where a start/restart signal begins a new session."""
        return self is not GameState.PLAYING
