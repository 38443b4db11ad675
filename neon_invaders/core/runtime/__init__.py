"""
Runtime configuration exports.

Provides game-wide constants, tunable gameplay config and the session
state enum. All exports are lightweight with no internal dependencies;
import GameSession from game_session.py and the pygame host from
main_loop.py explicitly.
"""

from neon_invaders.core.runtime.game_settings import (
    Display,
    Layers,
    Debug,
    Colors,
    Physics,
    GameConfig,
)
from neon_invaders.core.runtime.game_state import GameState

__all__ = [
    'Display',
    'Layers',
    'Debug',
    'Colors',
    'Physics',
    'GameConfig',
    'GameState',
]
