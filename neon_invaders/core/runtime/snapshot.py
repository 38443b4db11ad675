"""
snapshot.py
-----------
Read-only view of a session handed to the presentation layer each frame.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from neon_invaders.core.runtime.game_state import GameState
from neon_invaders.graphics.render_command import RenderCommand


@dataclass(frozen=True)
class GameSnapshot:
    """Everything needed to draw one frame."""
    state: GameState
    score: int
    lives: int
    wave: int
    high_score: int
    final_score: Optional[int]
    player: Optional[RenderCommand]
    projectiles: Tuple[RenderCommand, ...] = ()
    enemies: Tuple[RenderCommand, ...] = ()

    def draw_commands(self):
        """All render commands sorted back-to-front by layer."""
        commands = list(self.projectiles) + list(self.enemies)
        if self.player is not None:
            commands.append(self.player)
        return sorted(commands, key=lambda c: c.layer)
