"""
player.py
---------
The player-controlled ship.

Responsibilities
----------------
- Translate leveled left/right input into horizontal movement.
- Clamp the ship inside the playfield.
- Rate-limit firing and spawn upward projectiles through the BulletManager.
"""

from dataclasses import dataclass

from neon_invaders.core.debug.debug_logger import DebugLogger
from neon_invaders.core.runtime.game_settings import Colors, Layers
from neon_invaders.entities.base_entity import BaseEntity
from neon_invaders.entities.entity_types import ProjectileDirection
from neon_invaders.graphics.render_command import RenderKind, ShapeType


# ===========================================================
# Input Snapshot
# ===========================================================

@dataclass(frozen=True)
class PlayerInput:
    """Leveled (held / not held) input sampled by the host."""
    move_left: bool = False
    move_right: bool = False
    fire: bool = False


# ===========================================================
# Player
# ===========================================================

class Player(BaseEntity):
    """Represents the controllable player ship."""

    shape = ShapeType.TRIANGLE
    layer = Layers.PLAYER

    def __init__(self, config, bullet_manager=None):
        """
        Args:
            config (GameConfig): Size, speed and fire interval.
            bullet_manager (BulletManager): Receives spawned projectiles.
        """
        x, y = config.player_spawn
        super().__init__(x, y, config.player_width, config.player_height, color=Colors.PLAYER)

        self.speed = config.player_speed
        self.fire_interval = config.fire_interval_ms
        self.last_fired = None  # ms timestamp; None until the first shot
        self.playfield_width = config.width
        self.bullet_manager = bullet_manager

    # ===========================================================
    # Frame Cycle
    # ===========================================================

    def update(self, dt, inputs: PlayerInput = None, now: float = 0.0):
        """
        Move, clamp and possibly fire.

        Args:
            dt (float): Milliseconds since the previous tick.
            inputs (PlayerInput): Current held state.
            now (float): Current timestamp in milliseconds.
        """
        if inputs is None:
            return

        # Left and right are applied one after the other, so holding both cancels out
        if inputs.move_left:
            self.x -= self.speed * dt
        if inputs.move_right:
            self.x += self.speed * dt

        self._clamp_to_playfield()

        if inputs.fire and self.can_fire(now):
            if self.shoot() is not None:
                self.last_fired = now

    def _clamp_to_playfield(self):
        max_x = self.playfield_width - self.width
        if self.x < 0:
            self.x = 0.0
        if self.x > max_x:
            self.x = float(max_x)

    # ===========================================================
    # Combat
    # ===========================================================

    def can_fire(self, now: float) -> bool:
        """True once strictly more than fire_interval ms have passed since the last shot."""
        return self.last_fired is None or (now - self.last_fired) > self.fire_interval

    def shoot(self):
        """Spawn one upward projectile from the nose of the ship."""
        if self.bullet_manager is None:
            DebugLogger.warn("Attempted to fire without BulletManager", category="combat")
            return None

        projectile = self.bullet_manager.spawn(
            center_x=self.rect.centerx,
            y=self.y,
            direction=ProjectileDirection.PLAYER_UPWARD,
        )
        DebugLogger.trace(f"Fired projectile at x={projectile.x:.1f}", category="combat")
        return projectile

    def render_kind(self):
        return RenderKind.PLAYER
