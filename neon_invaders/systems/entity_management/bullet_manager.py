"""
bullet_manager.py
-----------------
Owns every projectile in flight for one session.

Responsibilities
----------------
- Spawn projectiles with the session's projectile tuning.
- Update projectile positions each tick.
- Drop projectiles flagged for removal (off-screen or after a hit).
"""

from neon_invaders.core.debug.debug_logger import DebugLogger
from neon_invaders.entities.entity_types import ProjectileDirection
from neon_invaders.entities.projectile import Projectile


class BulletManager:
    """Handles spawning, updating and compaction of active projectiles."""

    def __init__(self, config):
        """
        Args:
            config (GameConfig): Projectile size/speed and playfield height.
        """
        self.config = config
        self.active = []

    # ===========================================================
    # Spawning
    # ===========================================================

    def spawn(self, center_x, y, direction=ProjectileDirection.PLAYER_UPWARD):
        """
        Create a projectile and add it to the active list.

        Args:
            center_x (float): Horizontal centre of the projectile.
            y (float): Top edge at spawn.
            direction (ProjectileDirection): Travel direction.

        Returns:
            Projectile: The spawned projectile.
        """
        cfg = self.config
        projectile = Projectile(
            center_x, y, direction,
            speed=cfg.projectile_speed,
            width=cfg.projectile_width,
            height=cfg.projectile_height,
            playfield_height=cfg.height,
        )
        self.active.append(projectile)
        DebugLogger.trace(f"[BulletSpawn] {direction.owner} at ({center_x:.1f}, {y:.1f})",
                          category="combat")
        return projectile

    # ===========================================================
    # Update Cycle
    # ===========================================================

    def update(self, dt: float):
        """
        Move every projectile, then drop the ones that left the play bounds.

        Args:
            dt (float): Milliseconds since the previous tick.
        """
        for projectile in self.active:
            projectile.update(dt)
        self.cleanup()

    def cleanup(self) -> int:
        """Remove projectiles flagged DEAD. Returns how many were dropped."""
        before = len(self.active)
        self.active = [p for p in self.active if p.alive]
        return before - len(self.active)

    def clear(self):
        self.active = []

    def __len__(self):
        return len(self.active)
