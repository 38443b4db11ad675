"""
formation_manager.py
--------------------
The enemy formation: a grid of invaders that moves as one rigid body.

Responsibilities
----------------
- Spawn the rows x cols grid at the start of every wave.
- Sweep the whole formation horizontally at a shared speed.
- Reverse direction and drop every enemy once when any enemy hits a margin.
- Ratchet the shared speed upward after each cleared wave.
"""

from neon_invaders.core.debug.debug_logger import DebugLogger
from neon_invaders.entities.enemy import Enemy


class EnemyFormation:
    """Shared direction/speed controller for all enemies of a wave."""

    def __init__(self, config):
        """
        Args:
            config (GameConfig): Grid layout, speeds, margin and drop distance.
        """
        self.config = config
        self.enemies = []
        self.direction = 1
        self.speed = config.formation_base_speed
        self.playfield_width = config.width
        self.margin = config.edge_margin
        self.drop_distance = config.drop_distance

    # ===========================================================
    # Spawning
    # ===========================================================

    def reset(self):
        """Restore base speed and spawn the first wave."""
        self.speed = self.config.formation_base_speed
        self.spawn_wave()

    def spawn_wave(self):
        """Replace the formation with a fresh grid moving right. Speed is kept."""
        cfg = self.config
        self.direction = 1
        self.enemies = [
            Enemy(
                col * cfg.formation_spacing_x + cfg.formation_origin_x,
                row * cfg.formation_spacing_y + cfg.formation_origin_y,
                width=cfg.enemy_width,
                height=cfg.enemy_height,
                row=row,
                col=col,
            )
            for row in range(cfg.enemy_rows)
            for col in range(cfg.enemy_cols)
        ]
        DebugLogger.state(
            f"Spawned {len(self.enemies)} enemies ({cfg.enemy_rows}x{cfg.enemy_cols}) "
            f"at speed {self.speed:.3f}",
            category="entity_spawn"
        )

    def advance_wave(self):
        """Spawn the next wave and raise the shared speed by one increment."""
        self.spawn_wave()
        self.speed += self.config.formation_speed_increment

    # ===========================================================
    # Update Cycle
    # ===========================================================

    def update(self, dt):
        """
        Move every enemy, then handle edge contact once for the whole formation.

        Args:
            dt (float): Milliseconds since the previous tick.

        Returns:
            bool: True when the formation reversed this tick.
        """
        step = self.speed * dt * self.direction
        for enemy in self.enemies:
            enemy.x += step

        if not self._hit_edge():
            return False

        self.direction *= -1
        for enemy in self.enemies:
            enemy.y += self.drop_distance

        DebugLogger.trace(
            f"Formation reversed (direction={self.direction:+d}), dropped {self.drop_distance}",
            category="formation"
        )
        return True

    def _hit_edge(self) -> bool:
        if self.direction == 1:
            limit = self.playfield_width - self.margin
            return any(e.rect.right > limit for e in self.enemies)
        return any(e.x < self.margin for e in self.enemies)

    def cleanup(self) -> int:
        """Remove enemies flagged DEAD. Returns how many were dropped."""
        before = len(self.enemies)
        self.enemies = [e for e in self.enemies if e.alive]
        return before - len(self.enemies)

    # ===========================================================
    # Queries
    # ===========================================================

    @property
    def is_empty(self) -> bool:
        return not self.enemies

    def __len__(self):
        return len(self.enemies)

    def __iter__(self):
        return iter(self.enemies)
