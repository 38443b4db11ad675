"""
collision_manager.py
--------------------
Axis-aligned bounding-box collision detection for one simulation tick.

Responsibilities
----------------
- Provide the strict AABB overlap test used everywhere in the game.
- Resolve player projectiles against the formation (first match wins).
- Detect enemies touching the player or reaching the bottom edge.
- Mark hit entities DEAD only; compaction is left to the owning collections.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from neon_invaders.core.debug.debug_logger import DebugLogger
from neon_invaders.entities.entity_types import ProjectileDirection


# ===========================================================
# Pure Geometry
# ===========================================================

def intersects(a, b) -> bool:
    """
    Strict AABB overlap. Boxes that merely share an edge do not intersect.

    Args:
        a, b: Anything exposing left/right/top/bottom (e.g. Rect).
    """
    return (a.left < b.right and
            a.right > b.left and
            a.top < b.bottom and
            a.bottom > b.top)


# ===========================================================
# Tick Report
# ===========================================================

@dataclass
class CollisionReport:
    """Outcome of one detection pass."""
    kills: List[Tuple[object, object]] = field(default_factory=list)  # (projectile, enemy)
    player_hit: bool = False
    enemy_landed: bool = False

    @property
    def game_over(self) -> bool:
        return self.player_hit or self.enemy_landed


# ===========================================================
# Collision Manager
# ===========================================================

class CollisionManager:
    """Detects collisions and flags the entities involved."""

    def __init__(self, playfield_height):
        self.playfield_height = playfield_height

    def detect(self, player, projectiles, enemies) -> CollisionReport:
        """
        Run the three collision phases in order.

        Args:
            player (Player | None): The ship, if spawned.
            projectiles (list[Projectile]): Projectiles in flight.
            enemies (list[Enemy]): Formation members in formation order.

        Returns:
            CollisionReport: Kills and loss triggers found this tick.
        """
        report = CollisionReport()

        self._projectiles_vs_enemies(projectiles, enemies, report)

        survivors = [e for e in enemies if e.alive]
        if player is not None and player.alive:
            player_rect = player.rect
            report.player_hit = any(intersects(e.rect, player_rect) for e in survivors)

        report.enemy_landed = any(e.rect.bottom > self.playfield_height for e in survivors)

        if report.player_hit:
            DebugLogger.trace("Enemy collided with player")
        if report.enemy_landed:
            DebugLogger.trace("Enemy reached the bottom edge")

        return report

    def _projectiles_vs_enemies(self, projectiles, enemies, report):
        """A projectile removes at most one enemy; later enemies are not scanned."""
        for projectile in projectiles:
            if not projectile.alive or projectile.direction is not ProjectileDirection.PLAYER_UPWARD:
                continue

            p_rect = projectile.rect
            for enemy in enemies:
                if not enemy.alive:
                    continue
                if intersects(p_rect, enemy.rect):
                    projectile.mark_dead()
                    enemy.mark_dead()
                    report.kills.append((projectile, enemy))
                    DebugLogger.trace(f"Projectile hit enemy at row {enemy.row}, col {enemy.col}")
                    break
