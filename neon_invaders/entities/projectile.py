"""
projectile.py
-------------
Straight-line projectile fired by the player (upward) or an enemy (downward).

Responsibilities
----------------
- Move vertically at constant speed in its fixed direction.
- Flag itself for removal once it leaves the vertical play bounds.
"""

from neon_invaders.core.runtime.game_settings import Colors, Layers
from neon_invaders.entities.base_entity import BaseEntity
from neon_invaders.entities.entity_types import ProjectileDirection
from neon_invaders.graphics.render_command import RenderKind, ShapeType


class Projectile(BaseEntity):
    """A small rectangle moving straight up or down."""

    shape = ShapeType.RECT
    layer = Layers.BULLETS

    def __init__(self, center_x, y, direction: ProjectileDirection,
                 speed=0.6, width=4, height=10, playfield_height=600):
        """
        Args:
            center_x (float): Horizontal centre of the spawn point.
            y (float): Top edge at spawn.
            direction (ProjectileDirection): Travel direction, immutable.
            speed (float): Units per millisecond.
            playfield_height (float): Lower removal bound.
        """
        color = Colors.PLAYER_BULLET if direction is ProjectileDirection.PLAYER_UPWARD \
            else Colors.ENEMY_BULLET
        super().__init__(center_x - width / 2, y, width, height, color=color)
        self._direction = direction
        self.speed = speed
        self.playfield_height = playfield_height

    @property
    def direction(self) -> ProjectileDirection:
        return self._direction

    @property
    def owner(self) -> str:
        return self._direction.owner

    def update(self, dt):
        self.y += self.speed * dt * self._direction.sign

        if self.y < 0 or self.y > self.playfield_height:
            self.mark_dead()

    def render_kind(self):
        return RenderKind.PROJECTILE
