"""
enemy.py
--------
A single invader. Movement is owned by the EnemyFormation, so an Enemy
carries only geometry, its grid cell and its lifecycle flag.
"""

from neon_invaders.core.runtime.game_settings import Colors, Layers
from neon_invaders.entities.base_entity import BaseEntity
from neon_invaders.graphics.render_command import RenderKind, ShapeType


class Enemy(BaseEntity):
    """Formation member with fixed size and color."""

    shape = ShapeType.INVADER
    layer = Layers.ENEMIES

    def __init__(self, x, y, width=30, height=30, row=0, col=0):
        super().__init__(x, y, width, height, color=Colors.ENEMY)
        self.row = row
        self.col = col

    def render_kind(self):
        return RenderKind.ENEMY
