"""
neon_invaders/entities/__init__.py
----------------------------------
Entity module exports.

Exports:
    Player, PlayerInput - The ship and the leveled input it reads
    Projectile         - Straight-moving shot
    Enemy              - Formation member
    LifecycleState     - ALIVE / DEAD removal flag
    ProjectileDirection - PLAYER_UPWARD / ENEMY_DOWNWARD
"""

from neon_invaders.entities.entity_state import LifecycleState
from neon_invaders.entities.entity_types import ProjectileDirection
from neon_invaders.entities.base_entity import BaseEntity, Rect
from neon_invaders.entities.enemy import Enemy
from neon_invaders.entities.projectile import Projectile
from neon_invaders.entities.player import Player, PlayerInput

__all__ = [
    'LifecycleState',
    'ProjectileDirection',
    'BaseEntity',
    'Rect',
    'Enemy',
    'Projectile',
    'Player',
    'PlayerInput',
]
