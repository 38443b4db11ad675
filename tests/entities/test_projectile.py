"""
test_projectile.py
------------------
Tests for Projectile motion, removal bounds and render output.
"""

import pytest

from neon_invaders.core.runtime.game_settings import Colors, Layers
from neon_invaders.entities.entity_state import LifecycleState
from neon_invaders.entities.entity_types import ProjectileDirection
from neon_invaders.entities.projectile import Projectile
from neon_invaders.graphics.render_command import RenderKind, ShapeType


UP = ProjectileDirection.PLAYER_UPWARD
DOWN = ProjectileDirection.ENEMY_DOWNWARD


# ===========================================================
# Construction
# ===========================================================

def test_hitbox_is_centered_on_spawn_x_like_the_drawn_shot():
    p = Projectile(100, 300, UP)
    assert p.x == pytest.approx(98)
    assert p.rect.centerx == pytest.approx(100)
    assert (p.width, p.height) == (4, 10)
    assert p.death_state == LifecycleState.ALIVE


@pytest.mark.parametrize("direction, color, owner", [
    (UP, Colors.PLAYER_BULLET, "player"),
    (DOWN, Colors.ENEMY_BULLET, "enemy"),
])
def test_color_and_owner_follow_direction(direction, color, owner):
    p = Projectile(100, 300, direction)
    assert p.color == color
    assert p.owner == owner


def test_direction_cannot_be_reassigned():
    p = Projectile(100, 300, UP)
    with pytest.raises(AttributeError):
        p.direction = DOWN


# ===========================================================
# Motion
# ===========================================================

def test_upward_projectile_moves_up():
    p = Projectile(100, 300, UP)
    p.update(100)
    assert p.y == pytest.approx(300 - 0.6 * 100)
    assert p.x == pytest.approx(98)


def test_downward_projectile_moves_down():
    p = Projectile(100, 300, DOWN)
    p.update(100)
    assert p.y == pytest.approx(300 + 0.6 * 100)


def test_zero_delta_does_not_move():
    p = Projectile(100, 300, UP)
    p.update(0)
    assert p.y == 300
    assert p.alive


# ===========================================================
# Removal Bounds
# ===========================================================

def test_flagged_once_above_top():
    p = Projectile(100, 5, UP)
    p.update(10)
    assert p.y < 0
    assert not p.alive


def test_exactly_at_top_survives():
    p = Projectile(100, 6, UP, speed=1.0)
    p.update(6)
    assert p.y == 0
    assert p.alive


def test_flagged_once_below_playfield():
    p = Projectile(100, 595, DOWN, playfield_height=600)
    p.update(10)
    assert p.y > 600
    assert not p.alive


def test_custom_speed():
    p = Projectile(100, 300, UP, speed=1.0)
    p.update(50)
    assert p.y == pytest.approx(250)


# ===========================================================
# Rendering
# ===========================================================

def test_render_command():
    p = Projectile(100, 300, UP)
    cmd = p.render()
    assert cmd.kind is RenderKind.PROJECTILE
    assert cmd.shape is ShapeType.RECT
    assert (cmd.x, cmd.y, cmd.width, cmd.height) == (98, 300, 4, 10)
    assert cmd.color == Colors.PLAYER_BULLET
    assert cmd.layer == Layers.BULLETS
