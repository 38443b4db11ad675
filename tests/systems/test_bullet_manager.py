"""
test_bullet_manager.py
----------------------
Tests for projectile spawning, per-tick updates and compaction.
"""

import pytest

from neon_invaders.entities.entity_types import ProjectileDirection


def test_spawn_uses_config_tuning(bullet_manager, config):
    p = bullet_manager.spawn(center_x=200, y=500)

    assert bullet_manager.active == [p]
    assert p.direction is ProjectileDirection.PLAYER_UPWARD
    assert p.speed == config.projectile_speed
    assert (p.width, p.height) == (config.projectile_width, config.projectile_height)
    assert p.playfield_height == config.height


def test_update_moves_every_projectile(bullet_manager):
    up = bullet_manager.spawn(200, 300)
    down = bullet_manager.spawn(200, 300, direction=ProjectileDirection.ENEMY_DOWNWARD)

    bullet_manager.update(10)

    assert up.y == pytest.approx(294)
    assert down.y == pytest.approx(306)
    assert len(bullet_manager) == 2


def test_update_drops_projectiles_leaving_the_field(bullet_manager):
    leaving = bullet_manager.spawn(200, 3)
    staying = bullet_manager.spawn(200, 300)

    bullet_manager.update(10)

    assert bullet_manager.active == [staying]
    assert not leaving.alive


def test_cleanup_reports_removed_count(bullet_manager):
    a = bullet_manager.spawn(100, 100)
    bullet_manager.spawn(200, 100)
    a.mark_dead()

    assert bullet_manager.cleanup() == 1
    assert bullet_manager.cleanup() == 0
    assert len(bullet_manager) == 1


def test_clear(bullet_manager):
    bullet_manager.spawn(100, 100)
    bullet_manager.clear()
    assert len(bullet_manager) == 0
