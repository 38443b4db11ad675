"""
test_formation_manager.py
-------------------------
Tests for EnemyFormation grid layout, rigid-body sweep, edge reversal
and the wave speed ratchet.
"""

import pytest

from neon_invaders.systems.entity_management.formation_manager import EnemyFormation


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def formation(config):
    f = EnemyFormation(config)
    f.reset()
    return f


def xs(formation):
    return [e.x for e in formation]


def ys(formation):
    return [e.y for e in formation]


# ===========================================================
# Grid Layout
# ===========================================================

def test_spawns_full_grid(formation):
    assert len(formation) == 55
    assert not formation.is_empty
    assert formation.direction == 1
    assert formation.speed == pytest.approx(0.05)


@pytest.mark.parametrize("row, col", [(0, 0), (0, 10), (4, 0), (4, 10), (2, 5)])
def test_grid_positions(formation, row, col):
    enemy = next(e for e in formation if e.row == row and e.col == col)
    assert enemy.x == 50 + col * 50
    assert enemy.y == 50 + row * 40
    assert (enemy.width, enemy.height) == (30, 30)


def test_enemies_listed_row_major(formation):
    cells = [(e.row, e.col) for e in formation]
    assert cells == sorted(cells)


# ===========================================================
# Movement
# ===========================================================

def test_moves_as_rigid_body(formation):
    before = xs(formation)
    formation.update(100)
    after = xs(formation)

    deltas = {round(a - b, 9) for a, b in zip(after, before)}
    assert deltas == {round(0.05 * 100, 9)}
    assert ys(formation) == [50 + r * 40 for r in range(5) for _ in range(11)]


def test_zero_delta_is_a_no_op(formation):
    before = (xs(formation), ys(formation))
    assert formation.update(0) is False
    assert (xs(formation), ys(formation)) == before


def test_touching_right_limit_does_not_reverse(formation):
    formation.speed = 1.0
    # Rightmost enemy ends with right edge exactly at width - margin
    reversed_now = formation.update(200)
    assert reversed_now is False
    assert formation.direction == 1
    assert max(e.rect.right for e in formation) == 780


def test_crossing_right_limit_reverses_and_drops_once(formation):
    formation.speed = 1.0
    before_y = ys(formation)

    assert formation.update(201) is True
    assert formation.direction == -1
    assert ys(formation) == [y + 20 for y in before_y]

    # Still past the right limit, but now moving left: no second drop
    assert formation.update(0.5) is False
    assert ys(formation) == [y + 20 for y in before_y]


def test_crossing_left_margin_reverses(formation):
    formation.speed = 1.0
    formation.direction = -1
    before_y = ys(formation)

    assert formation.update(31) is True
    assert formation.direction == 1
    assert min(e.x for e in formation) == 19
    assert ys(formation) == [y + 20 for y in before_y]


def test_direction_only_ever_flips_sign(formation):
    formation.speed = 1.0
    seen = set()
    for _ in range(200):
        formation.update(16)
        seen.add(formation.direction)
    assert seen == {1, -1}


# ===========================================================
# Waves
# ===========================================================

def test_advance_wave_ratchets_speed(formation):
    formation.advance_wave()
    assert formation.speed == pytest.approx(0.07)
    formation.advance_wave()
    assert formation.speed == pytest.approx(0.09)


def test_advance_wave_respawns_grid_moving_right(formation):
    formation.direction = -1
    for enemy in formation:
        enemy.mark_dead()
    formation.cleanup()
    assert formation.is_empty

    formation.advance_wave()
    assert len(formation) == 55
    assert formation.direction == 1
    assert formation.enemies[0].position == (50.0, 50.0)


def test_reset_restores_base_speed(formation):
    formation.advance_wave()
    formation.advance_wave()
    formation.reset()
    assert formation.speed == pytest.approx(0.05)
    assert len(formation) == 55


# ===========================================================
# Removal
# ===========================================================

def test_cleanup_drops_only_dead(formation):
    formation.enemies[0].mark_dead()
    formation.enemies[7].mark_dead()
    assert formation.cleanup() == 2
    assert len(formation) == 53
    assert all(e.alive for e in formation)
