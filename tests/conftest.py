"""
conftest.py
-----------
Shared pytest configuration and fixtures for Neon Invaders tests.

Contains:
- Headless SDL setup so pygame host tests run without a display
- Logger silencing
- A controllable millisecond clock and a ready-made GameSession
- Entity placement helpers
"""

import os

# Must be set before pygame is imported anywhere
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from neon_invaders.core.debug.debug_logger import LoggerConfig
from neon_invaders.core.runtime.game_session import GameSession
from neon_invaders.core.runtime.game_settings import GameConfig
from neon_invaders.systems.entity_management.bullet_manager import BulletManager


# ===========================================================
# Test Helpers
# ===========================================================

class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, start=10_000.0):
        self.now = start

    def advance(self, ms):
        self.now += ms

    def __call__(self):
        return self.now


def place_on(projectile, target):
    """Centre a projectile inside a target's bounding box."""
    projectile.x = target.x + target.width / 2 - projectile.width / 2
    projectile.y = target.y + target.height / 2 - projectile.height / 2


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture(autouse=True)
def quiet_logger():
    """Silence console logging for the duration of a test."""
    previous = LoggerConfig.ENABLE_LOGGING
    LoggerConfig.ENABLE_LOGGING = False
    yield
    LoggerConfig.ENABLE_LOGGING = previous


@pytest.fixture
def config():
    """Default tuning (800x600 playfield, 5x11 formation)."""
    return GameConfig()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def place():
    """Helper that centres a projectile on a target."""
    return place_on


@pytest.fixture
def bullet_manager(config):
    return BulletManager(config)


@pytest.fixture
def session(config, clock):
    """Session in MENU state with a fake clock."""
    return GameSession(config, clock=clock)


@pytest.fixture
def playing_session(session):
    """Session that has already started."""
    session.start_game()
    return session


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: multi-tick scenarios through GameSession")
    config.addinivalue_line("markers", "host: tests that need pygame")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Tag tests by location so '-m' filtering works without decorating every test."""
    for item in items:
        path = str(item.fspath).replace("\\", "/")
        if "/graphics/" in path or "/ui/" in path or "test_input_manager" in path or "test_cli" in path:
            item.add_marker(pytest.mark.host)
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
