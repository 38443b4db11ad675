"""
test_cli.py
-----------
Tests for the ``python -m neon_invaders`` entry point.
"""

import pytest

from neon_invaders.__main__ import main, parse_args
from neon_invaders.core.debug.debug_logger import LoggerConfig
from neon_invaders.core.runtime import main_loop
from neon_invaders.core.runtime.game_settings import GameConfig


def test_defaults():
    args = parse_args([])
    assert args.config == "game.json"
    assert args.fps == 60
    assert args.font is None
    assert args.log_level == "INFO"


def test_rejects_unknown_log_level():
    with pytest.raises(SystemExit):
        parse_args(["--log-level", "LOUD"])


def test_main_builds_loop_from_config(monkeypatch):
    monkeypatch.setattr(LoggerConfig, "LOG_LEVEL", LoggerConfig.LOG_LEVEL)
    created = {}

    class FakeLoop:
        def __init__(self, config, fps, font_path):
            created.update(config=config, fps=fps, font_path=font_path)

        def run(self):
            created["ran"] = True

    monkeypatch.setattr(main_loop, "MainLoop", FakeLoop)

    assert main(["--fps", "30", "--log-level", "WARN"]) == 0
    assert created == {"config": GameConfig(), "fps": 30, "font_path": None, "ran": True}
    assert LoggerConfig.LOG_LEVEL == "WARN"
