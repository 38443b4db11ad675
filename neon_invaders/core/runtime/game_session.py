"""
game_session.py
---------------
Simulation core: owns every entity collection and advances one tick per frame.

Responsibilities
----------------
- Run the MENU -> PLAYING -> GAME_OVER state machine.
- Update player, projectiles and formation in a fixed order.
- Apply collision results (score, removal, loss) and handle wave clears.
- Publish ScoreChanged / WaveCleared / GameOver events and frame snapshots.

The session never touches a window, a font or a keyboard. The host feeds
it leveled input through ``inputs``, calls ``tick(dt)`` once per rendered
frame and draws whatever ``snapshot()`` returns.
"""

import time

from neon_invaders.core.debug.debug_logger import DebugLogger
from neon_invaders.core.runtime.game_settings import GameConfig
from neon_invaders.core.runtime.game_state import GameState
from neon_invaders.core.runtime.session_stats import SessionStats
from neon_invaders.core.runtime.snapshot import GameSnapshot
from neon_invaders.core.services.event_manager import (
    EventManager,
    GameOverEvent,
    GameStartedEvent,
    ScoreChangedEvent,
    WaveClearedEvent,
)
from neon_invaders.entities.player import Player, PlayerInput
from neon_invaders.systems.collision.collision_manager import CollisionManager
from neon_invaders.systems.entity_management.bullet_manager import BulletManager
from neon_invaders.systems.entity_management.formation_manager import EnemyFormation


def monotonic_ms() -> float:
    """Default session clock in milliseconds."""
    return time.monotonic() * 1000.0


class GameSession:
    """One game of Neon Invaders, from menu through any number of restarts."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, config: GameConfig = None, events: EventManager = None, clock=None):
        """
        Args:
            config: Gameplay tuning. Defaults to the built-in values.
            events: Dispatcher for session events. A private one is created if omitted.
            clock: Zero-argument callable returning the current time in ms.
        """
        self.config = config or GameConfig()
        self.events = events or EventManager()
        self._clock = clock or monotonic_ms

        self.state = GameState.MENU
        self.stats = SessionStats(self.config.starting_lives)
        self.inputs = PlayerInput()
        self.now = 0.0
        self.final_score = None

        self.player = None
        self.bullet_manager = BulletManager(self.config)
        self.formation = EnemyFormation(self.config)
        self.collision_manager = CollisionManager(self.config.height)

        DebugLogger.init_entry("GameSession")
        DebugLogger.init_sub(f"Playfield {self.config.width}x{self.config.height}")

    # ===========================================================
    # Read-only Accessors
    # ===========================================================

    @property
    def score(self) -> int:
        return self.stats.score

    @property
    def lives(self) -> int:
        return self.stats.lives

    @property
    def projectiles(self):
        return self.bullet_manager.active

    @property
    def enemies(self):
        return self.formation.enemies

    # ===========================================================
    # Commands
    # ===========================================================

    def start_game(self):
        """Begin a fresh session: reset stats, clear entities, spawn ship and first wave."""
        self.stats.reset()
        self.final_score = None
        self.bullet_manager.clear()
        self.player = Player(self.config, bullet_manager=self.bullet_manager)
        self.formation.reset()

        previous = self.state
        self.state = GameState.PLAYING
        DebugLogger.state(f"{previous.name} -> PLAYING")
        self.events.dispatch(GameStartedEvent(lives=self.stats.lives))

    def trigger_game_over(self):
        """Enter GAME_OVER and publish the final score. Ignored outside PLAYING."""
        if self.state is not GameState.PLAYING:
            return

        self.state = GameState.GAME_OVER
        self.final_score = self.stats.score
        DebugLogger.state(f"PLAYING -> GAME_OVER (final score {self.final_score})")
        self.events.dispatch(GameOverEvent(final_score=self.final_score))

    # ===========================================================
    # Simulation Tick
    # ===========================================================

    def tick(self, dt: float):
        """
        Advance the simulation by dt milliseconds.

        Order: player -> projectiles -> formation -> collisions -> wave clear.
        Does nothing unless PLAYING. Negative deltas are treated as zero.
        """
        if self.state is not GameState.PLAYING:
            return

        dt = max(0.0, dt)
        self.now = self._clock()
        self.stats.add_time(dt)

        self.player.update(dt, self.inputs, self.now)
        self.bullet_manager.update(dt)
        self.formation.update(dt)

        self._resolve_collisions()

        if self.state is GameState.PLAYING and self.formation.is_empty:
            self._clear_wave()

    def _resolve_collisions(self):
        report = self.collision_manager.detect(
            self.player, self.bullet_manager.active, self.formation.enemies
        )

        for _projectile, enemy in report.kills:
            self.stats.add_kill()
            self._add_score(self.config.points_per_enemy)

        # Compact only after the scan so removal never disturbs iteration
        self.bullet_manager.cleanup()
        self.formation.cleanup()

        if report.kills:
            DebugLogger.action(
                f"Destroyed {len(report.kills)} enemies, {len(self.formation)} remaining",
                category="combat"
            )

        if report.game_over:
            reason = "enemy collided with player" if report.player_hit else "enemy reached bottom"
            DebugLogger.state(f"Loss condition: {reason}")
            self.trigger_game_over()

    def _add_score(self, amount: int):
        self.stats.add_score(amount)
        self.events.dispatch(ScoreChangedEvent(score=self.stats.score, delta=amount))

    def _clear_wave(self):
        self.stats.add_wave()
        self.formation.advance_wave()
        DebugLogger.action(
            f"Wave {self.stats.waves_cleared} cleared, formation speed {self.formation.speed:.3f}",
            category="formation"
        )
        self.events.dispatch(WaveClearedEvent(
            wave=self.stats.waves_cleared,
            formation_speed=self.formation.speed,
        ))

    # ===========================================================
    # Presentation
    # ===========================================================

    def snapshot(self) -> GameSnapshot:
        """Immutable view of the current frame for the presentation layer."""
        return GameSnapshot(
            state=self.state,
            score=self.stats.score,
            lives=self.stats.lives,
            wave=self.stats.wave,
            high_score=self.stats.high_score,
            final_score=self.final_score,
            player=self.player.render() if self.player is not None else None,
            projectiles=tuple(p.render() for p in self.bullet_manager.active),
            enemies=tuple(e.render() for e in self.formation.enemies),
        )
