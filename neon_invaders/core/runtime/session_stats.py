"""
session_stats.py
----------------
Tracks statistics for the current game session/run.
Separated from entity management and game state.
"""


class SessionStats:
    """Container for run-specific statistics. Reset when starting a new game."""

    def __init__(self, starting_lives: int = 3):
        self.starting_lives = starting_lives
        self.score = 0
        self.high_score = 0
        self.lives = starting_lives
        self.enemies_killed = 0
        self.waves_cleared = 0
        self.run_time = 0.0  # ms

    # ===========================================================
    # Core Stats
    # ===========================================================

    def add_score(self, amount: int):
        """Add to current score and update high score. Score never decreases."""
        if amount < 0:
            raise ValueError(f"Score can only increase, got {amount}")
        self.score += amount
        if self.score > self.high_score:
            self.high_score = self.score

    def add_kill(self):
        self.enemies_killed += 1

    def add_wave(self):
        self.waves_cleared += 1

    def add_time(self, dt: float):
        """Add elapsed milliseconds to run timer."""
        self.run_time += dt

    @property
    def wave(self) -> int:
        """1-based index of the wave currently on screen."""
        return self.waves_cleared + 1

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def reset(self):
        """Reset all stats for new run. Preserves high score."""
        self.score = 0
        self.lives = self.starting_lives
        self.enemies_killed = 0
        self.waves_cleared = 0
        self.run_time = 0.0
