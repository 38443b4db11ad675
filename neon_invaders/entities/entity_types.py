"""Entity types."""

from enum import Enum


class ProjectileDirection(Enum):
    """Travel direction of a projectile. Fixed at creation."""
    PLAYER_UPWARD = -1
    ENEMY_DOWNWARD = 1

    @property
    def sign(self) -> int:
        """Vertical sign applied to speed (screen y grows downward)."""
        return self.value

    @property
    def owner(self) -> str:
        return "player" if self is ProjectileDirection.PLAYER_UPWARD else "enemy"
