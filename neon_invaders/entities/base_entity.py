"""
base_entity.py
--------------
Foundational class for all active in-game entities (Player, Enemy, Projectile).

Coordinate System
-----------------
All entities use top-left based coordinates:
- (x, y) is the top-left corner of the entity's bounding box
- y grows downward, so "upward" motion decreases y
- Collisions use the axis-aligned box (x, y, width, height)

Rendering
---------
Entities are renderer-agnostic. render() returns a RenderCommand that the
presentation layer interprets; nothing here imports a graphics library.
"""

from typing import NamedTuple

from neon_invaders.entities.entity_state import LifecycleState
from neon_invaders.graphics.render_command import RenderCommand, ShapeType


class Rect(NamedTuple):
    """Axis-aligned rectangle with float coordinates."""
    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def centerx(self) -> float:
        return self.x + self.width / 2


class BaseEntity:
    """
    Base class for all game entities.

    Subclassed by Player, Enemy and Projectile.
    """

    shape = ShapeType.RECT
    layer = 0

    def __init__(self, x, y, width, height, color=(255, 255, 255)):
        self.x = float(x)
        self.y = float(y)
        self.width = width
        self.height = height
        self.color = color
        self.death_state = LifecycleState.ALIVE

    # ===========================================================
    # Geometry
    # ===========================================================

    @property
    def position(self):
        return self.x, self.y

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    # ===========================================================
    # Lifecycle
    # ===========================================================

    @property
    def alive(self) -> bool:
        return self.death_state == LifecycleState.ALIVE

    def mark_dead(self):
        """Flag for removal; the owning collection compacts it later."""
        self.death_state = LifecycleState.DEAD

    # ===========================================================
    # Frame Cycle
    # ===========================================================

    def update(self, dt):
        """Advance by dt milliseconds. Static entities do nothing."""
        pass

    def render(self) -> RenderCommand:
        """Describe how to draw this entity."""
        return RenderCommand(
            kind=self.render_kind(),
            shape=self.shape,
            x=self.x, y=self.y,
            width=self.width, height=self.height,
            color=self.color,
            layer=self.layer,
        )

    def render_kind(self):
        raise NotImplementedError

    def __repr__(self):
        return (f"<{type(self).__name__} x={self.x:.1f} y={self.y:.1f} "
                f"{self.width}x{self.height} {self.death_state.name}>")
