"""
render_command.py
-----------------
Renderer-agnostic draw descriptors emitted by the simulation core.

Entities never draw themselves. Each one produces a RenderCommand
(kind + shape + geometry + color) and the presentation layer decides how
to rasterize it.
"""

from enum import Enum
from typing import NamedTuple, Tuple


class RenderKind(Enum):
    """What the command depicts."""
    PLAYER = "player"
    PROJECTILE = "projectile"
    ENEMY = "enemy"


class ShapeType(Enum):
    """How the command should be rasterized."""
    TRIANGLE = "triangle"    # apex at top-centre, base along the bottom edge
    RECT = "rect"
    INVADER = "invader"      # four-block pixel-art silhouette


class RenderCommand(NamedTuple):
    """Immutable draw descriptor in playfield coordinates."""
    kind: RenderKind
    shape: ShapeType
    x: float
    y: float
    width: float
    height: float
    color: Tuple[int, int, int]
    layer: int = 0


def invader_blocks(x: float, y: float, w: float, h: float):
    """
    Sub-rectangles making up the invader silhouette.

    Returns:
        list[tuple[float, float, float, float]]: (x, y, width, height) blocks.
    """
    return [
        (x + w * 0.25, y, w * 0.5, h * 0.25),               # head
        (x, y + h * 0.25, w, h * 0.5),                      # body
        (x, y + h * 0.75, w * 0.25, h * 0.25),              # left leg
        (x + w * 0.75, y + h * 0.75, w * 0.25, h * 0.25),   # right leg
    ]


def triangle_points(x: float, y: float, w: float, h: float):
    """Vertices of the ship triangle."""
    return [(x + w / 2, y), (x + w, y + h), (x, y + h)]
