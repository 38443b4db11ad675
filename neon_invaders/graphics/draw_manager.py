"""
draw_manager.py
---------------
Centralized pygame renderer for batching and layered draw calls.

Responsibilities:
- Interpret RenderCommand descriptors from the simulation core
- Maintain layered draw queues (shapes and pre-rendered surfaces)
- Render queued items back-to-front
- Optional hitbox debug overlay
"""

import pygame

from neon_invaders.core.debug.debug_logger import DebugLogger
from neon_invaders.core.runtime.game_settings import Colors, Debug
from neon_invaders.graphics.render_command import (
    ShapeType,
    invader_blocks,
    triangle_points,
)


class DrawManager:
    """Handles all rendering operations with layered batching."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, background_color=Colors.BACKGROUND):
        self.background_color = background_color
        self.command_layers = {}  # {layer: [RenderCommand, ...]}
        self.surface_layers = {}  # {layer: [(surface, pos), ...]}
        self.debug_hitboxes = []

        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Queue Management
    # ===========================================================

    def clear(self):
        """Clear all draw queues for new frame."""
        self.command_layers.clear()
        self.surface_layers.clear()
        self.debug_hitboxes.clear()

    def queue_command(self, command):
        """Queue one RenderCommand on its own layer."""
        self.command_layers.setdefault(command.layer, []).append(command)
        if Debug.HITBOX_VISIBLE:
            self.debug_hitboxes.append(
                pygame.Rect(round(command.x), round(command.y),
                            round(command.width), round(command.height))
            )

    def queue_commands(self, commands):
        for command in commands:
            self.queue_command(command)

    def queue_draw(self, surface, pos, layer=0):
        """
        Queue a pre-rendered surface (e.g. text) for drawing.

        Args:
            surface: pygame.Surface to blit
            pos: Top-left position or pygame.Rect
            layer: Render layer (lower = first)
        """
        if surface is None:
            DebugLogger.warn(f"Skipped invalid draw call at layer {layer}", category="render")
            return
        self.surface_layers.setdefault(layer, []).append((surface, pos))

    def queue_snapshot(self, snapshot):
        """Queue every entity of a GameSnapshot."""
        self.queue_commands(snapshot.draw_commands())

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self, target):
        """
        Draw all queued items to the target surface.

        Args:
            target: pygame.Surface (usually the display surface)
        """
        target.fill(self.background_color)

        layers = sorted(set(self.command_layers) | set(self.surface_layers))
        for layer in layers:
            for command in self.command_layers.get(layer, ()):
                self._draw_command(target, command)
            for surface, pos in self.surface_layers.get(layer, ()):
                target.blit(surface, pos)

        for rect in self.debug_hitboxes:
            pygame.draw.rect(target, Debug.HITBOX_COLOR, rect, 1)

    def _draw_command(self, target, command):
        """Rasterize one RenderCommand according to its shape."""
        x, y, w, h = command.x, command.y, command.width, command.height

        if command.shape is ShapeType.TRIANGLE:
            pygame.draw.polygon(target, command.color, triangle_points(x, y, w, h))
        elif command.shape is ShapeType.INVADER:
            for bx, by, bw, bh in invader_blocks(x, y, w, h):
                target.fill(command.color, pygame.Rect(round(bx), round(by), round(bw), round(bh)))
        else:
            target.fill(command.color, pygame.Rect(round(x), round(y), round(w), round(h)))
