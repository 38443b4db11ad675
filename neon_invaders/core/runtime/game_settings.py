"""
game_settings.py
----------------
Centralized constants and tunable gameplay configuration.

Units
-----
All simulation distances are in playfield units (pixels at 1x scale) and
all speeds are in units per millisecond, because the session is ticked
with millisecond frame deltas.
"""

from dataclasses import dataclass


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 800
    HEIGHT: int = 600
    FPS: int = 60
    CAPTION: str = "Neon Invaders"


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Frame timing limits applied by the host loop."""
    MAX_FRAME_TIME_MS: float = 100.0
    TAP_FIRE_MS: float = 100.0


# ===========================================================
# Rendering Layers
# ===========================================================

class Layers:
    """Z-order for rendering."""
    BACKGROUND: int = 0
    BULLETS: int = 200
    ENEMIES: int = 300
    PLAYER: int = 400
    UI: int = 600
    OVERLAY: int = 700


# ===========================================================
# Palette
# ===========================================================

class Colors:
    """Neon palette shared by the core descriptors and the HUD."""
    BACKGROUND = (0, 0, 0)
    PLAYER = (0, 255, 255)
    PLAYER_BULLET = (0, 255, 0)
    ENEMY_BULLET = (255, 0, 0)
    ENEMY = (255, 0, 0)
    TEXT = (255, 255, 255)
    TEXT_ACCENT = (0, 255, 255)


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Visual debug toggles -- not related to logging."""
    HITBOX_VISIBLE: bool = False
    HITBOX_COLOR = (255, 255, 0)


# ===========================================================
# Gameplay Configuration
# ===========================================================

# Section layout of config/game.json -> GameConfig field names
_SECTIONS = {
    "display": {
        "width": "width",
        "height": "height",
    },
    "player": {
        "width": "player_width",
        "height": "player_height",
        "bottom_offset": "player_bottom_offset",
        "speed": "player_speed",
        "fire_interval_ms": "fire_interval_ms",
    },
    "projectile": {
        "width": "projectile_width",
        "height": "projectile_height",
        "speed": "projectile_speed",
    },
    "formation": {
        "rows": "enemy_rows",
        "cols": "enemy_cols",
        "enemy_width": "enemy_width",
        "enemy_height": "enemy_height",
        "origin_x": "formation_origin_x",
        "origin_y": "formation_origin_y",
        "spacing_x": "formation_spacing_x",
        "spacing_y": "formation_spacing_y",
        "base_speed": "formation_base_speed",
        "speed_increment": "formation_speed_increment",
        "edge_margin": "edge_margin",
        "drop_distance": "drop_distance",
    },
    "scoring": {
        "points_per_enemy": "points_per_enemy",
        "starting_lives": "starting_lives",
    },
}

_POSITIVE_FIELDS = (
    "width", "height",
    "player_width", "player_height",
    "projectile_width", "projectile_height",
    "enemy_rows", "enemy_cols", "enemy_width", "enemy_height",
)


@dataclass(frozen=True)
class GameConfig:
    """Immutable gameplay tuning for one session."""

    # Playfield
    width: int = Display.WIDTH
    height: int = Display.HEIGHT

    # Player ship
    player_width: float = 40
    player_height: float = 20
    player_bottom_offset: float = 50
    player_speed: float = 0.4
    fire_interval_ms: float = 500

    # Projectiles
    projectile_width: float = 4
    projectile_height: float = 10
    projectile_speed: float = 0.6

    # Enemy formation
    enemy_rows: int = 5
    enemy_cols: int = 11
    enemy_width: float = 30
    enemy_height: float = 30
    formation_origin_x: float = 50
    formation_origin_y: float = 50
    formation_spacing_x: float = 50
    formation_spacing_y: float = 40
    formation_base_speed: float = 0.05
    formation_speed_increment: float = 0.02
    edge_margin: float = 20
    drop_distance: float = 20

    # Scoring
    points_per_enemy: int = 10
    starting_lives: int = 3

    def __post_init__(self):
        for name in _POSITIVE_FIELDS:
            if getattr(self, name) <= 0:
                raise ValueError(f"GameConfig.{name} must be positive, got {getattr(self, name)}")

    # ===========================================================
    # Construction
    # ===========================================================

    @classmethod
    def from_dict(cls, data: dict) -> "GameConfig":
        """
        Build a config from the nested section layout used by game.json.

        Args:
            data: {"display": {...}, "player": {...}, ...}. Missing keys keep
                their defaults; '_notes' keys are ignored.

        Raises:
            ValueError: On an unknown section or key.
        """
        kwargs = {}
        for section, values in data.items():
            if section == "_notes":
                continue
            mapping = _SECTIONS.get(section)
            if mapping is None:
                raise ValueError(f"Unknown config section '{section}'")
            for key, value in values.items():
                if key == "_notes":
                    continue
                if key not in mapping:
                    raise ValueError(f"Unknown config key '{section}.{key}'")
                kwargs[mapping[key]] = value
        return cls(**kwargs)

    def to_dict(self) -> dict:
        """Inverse of from_dict."""
        data = {section: {} for section in _SECTIONS}
        for section, mapping in _SECTIONS.items():
            for key, field_name in mapping.items():
                data[section][key] = getattr(self, field_name)
        return data

    @classmethod
    def load(cls, filename: str = "game.json", strict: bool = False) -> "GameConfig":
        """Load tuning from a JSON config file, falling back to defaults."""
        from neon_invaders.core.services.config_manager import load_config
        return cls.from_dict(load_config(filename, cls().to_dict(), strict=strict))

    # ===========================================================
    # Derived Values
    # ===========================================================

    @property
    def player_spawn(self) -> tuple:
        """Top-left spawn point: horizontally centred, near the bottom."""
        return (self.width / 2 - self.player_width / 2,
                self.height - self.player_bottom_offset)

    @property
    def enemy_count(self) -> int:
        return self.enemy_rows * self.enemy_cols
