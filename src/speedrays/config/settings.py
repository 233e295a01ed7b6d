"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GameSettings(BaseSettings):
    """Simulation tuning shared by both modes."""

    model_config = SettingsConfigDict(env_prefix="SPEEDRAYS_GAME_")

    # Playfield
    view_width: int = Field(default=420, gt=0)
    view_height: int = Field(default=860, gt=0)
    lane_count: int = Field(default=3, ge=1)
    road_padding: int = Field(default=28, ge=0)

    # Timing
    hz: int = Field(default=60, gt=0)

    # Speed (pixels per tick)
    min_speed: float = 4.0
    max_speed: float = 15.0
    start_speed_offset: float = 0.5
    acceleration: float = 0.55
    deceleration: float = 0.7
    fallback_scroll_factor: float = 3.9

    # Spawning (milliseconds)
    obstacle_interval_base_ms: float = 720.0
    obstacle_interval_floor_ms: float = 360.0
    obstacle_interval_scale: float = 40.0
    pickup_interval_base_ms: float = 1100.0
    pickup_interval_floor_ms: float = 420.0
    pickup_interval_scale: float = 30.0

    # Player
    player_width: float = 54.0
    player_height: float = 96.0
    player_bottom_offset: float = 120.0
    race_lateral_step: float = 7.8
    park_step: float = 5.2

    # Obstacles / pickups
    obstacle_width: float = 46.0
    obstacle_min_height: float = 68.0
    obstacle_height_jitter: float = 22.0
    obstacle_speed_base: float = 1.2
    obstacle_speed_jitter: float = 2.2
    obstacle_cull_margin: float = 60.0
    pickup_size: float = 24.0
    pickup_spawn_y: float = -18.0
    pickup_speed_offset: float = 1.4
    pickup_cull_margin: float = 40.0

    # Scoring
    pickup_reward: int = 15
    score_rate: float = 0.7
    level_speed_bonus: float = 1.0
    park_reward: int = 500

    # Parking lot
    lot_margin: float = 24.0
    lot_top_offset: float = 60.0
    lot_bottom_reserve: float = 200.0
    wall_thickness: float = 12.0
    spot_width: float = 80.0
    spot_height: float = 120.0
    spot_inset: float = 24.0
    spot_min_width: int = 50
    spot_min_height: int = 80

    @model_validator(mode="after")
    def _check_speed_bounds(self) -> "GameSettings":
        if self.min_speed > self.max_speed:
            raise ValueError(
                f"min_speed ({self.min_speed}) must not exceed max_speed ({self.max_speed})"
            )
        return self

    @property
    def dt(self) -> float:
        """Fixed simulation step in seconds."""
        return 1.0 / self.hz

    @property
    def frame_ms(self) -> float:
        """Fixed simulation step in milliseconds."""
        return 1000.0 / self.hz

    @property
    def start_speed(self) -> float:
        return min(self.max_speed, self.min_speed + self.start_speed_offset)


class AudioSettings(BaseSettings):
    """Tone synthesis settings."""

    model_config = SettingsConfigDict(env_prefix="SPEEDRAYS_AUDIO_")

    enabled: bool = True
    sample_rate: int = 44100
    master_volume: float = Field(default=1.0, ge=0.0, le=1.0)


class DisplaySettings(BaseSettings):
    """Desktop window settings."""

    model_config = SettingsConfigDict(env_prefix="SPEEDRAYS_DISPLAY_")

    title: str = "SpeedRays"
    fps: int = 60
    hud_height: int = 64
    toast_ms: int = 2800


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="SPEEDRAYS_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False
    seed: Optional[int] = None

    # Paths
    scores_path: Path = Field(default_factory=lambda: Path.cwd() / "speedrays_scores.json")

    # Nested settings
    game: GameSettings = Field(default_factory=GameSettings)
    audio: AudioSettings = Field(default_factory=AudioSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
