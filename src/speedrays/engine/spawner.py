"""Time-driven creation of race traffic and coins."""

from typing import Optional
import logging
import random

from speedrays.config.settings import GameSettings
from speedrays.core.entities import Obstacle, Pickup
from speedrays.core.session import SessionState

logger = logging.getLogger(__name__)


def lane_center(settings: GameSettings, lane: int) -> float:
    """X coordinate of the middle of ``lane`` on the road."""
    road_width = settings.view_width - settings.road_padding * 2
    lane_width = road_width / settings.lane_count
    return settings.road_padding + lane_width * lane + lane_width / 2


class Spawner:
    """Owns the per-type spawn countdowns for one run.

    Countdowns are in milliseconds and start at zero, so the first tick
    spawns one obstacle and one pickup. After each spawn the countdown is
    reset to an interval that shrinks as speed grows, down to a floor.
    """

    def __init__(self, settings: GameSettings, rng: Optional[random.Random] = None):
        self.settings = settings
        self.rng = rng or random.Random()
        self.obstacle_countdown = 0.0
        self.pickup_countdown = 0.0

    def reset(self) -> None:
        self.obstacle_countdown = 0.0
        self.pickup_countdown = 0.0

    def obstacle_interval(self, speed: float) -> float:
        s = self.settings
        return max(s.obstacle_interval_floor_ms, s.obstacle_interval_base_ms - speed * s.obstacle_interval_scale)

    def pickup_interval(self, speed: float) -> float:
        s = self.settings
        return max(s.pickup_interval_floor_ms, s.pickup_interval_base_ms - speed * s.pickup_interval_scale)

    def tick(self, session: SessionState) -> None:
        """Advance both countdowns by one frame and spawn what is due."""
        frame_ms = self.settings.frame_ms
        self.obstacle_countdown -= frame_ms
        self.pickup_countdown -= frame_ms

        if self.obstacle_countdown <= 0:
            self.spawn_obstacle(session)
            self.obstacle_countdown = self.obstacle_interval(session.speed)
        if self.pickup_countdown <= 0:
            self.spawn_pickup(session)
            self.pickup_countdown = self.pickup_interval(session.speed)

    def _pick_lane(self) -> int:
        return self.rng.randrange(self.settings.lane_count)

    def spawn_obstacle(self, session: SessionState) -> Obstacle:
        s = self.settings
        lane = self._pick_lane()
        h = s.obstacle_min_height + self.rng.random() * s.obstacle_height_jitter
        w = s.obstacle_width
        obstacle = Obstacle(
            x=lane_center(s, lane) - w / 2,
            y=-h,
            w=w,
            h=h,
            lane=lane,
            vy=session.speed + s.obstacle_speed_base + self.rng.random() * s.obstacle_speed_jitter,
        )
        session.obstacles.append(obstacle)
        logger.debug(f"Obstacle spawned in lane {lane} (vy={obstacle.vy:.2f})")
        return obstacle

    def spawn_pickup(self, session: SessionState) -> Pickup:
        s = self.settings
        lane = self._pick_lane()
        size = s.pickup_size
        pickup = Pickup(
            x=lane_center(s, lane) - size / 2,
            y=s.pickup_spawn_y,
            w=size,
            h=size,
            lane=lane,
            vy=session.speed + s.pickup_speed_offset,
        )
        session.pickups.append(pickup)
        logger.debug(f"Pickup spawned in lane {lane}")
        return pickup
