"""Frame-buffer renderer for SpeedRays.

Draws a session into an RGB numpy array of shape (height, width, 3).
The renderer only reads the session.
"""

from typing import Optional
import logging

import numpy as np
from numpy.typing import NDArray

from speedrays.config.settings import GameSettings
from speedrays.core.entities import CarStyle, Obstacle, Pickup, Player
from speedrays.core.session import GameMode, SessionState
from speedrays.graphics.primitives import (
    draw_circle, draw_dashed_rect, draw_rect, fill, hex_to_rgb
)

logger = logging.getLogger(__name__)

ROAD_BG = (26, 31, 46)
ROAD = (43, 49, 71)
LANE_MARK = (92, 100, 128)
ENEMY = (221, 51, 51)
COIN = (255, 209, 102)
COIN_RIM = (184, 137, 0)
LOT_BG = (36, 49, 79)
SPOT = (154, 211, 255)
WALL = (13, 19, 38)
COCKPIT = (235, 238, 245)
WHEEL = (11, 11, 15)

STRIPE_WIDTH = {
    CarStyle.MUSCLE: 16,
    CarStyle.RETRO: 10,
    CarStyle.SPORT: 12,
}

DASH_HEIGHT = 28
DASH_GAP = 18


class GameRenderer:
    """Render sink drawing into ``self.buffer``."""

    def __init__(self, settings: Optional[GameSettings] = None):
        self.settings = settings or GameSettings()
        self.buffer: NDArray[np.uint8] = np.zeros(
            (self.settings.view_height, self.settings.view_width, 3), dtype=np.uint8
        )
        self.frames = 0

    def render(self, session: SessionState) -> None:
        if session.mode is GameMode.RACE:
            self._draw_road(session)
            for obstacle in session.obstacles:
                self._draw_enemy(obstacle)
            for pickup in session.pickups:
                self._draw_coin(pickup)
        else:
            self._draw_lot(session)
        self._draw_car(session.player)
        self.frames += 1

    def _draw_road(self, session: SessionState) -> None:
        s = self.settings
        fill(self.buffer, ROAD_BG)

        road_width = s.view_width - s.road_padding * 2
        draw_rect(self.buffer, s.road_padding, 0, road_width, s.view_height, ROAD)

        lane_width = road_width / s.lane_count
        period = DASH_HEIGHT + DASH_GAP
        offset = int(session.t * session.speed * 6) % period
        for i in range(1, s.lane_count):
            x = int(s.road_padding + i * lane_width) - 2
            for y in range(-offset, s.view_height, period):
                draw_rect(self.buffer, x, y, 4, DASH_HEIGHT, LANE_MARK)

    def _draw_lot(self, session: SessionState) -> None:
        fill(self.buffer, LOT_BG)
        for zone in session.zones:
            draw_dashed_rect(self.buffer, int(zone.x), int(zone.y), int(zone.w), int(zone.h), SPOT)
        for wall in session.walls:
            draw_rect(self.buffer, int(wall.x), int(wall.y), int(wall.w), int(wall.h), WALL)

    def _draw_enemy(self, obstacle: Obstacle) -> None:
        draw_rect(self.buffer, int(obstacle.x), int(obstacle.y), int(obstacle.w), int(obstacle.h), ENEMY)

    def _draw_coin(self, pickup: Pickup) -> None:
        cx = int(pickup.x + pickup.w / 2)
        cy = int(pickup.y + pickup.h / 2)
        r = int(pickup.w / 2)
        draw_circle(self.buffer, cx, cy, r, COIN)
        draw_circle(self.buffer, cx, cy, r - 5, COIN_RIM, filled=False)

    def _draw_car(self, player: Player) -> None:
        x, y, w, h = int(player.x), int(player.y), int(player.w), int(player.h)
        draw_rect(self.buffer, x, y, w, h, hex_to_rgb(player.color))

        stripe = STRIPE_WIDTH.get(player.car, 12)
        draw_rect(self.buffer, x + (w - stripe) // 2, y + 10, stripe, h - 20, COCKPIT)

        wheel_w, wheel_h = 10, 22
        for wx in (x - 4, x + w - 6):
            draw_rect(self.buffer, wx, y + 14, wheel_w, wheel_h, WHEEL)
            draw_rect(self.buffer, wx, y + h - 14 - wheel_h, wheel_w, wheel_h, WHEEL)
