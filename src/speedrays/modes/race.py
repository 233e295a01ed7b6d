"""Race - dodge traffic across the lanes and grab coins."""

import math
from typing import Optional, Sequence
import logging

from speedrays.audio.cues import COIN, CRASH
from speedrays.core.events import EventType
from speedrays.core.geometry import intersects
from speedrays.core.session import GameMode, InputSample, SessionState
from speedrays.engine.progression import RACE_OBJECTIVES, Objective
from speedrays.engine.spawner import Spawner, lane_center
from speedrays.modes.base import BaseMode, ModeContext, RunOutcome

logger = logging.getLogger(__name__)


class RaceMode(BaseMode):
    mode = GameMode.RACE
    name = "race"

    START_LANE = 1

    def __init__(self, context: ModeContext):
        super().__init__(context)
        self.spawner = Spawner(self.settings, context.rng)

    @property
    def objectives(self) -> Sequence[Objective]:
        return RACE_OBJECTIVES

    def setup(self, session: SessionState) -> None:
        """Centre the car body on the middle lane (x is lane centre minus half the width)."""
        self.spawner.reset()
        player = session.player
        player.x = lane_center(self.settings, self.START_LANE) - player.w / 2

    def _lateral_bounds(self, width: float) -> tuple[float, float]:
        s = self.settings
        return s.road_padding + 6, s.view_width - s.road_padding - width - 6

    def move_player(self, session: SessionState, inp: InputSample) -> None:
        player = session.player
        player.x += inp.move_x * self.settings.race_lateral_step
        low, high = self._lateral_bounds(player.w)
        player.x = max(low, min(high, player.x))

    def spawn(self, session: SessionState) -> None:
        self.spawner.tick(session)

    def advance(self, session: SessionState) -> None:
        s = self.settings
        fallback = session.speed * s.fallback_scroll_factor

        for obstacle in session.obstacles:
            obstacle.y += obstacle.vy if obstacle.vy is not None else fallback
        for pickup in session.pickups:
            pickup.y += pickup.vy if pickup.vy is not None else fallback

        before = len(session.obstacles)
        session.obstacles = [o for o in session.obstacles if o.y < s.view_height + s.obstacle_cull_margin]
        session.avoided_count += before - len(session.obstacles)
        session.pickups = [p for p in session.pickups if p.y < s.view_height + s.pickup_cull_margin]

    def resolve_collisions(self, session: SessionState, inp: InputSample) -> Optional[RunOutcome]:
        player = session.player

        for obstacle in session.obstacles:
            if intersects(player, obstacle):
                self.play(CRASH)
                self.emit_event(EventType.OBSTACLE_HIT, {"lane": obstacle.lane})
                logger.info(f"Crashed in lane {obstacle.lane} at score {session.score}")
                return RunOutcome.CRASHED

        for i in range(len(session.pickups) - 1, -1, -1):
            pickup = session.pickups[i]
            if intersects(player, pickup):
                del session.pickups[i]
                session.collected_count += 1
                session.score += self.settings.pickup_reward
                self.play(COIN)
                self.emit_event(EventType.PICKUP_COLLECTED, {
                    "lane": pickup.lane,
                    "collected": session.collected_count,
                })
        return None

    def accrue(self, session: SessionState) -> None:
        session.distance += session.speed * self.settings.dt
        session.score += math.floor(session.speed * self.settings.score_rate)

    def apply_level_bonus(self, session: SessionState) -> None:
        s = self.settings
        session.speed = min(s.max_speed, session.speed + s.level_speed_bonus)
