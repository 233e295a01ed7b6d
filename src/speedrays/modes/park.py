"""Park - steer around the lot and stop in the highlighted spot."""

from typing import Optional, Sequence
import logging

from speedrays.audio.cues import PARKED
from speedrays.core.entities import TargetZone, Wall
from speedrays.core.events import EventType
from speedrays.core.geometry import intersects
from speedrays.core.session import PARKED_BADGE, GameMode, InputSample, SessionState
from speedrays.engine.progression import PARK_OBJECTIVES, Objective
from speedrays.modes.base import BaseMode, RunOutcome

logger = logging.getLogger(__name__)


class ParkMode(BaseMode):
    mode = GameMode.PARK
    name = "park"

    evaluates_on_finish = True
    carries_level = True

    @property
    def objectives(self) -> Sequence[Objective]:
        return PARK_OBJECTIVES

    def setup(self, session: SessionState) -> None:
        """Build the lot: four walls and one target spot in the top right."""
        s = self.settings
        margin = s.lot_margin
        top = margin + s.lot_top_offset
        lot_w = s.view_width - margin * 2
        lot_h = s.view_height - s.lot_bottom_reserve
        t = s.wall_thickness

        session.walls = [
            Wall(margin, top, lot_w, t),
            Wall(margin, top + lot_h - t, lot_w, t),
            Wall(margin, top, t, lot_h),
            Wall(margin + lot_w - t, top, t, lot_h),
        ]
        session.zones = [
            TargetZone(
                x=margin + lot_w - s.spot_width - s.spot_inset,
                y=top + s.spot_inset,
                w=s.spot_width,
                h=s.spot_height,
            )
        ]

        player = session.player
        player.x = margin + 36
        player.y = top + lot_h - player.h - 24

    def move_player(self, session: SessionState, inp: InputSample) -> None:
        step = self.settings.park_step
        session.player.x += inp.move_x * step
        session.player.y += inp.move_y * step

    def _push_back(self, session: SessionState, inp: InputSample) -> None:
        """Undo wall penetration along the axis the player was moving on."""
        player = session.player
        for wall in session.walls:
            if not intersects(player, wall):
                continue
            if inp.move_x > 0:
                player.x = wall.x - player.w
            if inp.move_x < 0:
                player.x = wall.x + wall.w
            if inp.move_y > 0:
                player.y = wall.y - player.h
            if inp.move_y < 0:
                player.y = wall.y + wall.h

    def resolve_collisions(self, session: SessionState, inp: InputSample) -> Optional[RunOutcome]:
        self._push_back(session, inp)

        # Lenient parking: touching the spot is enough
        zone = session.target_zone
        if zone is not None and intersects(session.player, zone):
            session.award_badge(PARKED_BADGE)
            session.score += self.settings.park_reward
            self.play(PARKED)
            self.emit_event(EventType.PARKED, {"level": session.level})
            logger.info(f"Parked on level {session.level} after {session.elapsed:.1f}s")
            return RunOutcome.PARKED
        return None
