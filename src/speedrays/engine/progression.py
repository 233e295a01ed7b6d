"""Per-mode level objectives and the tracker that walks through them."""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence
import logging

from speedrays.config.settings import GameSettings
from speedrays.core.session import PARKED_BADGE, SessionState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Objective:
    """One level's win condition.

    ``check`` must not mutate the session. ``setup`` runs once when a run
    starts on this level and may reshape the level geometry.
    """

    id: int
    description: str
    check: Callable[[SessionState], bool]
    setup: Optional[Callable[[SessionState, GameSettings], None]] = None


def _parked(session: SessionState) -> bool:
    return session.over and PARKED_BADGE in session.badges


def shrink_spot(scale: float) -> Callable[[SessionState, GameSettings], None]:
    """Setup action that shrinks the target zone around its centre."""

    def setup(session: SessionState, settings: GameSettings) -> None:
        zone = session.target_zone
        if zone is None:
            return
        zone.shrink(scale, settings.spot_min_width, settings.spot_min_height)
        logger.debug(f"Target zone shrunk to {zone.w}x{zone.h}")

    return setup


RACE_OBJECTIVES: tuple[Objective, ...] = (
    Objective(1, "Survive 20s", lambda s: s.elapsed >= 20),
    Objective(2, "Reach score 400", lambda s: s.score >= 400),
    Objective(3, "Collect 8 coins", lambda s: s.collected_count >= 8),
    Objective(4, "Survive 40s", lambda s: s.elapsed >= 40),
    Objective(5, "Reach score 900", lambda s: s.score >= 900),
)

PARK_OBJECTIVES: tuple[Objective, ...] = (
    Objective(1, "Park in the highlighted spot", _parked),
    Objective(2, "Park again (smaller spot)", _parked, setup=shrink_spot(0.8)),
    Objective(3, "Park again (tiny spot)", _parked, setup=shrink_spot(0.65)),
)


class ProgressionTracker:
    """Looks up the objective for the current level and advances on success."""

    def __init__(self, objectives: Sequence[Objective]):
        self.objectives = sorted(objectives, key=lambda o: o.id)

    def current(self, session: SessionState) -> Optional[Objective]:
        for objective in self.objectives:
            if objective.id == session.level:
                return objective
        return None

    def setup_level(self, session: SessionState, settings: GameSettings) -> None:
        """Run the current level's setup action, if it has one."""
        objective = self.current(session)
        if objective is not None and objective.setup is not None:
            objective.setup(session, settings)
            logger.info(f"Level {objective.id} setup applied: {objective.description}")

    def evaluate(self, session: SessionState) -> Optional[Objective]:
        """Advance one level if the current objective is met.

        Returns the completed objective, or None. Past the last level this
        is a no-op.
        """
        objective = self.current(session)
        if objective is None or not objective.check(session):
            return None

        session.level += 1
        logger.info(f"Level {objective.id} complete: {objective.description}")
        return objective

    @property
    def level_count(self) -> int:
        return len(self.objectives)
