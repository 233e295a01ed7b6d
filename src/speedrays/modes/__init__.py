"""Game modes for SpeedRays."""

from typing import Dict, Type

from speedrays.core.session import GameMode

from .base import BaseMode, ModeContext, RunOutcome
from .park import ParkMode
from .race import RaceMode

MODES: Dict[GameMode, Type[BaseMode]] = {
    GameMode.RACE: RaceMode,
    GameMode.PARK: ParkMode,
}


def create_mode(mode: GameMode, context: ModeContext) -> BaseMode:
    """Instantiate the ruleset registered for ``mode``."""
    return MODES[mode](context)


__all__ = ["BaseMode", "MODES", "ModeContext", "ParkMode", "RaceMode", "RunOutcome", "create_mode"]
