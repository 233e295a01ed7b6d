"""Core data model for SpeedRays."""

from .events import Event, EventBus, EventType
from .geometry import contains, intersects
from .session import GameMode, InputSample, PlayerProfile, RunRecord, SessionState
from .state import Screen, ScreenFlow

__all__ = [
    "Event",
    "EventBus",
    "EventType",
    "GameMode",
    "InputSample",
    "PlayerProfile",
    "RunRecord",
    "Screen",
    "ScreenFlow",
    "SessionState",
    "contains",
    "intersects",
]
