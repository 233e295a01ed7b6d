"""
Run-scoped state for SpeedRays.

A ``SessionState`` is built when a run starts and thrown away when the
player restarts or goes home. Everything a tick reads or writes lives on
it, so the engine components receive it by reference and never keep a
copy of their own.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
import logging
import math

from speedrays.core.entities import CarStyle, Obstacle, Pickup, Player, TargetZone, Wall

logger = logging.getLogger(__name__)

PARKED_BADGE = "🅿️ Parked!"

DEFAULT_NAME = "Player"
DEFAULT_AGE = 18
DEFAULT_AVATAR = "😎"
DEFAULT_COLOR = "#4cc9f0"


class GameMode(Enum):
    """Rulesets a run can be played under."""

    RACE = "race"
    PARK = "park"

    @classmethod
    def parse(cls, value: Optional[str]) -> "GameMode":
        """Parse a mode name; anything that is not parking is a race."""
        if value and value.strip().lower() in ("park", "parking"):
            return cls.PARK
        return cls.RACE


@dataclass(frozen=True)
class PlayerProfile:
    """Who is driving. Supplied once at run start."""

    name: str = DEFAULT_NAME
    age: int = DEFAULT_AGE
    avatar: str = DEFAULT_AVATAR
    car: CarStyle = CarStyle.SPORT
    color: str = DEFAULT_COLOR

    @classmethod
    def from_form(
        cls,
        name: Optional[str] = None,
        age: Any = None,
        avatar: Optional[str] = None,
        car: Optional[str] = None,
        color: Optional[str] = None,
    ) -> "PlayerProfile":
        """Build a profile from raw start-screen values.

        Nothing is rejected: blank or malformed fields fall back to defaults.
        """
        try:
            parsed_age = int(age)
        except (TypeError, ValueError):
            parsed_age = DEFAULT_AGE
        if parsed_age <= 0:
            parsed_age = DEFAULT_AGE

        glyph = (avatar or "").strip()[:2] or DEFAULT_AVATAR

        return cls(
            name=(name or "").strip() or DEFAULT_NAME,
            age=parsed_age,
            avatar=glyph,
            car=CarStyle.parse(car),
            color=_normalize_color(color),
        )

    def describe(self) -> str:
        """HUD line, e.g. ``😎 Ana (12)``."""
        return f"{self.avatar} {self.name} ({self.age})"


def _normalize_color(value: Optional[str]) -> str:
    if not value:
        return DEFAULT_COLOR
    value = value.strip()
    if not value.startswith("#"):
        value = "#" + value
    if len(value) != 7:
        return DEFAULT_COLOR
    try:
        int(value[1:], 16)
    except ValueError:
        return DEFAULT_COLOR
    return value.lower()


@dataclass(frozen=True)
class InputSample:
    """Directional and pause flags sampled once per tick."""

    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    pause: bool = False

    @property
    def move_x(self) -> int:
        return (-1 if self.left else 0) + (1 if self.right else 0)

    @property
    def move_y(self) -> int:
        return (-1 if self.up else 0) + (1 if self.down else 0)


@dataclass
class SessionState:
    """Aggregate mutable state of one run."""

    mode: GameMode
    profile: PlayerProfile
    player: Player
    speed: float
    level: int = 1

    running: bool = True
    over: bool = False
    t: float = 0.0
    elapsed: float = 0.0
    distance: float = 0.0
    score: int = 0
    avoided_count: int = 0
    collected_count: int = 0
    badges: list[str] = field(default_factory=list)

    obstacles: list[Obstacle] = field(default_factory=list)
    pickups: list[Pickup] = field(default_factory=list)
    walls: list[Wall] = field(default_factory=list)
    zones: list[TargetZone] = field(default_factory=list)

    def award_badge(self, badge: str) -> None:
        """Append a badge; the list is never reordered or trimmed."""
        self.badges.append(badge)
        logger.info(f"Badge awarded: {badge}")

    def finish(self) -> None:
        """Mark the run as over. Further ticks will not mutate it."""
        self.running = False
        self.over = True

    @property
    def target_zone(self) -> Optional[TargetZone]:
        return self.zones[0] if self.zones else None

    def to_record(self, now: Optional[datetime] = None) -> "RunRecord":
        """Snapshot for the score log."""
        stamp = now or datetime.now(timezone.utc)
        return RunRecord(
            name=self.profile.name,
            age=self.profile.age,
            avatar=self.profile.avatar,
            car=self.profile.car.value,
            color=self.profile.color,
            score=self.score,
            badges=list(self.badges),
            time=math.floor(self.elapsed),
            at=stamp.isoformat(),
        )


@dataclass(frozen=True)
class RunRecord:
    """Entry appended to the score log when a run ends."""

    name: str
    age: int
    avatar: str
    car: str
    color: str
    score: int
    badges: list[str]
    time: int
    at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "age": self.age,
            "avatar": self.avatar,
            "car": self.car,
            "color": self.color,
            "score": self.score,
            "badges": list(self.badges),
            "time": self.time,
            "at": self.at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RunRecord":
        badges = data.get("badges")
        return cls(
            name=str(data.get("name", DEFAULT_NAME)),
            age=int(data.get("age", DEFAULT_AGE)),
            avatar=str(data.get("avatar", DEFAULT_AVATAR)),
            car=str(data.get("car", CarStyle.SPORT.value)),
            color=str(data.get("color", DEFAULT_COLOR)),
            score=int(data.get("score", 0)),
            badges=[str(b) for b in badges] if isinstance(badges, list) else [],
            time=int(data.get("time", 0)),
            at=str(data.get("at", "")),
        )
