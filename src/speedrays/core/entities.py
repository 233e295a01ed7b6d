"""Game objects living on the road or in the parking lot.

Every entity is an axis-aligned box. Only the fields a variant actually
uses are carried by it: scrolling entities know their lane and velocity,
the player knows how it is painted, walls and target zones are plain
geometry.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class CarStyle(Enum):
    """Body styles offered on the start screen."""

    SPORT = "sport"
    MUSCLE = "muscle"
    RETRO = "retro"

    @classmethod
    def parse(cls, value: Optional[str]) -> "CarStyle":
        """Map free-form input onto a style, falling back to SPORT."""
        for style in cls:
            if value and style.value == value.strip().lower():
                return style
        return cls.SPORT


@dataclass
class Player:
    x: float
    y: float
    w: float
    h: float
    color: str = "#4cc9f0"
    car: CarStyle = CarStyle.SPORT


@dataclass
class Obstacle:
    x: float
    y: float
    w: float
    h: float
    lane: int
    vy: Optional[float] = None


@dataclass
class Pickup:
    x: float
    y: float
    w: float
    h: float
    lane: int
    vy: Optional[float] = None


@dataclass(frozen=True)
class Wall:
    x: float
    y: float
    w: float
    h: float


@dataclass
class TargetZone:
    x: float
    y: float
    w: float
    h: float

    def shrink(self, scale: float, min_w: int, min_h: int) -> None:
        """Scale the zone around its centre, keeping a minimum size."""
        cx = self.x + self.w / 2
        cy = self.y + self.h / 2
        self.w = max(min_w, math.floor(self.w * scale))
        self.h = max(min_h, math.floor(self.h * scale))
        self.x = math.floor(cx - self.w / 2)
        self.y = math.floor(cy - self.h / 2)


Scrolling = Union[Obstacle, Pickup]
Entity = Union[Player, Obstacle, Pickup, Wall, TargetZone]
