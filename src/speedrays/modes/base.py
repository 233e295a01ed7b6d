"""Base class for the SpeedRays rulesets."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Sequence
import logging
import random

from speedrays.audio.cues import ToneCue
from speedrays.config.settings import GameSettings
from speedrays.core.entities import Player
from speedrays.core.events import Event, EventBus, EventType
from speedrays.core.session import GameMode, InputSample, PlayerProfile, SessionState
from speedrays.engine.progression import Objective
from speedrays.engine.sinks import AudioSink, NullAudio

logger = logging.getLogger(__name__)


class RunOutcome(Enum):
    """Why a run ended."""

    CRASHED = "crashed"
    PARKED = "parked"

    @property
    def success(self) -> bool:
        return self is RunOutcome.PARKED


@dataclass
class ModeContext:
    """Collaborators shared with a mode for the duration of one run."""

    settings: GameSettings = field(default_factory=GameSettings)
    event_bus: EventBus = field(default_factory=EventBus)
    audio: AudioSink = field(default_factory=NullAudio)
    rng: random.Random = field(default_factory=random.Random)


class BaseMode(ABC):
    """Abstract base class for a ruleset.

    The simulation loop calls these hooks in a fixed order every tick and
    never looks at which mode it is driving:

        1. move_player(session, input)
        2. spawn(session)
        3. advance(session)
        4. resolve_collisions(session, input) -> RunOutcome | None
        5. accrue(session)

    ``apply_level_bonus`` runs after an objective is completed.
    """

    # Mode metadata (override in subclasses)
    mode: GameMode = GameMode.RACE
    name: str = "base"

    # Park objectives look at the finished run, so they are also checked
    # once after the run ends.
    evaluates_on_finish: bool = False

    # Whether a restart continues from the level this run reached.
    carries_level: bool = False

    def __init__(self, context: ModeContext):
        self.context = context
        self.settings = context.settings
        logger.debug(f"Mode created: {self.name}")

    @property
    @abstractmethod
    def objectives(self) -> Sequence[Objective]:
        """Ordered level objectives for this mode."""

    def new_session(self, profile: PlayerProfile, level: int = 1) -> SessionState:
        """Build a fresh session with the player placed for this mode."""
        s = self.settings
        player = Player(
            x=0.0,
            y=s.view_height - s.player_bottom_offset,
            w=s.player_width,
            h=s.player_height,
            color=profile.color,
            car=profile.car,
        )
        session = SessionState(
            mode=self.mode,
            profile=profile,
            player=player,
            speed=s.start_speed,
            level=max(1, level),
        )
        self.setup(session)
        return session

    # Abstract hooks
    @abstractmethod
    def setup(self, session: SessionState) -> None:
        """Place the player and build any level geometry."""

    @abstractmethod
    def move_player(self, session: SessionState, inp: InputSample) -> None:
        """Apply this tick's input to the player position."""

    @abstractmethod
    def resolve_collisions(self, session: SessionState, inp: InputSample) -> Optional[RunOutcome]:
        """Handle contacts. Return an outcome to end the run now."""

    # Optional overrides
    def spawn(self, session: SessionState) -> None:
        pass

    def advance(self, session: SessionState) -> None:
        pass

    def accrue(self, session: SessionState) -> None:
        pass

    def apply_level_bonus(self, session: SessionState) -> None:
        pass

    # Utility methods
    def play(self, cue: ToneCue) -> None:
        self.context.audio.play_cue(cue)

    def emit_event(self, event_type: EventType, data: Optional[Dict[str, Any]] = None) -> None:
        """Emit an event through the event bus."""
        self.context.event_bus.emit(Event(
            type=event_type,
            data=data or {},
            source=f"mode_{self.name}"
        ))
