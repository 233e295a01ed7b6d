"""
Fixed-step simulation loop for SpeedRays.

``Simulation.tick`` advances one run by exactly one step and reports
whether it wants another. ``RunController`` drives ticks from a host
frame pump and makes sure only one tick stream is ever alive.
"""

from enum import Enum, auto
from typing import Callable, Dict, Optional, Protocol
import logging
import random

from speedrays.audio.cues import LEVEL_UP
from speedrays.config.settings import GameSettings
from speedrays.core.events import Event, EventBus, EventType
from speedrays.core.session import GameMode, InputSample, PlayerProfile, RunRecord, SessionState
from speedrays.core.state import Screen, ScreenFlow
from speedrays.engine.progression import Objective, ProgressionTracker
from speedrays.engine.sinks import (
    AudioSink,
    GuardedAudio,
    GuardedRender,
    GuardedScores,
    NullAudio,
    NullRender,
    NullScores,
    RenderSink,
    ScoreSink,
)
from speedrays.modes import BaseMode, ModeContext, RunOutcome, create_mode

logger = logging.getLogger(__name__)


class TickSignal(Enum):
    CONTINUE = auto()
    STOP = auto()


class Simulation:
    """One run: the session, its mode, its progression and its sinks.

    Tick order:
        1. paused -> nothing changes
        2. speed from up/down input, clamped
        3. player movement
        4. spawning
        5. scrolling and culling
        6. collisions; a run-ending outcome finishes the run here
        7. score and distance
        8. level progression
        9. render
    """

    def __init__(
        self,
        mode: GameMode,
        profile: PlayerProfile,
        settings: Optional[GameSettings] = None,
        *,
        render: Optional[RenderSink] = None,
        audio: Optional[AudioSink] = None,
        scores: Optional[ScoreSink] = None,
        event_bus: Optional[EventBus] = None,
        rng: Optional[random.Random] = None,
        start_level: int = 1,
    ):
        self.settings = settings or GameSettings()
        self.event_bus = event_bus or EventBus()
        self.render_sink = GuardedRender(render or NullRender())
        self.audio = GuardedAudio(audio or NullAudio())
        self.scores = GuardedScores(scores or NullScores())

        context = ModeContext(
            settings=self.settings,
            event_bus=self.event_bus,
            audio=self.audio,
            rng=rng or random.Random(),
        )
        self.mode: BaseMode = create_mode(mode, context)
        self.session: SessionState = self.mode.new_session(profile, start_level)
        self.tracker = ProgressionTracker(self.mode.objectives)
        self.tracker.setup_level(self.session, self.settings)

        self.outcome: Optional[RunOutcome] = None
        self.record: Optional[RunRecord] = None
        self.ticks = 0

        logger.info(
            f"Run started: {profile.name} in {mode.value} mode at level {self.session.level}"
        )
        self._emit(EventType.RUN_STARTED, {"mode": mode.value, "level": self.session.level})

    def tick(self, inp: InputSample) -> TickSignal:
        session = self.session
        if not session.running:
            return TickSignal.STOP
        if inp.pause:
            return TickSignal.CONTINUE

        dt = self.settings.dt
        session.t += dt
        session.elapsed += dt
        self.ticks += 1

        self._integrate_speed(inp)
        self.mode.move_player(session, inp)
        self.mode.spawn(session)
        self.mode.advance(session)

        outcome = self.mode.resolve_collisions(session, inp)
        if outcome is not None:
            self._end_run(outcome)
            return TickSignal.STOP

        self.mode.accrue(session)
        self._evaluate_progression()
        self.render_sink.render(session)
        return TickSignal.CONTINUE

    def _integrate_speed(self, inp: InputSample) -> None:
        s = self.settings
        speed = self.session.speed
        if inp.up:
            speed = min(s.max_speed, speed + s.acceleration)
        if inp.down:
            speed = max(s.min_speed, speed - s.deceleration)
        self.session.speed = max(s.min_speed, min(s.max_speed, speed))

    def _evaluate_progression(self) -> Optional[Objective]:
        completed = self.tracker.evaluate(self.session)
        if completed is None:
            return None

        self.audio.play_cue(LEVEL_UP)
        self.mode.apply_level_bonus(self.session)
        self._emit(EventType.LEVEL_COMPLETE, {
            "objective": completed.id,
            "description": completed.description,
            "level": self.session.level,
        })
        return completed

    def _end_run(self, outcome: RunOutcome) -> None:
        session = self.session
        session.finish()
        self.outcome = outcome

        if self.mode.evaluates_on_finish:
            self._evaluate_progression()

        self.record = session.to_record()
        self.scores.record(self.record)
        logger.info(
            f"Run ended ({outcome.value}): score={session.score} "
            f"time={self.record.time}s badges={session.badges}"
        )
        self._emit(EventType.RUN_ENDED, {
            "outcome": outcome.value,
            "success": outcome.success,
            "record": self.record,
        })
        self.render_sink.render(session)

    def _emit(self, event_type: EventType, data: dict) -> None:
        self.event_bus.emit(Event(type=event_type, data=data, source="simulation"))


class FramePump(Protocol):
    """Host-side per-frame scheduler (an animation-frame callback)."""

    def request_frame(self, callback: Callable[[], None]) -> int: ...

    def cancel(self, handle: int) -> None: ...


class ManualFramePump:
    """Frame pump that runs requested callbacks when the host calls ``pump``.

    Callbacks requested while pumping are deferred to the next ``pump``;
    callbacks cancelled while pumping do not run.
    """

    def __init__(self) -> None:
        self._next_handle = 1
        self._pending: Dict[int, Callable[[], None]] = {}
        self._due: Dict[int, Callable[[], None]] = {}

    def request_frame(self, callback: Callable[[], None]) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._pending[handle] = callback
        return handle

    def cancel(self, handle: int) -> None:
        self._pending.pop(handle, None)
        self._due.pop(handle, None)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def pump(self) -> int:
        """Run every callback that was pending before this call."""
        self._due, self._pending = self._pending, {}
        ran = 0
        while self._due:
            handle = next(iter(self._due))
            self._due.pop(handle)()
            ran += 1
        return ran


class RunController:
    """Starts, restarts and cancels runs on top of a frame pump.

    A pending frame is always cancelled before a new session is built,
    so at most one tick stream exists at a time.
    """

    def __init__(
        self,
        pump: FramePump,
        input_source: Callable[[], InputSample],
        settings: Optional[GameSettings] = None,
        *,
        render: Optional[RenderSink] = None,
        audio: Optional[AudioSink] = None,
        scores: Optional[ScoreSink] = None,
        event_bus: Optional[EventBus] = None,
        flow: Optional[ScreenFlow] = None,
        seed: Optional[int] = None,
    ):
        self.pump = pump
        self.input_source = input_source
        self.settings = settings or GameSettings()
        self.render = render
        self.audio = audio
        self.scores = scores
        self.event_bus = event_bus or EventBus()
        self.flow = flow or ScreenFlow()
        self.rng = random.Random(seed)

        self.simulation: Optional[Simulation] = None
        self._handle: Optional[int] = None
        self._profile: Optional[PlayerProfile] = None
        self._mode: Optional[GameMode] = None
        self.flow.add_listener(self._on_screen_change)

    @property
    def is_active(self) -> bool:
        """True while a frame is scheduled for the current run."""
        return self._handle is not None

    def start(self, profile: PlayerProfile, mode: GameMode, start_level: int = 1) -> Simulation:
        self.cancel()
        self._profile = profile
        self._mode = mode

        self.simulation = Simulation(
            mode,
            profile,
            self.settings,
            render=self.render,
            audio=self.audio,
            scores=self.scores,
            event_bus=self.event_bus,
            rng=self.rng,
            start_level=start_level,
        )
        if self.flow.screen is not Screen.PLAYING:
            self.flow.transition(Screen.PLAYING)
        self._schedule()
        return self.simulation

    def restart(self) -> Simulation:
        """Play again with the same profile and mode.

        Modes whose levels are won across runs (park) continue from the level
        reached; the others start again from level 1.
        """
        if self._profile is None or self._mode is None:
            raise RuntimeError("restart() called before any run was started")
        level = 1
        simulation = self.simulation
        if simulation is not None and simulation.mode.carries_level:
            level = simulation.session.level
        return self.start(self._profile, self._mode, level)

    def go_home(self) -> None:
        self.cancel()
        self.simulation = None
        if self.flow.screen is not Screen.HOME:
            self.flow.transition(Screen.HOME)

    def cancel(self) -> None:
        if self._handle is not None:
            self.pump.cancel(self._handle)
            self._handle = None

    def _on_screen_change(self, old: Screen, new: Screen) -> None:
        self.event_bus.emit(Event(
            type=EventType.STATE_CHANGED,
            data={"old": old.name, "new": new.name},
            source="controller",
        ))

    def _schedule(self) -> None:
        self._handle = self.pump.request_frame(self._frame)

    def _frame(self) -> None:
        self._handle = None
        simulation = self.simulation
        if simulation is None:
            return

        signal = simulation.tick(self.input_source())
        if signal is TickSignal.CONTINUE:
            self._schedule()
        elif self.simulation is simulation and simulation.session.over:
            self.flow.transition(Screen.GAME_OVER)
