"""
Side-effect boundaries of the simulation.

The engine only talks to these protocols. Every call goes through a
guard so that a broken speaker, renderer or score file is logged and
ignored instead of ending the run.
"""

from typing import Protocol
import logging

from speedrays.audio.cues import ToneCue
from speedrays.core.session import RunRecord, SessionState

logger = logging.getLogger(__name__)


class RenderSink(Protocol):
    def render(self, session: SessionState) -> None: ...


class AudioSink(Protocol):
    def play_cue(self, cue: ToneCue) -> None: ...


class ScoreSink(Protocol):
    def record(self, entry: RunRecord) -> None: ...


class NullRender:
    def render(self, session: SessionState) -> None:
        pass


class NullAudio:
    def play_cue(self, cue: ToneCue) -> None:
        pass


class NullScores:
    def record(self, entry: RunRecord) -> None:
        pass


class GuardedAudio:
    """Audio sink wrapper that never raises."""

    def __init__(self, inner: AudioSink):
        self.inner = inner

    def play_cue(self, cue: ToneCue) -> None:
        try:
            self.inner.play_cue(cue)
        except Exception as e:
            logger.error(f"Audio cue '{cue.name}' failed: {e}")


class GuardedRender:
    """Render sink wrapper that never raises."""

    def __init__(self, inner: RenderSink):
        self.inner = inner

    def render(self, session: SessionState) -> None:
        try:
            self.inner.render(session)
        except Exception as e:
            logger.error(f"Render failed: {e}")


class GuardedScores:
    """Score sink wrapper that never raises."""

    def __init__(self, inner: ScoreSink):
        self.inner = inner

    def record(self, entry: RunRecord) -> None:
        try:
            self.inner.record(entry)
        except Exception as e:
            logger.error(f"Failed to record run for {entry.name}: {e}")
