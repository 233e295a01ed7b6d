from __future__ import annotations

import random

import pytest

from speedrays.audio.cues import ToneCue
from speedrays.config.settings import GameSettings
from speedrays.core.events import Event, EventBus, EventType
from speedrays.core.session import PlayerProfile, RunRecord, SessionState


class RecordingAudio:
    def __init__(self) -> None:
        self.cues: list[ToneCue] = []

    def play_cue(self, cue: ToneCue) -> None:
        self.cues.append(cue)


class RecordingScores:
    def __init__(self) -> None:
        self.records: list[RunRecord] = []

    def record(self, entry: RunRecord) -> None:
        self.records.append(entry)


class RecordingEvents:
    def __init__(self, bus: EventBus) -> None:
        self.events: list[Event] = []
        for event_type in EventType:
            bus.subscribe(event_type, self.events.append)

    def of(self, event_type: EventType) -> list[Event]:
        return [e for e in self.events if e.type is event_type]


class RecordingRender:
    def __init__(self) -> None:
        self.frames = 0

    def render(self, session: SessionState) -> None:
        self.frames += 1


@pytest.fixture
def settings() -> GameSettings:
    return GameSettings()


@pytest.fixture
def profile() -> PlayerProfile:
    return PlayerProfile.from_form("Ana", "12", "😎", "sport", "#ff8800")


@pytest.fixture
def audio() -> RecordingAudio:
    return RecordingAudio()


@pytest.fixture
def scores() -> RecordingScores:
    return RecordingScores()


@pytest.fixture
def render() -> RecordingRender:
    return RecordingRender()


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def events(bus) -> RecordingEvents:
    return RecordingEvents(bus)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
