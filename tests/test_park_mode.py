from __future__ import annotations

import pytest

from speedrays.audio.cues import PARKED
from speedrays.core.entities import TargetZone
from speedrays.core.events import EventType
from speedrays.core.session import PARKED_BADGE, GameMode, InputSample
from speedrays.modes import ModeContext, ParkMode, RunOutcome


@pytest.fixture
def park(settings, bus, audio) -> ParkMode:
    return ParkMode(ModeContext(settings=settings, event_bus=bus, audio=audio))


@pytest.fixture
def session(park, profile):
    return park.new_session(profile)


def _step(park, session, inp):
    park.move_player(session, inp)
    return park.resolve_collisions(session, inp)


def test_setup_builds_the_lot(session) -> None:
    assert session.mode is GameMode.PARK
    assert len(session.walls) == 4
    assert len(session.zones) == 1

    zone = session.target_zone
    assert (zone.x, zone.y, zone.w, zone.h) == (292, 108, 80, 120)
    assert (session.player.x, session.player.y) == (60, 624)

    top, bottom, left, right = session.walls
    assert (top.y, top.h) == (84, 12)
    assert bottom.y == 84 + 660 - 12
    assert (left.x, left.w) == (24, 12)
    assert right.x == 24 + 372 - 12


def test_player_moves_freely_on_both_axes(park, session) -> None:
    x, y = session.player.x, session.player.y
    park.move_player(session, InputSample(right=True, up=True))
    assert session.player.x == pytest.approx(x + 5.2)
    assert session.player.y == pytest.approx(y - 5.2)


def test_walls_push_back_along_the_motion_axis(park, session) -> None:
    right = session.walls[3]
    session.player.x, session.player.y = right.x - 54 - 2, 400
    assert _step(park, session, InputSample(right=True)) is None
    assert session.player.x == right.x - 54

    left = session.walls[2]
    session.player.x = left.x + left.w + 1
    _step(park, session, InputSample(left=True))
    assert session.player.x == left.x + left.w

    top = session.walls[0]
    session.player.x, session.player.y = 60, top.y + top.h + 2
    _step(park, session, InputSample(up=True))
    assert session.player.y == top.y + top.h

    bottom = session.walls[1]
    session.player.y = bottom.y - 96 - 2
    _step(park, session, InputSample(down=True))
    assert session.player.y == bottom.y - 96


def test_walls_cannot_be_driven_through(park, session) -> None:
    for _ in range(200):
        _step(park, session, InputSample(left=True))
    assert session.player.x >= session.walls[2].x + session.walls[2].w


def test_entering_the_spot_parks_the_car(park, session, audio, events) -> None:
    session.walls = []
    session.zones = [TargetZone(x=300, y=100, w=80, h=120)]
    session.player.x, session.player.y = 310, 110

    outcome = park.resolve_collisions(session, InputSample())

    assert outcome is RunOutcome.PARKED
    assert outcome.success
    assert session.badges == [PARKED_BADGE]
    assert session.score == 500
    assert audio.cues == [PARKED]
    assert events.of(EventType.PARKED)[-1].data["level"] == 1


def test_partial_overlap_with_the_spot_is_enough(park, session) -> None:
    zone = session.target_zone
    session.player.x = zone.x - 50
    session.player.y = zone.y + 10
    assert park.resolve_collisions(session, InputSample()) is RunOutcome.PARKED


def test_no_score_accrues_while_driving(park, session) -> None:
    park.accrue(session)
    park.spawn(session)
    park.advance(session)
    assert session.score == 0
    assert session.obstacles == [] and session.pickups == []
