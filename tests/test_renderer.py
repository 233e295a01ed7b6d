from __future__ import annotations

import copy

import numpy as np

from speedrays.core.entities import Obstacle, Pickup
from speedrays.graphics.primitives import draw_dashed_rect, draw_rect, hex_to_rgb
from speedrays.graphics.renderer import ENEMY, SPOT, WALL, GameRenderer
from speedrays.modes import ModeContext, ParkMode, RaceMode


def test_hex_to_rgb() -> None:
    assert hex_to_rgb("#ff8800") == (255, 136, 0)
    assert hex_to_rgb("bad") == (76, 201, 240)
    assert hex_to_rgb("#zzzzzz") == (76, 201, 240)


def test_draw_rect_clips_to_the_buffer() -> None:
    buffer = np.zeros((10, 10, 3), dtype=np.uint8)
    draw_rect(buffer, -5, -5, 8, 8, (1, 2, 3))
    assert tuple(buffer[0, 0]) == (1, 2, 3)
    assert tuple(buffer[2, 2]) == (1, 2, 3)
    assert tuple(buffer[3, 3]) == (0, 0, 0)

    draw_rect(buffer, 20, 20, 5, 5, (9, 9, 9))
    assert not (buffer == 9).any()


def test_dashed_rect_leaves_gaps() -> None:
    buffer = np.zeros((40, 40, 3), dtype=np.uint8)
    draw_dashed_rect(buffer, 0, 0, 40, 40, (255, 255, 255))
    assert tuple(buffer[0, 5]) == (255, 255, 255)
    assert tuple(buffer[0, 14]) == (0, 0, 0)
    assert tuple(buffer[20, 20]) == (0, 0, 0)


def test_race_frame(settings, profile) -> None:
    renderer = GameRenderer(settings)
    session = RaceMode(ModeContext(settings=settings)).new_session(profile)
    session.obstacles.append(Obstacle(x=40, y=100, w=46, h=70, lane=0, vy=6))
    session.pickups.append(Pickup(x=300, y=300, w=24, h=24, lane=2, vy=6))
    before = copy.deepcopy(session)

    renderer.render(session)

    assert renderer.buffer.shape == (860, 420, 3)
    assert renderer.frames == 1
    assert session == before
    assert tuple(renderer.buffer[745, 210]) == (255, 136, 0)
    assert tuple(renderer.buffer[130, 60]) == ENEMY


def test_park_frame(settings, profile) -> None:
    renderer = GameRenderer(settings)
    session = ParkMode(ModeContext(settings=settings)).new_session(profile)
    renderer.render(session)

    zone = session.target_zone
    assert tuple(renderer.buffer[int(zone.y) + 1, int(zone.x) + 1]) == SPOT
    top = session.walls[0]
    assert tuple(renderer.buffer[int(top.y) + 2, 200]) == WALL
    assert tuple(renderer.buffer[int(session.player.y) + 5, int(session.player.x) + 27]) == (255, 136, 0)
