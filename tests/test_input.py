from __future__ import annotations

import pygame

from speedrays.simulator.input import KeyboardInput


def _key(kind: int, key: int) -> pygame.event.Event:
    return pygame.event.Event(kind, key=key)


def test_arrow_keys_are_held_until_released() -> None:
    keys = KeyboardInput()
    assert keys.handle_event(_key(pygame.KEYDOWN, pygame.K_LEFT))
    assert keys.handle_event(_key(pygame.KEYDOWN, pygame.K_UP))
    sample = keys.sample()
    assert sample.left and sample.up
    assert not sample.right and not sample.pause

    keys.handle_event(_key(pygame.KEYUP, pygame.K_LEFT))
    assert not keys.sample().left
    assert keys.sample().up


def test_p_toggles_pause() -> None:
    keys = KeyboardInput()
    keys.handle_event(_key(pygame.KEYDOWN, pygame.K_p))
    assert keys.paused and keys.sample().pause
    keys.handle_event(_key(pygame.KEYDOWN, pygame.K_p))
    assert not keys.paused


def test_other_keys_are_ignored_and_reset_clears() -> None:
    keys = KeyboardInput()
    assert not keys.handle_event(_key(pygame.KEYDOWN, pygame.K_a))
    keys.handle_event(_key(pygame.KEYDOWN, pygame.K_DOWN))
    keys.handle_event(_key(pygame.KEYDOWN, pygame.K_p))
    keys.reset()
    sample = keys.sample()
    assert not sample.down and not sample.pause
