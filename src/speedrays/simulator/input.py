"""
Keyboard input for the desktop simulator.

Arrow keys are held flags; P toggles pause. The simulation polls
``sample()`` once per tick.
"""

import pygame

from speedrays.core.session import InputSample

ARROWS = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
}


class KeyboardInput:
    """Tracks held arrow keys and the pause toggle."""

    def __init__(self) -> None:
        self._held = {name: False for name in ARROWS.values()}
        self._paused = False

    @property
    def paused(self) -> bool:
        return self._paused

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Update flags from a pygame event. Returns True if consumed."""
        if event.type == pygame.KEYDOWN:
            if event.key in ARROWS:
                self._held[ARROWS[event.key]] = True
                return True
            if event.key == pygame.K_p:
                self._paused = not self._paused
                return True
        elif event.type == pygame.KEYUP:
            if event.key in ARROWS:
                self._held[ARROWS[event.key]] = False
                return True
        return False

    def sample(self) -> InputSample:
        return InputSample(pause=self._paused, **self._held)

    def reset(self) -> None:
        for name in self._held:
            self._held[name] = False
        self._paused = False
