"""
Screen flow for SpeedRays.

States:
    HOME: Start screen (profile form, mode picker, high scores)
    PLAYING: A run is in progress (including while paused)
    GAME_OVER: Final score and earned badges
"""

from enum import Enum, auto
from typing import Callable
import logging

logger = logging.getLogger(__name__)


class Screen(Enum):
    """Application screens."""
    HOME = auto()
    PLAYING = auto()
    GAME_OVER = auto()


class ScreenFlow:
    """
    Tracks which screen is shown and refuses impossible jumps.

    Listeners are called with ``(old, new)`` after every accepted change.
    """

    VALID_TRANSITIONS: list[tuple[Screen, Screen]] = [
        (Screen.HOME, Screen.PLAYING),
        (Screen.PLAYING, Screen.GAME_OVER),
        (Screen.PLAYING, Screen.HOME),       # Quit mid-run
        (Screen.GAME_OVER, Screen.PLAYING),  # Restart
        (Screen.GAME_OVER, Screen.HOME),
    ]

    def __init__(self, initial: Screen = Screen.HOME) -> None:
        self._screen = initial
        self._listeners: list[Callable[[Screen, Screen], None]] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.info(f"ScreenFlow initialized with screen: {initial.name}")

    @property
    def screen(self) -> Screen:
        """Get current screen."""
        return self._screen

    def can_transition(self, to_screen: Screen) -> bool:
        """Check if transition to given screen is valid."""
        return (self._screen, to_screen) in self._valid_transitions

    def transition(self, to_screen: Screen) -> bool:
        """
        Attempt to switch screens.

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_screen):
            logger.warning(
                f"Invalid transition: {self._screen.name} -> {to_screen.name}"
            )
            return False

        old = self._screen
        self._screen = to_screen
        logger.info(f"Screen transition: {old.name} -> {to_screen.name}")

        for listener in self._listeners:
            try:
                listener(old, to_screen)
            except Exception as e:
                logger.error(f"Error in screen listener: {e}")

        return True

    def add_listener(self, callback: Callable[[Screen, Screen], None]) -> None:
        """Add a screen change listener."""
        self._listeners.append(callback)
