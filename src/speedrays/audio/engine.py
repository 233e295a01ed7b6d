"""
SpeedRays audio engine.

Synthesises every cue once at start-up and plays them through
pygame.mixer. When no mixer device is available the engine stays
silent instead of failing.
"""

import array
import logging
from typing import Dict, Optional

import pygame

from speedrays.audio.cues import ALL_CUES, ToneCue
from speedrays.audio.synth import render_tone
from speedrays.config.settings import AudioSettings

logger = logging.getLogger(__name__)


class AudioEngine:
    """Tone player implementing the simulation's audio sink."""

    def __init__(self, settings: Optional[AudioSettings] = None):
        self.settings = settings or AudioSettings()
        self._initialized = False
        self._sounds: Dict[ToneCue, pygame.mixer.Sound] = {}
        self._muted = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def init(self) -> bool:
        """Initialize the mixer and pre-render the known cues."""
        if not self.settings.enabled:
            logger.info("Audio disabled by settings")
            return False
        try:
            pygame.mixer.pre_init(self.settings.sample_rate, -16, 2, 1024)
            pygame.mixer.init()
            pygame.mixer.set_num_channels(8)
        except pygame.error as e:
            logger.error(f"Failed to initialize audio: {e}")
            return False

        self._initialized = True
        for cue in ALL_CUES:
            self._sounds[cue] = self._create_sound(cue)
        logger.info(f"Audio engine initialized ({len(self._sounds)} cues)")
        return True

    def _create_sound(self, cue: ToneCue) -> pygame.mixer.Sound:
        """Render a cue and wrap it in a stereo pygame Sound."""
        samples = render_tone(
            cue.frequency,
            cue.duration_ms,
            wave=cue.wave,
            gain=cue.gain,
            sample_rate=self.settings.sample_rate,
        )
        stereo = array.array('h')
        for s in samples:
            stereo.append(s)
            stereo.append(s)
        return pygame.mixer.Sound(buffer=stereo)

    def play_cue(self, cue: ToneCue) -> None:
        """Play a cue, rendering it on first use if it is not cached."""
        if not self._initialized or self._muted:
            return

        sound = self._sounds.get(cue)
        if sound is None:
            sound = self._create_sound(cue)
            self._sounds[cue] = sound

        sound.set_volume(self.settings.master_volume)
        sound.play()

    def toggle_mute(self) -> bool:
        self._muted = not self._muted
        logger.info(f"Audio muted: {self._muted}")
        return self._muted

    def cleanup(self) -> None:
        if self._initialized:
            pygame.mixer.quit()
            self._initialized = False
            self._sounds.clear()
            logger.info("Audio engine stopped")
