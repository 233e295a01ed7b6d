"""
SpeedRays audio - chiptune cues for crashes, coins, parking and level-ups.

``AudioEngine`` lives in ``speedrays.audio.engine`` and pulls in pygame.
"""

from .cues import ALL_CUES, COIN, CRASH, LEVEL_UP, PARKED, ToneCue
from .synth import WaveType, render_tone

__all__ = ["ALL_CUES", "COIN", "CRASH", "LEVEL_UP", "PARKED", "ToneCue", "WaveType", "render_tone"]
