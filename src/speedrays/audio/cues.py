"""Sound cues fired by the simulation."""

from dataclasses import dataclass

from speedrays.audio.synth import WaveType


@dataclass(frozen=True)
class ToneCue:
    """Fire-and-forget tone descriptor."""

    name: str
    frequency: float
    duration_ms: float
    wave: WaveType = WaveType.SINE
    gain: float = 0.05


CRASH = ToneCue("crash", 100, 260, WaveType.SAWTOOTH, 0.08)
COIN = ToneCue("coin", 1046, 100, WaveType.SQUARE, 0.05)
PARKED = ToneCue("parked", 1320, 180, WaveType.SQUARE, 0.06)
LEVEL_UP = ToneCue("level_up", 1244, 180, WaveType.SINE, 0.06)

ALL_CUES = (CRASH, COIN, PARKED, LEVEL_UP)
