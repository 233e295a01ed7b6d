"""
Oscillators and one-shot tone rendering.

Pure Python, no mixer required: the output is a mono 16-bit sample array
that the audio engine hands to pygame.
"""

import array
import math
from enum import Enum


class WaveType(Enum):
    """Oscillator waveform types."""
    SINE = "sine"
    SQUARE = "square"
    SAWTOOTH = "sawtooth"
    TRIANGLE = "triangle"


def square(t: float, freq: float) -> float:
    """Square wave oscillator."""
    return 1 if (t * freq) % 1 < 0.5 else -1


def triangle(t: float, freq: float) -> float:
    """Triangle wave oscillator."""
    p = (t * freq) % 1
    return 4 * abs(p - 0.5) - 1


def sine(t: float, freq: float) -> float:
    """Sine wave oscillator."""
    return math.sin(2 * math.pi * freq * t)


def saw(t: float, freq: float) -> float:
    """Sawtooth wave oscillator."""
    return 2 * ((t * freq) % 1) - 1


OSCILLATORS = {
    WaveType.SINE: sine,
    WaveType.SQUARE: square,
    WaveType.SAWTOOTH: saw,
    WaveType.TRIANGLE: triangle,
}

# Short ramp at both ends to avoid clicks
RAMP_SECONDS = 0.004


def render_tone(
    frequency: float,
    duration_ms: float,
    wave: WaveType = WaveType.SINE,
    gain: float = 0.05,
    sample_rate: int = 44100,
) -> array.array:
    """Render a single tone as signed 16-bit mono samples."""
    osc = OSCILLATORS[wave]
    count = max(0, int(sample_rate * duration_ms / 1000))
    duration = count / sample_rate
    gain = max(0.0, min(1.0, gain))

    samples = array.array('h')
    for i in range(count):
        t = i / sample_rate
        env = min(1.0, t / RAMP_SECONDS, (duration - t) / RAMP_SECONDS)
        val = osc(t, frequency) * gain * max(0.0, env)
        samples.append(int(max(-1, min(1, val)) * 32767))
    return samples
