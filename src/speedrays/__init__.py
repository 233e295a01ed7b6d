"""SpeedRays - a two-mode arcade driving game."""

__version__ = "0.1.0"
