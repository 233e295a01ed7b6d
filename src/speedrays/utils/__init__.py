"""Utility modules for SpeedRays."""

from .score_log import ScoreLog, format_highscores

__all__ = ["ScoreLog", "format_highscores"]
