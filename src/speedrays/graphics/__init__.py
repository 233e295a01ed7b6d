"""Graphics rendering for SpeedRays."""

from .renderer import GameRenderer
from .primitives import draw_circle, draw_dashed_rect, draw_rect, fill, hex_to_rgb

__all__ = ["GameRenderer", "draw_circle", "draw_dashed_rect", "draw_rect", "fill", "hex_to_rgb"]
