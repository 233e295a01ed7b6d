"""Basic drawing primitives for the SpeedRays frame buffer."""

from typing import Tuple
import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
Buffer = NDArray[np.uint8]


def hex_to_rgb(value: str, default: Color = (76, 201, 240)) -> Color:
    """Convert ``#rrggbb`` to an RGB tuple."""
    value = value.lstrip("#")
    if len(value) != 6:
        return default
    try:
        return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))
    except ValueError:
        return default


def fill(buffer: Buffer, color: Color) -> None:
    """Fill entire buffer with color."""
    buffer[:, :] = color


def draw_rect(
    buffer: Buffer,
    x: int,
    y: int,
    width: int,
    height: int,
    color: Color,
    filled: bool = True,
    thickness: int = 1,
) -> None:
    """Draw a rectangle on the buffer.

    Args:
        buffer: Target numpy array (height, width, 3)
        x: Left edge x coordinate
        y: Top edge y coordinate
        width: Rectangle width
        height: Rectangle height
        color: RGB color tuple
        filled: If True, fill rectangle; if False, draw outline only
        thickness: Line thickness for outline (when filled=False)
    """
    h, w = buffer.shape[:2]

    # Clamp to buffer bounds
    x1 = max(0, min(x, w))
    y1 = max(0, min(y, h))
    x2 = max(0, min(x + width, w))
    y2 = max(0, min(y + height, h))

    if x1 >= x2 or y1 >= y2:
        return

    if filled:
        buffer[y1:y2, x1:x2] = color
        return

    t = max(1, thickness)
    buffer[y1:min(y1 + t, y2), x1:x2] = color
    buffer[max(y2 - t, y1):y2, x1:x2] = color
    buffer[y1:y2, x1:min(x1 + t, x2)] = color
    buffer[y1:y2, max(x2 - t, x1):x2] = color


def draw_dashed_rect(
    buffer: Buffer,
    x: int,
    y: int,
    width: int,
    height: int,
    color: Color,
    dash: int = 10,
    gap: int = 8,
    thickness: int = 3,
) -> None:
    """Outline a rectangle with a dashed stroke."""
    step = dash + gap
    for dx in range(0, max(0, width), step):
        seg = min(dash, width - dx)
        draw_rect(buffer, x + dx, y, seg, thickness, color)
        draw_rect(buffer, x + dx, y + height - thickness, seg, thickness, color)
    for dy in range(0, max(0, height), step):
        seg = min(dash, height - dy)
        draw_rect(buffer, x, y + dy, thickness, seg, color)
        draw_rect(buffer, x + width - thickness, y + dy, thickness, seg, color)


def draw_circle(
    buffer: Buffer,
    cx: int,
    cy: int,
    radius: int,
    color: Color,
    filled: bool = True,
) -> None:
    """Draw a circle on the buffer.

    Args:
        buffer: Target numpy array (height, width, 3)
        cx: Center x coordinate
        cy: Center y coordinate
        radius: Circle radius in pixels
        color: RGB color tuple
        filled: If True, fill circle; if False, draw a 1px ring
    """
    h, w = buffer.shape[:2]

    y_indices, x_indices = np.ogrid[:h, :w]
    dist_sq = (x_indices - cx) ** 2 + (y_indices - cy) ** 2
    if filled:
        mask = dist_sq <= radius ** 2
    else:
        mask = (dist_sq <= radius ** 2) & (dist_sq > (radius - 1) ** 2)
    buffer[mask] = color
