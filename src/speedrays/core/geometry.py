"""Axis-aligned box tests used for every collision in the game."""

from typing import Protocol


class Box(Protocol):
    """Anything with a top-left corner and a size."""

    x: float
    y: float
    w: float
    h: float


def intersects(a: Box, b: Box) -> bool:
    """Check whether two boxes overlap.

    Intervals are half-open, so boxes that only share an edge do not
    overlap. The test is symmetric in ``a`` and ``b``.
    """
    return (
        a.x < b.x + b.w
        and a.x + a.w > b.x
        and a.y < b.y + b.h
        and a.y + a.h > b.y
    )


def contains(outer: Box, inner: Box) -> bool:
    """Check whether ``inner`` lies entirely within ``outer``."""
    return (
        inner.x >= outer.x
        and inner.y >= outer.y
        and inner.x + inner.w <= outer.x + outer.w
        and inner.y + inner.h <= outer.y + outer.h
    )
