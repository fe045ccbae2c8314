"""
Geometry Primitives Module

Distance and orientation helpers shared by the segment stages and by
element hit-testing.
"""

import math
from typing import Tuple

from ..constants import DEFAULT_ORIENTATION_TOLERANCE, Orientation

Point = Tuple[float, float]


def point_segment_distance(p: Point, a: Point, b: Point) -> float:
    """
    Calculate the distance from a point to a line segment.

    The point is projected onto the line through a and b, the projection
    parameter is clamped to [0, 1], and the distance to the clamped point
    is returned.

    Args:
        p: Query point (x, y)
        a: Segment start (x, y)
        b: Segment end (x, y)

    Returns:
        Euclidean distance from p to the nearest point of segment a-b
    """
    px, py = p
    ax, ay = a
    bx, by = b

    dx = bx - ax
    dy = by - ay
    length_sq = dx * dx + dy * dy

    # Degenerate segment: distance to the single point
    if length_sq == 0:
        return math.hypot(px - ax, py - ay)

    t = ((px - ax) * dx + (py - ay) * dy) / length_sq
    t = max(0.0, min(1.0, t))

    nearest_x = ax + t * dx
    nearest_y = ay + t * dy
    return math.hypot(px - nearest_x, py - nearest_y)


def segment_angle(a: Point, b: Point) -> float:
    """Angle of the direction a -> b in radians (atan2 convention)."""
    return math.atan2(b[1] - a[1], b[0] - a[0])


def classify_orientation(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    tolerance: float = DEFAULT_ORIENTATION_TOLERANCE
) -> str:
    """
    Classify a segment as horizontal or vertical.

    Horizontal iff |y2 - y1| < tolerance, otherwise vertical. Only meaningful
    for axis-aligned segments, which is all the scanline detector emits.
    """
    if abs(y2 - y1) < tolerance:
        return Orientation.HORIZONTAL
    return Orientation.VERTICAL


def intervals_overlap(
    start1: float,
    end1: float,
    start2: float,
    end2: float
) -> bool:
    """Check whether two closed intervals share more than a single point."""
    return min(end1, end2) > max(start1, start2)
