"""
Duplicate Filter Module

Removes segments that overlap an already-kept segment of the same
orientation. Row and column scans of a thick stroke report the same wall
several times; only the first report survives.
"""

import logging
from typing import List

from ..constants import DEFAULT_DUPLICATE_TOLERANCE, DEFAULT_ORIENTATION_TOLERANCE
from ..geometry.primitives import intervals_overlap
from .segment import Segment

logger = logging.getLogger(__name__)


def segments_are_duplicates(
    seg_a: Segment,
    seg_b: Segment,
    tolerance: float = DEFAULT_DUPLICATE_TOLERANCE,
    orientation_tolerance: float = DEFAULT_ORIENTATION_TOLERANCE
) -> bool:
    """
    Check if two segments describe the same stretch of wall.

    Both must share an orientation class, lie within tolerance of each
    other across the axis, and overlap along it. Segments that only touch
    at an endpoint, or that sit side by side without overlapping, are not
    duplicates.

    Args:
        seg_a: First segment
        seg_b: Second segment
        tolerance: Max cross-axis difference (exclusive)
        orientation_tolerance: Tolerance for orientation classification

    Returns:
        True if seg_b duplicates seg_a
    """
    orientation = seg_a.orientation(orientation_tolerance)
    if seg_b.orientation(orientation_tolerance) != orientation:
        return False

    cross_a = seg_a.cross_coordinate(orientation_tolerance)
    cross_b = seg_b.cross_coordinate(orientation_tolerance)
    if abs(cross_a - cross_b) >= tolerance:
        return False

    start_a, end_a = seg_a.along_interval(orientation_tolerance)
    start_b, end_b = seg_b.along_interval(orientation_tolerance)
    return intervals_overlap(start_a, end_a, start_b, end_b)


def filter_duplicate_segments(
    segments: List[Segment],
    tolerance: float = DEFAULT_DUPLICATE_TOLERANCE,
    orientation_tolerance: float = DEFAULT_ORIENTATION_TOLERANCE
) -> List[Segment]:
    """
    Drop segments that duplicate an earlier kept segment.

    Segments are processed in order; the first one seen wins and later
    duplicates are discarded without merging their extent.

    Args:
        segments: Raw segments in detection order
        tolerance: Max cross-axis difference (exclusive)
        orientation_tolerance: Tolerance for orientation classification

    Returns:
        Kept segments, in their original relative order
    """
    kept: List[Segment] = []

    for candidate in segments:
        is_duplicate = any(
            segments_are_duplicates(existing, candidate, tolerance, orientation_tolerance)
            for existing in kept
        )
        if not is_duplicate:
            kept.append(candidate)

    logger.info(
        f"Duplicate filter: {len(segments)} -> {len(kept)} segments "
        f"({len(segments) - len(kept)} removed)"
    )
    return kept
