"""
Segment Merger Module

Joins collinear segments whose endpoints nearly touch, repeating until no
pair can be joined.

The merge is greedy: the first joinable pair in scan order is merged and
the scan restarts from the beginning. When three or more segments meet in
the same region, the result depends on input order.
"""

import logging
from typing import List, Optional, Tuple

from ..constants import DEFAULT_MERGE_TOLERANCE, DEFAULT_ORIENTATION_TOLERANCE
from .segment import Segment

logger = logging.getLogger(__name__)

# Which end of seg_a gets extended
JOIN_AT_END = "end"
JOIN_AT_START = "start"


def _along(x: int, y: int, horizontal: bool) -> int:
    return x if horizontal else y


def join_direction(
    seg_a: Segment,
    seg_b: Segment,
    tolerance: float = DEFAULT_MERGE_TOLERANCE,
    orientation_tolerance: float = DEFAULT_ORIENTATION_TOLERANCE
) -> Optional[str]:
    """
    Decide whether seg_b can be joined onto seg_a, and at which end.

    Both segments must share an orientation class and lie within tolerance
    of each other across the axis. Then either seg_a's end is within
    tolerance of seg_b's start (JOIN_AT_END), or seg_a's start is within
    tolerance of seg_b's end (JOIN_AT_START). The end check wins when both
    hold.

    Returns:
        JOIN_AT_END, JOIN_AT_START, or None
    """
    horizontal = seg_a.is_horizontal(orientation_tolerance)
    if seg_b.is_horizontal(orientation_tolerance) != horizontal:
        return None

    cross_a = seg_a.cross_coordinate(orientation_tolerance)
    cross_b = seg_b.cross_coordinate(orientation_tolerance)
    if abs(cross_a - cross_b) >= tolerance:
        return None

    a_start = _along(seg_a.x1, seg_a.y1, horizontal)
    a_end = _along(seg_a.x2, seg_a.y2, horizontal)
    b_start = _along(seg_b.x1, seg_b.y1, horizontal)
    b_end = _along(seg_b.x2, seg_b.y2, horizontal)

    if abs(a_end - b_start) < tolerance:
        return JOIN_AT_END
    if abs(a_start - b_end) < tolerance:
        return JOIN_AT_START
    return None


def merge_pair(seg_a: Segment, seg_b: Segment, direction: str) -> Segment:
    """
    Extend seg_a to seg_b's far endpoint.

    seg_a keeps the endpoint that is not being joined; the joined end is
    replaced with the corresponding endpoint of seg_b.
    """
    if direction == JOIN_AT_END:
        return Segment(x1=seg_a.x1, y1=seg_a.y1, x2=seg_b.x2, y2=seg_b.y2)
    if direction == JOIN_AT_START:
        return Segment(x1=seg_b.x1, y1=seg_b.y1, x2=seg_a.x2, y2=seg_a.y2)
    raise ValueError(f"Unknown join direction: {direction}")


def find_merge_candidate(
    segments: List[Segment],
    tolerance: float = DEFAULT_MERGE_TOLERANCE,
    orientation_tolerance: float = DEFAULT_ORIENTATION_TOLERANCE
) -> Optional[Tuple[int, int, str]]:
    """
    Find the first joinable pair (i, j), i < j, in scan order.

    Returns:
        (i, j, direction) or None if the list is at its fixpoint
    """
    n = len(segments)
    for i in range(n):
        for j in range(i + 1, n):
            direction = join_direction(
                segments[i], segments[j], tolerance, orientation_tolerance
            )
            if direction is not None:
                return i, j, direction
    return None


def merge_segments(
    segments: List[Segment],
    tolerance: float = DEFAULT_MERGE_TOLERANCE,
    orientation_tolerance: float = DEFAULT_ORIENTATION_TOLERANCE
) -> List[Segment]:
    """
    Merge collinear, endpoint-adjacent segments to a fixpoint.

    Each merge replaces segment i with the joined segment, removes segment j
    and restarts the pairwise scan. Every merge shortens the list, so the
    loop terminates; worst case is cubic in the segment count.

    Args:
        segments: Input segments (not modified)
        tolerance: Max cross-axis offset and endpoint gap (exclusive)
        orientation_tolerance: Tolerance for orientation classification

    Returns:
        Merged segments; running this again on the result changes nothing
    """
    working = list(segments)
    merges = 0

    while True:
        candidate = find_merge_candidate(working, tolerance, orientation_tolerance)
        if candidate is None:
            break

        i, j, direction = candidate
        working[i] = merge_pair(working[i], working[j], direction)
        del working[j]
        merges += 1

    logger.info(
        f"Segment merger: {merges} merges, "
        f"{len(segments)} -> {len(working)} segments"
    )
    return working
