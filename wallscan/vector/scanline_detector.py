"""
Scanline Segment Detector Module

Scans sampled rows and columns of a bitmap and turns long foreground runs
into axis-aligned segments.

Sampling every scan_gap-th row trades accuracy for speed: strokes thinner
than the stride can fall between sampled rows and are not detected.
"""

import logging
from typing import List, Tuple

import numpy as np

from ..constants import DEFAULT_MIN_LINE_LENGTH, DEFAULT_SCAN_GAP
from ..raster.thresholder import Bitmap
from .segment import Segment

logger = logging.getLogger(__name__)


def find_runs(line: np.ndarray) -> List[Tuple[int, int]]:
    """
    Find maximal runs of True values in a 1D boolean array.

    Args:
        line: 1D boolean array (one bitmap row or column)

    Returns:
        List of (start, end) index pairs, end inclusive. A run that reaches
        the end of the array ends at len(line) - 1.
    """
    if line.size == 0:
        return []

    # Pad with background on both sides so every run has a rising and
    # falling edge
    padded = np.concatenate(([False], np.asarray(line, dtype=bool), [False]))
    edges = np.diff(padded.astype(np.int8))

    starts = np.flatnonzero(edges == 1)
    ends = np.flatnonzero(edges == -1) - 1

    return [(int(s), int(e)) for s, e in zip(starts, ends)]


def _long_runs(line: np.ndarray, min_line_length: int) -> List[Tuple[int, int]]:
    """Runs whose pixel count is strictly greater than min_line_length."""
    return [
        (start, end) for start, end in find_runs(line)
        if end - start + 1 > min_line_length
    ]


def scan_rows(
    bitmap: Bitmap,
    min_line_length: int = DEFAULT_MIN_LINE_LENGTH,
    scan_gap: int = DEFAULT_SCAN_GAP
) -> List[Segment]:
    """
    Detect horizontal segments on every scan_gap-th row, left to right.

    Args:
        bitmap: Thresholded image
        min_line_length: Runs must be longer than this many pixels
        scan_gap: Row stride

    Returns:
        Horizontal segments in scan order (top to bottom, left to right)
    """
    segments = []
    for y in range(0, bitmap.height, scan_gap):
        for start, end in _long_runs(bitmap.row(y), min_line_length):
            segments.append(Segment(x1=start, y1=y, x2=end, y2=y))
    return segments


def scan_columns(
    bitmap: Bitmap,
    min_line_length: int = DEFAULT_MIN_LINE_LENGTH,
    scan_gap: int = DEFAULT_SCAN_GAP
) -> List[Segment]:
    """
    Detect vertical segments on every scan_gap-th column, top to bottom.

    Args:
        bitmap: Thresholded image
        min_line_length: Runs must be longer than this many pixels
        scan_gap: Column stride

    Returns:
        Vertical segments in scan order (left to right, top to bottom)
    """
    segments = []
    for x in range(0, bitmap.width, scan_gap):
        for start, end in _long_runs(bitmap.column(x), min_line_length):
            segments.append(Segment(x1=x, y1=start, x2=x, y2=end))
    return segments


def detect_segments(
    bitmap: Bitmap,
    min_line_length: int = DEFAULT_MIN_LINE_LENGTH,
    scan_gap: int = DEFAULT_SCAN_GAP
) -> List[Segment]:
    """
    Run both scan passes.

    Horizontal results come first, then vertical ones, each in scan order.
    The merge stage relies on this order only for tie-breaking.

    Args:
        bitmap: Thresholded image
        min_line_length: Minimum run length (exclusive), in pixels
        scan_gap: Sampling stride for rows and columns

    Returns:
        Raw segment list
    """
    horizontal = scan_rows(bitmap, min_line_length, scan_gap)
    vertical = scan_columns(bitmap, min_line_length, scan_gap)

    logger.info(
        f"Scanline detector: {len(horizontal)} horizontal, "
        f"{len(vertical)} vertical segments"
    )
    return horizontal + vertical
