# Segment detection, deduplication and merging module

from .segment import Segment

from .scanline_detector import (
    find_runs,
    scan_rows,
    scan_columns,
    detect_segments,
)

from .duplicate_filter import (
    segments_are_duplicates,
    filter_duplicate_segments,
)

from .segment_merger import (
    JOIN_AT_END,
    JOIN_AT_START,
    join_direction,
    merge_pair,
    find_merge_candidate,
    merge_segments,
)

__all__ = [
    # Segment
    "Segment",
    # Scanline Detector
    "find_runs",
    "scan_rows",
    "scan_columns",
    "detect_segments",
    # Duplicate Filter
    "segments_are_duplicates",
    "filter_duplicate_segments",
    # Segment Merger
    "JOIN_AT_END",
    "JOIN_AT_START",
    "join_direction",
    "merge_pair",
    "find_merge_candidate",
    "merge_segments",
]
