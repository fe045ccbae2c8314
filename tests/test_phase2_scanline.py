#!/usr/bin/env python
"""
Phase 2 Tests: Scanline Segment Detection

Tests for:
- Run finding on single rows/columns
- Row and column passes
- Minimum length and image boundary handling
- Output ordering
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import numpy as np

from wallscan.raster import make_bitmap
from wallscan.vector import (
    Segment,
    find_runs,
    scan_rows,
    scan_columns,
    detect_segments,
)
from wallscan.constants import DEFAULT_MIN_LINE_LENGTH, DEFAULT_SCAN_GAP


def blank_pixels(width: int = 100, height: int = 100) -> np.ndarray:
    """All-background boolean grid."""
    return np.zeros((height, width), dtype=bool)


class TestFindRuns:
    """Tests for run finding."""

    def test_runs_inclusive_end(self):
        """Runs are reported with inclusive end indices."""
        line = np.array([False, True, True, False, True])
        assert find_runs(line) == [(1, 2), (4, 4)]
        print("  [PASS] Runs with inclusive end")

    def test_run_to_boundary(self):
        """A run that reaches the end of the line ends at len - 1."""
        line = np.array([False, False, True, True, True])
        assert find_runs(line) == [(2, 4)]
        print("  [PASS] Run to boundary")

    def test_full_and_empty(self):
        """All-foreground, all-background and empty lines."""
        assert find_runs(np.ones(6, dtype=bool)) == [(0, 5)]
        assert find_runs(np.zeros(6, dtype=bool)) == []
        assert find_runs(np.zeros(0, dtype=bool)) == []
        print("  [PASS] Full and empty lines")


class TestScanPasses:
    """Tests for row and column scanning."""

    def test_defaults(self):
        """Default min length 15, stride 5."""
        assert DEFAULT_MIN_LINE_LENGTH == 15
        assert DEFAULT_SCAN_GAP == 5
        print("  [PASS] Defaults")

    def test_single_horizontal_line(self):
        """A 1px line on a sampled row gives exactly one segment."""
        pixels = blank_pixels()
        pixels[50, 10:80] = True
        segments = detect_segments(make_bitmap(pixels))

        assert segments == [Segment(10, 50, 79, 50)], f"Got {segments}"
        print("  [PASS] Single horizontal line")

    def test_blank_image(self):
        """No foreground, no segments."""
        assert detect_segments(make_bitmap(blank_pixels())) == []
        print("  [PASS] Blank image")

    def test_minimum_length_is_exclusive(self):
        """A 16 pixel run is kept, a 15 pixel run is not."""
        pixels = blank_pixels()
        pixels[10, 0:16] = True
        pixels[20, 0:15] = True
        segments = scan_rows(make_bitmap(pixels))

        assert segments == [Segment(0, 10, 15, 10)], f"Got {segments}"
        for seg in segments:
            assert seg.run_length() > DEFAULT_MIN_LINE_LENGTH
        print("  [PASS] Minimum length exclusive")

    def test_right_edge_run(self):
        """A run touching the right edge ends at width - 1."""
        pixels = blank_pixels(width=60)
        pixels[20, 30:] = True
        segments = scan_rows(make_bitmap(pixels))

        assert segments == [Segment(30, 20, 59, 20)]
        print("  [PASS] Right edge run")

    def test_bottom_edge_run(self):
        """A vertical run touching the bottom edge ends at height - 1."""
        pixels = blank_pixels(height=80)
        pixels[40:, 25] = True
        segments = scan_columns(make_bitmap(pixels))

        assert segments == [Segment(25, 40, 25, 79)]
        print("  [PASS] Bottom edge run")

    def test_unsampled_row_missed(self):
        """A thin line between sampled rows is not detected."""
        pixels = blank_pixels()
        pixels[52, 10:90] = True
        assert scan_rows(make_bitmap(pixels)) == []

        # A stride of 1 picks it up
        assert scan_rows(make_bitmap(pixels), scan_gap=1) == [Segment(10, 52, 89, 52)]
        print("  [PASS] Unsampled row missed")

    def test_multiple_runs_on_one_row(self):
        """Runs on the same row are reported left to right."""
        pixels = blank_pixels()
        pixels[30, 0:20] = True
        pixels[30, 40:70] = True
        segments = scan_rows(make_bitmap(pixels))

        assert segments == [Segment(0, 30, 19, 30), Segment(40, 30, 69, 30)]
        print("  [PASS] Multiple runs on one row")

    def test_horizontal_before_vertical(self):
        """Row results precede column results."""
        pixels = blank_pixels()
        pixels[5:60, 10] = True     # vertical stroke
        pixels[70, 20:90] = True    # horizontal stroke
        segments = detect_segments(make_bitmap(pixels))

        assert segments == [Segment(20, 70, 89, 70), Segment(10, 5, 10, 59)], f"Got {segments}"
        assert segments[0].is_horizontal()
        assert not segments[1].is_horizontal()
        print("  [PASS] Horizontal before vertical")

    def test_every_raw_segment_is_long_enough(self):
        """Min length invariant holds on a noisy image."""
        rng = np.random.default_rng(7)
        pixels = rng.random((120, 120)) < 0.9
        min_length = 20
        segments = detect_segments(make_bitmap(pixels), min_line_length=min_length, scan_gap=3)

        assert segments, "Dense noise should produce some runs"
        for seg in segments:
            assert seg.run_length() > min_length, f"{seg} too short"
        print("  [PASS] Raw segments respect min length")


def run_all_tests():
    """Run all Phase 2 tests."""
    print("=" * 60)
    print("PHASE 2 TESTS: Scanline Segment Detection")
    print("=" * 60)

    all_passed = True
    for test_class in (TestFindRuns, TestScanPasses):
        print(f"\n{test_class.__doc__}")
        print("-" * 40)
        tests = test_class()
        for name in dir(tests):
            if not name.startswith("test_"):
                continue
            try:
                getattr(tests, name)()
            except AssertionError as e:
                print(f"  [FAIL] {name}: {e}")
                all_passed = False
            except Exception as e:
                print(f"  [ERROR] {name}: {e}")
                all_passed = False

    print()
    print("=" * 60)
    if all_passed:
        print("ALL PHASE 2 TESTS PASSED")
        return 0
    else:
        print("SOME TESTS FAILED")
        return 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
