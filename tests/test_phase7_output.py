#!/usr/bin/env python
"""
Phase 7 Tests: Output Generation

Tests for:
- JSON document structure
- JSON file writing and naming
- Debug bitmap and overlay images
"""

import json
import sys
import tempfile
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import cv2
import numpy as np

from wallscan.output import (
    segments_to_document,
    write_segments_to_json,
    generate_json_filename,
    bitmap_to_image,
    draw_segments,
    save_bitmap_image,
    save_overlay_image,
    generate_debug_filenames,
)
from wallscan.pipeline import ExtractionConfig
from wallscan.raster import make_bitmap, raster_from_array
from wallscan.vector import Segment


SAMPLE_WALLS = [Segment(10, 50, 79, 50), Segment(40, 5, 40, 90)]


def test_document_structure():
    """Document carries image size, parameters and walls."""
    document = segments_to_document(
        SAMPLE_WALLS, "plan.png", 100, 100, ExtractionConfig(scan_gap=2)
    )

    assert document["input_file"] == "plan.png"
    assert document["image"] == {"width": 100, "height": 100}
    assert document["parameters"]["scan_gap"] == 2
    assert document["parameters"]["threshold"] == 200
    assert document["wall_count"] == 2
    assert document["walls"][0] == {
        "x1": 10, "y1": 50, "x2": 79, "y2": 50, "orientation": "horizontal"
    }
    assert document["walls"][1]["orientation"] == "vertical"
    print("  [PASS] Document structure")


def test_document_without_config():
    document = segments_to_document([], "plan.png", 10, 20)
    assert document["parameters"] == {}
    assert document["walls"] == []
    print("  [PASS] Document without config")


def test_write_json():
    """JSON file round-trips through json.load."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "nested" / "plan_walls.json"
        written = write_segments_to_json(
            SAMPLE_WALLS, str(path), "plan.png", 100, 100, ExtractionConfig()
        )
        assert written == str(path)

        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        assert data["wall_count"] == 2
        assert data["walls"][1]["x1"] == 40
    print("  [PASS] Write JSON")


def test_json_filename():
    assert generate_json_filename("/data/scan.png", "/out") == str(Path("/out") / "scan_walls.json")
    assert generate_json_filename("scan.png", "out") == str(Path("out") / "scan_walls.json")
    print("  [PASS] JSON filename")


def test_bitmap_to_image():
    """Foreground is black, background white."""
    pixels = np.zeros((3, 4), dtype=bool)
    pixels[1, 2] = True
    image = bitmap_to_image(make_bitmap(pixels))

    assert image.dtype == np.uint8
    assert image[1, 2] == 0
    assert image[0, 0] == 255
    print("  [PASS] Bitmap to image")


def test_draw_segments_colors():
    """Horizontal walls red, vertical walls blue (BGR)."""
    canvas = np.full((100, 100, 3), 255, dtype=np.uint8)
    drawn = draw_segments(canvas, SAMPLE_WALLS)

    assert tuple(drawn[50, 30]) == (0, 0, 255)
    assert tuple(drawn[20, 40]) == (255, 0, 0)
    assert tuple(canvas[50, 30]) == (255, 255, 255), "Source canvas must be untouched"
    print("  [PASS] Draw segment colors")


def test_save_debug_images():
    """Bitmap and overlay images are written at the expected paths."""
    image = np.full((60, 80, 4), 255, dtype=np.uint8)
    image[30, 5:70, :3] = 0
    raster = raster_from_array(image)

    with tempfile.TemporaryDirectory() as tmpdir:
        bitmap_path, overlay_path = generate_debug_filenames("in/plan.png", tmpdir)
        assert bitmap_path.endswith("plan_bitmap.png")
        assert overlay_path.endswith("plan_overlay.png")

        pixels = np.zeros((60, 80), dtype=bool)
        pixels[30, 5:70] = True
        save_bitmap_image(make_bitmap(pixels), bitmap_path)
        save_overlay_image(raster, [Segment(5, 30, 69, 30)], overlay_path)

        saved_bitmap = cv2.imread(bitmap_path, cv2.IMREAD_GRAYSCALE)
        assert saved_bitmap.shape == (60, 80)
        assert saved_bitmap[30, 10] == 0

        saved_overlay = cv2.imread(overlay_path)
        assert saved_overlay.shape == (60, 80, 3)
        assert tuple(saved_overlay[30, 10]) == (0, 0, 255)
    print("  [PASS] Save debug images")


def run_all_tests():
    """Run all Phase 7 tests."""
    print("=" * 60)
    print("PHASE 7 TESTS: Output Generation")
    print("=" * 60)

    tests = [
        test_document_structure,
        test_document_without_config,
        test_write_json,
        test_json_filename,
        test_bitmap_to_image,
        test_draw_segments_colors,
        test_save_debug_images,
    ]

    all_passed = True
    for test in tests:
        try:
            test()
        except AssertionError as e:
            print(f"  [FAIL] {test.__name__}: {e}")
            all_passed = False
        except Exception as e:
            print(f"  [ERROR] {test.__name__}: {e}")
            all_passed = False

    print()
    print("=" * 60)
    if all_passed:
        print("ALL PHASE 7 TESTS PASSED")
        return 0
    else:
        print("SOME TESTS FAILED")
        return 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
