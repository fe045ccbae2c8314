"""
Debug Image Module

Saves intermediate images: the thresholded bitmap and an overlay of the
detected walls on the source image.
"""

import logging
from pathlib import Path
from typing import List, Tuple

import cv2
import numpy as np

from ..constants import (
    DEFAULT_ORIENTATION_TOLERANCE,
    OVERLAY_HORIZONTAL_COLOR,
    OVERLAY_VERTICAL_COLOR,
    OVERLAY_LINE_THICKNESS,
)
from ..raster.image import Raster
from ..raster.thresholder import Bitmap
from ..vector.segment import Segment

logger = logging.getLogger(__name__)


def bitmap_to_image(bitmap: Bitmap) -> np.ndarray:
    """Grayscale image with foreground black and background white."""
    return np.where(bitmap.pixels, 0, 255).astype(np.uint8)


def draw_segments(
    image: np.ndarray,
    segments: List[Segment],
    orientation_tolerance: float = DEFAULT_ORIENTATION_TOLERANCE
) -> np.ndarray:
    """
    Draw segments on a copy of a BGR image.

    Horizontal walls are drawn red, vertical walls blue.
    """
    canvas = image.copy()
    for seg in segments:
        color = (
            OVERLAY_HORIZONTAL_COLOR if seg.is_horizontal(orientation_tolerance)
            else OVERLAY_VERTICAL_COLOR
        )
        cv2.line(canvas, seg.start, seg.end, color, OVERLAY_LINE_THICKNESS)
    return canvas


def save_bitmap_image(bitmap: Bitmap, output_path: str) -> str:
    """Write the thresholded bitmap as a PNG."""
    cv2.imwrite(str(output_path), bitmap_to_image(bitmap))
    logger.debug(f"Saved bitmap image: {output_path}")
    return str(output_path)


def save_overlay_image(
    raster: Raster,
    segments: List[Segment],
    output_path: str,
    orientation_tolerance: float = DEFAULT_ORIENTATION_TOLERANCE
) -> str:
    """Write the source image with detected walls drawn on top."""
    bgr = cv2.cvtColor(raster.to_array().copy(), cv2.COLOR_RGBA2BGR)
    overlay = draw_segments(bgr, segments, orientation_tolerance)
    cv2.imwrite(str(output_path), overlay)
    logger.debug(f"Saved overlay image: {output_path}")
    return str(output_path)


def generate_debug_filenames(input_path: str, output_dir: str) -> Tuple[str, str]:
    """Paths for the (bitmap, overlay) debug images."""
    stem = Path(input_path).stem
    output_dir = Path(output_dir)
    return (
        str(output_dir / f"{stem}_bitmap.png"),
        str(output_dir / f"{stem}_overlay.png"),
    )
