"""
Thresholder Module

Converts an RGBA raster into a binary foreground/background bitmap.
"""

import logging
from dataclasses import dataclass

import numpy as np

from ..constants import (
    DEFAULT_THRESHOLD,
    LUMINANCE_WEIGHT_R,
    LUMINANCE_WEIGHT_G,
    LUMINANCE_WEIGHT_B,
)
from .image import Raster, validate_raster

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Bitmap:
    """
    Binary image: pixels[y, x] is True for foreground (ink).

    The array is materialized once and marked read-only.
    """
    pixels: np.ndarray

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def row(self, y: int) -> np.ndarray:
        return self.pixels[y, :]

    def column(self, x: int) -> np.ndarray:
        return self.pixels[:, x]

    @property
    def foreground_count(self) -> int:
        return int(np.count_nonzero(self.pixels))


def luminance(rgba: np.ndarray) -> np.ndarray:
    """
    Compute per-pixel luminance.

    Args:
        rgba: (H, W, 3) or (H, W, 4) uint8 array; alpha is ignored

    Returns:
        (H, W) float array, L = 0.299R + 0.587G + 0.114B
    """
    channels = rgba[..., :3].astype(np.float64)
    return (
        LUMINANCE_WEIGHT_R * channels[..., 0]
        + LUMINANCE_WEIGHT_G * channels[..., 1]
        + LUMINANCE_WEIGHT_B * channels[..., 2]
    )


def make_bitmap(pixels: np.ndarray) -> Bitmap:
    """Wrap a boolean (H, W) array as a read-only Bitmap."""
    frozen = np.array(pixels, dtype=bool, copy=True)
    frozen.flags.writeable = False
    return Bitmap(pixels=frozen)


def threshold_raster(raster: Raster, threshold: float = DEFAULT_THRESHOLD) -> Bitmap:
    """
    Threshold a raster into a bitmap.

    A pixel is foreground iff its luminance is strictly below the threshold.
    The default suits dark strokes on a light background.

    Args:
        raster: Input RGBA raster (left unmodified)
        threshold: Luminance threshold

    Returns:
        Bitmap with the raster's dimensions
    """
    validate_raster(raster)

    bitmap = make_bitmap(luminance(raster.to_array()) < threshold)

    logger.debug(
        f"Thresholded {raster.width}x{raster.height} raster at T={threshold}: "
        f"{bitmap.foreground_count} foreground pixels"
    )
    return bitmap
