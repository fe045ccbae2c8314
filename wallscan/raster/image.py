"""
Raster Image Module

Input raster container, validation, and image file loading.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..constants import BYTES_PER_PIXEL

logger = logging.getLogger(__name__)


class ExtractionError(Exception):
    """Base exception for wall extraction errors."""
    pass


class InputError(ExtractionError):
    """Raised when the raster or the configuration is unusable."""
    pass


@dataclass(frozen=True)
class Raster:
    """
    An RGBA raster: 4 bytes per pixel, row-major, origin top-left.
    """
    width: int
    height: int
    data: bytes

    def to_array(self) -> np.ndarray:
        """
        View the buffer as a (height, width, 4) uint8 array.

        The returned array is read-only; the raster itself is never modified.
        """
        validate_raster(self)
        return np.frombuffer(self.data, dtype=np.uint8).reshape(
            self.height, self.width, BYTES_PER_PIXEL
        )


def validate_raster(raster: Raster) -> None:
    """
    Check raster dimensions against its buffer.

    Raises:
        InputError: If width or height is zero or negative, or the buffer
            length is not width * height * 4
    """
    if raster.width <= 0 or raster.height <= 0:
        raise InputError(
            f"Raster must have non-zero size, got {raster.width}x{raster.height}"
        )

    expected = raster.width * raster.height * BYTES_PER_PIXEL
    if len(raster.data) != expected:
        raise InputError(
            f"Raster buffer has {len(raster.data)} bytes, expected {expected} "
            f"for {raster.width}x{raster.height} RGBA"
        )


def raster_from_array(array: np.ndarray) -> Raster:
    """
    Build a Raster from a numpy image.

    Args:
        array: (H, W, 4) RGBA or (H, W, 3) RGB uint8 array. RGB input gets
            an opaque alpha channel.

    Returns:
        Raster with a copy of the pixel data
    """
    if array.ndim != 3 or array.shape[2] not in (3, 4):
        raise InputError(f"Expected an (H, W, 3) or (H, W, 4) array, got shape {array.shape}")

    if array.shape[2] == 3:
        alpha = np.full(array.shape[:2] + (1,), 255, dtype=np.uint8)
        array = np.concatenate([array.astype(np.uint8), alpha], axis=2)

    height, width = array.shape[:2]
    raster = Raster(
        width=int(width),
        height=int(height),
        data=np.ascontiguousarray(array, dtype=np.uint8).tobytes()
    )
    validate_raster(raster)
    return raster


def load_raster(filepath: Union[str, Path]) -> Raster:
    """
    Decode an image file into an RGBA raster.

    Args:
        filepath: Path to any image format Pillow can read

    Returns:
        Raster

    Raises:
        InputError: If the file is missing or cannot be decoded
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise InputError(f"File not found: {filepath}")

    if not filepath.is_file():
        raise InputError(f"Path is not a file: {filepath}")

    try:
        with Image.open(filepath) as image:
            rgba = image.convert("RGBA")
            width, height = rgba.size
            data = rgba.tobytes()
    except (UnidentifiedImageError, OSError) as e:
        raise InputError(f"Cannot decode image: {filepath}. Error: {e}") from e

    logger.debug(f"Loaded {filepath.name}: {width}x{height}")

    raster = Raster(width=width, height=height, data=data)
    validate_raster(raster)
    return raster
