# Raster input and thresholding module

from .image import (
    ExtractionError,
    InputError,
    Raster,
    validate_raster,
    raster_from_array,
    load_raster,
)

from .thresholder import (
    Bitmap,
    luminance,
    make_bitmap,
    threshold_raster,
)

__all__ = [
    # Image
    "ExtractionError",
    "InputError",
    "Raster",
    "validate_raster",
    "raster_from_array",
    "load_raster",
    # Thresholder
    "Bitmap",
    "luminance",
    "make_bitmap",
    "threshold_raster",
]
