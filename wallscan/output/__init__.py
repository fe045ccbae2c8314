# Output module

from .json_writer import (
    segments_to_document,
    write_segments_to_json,
    generate_json_filename,
)

from .debug_images import (
    bitmap_to_image,
    draw_segments,
    save_bitmap_image,
    save_overlay_image,
    generate_debug_filenames,
)

__all__ = [
    # JSON
    "segments_to_document",
    "write_segments_to_json",
    "generate_json_filename",
    # Debug images
    "bitmap_to_image",
    "draw_segments",
    "save_bitmap_image",
    "save_overlay_image",
    "generate_debug_filenames",
]
