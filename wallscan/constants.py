"""
Wallscan - Master Constants Reference

Default values for every tunable parameter of the wall extraction pipeline.
All of them can be overridden through ExtractionConfig or the CLI.
"""

# =============================================================================
# THRESHOLDING CONSTANTS
# =============================================================================

# Pixels with luminance below this are foreground (ink)
DEFAULT_THRESHOLD = 200

# Luminance weights (ITU-R BT.601)
LUMINANCE_WEIGHT_R = 0.299
LUMINANCE_WEIGHT_G = 0.587
LUMINANCE_WEIGHT_B = 0.114

# Bytes per pixel in the input buffer (R, G, B, A)
BYTES_PER_PIXEL = 4

# =============================================================================
# SCANLINE DETECTION CONSTANTS
# =============================================================================

# Runs must be strictly longer than this (pixels)
DEFAULT_MIN_LINE_LENGTH = 15

# Sample every Nth row/column
DEFAULT_SCAN_GAP = 5

# =============================================================================
# DEDUPLICATION AND MERGING CONSTANTS
# =============================================================================

# Max cross-axis offset for two overlapping segments to count as duplicates
DEFAULT_DUPLICATE_TOLERANCE = 5

# Max cross-axis offset and endpoint gap for joining collinear segments
DEFAULT_MERGE_TOLERANCE = 10

# |y2 - y1| below this classifies a segment as horizontal
DEFAULT_ORIENTATION_TOLERANCE = 10

# =============================================================================
# ELEMENT INTERACTION CONSTANTS
# =============================================================================

# Hit radius around a wall (line-like element)
WALL_HIT_TOLERANCE = 10

# Hit radius around a door or window (point-like element)
POINT_HIT_TOLERANCE = 15

# Max distance to a wall for a door/window to inherit its angle
ROTATION_INFERENCE_TOLERANCE = 30

# =============================================================================
# DEBUG OUTPUT CONSTANTS
# =============================================================================

# BGR colors for overlay drawing
OVERLAY_HORIZONTAL_COLOR = (0, 0, 255)
OVERLAY_VERTICAL_COLOR = (255, 0, 0)
OVERLAY_LINE_THICKNESS = 2

# =============================================================================
# ORIENTATION CLASSES
# =============================================================================

class Orientation:
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

# =============================================================================
# ELEMENT TYPES
# =============================================================================

class ElementType:
    WALL = "wall"
    DOOR = "door"
    WINDOW = "window"
