# Geometry primitives and plan element queries module

from .primitives import (
    point_segment_distance,
    segment_angle,
    classify_orientation,
    intervals_overlap,
)

from .elements import (
    PlanElement,
    generate_element_id,
    segments_to_walls,
    replace_walls,
    find_element_at,
    find_nearest_wall,
    infer_element_rotation,
    orient_elements,
)

__all__ = [
    # Primitives
    "point_segment_distance",
    "segment_angle",
    "classify_orientation",
    "intervals_overlap",
    # Elements
    "PlanElement",
    "generate_element_id",
    "segments_to_walls",
    "replace_walls",
    "find_element_at",
    "find_nearest_wall",
    "infer_element_rotation",
    "orient_elements",
]
