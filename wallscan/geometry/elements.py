"""
Plan Element Module

Caller-side floor plan elements (walls, doors, windows) and the queries an
editor runs against them: hit-testing under a cursor, nearest-wall lookup,
and rotation inference for point-like elements.
"""

import logging
import math
import uuid
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from ..constants import (
    ElementType,
    POINT_HIT_TOLERANCE,
    ROTATION_INFERENCE_TOLERANCE,
    WALL_HIT_TOLERANCE,
)
from .primitives import Point, point_segment_distance, segment_angle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlanElement:
    """
    A wall, door or window in the editor's element list.

    Walls use both endpoints. Doors and windows are anchored at (x1, y1).
    """
    element_id: str
    element_type: str
    x1: float
    y1: float
    x2: Optional[float] = None
    y2: Optional[float] = None
    rotation: float = 0.0

    @property
    def is_wall(self) -> bool:
        return (
            self.element_type == ElementType.WALL
            and self.x2 is not None
            and self.y2 is not None
        )

    @property
    def anchor(self) -> Point:
        return (self.x1, self.y1)

    def distance_to(self, point: Point) -> float:
        """Distance from point to the wall segment, or to the anchor."""
        if self.is_wall:
            return point_segment_distance(point, self.anchor, (self.x2, self.y2))
        return math.hypot(point[0] - self.x1, point[1] - self.y1)

    def to_dict(self) -> Dict[str, Any]:
        """Convert element to dictionary for JSON serialization."""
        data = {
            "id": self.element_id,
            "type": self.element_type,
            "x1": self.x1,
            "y1": self.y1,
        }
        if self.x2 is not None and self.y2 is not None:
            data["x2"] = self.x2
            data["y2"] = self.y2
        if self.rotation:
            data["rotation"] = self.rotation
        return data


def generate_element_id() -> str:
    return f"element-{uuid.uuid4().hex[:12]}"


def segments_to_walls(
    segments: Iterable,
    id_factory: Optional[Callable[[], str]] = None
) -> List[PlanElement]:
    """
    Wrap extracted segments as wall elements with fresh ids.

    Args:
        segments: Extraction output
        id_factory: Callable returning a new unique id (default: uuid based)

    Returns:
        Wall elements in segment order
    """
    id_factory = id_factory or generate_element_id
    return [
        PlanElement(
            element_id=id_factory(),
            element_type=ElementType.WALL,
            x1=seg.x1,
            y1=seg.y1,
            x2=seg.x2,
            y2=seg.y2,
        )
        for seg in segments
    ]


def replace_walls(
    elements: List[PlanElement],
    walls: List[PlanElement]
) -> List[PlanElement]:
    """
    Replace every existing wall with a new extraction result.

    Doors and windows are kept in their order; the old walls are dropped and
    the new walls appended. An empty result clears the walls.

    Args:
        elements: Current element list (not modified)
        walls: Newly extracted wall elements

    Returns:
        New element list
    """
    kept = [el for el in elements if el.element_type != ElementType.WALL]
    removed = len(elements) - len(kept)

    logger.debug(f"Replacing {removed} walls with {len(walls)} extracted walls")
    return kept + list(walls)


def find_element_at(
    elements: List[PlanElement],
    point: Point,
    wall_tolerance: float = WALL_HIT_TOLERANCE,
    point_tolerance: float = POINT_HIT_TOLERANCE
) -> Optional[str]:
    """
    Find the element under a cursor position.

    Elements later in the list are drawn on top, so they are checked first.

    Args:
        elements: Element list in drawing order
        point: Cursor position (x, y)
        wall_tolerance: Hit radius for walls
        point_tolerance: Hit radius for doors and windows

    Returns:
        The element_id of the topmost hit, or None
    """
    for element in reversed(elements):
        if element.element_type == ElementType.WALL:
            if not element.is_wall:
                continue
            if element.distance_to(point) < wall_tolerance:
                return element.element_id
        elif element.element_type in (ElementType.DOOR, ElementType.WINDOW):
            if element.distance_to(point) < point_tolerance:
                return element.element_id

    return None


def find_nearest_wall(
    elements: List[PlanElement],
    point: Point
) -> Tuple[Optional[PlanElement], float]:
    """
    Find the wall closest to a point.

    Returns:
        Tuple of (wall, distance); (None, inf) when there are no walls.
        Ties go to the earlier wall.
    """
    nearest = None
    min_distance = math.inf

    for element in elements:
        if not element.is_wall:
            continue
        distance = element.distance_to(point)
        if distance < min_distance:
            min_distance = distance
            nearest = element

    return nearest, min_distance


def infer_element_rotation(
    elements: List[PlanElement],
    element: PlanElement,
    tolerance: float = ROTATION_INFERENCE_TOLERANCE
) -> float:
    """
    Rotation for a door or window, aligned with its nearest wall.

    Args:
        elements: Element list containing the walls
        element: Point-like element to orient
        tolerance: Max distance to the wall (exclusive)

    Returns:
        Wall angle in radians, or 0.0 when no wall is close enough
    """
    wall, distance = find_nearest_wall(elements, element.anchor)
    if wall is None or distance >= tolerance:
        return 0.0
    return segment_angle(wall.anchor, (wall.x2, wall.y2))


def orient_elements(
    elements: List[PlanElement],
    tolerance: float = ROTATION_INFERENCE_TOLERANCE
) -> List[PlanElement]:
    """Return a copy of the list with every door and window rotated to its wall."""
    oriented = []
    for element in elements:
        if element.element_type in (ElementType.DOOR, ElementType.WINDOW):
            rotation = infer_element_rotation(elements, element, tolerance)
            element = replace(element, rotation=rotation)
        oriented.append(element)
    return oriented
