"""
Segment Module

Pixel-space wall segment shared by every vector stage.
"""

import math
from dataclasses import dataclass
from typing import Dict, Tuple

from ..constants import DEFAULT_ORIENTATION_TOLERANCE, Orientation
from ..geometry.primitives import classify_orientation


@dataclass(frozen=True)
class Segment:
    """
    A straight wall segment in image coordinates (y grows downward).

    Orientation is never stored; it is derived from the endpoints with a
    caller-supplied tolerance.
    """
    x1: int
    y1: int
    x2: int
    y2: int

    @property
    def start(self) -> Tuple[int, int]:
        return (self.x1, self.y1)

    @property
    def end(self) -> Tuple[int, int]:
        return (self.x2, self.y2)

    @property
    def length(self) -> float:
        """Euclidean distance between the endpoints."""
        return math.hypot(self.x2 - self.x1, self.y2 - self.y1)

    def orientation(self, tolerance: float = DEFAULT_ORIENTATION_TOLERANCE) -> str:
        """Orientation class (Orientation.HORIZONTAL or Orientation.VERTICAL)."""
        return classify_orientation(self.x1, self.y1, self.x2, self.y2, tolerance)

    def is_horizontal(self, tolerance: float = DEFAULT_ORIENTATION_TOLERANCE) -> bool:
        return self.orientation(tolerance) == Orientation.HORIZONTAL

    def cross_coordinate(self, tolerance: float = DEFAULT_ORIENTATION_TOLERANCE) -> int:
        """Fixed coordinate: y1 for horizontal segments, x1 for vertical ones."""
        return self.y1 if self.is_horizontal(tolerance) else self.x1

    def along_interval(
        self,
        tolerance: float = DEFAULT_ORIENTATION_TOLERANCE
    ) -> Tuple[int, int]:
        """Ordered (start, end) extent along the segment's own axis."""
        if self.is_horizontal(tolerance):
            return (min(self.x1, self.x2), max(self.x1, self.x2))
        return (min(self.y1, self.y2), max(self.y1, self.y2))

    def run_length(self, tolerance: float = DEFAULT_ORIENTATION_TOLERANCE) -> int:
        """Number of pixels covered along the axis, endpoints inclusive."""
        start, end = self.along_interval(tolerance)
        return end - start + 1

    def to_dict(
        self,
        orientation_tolerance: float = DEFAULT_ORIENTATION_TOLERANCE
    ) -> Dict[str, object]:
        """Convert segment to dictionary for JSON serialization."""
        return {
            "x1": self.x1,
            "y1": self.y1,
            "x2": self.x2,
            "y2": self.y2,
            "orientation": self.orientation(orientation_tolerance),
        }
