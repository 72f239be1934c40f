"""Points, edges and events used while building a Voronoi diagram."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class VPoint:
    """A 2D point, optionally tagged with an integer id (-1 when untagged)."""

    x: float
    y: float
    id: int = -1


def _ieee_div(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics: division by zero gives inf or nan."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
        return math.copysign(math.inf, sign)
    return numerator / denominator


class VEdge:
    """An edge of a Voronoi diagram.

    ``start`` and ``end`` are the edge's endpoints (``end`` is filled in once
    the edge is finished), ``left`` and ``right`` the sites on either side.
    The edge lies on the line ``y = f * x + g`` and ``direction`` points from
    ``start`` towards ``end``, normal to the segment between the two sites.
    Some edges come in two halves; ``neighbour`` links them.
    """

    def __init__(self, start: VPoint, left: VPoint, right: VPoint) -> None:
        self.start = start
        self.left = left
        self.right = right
        self.end: Optional[VPoint] = None
        self.neighbour: Optional[VEdge] = None
        self.f = _ieee_div(right.x - left.x, left.y - right.y)
        self.g = start.y - self.f * start.x
        self.direction = VPoint(right.y - left.y, -(right.x - left.x))

    def __repr__(self) -> str:
        return f"VEdge(start={self.start!r}, end={self.end!r})"


class VEvent:
    """A place or circle event in the sweep-line queue, ordered by ``y``."""

    def __init__(self, point: VPoint, is_place_event: bool) -> None:
        self.point = point
        self.is_place_event = is_place_event
        self.y = point.y
        self.arch: Optional[Any] = None

    def __lt__(self, other: VEvent) -> bool:
        return self.y < other.y

    def __repr__(self) -> str:
        kind = "place" if self.is_place_event else "circle"
        return f"VEvent({kind}, y={self.y})"