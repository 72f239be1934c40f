"""Field-side representation of robots, the ball and heat-map cells."""

from __future__ import annotations

import colorsys
import enum
import math
from dataclasses import dataclass, field
from typing import List, NamedTuple, Tuple

ROBOT_RADIUS = 10
SUBTEND_ANGLE = 30.0
BALL_RADIUS = 5.0

# Field size in scene units (centimetres); scene origin is the top-left corner.
FIELD_HALF_LENGTH = 4.5
FIELD_HALF_WIDTH = 3.0
SCENE_UNITS_PER_METRE = 100

Rect = Tuple[float, float, float, float]


class Color(NamedTuple):
    """An 8-bit RGB colour."""

    r: int
    g: int
    b: int


BLACK = Color(0, 0, 0)
BLUE = Color(0, 0, 255)
YELLOW = Color(255, 255, 0)


def transform_from_scene(x: float, y: float) -> Tuple[float, float]:
    """Convert scene coordinates to metres with the origin at the field centre."""
    return (
        x / SCENE_UNITS_PER_METRE - FIELD_HALF_LENGTH,
        y / SCENE_UNITS_PER_METRE - FIELD_HALF_WIDTH,
    )


def bounding_square(center_x: float, center_y: float, half_side: float) -> Rect:
    """The (left, top, width, height) square around a centre; half_side is truncated."""
    half = int(half_side)
    return (center_x - half, center_y - half, 2 * half, 2 * half)


def _hsv(color: Color) -> Tuple[float, float, float]:
    return colorsys.rgb_to_hsv(color.r / 255, color.g / 255, color.b / 255)


def _rgb(h: float, s: float, v: float) -> Color:
    r, g, b = colorsys.hsv_to_rgb(h, s, v)
    return Color(round(r * 255), round(g * 255), round(b * 255))


def _lighter(color: Color, factor: int) -> Color:
    if factor <= 0:
        return color
    if factor < 100:
        return _darker(color, 10000 // factor)
    h, s, v = _hsv(color)
    v = v * factor / 100
    if v > 1.0:
        s = max(0.0, s - (v - 1.0))
        v = 1.0
    return _rgb(h, s, v)


def _darker(color: Color, factor: int) -> Color:
    if factor <= 0:
        return color
    if factor < 100:
        return _lighter(color, 10000 // factor)
    h, s, v = _hsv(color)
    return _rgb(h, s, v * 100 / factor)


def heat_color(intensity: float) -> Color:
    """Colour for a heat-map value: yellow shades above zero, blue at or below.

    The magnitude is clamped to 200; above 100 the shade darkens, at or
    below 100 it lightens.
    """
    base = YELLOW
    if intensity <= 0:
        base = BLUE
        value = 200.0 if intensity < -200 else -intensity
    elif intensity >= 200:
        value = 200.0
    else:
        value = intensity
    if value > 100:
        return _darker(base, int(value))
    return _lighter(base, int(200 - value))


class Team(enum.Enum):
    """The side a robot plays for, with its body colour."""

    BLUE = "blue"
    YELLOW = "yellow"

    @property
    def color(self) -> Color:
        return BLUE if self is Team.BLUE else YELLOW


@dataclass
class Bot:
    """A robot on the field: position in scene units, orientation in radians."""

    team: Team
    id: int
    x: float = 0.0
    y: float = 0.0
    orientation: float = 0.0

    def update_position(self, x: float, y: float, orientation: float) -> None:
        """Move the robot and turn it to ``orientation``."""
        self.x = x
        self.y = y
        self.orientation = orientation

    @property
    def rotation_degrees(self) -> float:
        return math.degrees(self.orientation)

    def outline(self) -> List[Tuple[float, float]]:
        """Scene points of the body: a circle with its front cut off flat.

        The arc runs from ``SUBTEND_ANGLE`` round to ``360 - SUBTEND_ANGLE``
        degrees; the polygon closes along the flat front.
        """
        cos_o = math.cos(self.orientation)
        sin_o = math.sin(self.orientation)
        points = []
        angle = SUBTEND_ANGLE
        while angle <= 360 - SUBTEND_ANGLE + 1e-9:
            rad = math.radians(angle)
            lx = ROBOT_RADIUS * math.cos(rad)
            ly = -ROBOT_RADIUS * math.sin(rad)
            points.append(
                (self.x + lx * cos_o - ly * sin_o, self.y + lx * sin_o + ly * cos_o)
            )
            angle += 10.0
        return points


@dataclass
class Ball:
    """The ball; it must be placed on the field before it can be moved."""

    color: Color = BLACK
    radius: float = BALL_RADIUS
    x: float = 0.0
    y: float = 0.0
    placed: bool = field(default=False)

    def place(self, x: float, y: float) -> None:
        """Put the ball on the field at (x, y)."""
        self.x = x
        self.y = y
        self.placed = True

    def update_position(self, x: float, y: float) -> None:
        """Move a placed ball."""
        if not self.placed:
            raise ValueError("ball not added to scene!")
        self.x = x
        self.y = y

    def bounds(self) -> Rect:
        """The square the ball is drawn in."""
        return bounding_square(self.x, self.y, self.radius)


@dataclass
class HeatCell:
    """A cell of the heat map, coloured by its intensity."""

    x: float
    y: float
    intensity: float
    width: float
    radius: float
    color: Color = field(init=False)

    def __post_init__(self) -> None:
        self.color = heat_color(self.intensity)

    @property
    def bounds(self) -> Rect:
        return (self.x - self.radius, self.y - self.radius, 2 * self.radius, 2 * self.radius)

    def update_color(self, intensity: float, paint: bool) -> Color:
        """Work out the colour for ``intensity``; apply it only when ``paint``."""
        color = heat_color(intensity)
        if paint:
            self.color = color
        return color