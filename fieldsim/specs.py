"""Conversion of standard robot specifications into the simulator's own form."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, Tuple

# Type tag of the custom spec entry that carries the simulator-specific fields.
ERFORCE_SPEC_TYPE = "sslsim.RobotSpecErForce"

# Used when the spec gives no kick limits.
DEFAULT_SHOT_LINEAR_MAX = 100.0
DEFAULT_SHOT_CHIP_MAX = 100.0

# Only this dribbler height is known to make dribbling work.
DRIBBLER_HEIGHT = 0.04

BLUE_TEAM = "BLUE"

_LIMIT_FIELDS = (
    "acc_speedup_absolute_max",
    "acc_speedup_angular_max",
    "acc_brake_absolute_max",
    "acc_brake_angular_max",
    "vel_absolute_max",
    "vel_angular_max",
)


class SpecError(ValueError):
    """A robot spec lacks a field the simulator needs."""

    def __init__(self, missing: str) -> None:
        super().__init__(f"robot spec is missing required field {missing!r}")
        self.missing = missing


@dataclass
class RobotSpecs:
    """Robot description in the form the simulator uses."""

    id: int
    radius: float
    height: float
    mass: float
    v_max: float
    omega_max: float
    shot_linear_max: float
    shot_chip_max: float
    dribbler_width: float
    shoot_radius: float
    angle: float
    a_speedup_f_max: float
    a_speedup_s_max: float
    a_speedup_phi_max: float
    a_brake_f_max: float
    a_brake_s_max: float
    a_brake_phi_max: float
    dribbler_height: float = DRIBBLER_HEIGHT
    year: int = 1970
    generation: int = 0
    type: str = "Regular"


def _is_set(values: Mapping[str, Any], key: str) -> bool:
    return values.get(key) is not None


def _require(values: Mapping[str, Any], key: str, name: Optional[str] = None) -> Any:
    if not _is_set(values, key):
        raise SpecError(name or key)
    return values[key]


def _custom_spec(spec: Mapping[str, Any]) -> Mapping[str, Any]:
    for entry in spec.get("custom") or ():
        if isinstance(entry, Mapping) and entry.get("type") == ERFORCE_SPEC_TYPE:
            return entry
    raise SpecError("custom")


def _opening_angle(center_to_dribbler: float, radius: float) -> float:
    # cos(angle / 2) = center_to_dribbler / radius
    if radius == 0:
        return math.nan
    ratio = center_to_dribbler / radius
    if not -1.0 <= ratio <= 1.0:
        return math.nan
    return 2 * math.acos(ratio)


def convert_specs(
    spec: Mapping[str, Any], chip_distance: Callable[[float], float]
) -> Tuple[bool, RobotSpecs]:
    """Convert a standard robot spec; returns (is_blue, specs).

    ``chip_distance`` turns a maximum chip-kick speed into a chip distance.
    Raises SpecError naming the first required field that is missing.
    """
    mass = _require(spec, "mass")
    limits = _require(spec, "limits")
    center_to_dribbler = _require(spec, "center_to_dribbler")
    custom = _custom_spec(spec)
    shoot_radius = _require(custom, "shoot_radius")
    dribbler_width = _require(custom, "dribbler_width")
    for key in _LIMIT_FIELDS:
        _require(limits, key, f"limits.{key}")
    identity = spec.get("id") or {}
    robot_id = _require(identity, "id", "id.id")
    team = _require(identity, "team", "id.team")

    radius = spec.get("radius", 0.0) or 0.0
    height = spec.get("height", 0.0) or 0.0

    if _is_set(spec, "max_linear_kick_speed"):
        shot_linear_max = spec["max_linear_kick_speed"]
    else:
        shot_linear_max = DEFAULT_SHOT_LINEAR_MAX
    if _is_set(spec, "max_chip_kick_speed"):
        shot_chip_max = chip_distance(spec["max_chip_kick_speed"])
    else:
        shot_chip_max = DEFAULT_SHOT_CHIP_MAX

    specs = RobotSpecs(
        id=robot_id,
        radius=radius,
        height=height,
        mass=mass,
        v_max=limits["vel_absolute_max"],
        omega_max=limits["vel_angular_max"],
        shot_linear_max=shot_linear_max,
        shot_chip_max=shot_chip_max,
        dribbler_width=dribbler_width,
        shoot_radius=shoot_radius,
        angle=_opening_angle(center_to_dribbler, radius),
        a_speedup_f_max=limits["acc_speedup_absolute_max"],
        a_speedup_s_max=limits["acc_speedup_absolute_max"],
        a_speedup_phi_max=limits["acc_speedup_angular_max"],
        a_brake_f_max=limits["acc_brake_absolute_max"],
        a_brake_s_max=limits["acc_brake_absolute_max"],
        a_brake_phi_max=limits["acc_brake_angular_max"],
    )
    return team == BLUE_TEAM, specs


def default_team(template: RobotSpecs, count: int = 6) -> List[RobotSpecs]:
    """``count`` copies of ``template`` numbered 0 to count - 1."""
    if count < 0:
        raise ValueError("count must not be negative")
    return [dataclasses.replace(template, id=robot_id) for robot_id in range(count)]