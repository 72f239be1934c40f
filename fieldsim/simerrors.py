"""Simulator error reports and helpers for incoming control messages."""

from __future__ import annotations

import enum
import sys
import time
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, TextIO

# Handling one datagram should take less than this many nanoseconds.
LATENCY_LIMIT_NS = 1e6

# Positions and velocities arrive in metres and are scaled to millimetres.
_SCALE = 1e3

TELEPORT_BALL_KEYS = ("x", "y", "z", "vx", "vy", "vz")
TELEPORT_ROBOT_KEYS = ("x", "y", "v_x", "v_y")


class SimError(enum.Enum):
    """Kinds of error the simulator reports, with their wire code and message."""

    UNSUPPORTED_VELOCITY = (
        "VELOCITY_TYPE",
        "The received message had a velocity type unsupported by this simulator ",
    )
    UNSUPPORTED_ANGLE = (
        "ANGLE_VALUE",
        "The received kick angle was not equal to either 0 or 45 ",
    )
    UNREADABLE = (
        "UNREADABLE",
        "The received message was unreadable ",
    )
    MISSING_SPEC = (
        "INVALID_SPEC",
        "The received spec is missing one of the required fields for this simulator ",
    )
    INVALID_REALISM = (
        "INVALID_REALISM",
        "The received realism is not conforming to the realism configuration "
        "for this simulator ",
    )

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def prefix(self) -> str:
        return self.value[1]


class SimErrorSource(enum.Enum):
    """Who sent the message that caused an error."""

    CONTROLLER = "CONTROLLER"
    BLUE_TEAM = "BLUE"
    YELLOW_TEAM = "YELLOW"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class SimulatorError:
    """An error as sent back to a client: a short code and a message."""

    code: str
    message: str


def _log(stream: TextIO, text: str) -> None:
    stream.write(f"{time.strftime('%H:%M:%S')} {text}")
    stream.flush()


def make_error(
    code: SimError,
    source: SimErrorSource,
    appendix: str = "",
    stream: Optional[TextIO] = None,
) -> SimulatorError:
    """Build the error for ``code`` and log it, with its source, to ``stream``."""
    if not isinstance(code, SimError):
        raise ValueError(f"unmanaged simulator error: {code!r}")
    out = sys.stderr if stream is None else stream
    error = SimulatorError(code=code.code, message=code.prefix + appendix)
    label = source.label if isinstance(source, SimErrorSource) else "INVALID"
    _log(out, f"[{label:<10} - {error.code:<15}] {error.message}\n")
    return error


def scale_up(values: Mapping[str, Any], keys: Iterable[str]) -> dict:
    """Copy ``values`` with each of ``keys`` that is set multiplied by 1e3."""
    result = dict(values)
    for key in keys:
        if result.get(key) is not None:
            result[key] = result[key] * _SCALE
    return result


def scale_teleport_ball(ball: Mapping[str, Any]) -> dict:
    """Scale the position and velocity of a ball teleport to millimetres."""
    return scale_up(ball, TELEPORT_BALL_KEYS)


def scale_teleport_robot(robot: Mapping[str, Any]) -> dict:
    """Scale the position and velocity of a robot teleport to millimetres."""
    return scale_up(robot, TELEPORT_ROBOT_KEYS)


def latency_warning(delta: int) -> Optional[str]:
    """A warning if handling took more than 1e6 ns, else None."""
    if delta > LATENCY_LIMIT_NS:
        return f"Warning: Handled Datagram in {delta}ns, should be lower than 1e6"
    return None


def unsupported_velocity_errors(
    robot_commands: Iterable[Mapping[str, Any]], source: SimErrorSource
) -> List[SimulatorError]:
    """Errors for every move command given as wheel or global velocity."""
    errors = []
    for command in robot_commands:
        move = command.get("move_command")
        if move is None:
            continue
        if move.get("wheel_velocity") is not None or move.get("global_velocity") is not None:
            robot = f"(Robot :{command.get('id', 0)})"
            errors.append(make_error(SimError.UNSUPPORTED_VELOCITY, source, robot))
    return errors