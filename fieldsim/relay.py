"""Radio feedback for teams and caching of team setup across simulator restarts."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional


@dataclass(frozen=True)
class RadioResponse:
    """A robot's radio reply; unset fields are None."""

    id: int
    is_blue: Optional[bool] = None
    ball_detected: Optional[bool] = None


@dataclass(frozen=True)
class RobotFeedback:
    """Feedback sent to a team about one of its robots."""

    id: int
    dribbler_ball_contact: bool


def build_feedback(
    responses: Iterable[RadioResponse], is_blue: bool
) -> List[RobotFeedback]:
    """Feedback for the team's robots that report ball detection.

    An empty list means there is nothing to send.
    """
    return [
        RobotFeedback(id=response.id, dribbler_ball_contact=response.ball_detected)
        for response in responses
        if response.is_blue is not None
        and response.is_blue == is_blue
        and response.ball_detected is not None
    ]


class CommandCache:
    """Remembers team and realism setup so a fresh simulator can be given it.

    Commands are dictionaries with the optional keys ``set_team_blue``,
    ``set_team_yellow`` and ``simulator`` (itself holding ``simulator_setup``
    and ``realism_config``).
    """

    def __init__(self) -> None:
        self.team_command: Dict[str, Any] = {}
        self.setup: Optional[Any] = None
        self.restarts = 0

    def handle_command(self, command: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Record setup from ``command`` and return the commands to pass on.

        A command carrying a simulator setup starts a new simulator: the
        cached setup goes first, then the command without the parts the
        cache now supplies. ``command`` itself is left unchanged.
        """
        command = copy.deepcopy(command)
        simulator = command.get("simulator")
        has_setup = simulator is not None and simulator.get("simulator_setup") is not None

        for key in ("set_team_blue", "set_team_yellow"):
            if command.get(key) is not None:
                self.team_command[key] = copy.deepcopy(command[key])
                if has_setup:
                    del command[key]
        if simulator is not None and simulator.get("realism_config") is not None:
            cached_sim = self.team_command.setdefault("simulator", {})
            cached_sim["realism_config"] = copy.deepcopy(simulator["realism_config"])
            if has_setup:
                del simulator["realism_config"]

        if not has_setup:
            return [command]

        self.setup = copy.deepcopy(simulator["simulator_setup"])
        self.restarts += 1
        self.team_command.setdefault("simulator", {})["enable"] = True
        self.team_command.setdefault("transceiver", {})["charge"] = True
        return [copy.deepcopy(self.team_command), command]