from typing import Any, List, Set

from robot_dispatch.domain.errors import SourceUnavailableError
from robot_dispatch.domain.robot import Robot


def parse_robot_list(payload: Any) -> List[Robot]:
    """
    Converts a robot-listing payload into Robot records.

    Expected shape: [{"robotId": "1", "batteryLevel": 99, "x": 48, "y": 92}, ...]
    Raises SourceUnavailableError when the shape is wrong or ids repeat.
    """
    if not isinstance(payload, list):
        raise SourceUnavailableError(
            f"Robot list payload must be a JSON array, got {type(payload).__name__}"
        )

    robots: List[Robot] = []
    seen: Set[str] = set()
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise SourceUnavailableError(f"Robot entry #{index} is not an object")
        if item.get("robotId") is None:
            raise SourceUnavailableError(f"Robot entry #{index} has no robotId")

        robot = Robot.from_payload(item)
        if robot.robot_id in seen:
            raise SourceUnavailableError(f"Duplicate robotId {robot.robot_id!r}")
        seen.add(robot.robot_id)
        robots.append(robot)

    return robots
