import math
from typing import Any, List, Sequence

from robot_dispatch.domain.errors import InvalidInputError
from robot_dispatch.domain.robot import EnrichedRobot, Robot
from robot_dispatch.services.distance import calculate_distance


def is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # int too large for a float
        return False


def _check_robot(robot: Robot) -> None:
    for field_name in ("x", "y", "battery_level"):
        if not is_number(getattr(robot, field_name)):
            raise InvalidInputError(
                f"Robot {robot.robot_id!r} has non-numeric {field_name}: {getattr(robot, field_name)!r}"
            )


def enrich_robots(robots: Sequence[Robot], x: float, y: float) -> List[EnrichedRobot]:
    """
    Builds enriched copies of `robots` carrying their distance to (x, y).

    Order and length are preserved. The input records are left untouched.
    Every record is validated before any distance is computed, so a
    malformed record fails the whole call with InvalidInputError.
    """
    if not is_number(x) or not is_number(y):
        raise InvalidInputError(f"Target point must be numeric, got ({x!r}, {y!r})")

    for robot in robots:
        _check_robot(robot)

    return [
        EnrichedRobot.from_robot(robot, calculate_distance(x, y, robot.x, robot.y))
        for robot in robots
    ]
