from typing import List, Optional, Sequence

from robot_dispatch.domain.robot import EnrichedRobot
from robot_dispatch.interfaces.selection_policy import SelectionPolicy


def sort_by_distance(robots: Sequence[EnrichedRobot]) -> List[EnrichedRobot]:
    # sorted() is stable: equal distances keep source order
    return sorted(robots, key=lambda r: r.distance)


def sort_by_battery(robots: Sequence[EnrichedRobot]) -> List[EnrichedRobot]:
    return sorted(robots, key=lambda r: r.battery_level, reverse=True)


def filter_by_distance(robots: Sequence[EnrichedRobot], distance: float) -> List[EnrichedRobot]:
    return [r for r in robots if r.distance <= distance]


class BatteryWithinDistancePolicy(SelectionPolicy):
    """
    Two-stage policy: distance gate, then battery maximization.

    1. Robots farther than `within_distance` are dropped.
    2. A single remaining robot wins on proximity alone.
    3. Among several, the highest battery level wins. Equal battery
       levels fall back to the closest robot, then to source order.
    """

    def select(
        self,
        robots: List[EnrichedRobot],
        within_distance: float
    ) -> Optional[EnrichedRobot]:
        candidates = filter_by_distance(sort_by_distance(robots), within_distance)

        if not candidates:
            return None

        if len(candidates) == 1:
            return candidates[0]

        return sort_by_battery(candidates)[0]
