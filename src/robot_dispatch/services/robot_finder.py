import logging
from typing import List, Optional

from robot_dispatch.domain.errors import RobotDispatchError
from robot_dispatch.domain.robot import EnrichedRobot, Robot
from robot_dispatch.domain.selection_request import SelectionRequest
from robot_dispatch.interfaces.robot_source import RobotSource
from robot_dispatch.interfaces.selection_policy import SelectionPolicy
from robot_dispatch.services.robot_enrichment import enrich_robots
from robot_dispatch.services.selection_policy import BatteryWithinDistancePolicy

logger = logging.getLogger(__name__)


class RobotFinder:
    """
    Orchestrates one selection: Fetch -> Enrich -> Select.
    Holds no state between calls; every call reads its own snapshot.
    """
    def __init__(
        self,
        source: RobotSource,
        policy: Optional[SelectionPolicy] = None
    ):
        self.source = source
        self.policy = policy or BatteryWithinDistancePolicy()

    def find_robot(self, request: SelectionRequest) -> Optional[EnrichedRobot]:
        """
        Returns the best robot for the request, or None if no robot is
        within range. Source and validation errors propagate unchanged.
        """
        robots: List[Robot] = []
        stage = "fetch"
        try:
            robots = self.source.fetch()
            stage = "enrich"
            enriched = enrich_robots(robots, request.x, request.y)
            stage = "select"
            return self.policy.select(enriched, request.within_distance)
        except RobotDispatchError as e:
            logger.warning(
                f"[RobotFinder] {stage} failed for target=({request.x}, {request.y}) "
                f"within={request.within_distance} robots={len(robots)}: {e}"
            )
            raise
