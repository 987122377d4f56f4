from abc import ABC, abstractmethod
from typing import List, Optional
from robot_dispatch.domain.robot import EnrichedRobot

class SelectionPolicy(ABC):
    """
    Interface for picking one robot out of an enriched snapshot.
    Must be pure and deterministic for a given snapshot.
    """
    @abstractmethod
    def select(
        self,
        robots: List[EnrichedRobot],
        within_distance: float
    ) -> Optional[EnrichedRobot]:
        """
        Returns the chosen robot, or None when no robot qualifies.
        """
        pass
