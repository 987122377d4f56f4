from abc import ABC, abstractmethod
from typing import List
from robot_dispatch.domain.robot import Robot

class RobotSource(ABC):
    """
    Interface for fetching the currently available robots.
    Implementations handle connection logic (HTTP API, bundled fixture).
    """
    @abstractmethod
    def fetch(self) -> List[Robot]:
        """
        Returns a fresh snapshot of available robots.
        Raises SourceUnavailableError when the source cannot be read.
        """
        pass
