import json
import os
from typing import List, Optional

from robot_dispatch.adapters.robot_payload import parse_robot_list
from robot_dispatch.domain.errors import SourceUnavailableError
from robot_dispatch.domain.robot import Robot
from robot_dispatch.interfaces.robot_source import RobotSource

DEFAULT_FIXTURE_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data", "robots.json")


class StaticRobotSource(RobotSource):
    """
    Deterministic source for tests and offline runs.
    Returns a new list on every fetch so callers never share a snapshot.
    """
    def __init__(self, robots: List[Robot]):
        self._robots = tuple(robots)

    def fetch(self) -> List[Robot]:
        return list(self._robots)

    @classmethod
    def from_fixture(cls, path: Optional[str] = None) -> "StaticRobotSource":
        """
        Loads the bundled robot list (or the JSON file at `path`).
        """
        path = path or DEFAULT_FIXTURE_PATH
        try:
            with open(path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except FileNotFoundError as e:
            raise SourceUnavailableError(f"Robot fixture not found: {path}") from e
        except json.JSONDecodeError as e:
            raise SourceUnavailableError(f"Robot fixture is not valid JSON: {e}") from e
        return cls(parse_robot_list(payload))
