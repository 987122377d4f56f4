from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class Robot:
    """
    Identity and status of a robot as reported by a robot source.
    Values are kept as received; numeric checks happen at enrichment.
    """
    robot_id: str
    battery_level: Any  # 0..100
    x: Any
    y: Any

    @property
    def position(self) -> Tuple[Any, Any]:
        return (self.x, self.y)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Robot":
        return cls(
            robot_id=str(payload["robotId"]),
            battery_level=payload.get("batteryLevel"),
            x=payload.get("x"),
            y=payload.get("y"),
        )

    def to_payload(self) -> Dict[str, Any]:
        return {
            "robotId": self.robot_id,
            "batteryLevel": self.battery_level,
            "x": self.x,
            "y": self.y,
        }


@dataclass(frozen=True)
class EnrichedRobot:
    """
    Robot snapshot plus its distance to a target point.
    Built per request and discarded after the response.
    """
    robot_id: str
    battery_level: int
    x: float
    y: float
    distance: float  # >= 0

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @classmethod
    def from_robot(cls, robot: Robot, distance: float) -> "EnrichedRobot":
        return cls(
            robot_id=robot.robot_id,
            battery_level=robot.battery_level,
            x=robot.x,
            y=robot.y,
            distance=distance,
        )

    def to_payload(self) -> Dict[str, Any]:
        return {
            "robotId": self.robot_id,
            "batteryLevel": self.battery_level,
            "x": self.x,
            "y": self.y,
            "distance": self.distance,
        }
