import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from robot_dispatch.domain.errors import RobotDispatchError
from robot_dispatch.domain.robot import EnrichedRobot

MOVE_REQUEST_REJECTED = "MOVE_REQUEST_REJECTED"
MOVE_ROBOT_SELECTED = "MOVE_ROBOT_SELECTED"
MOVE_NO_ROBOT = "MOVE_NO_ROBOT"
MOVE_REQUEST_FAILED = "MOVE_REQUEST_FAILED"


class StructuredRuntimeLogger:
    """
    JSON-lines logger for the move request path.
    One line per outcome; request bodies are never written out.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger("robot_dispatch.runtime")

    def emit(self, event_type: str, **fields: Any) -> None:
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "event_type": event_type,
        }
        payload.update(fields)
        self._logger.info(json.dumps(payload, default=str, ensure_ascii=True))

    def request_rejected(self, reason: str, load_id: Any = None) -> None:
        self.emit(MOVE_REQUEST_REJECTED, status="rejected", reason=reason, load_id=load_id)

    def robot_selected(self, load_id: Any, robot: EnrichedRobot) -> None:
        self.emit(
            MOVE_ROBOT_SELECTED,
            status="ok",
            load_id=load_id,
            robot_id=robot.robot_id,
            distance=robot.distance,
            battery_level=robot.battery_level,
        )

    def no_robot(self, load_id: Any, x: float, y: float, within_distance: float) -> None:
        self.emit(MOVE_NO_ROBOT, status="no_robot", load_id=load_id, x=x, y=y, within_distance=within_distance)

    def request_failed(self, load_id: Any, error: Exception) -> None:
        fields: Dict[str, Any] = {"error_type": type(error).__name__}
        # Only typed dispatch errors carry messages safe to log
        if isinstance(error, RobotDispatchError):
            fields["error"] = str(error)
        self.emit(MOVE_REQUEST_FAILED, status="error", load_id=load_id, **fields)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
