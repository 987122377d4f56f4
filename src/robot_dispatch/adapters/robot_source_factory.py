from robot_dispatch.adapters.http_robot_source import HttpRobotSource
from robot_dispatch.adapters.static_robot_source import StaticRobotSource
from robot_dispatch.config.settings import Settings
from robot_dispatch.interfaces.robot_source import RobotSource


def build_robot_source(settings: Settings) -> RobotSource:
    mode = settings.ROBOT_SOURCE_MODE.strip().lower()
    if mode == "fixture":
        return StaticRobotSource.from_fixture()
    if mode == "http":
        return HttpRobotSource(
            url=settings.ROBOT_SOURCE_URL,
            timeout=settings.ROBOT_SOURCE_TIMEOUT_SECONDS,
            max_retries=settings.ROBOT_SOURCE_MAX_RETRIES,
        )
    raise ValueError(f"Unknown ROBOT_SOURCE_MODE: {settings.ROBOT_SOURCE_MODE!r}")
