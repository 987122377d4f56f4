import sys
import os

# Ensure src is in python path
sys.path.append(os.path.join(os.path.dirname(__file__), "src"))

from robot_dispatch.adapters.robot_source_factory import build_robot_source
from robot_dispatch.config.settings import settings
from robot_dispatch.inbound.move_request_server import run_server, setup_dependencies
from robot_dispatch.observability.structured_runtime_logger import configure_logging
from robot_dispatch.services.robot_finder import RobotFinder


def main():
    configure_logging(settings.LOG_LEVEL)
    print(f"Initializing DEV environment (robot source: {settings.ROBOT_SOURCE_MODE})...")

    # 1. Infrastructure
    source = build_robot_source(settings)

    # 2. Core
    finder = RobotFinder(source=source)

    # 3. Inbound
    setup_dependencies(finder, within_distance=settings.DEFAULT_WITHIN_DISTANCE)

    print(f"Serving POST /v1/move on {settings.SERVER_HOST}:{settings.SERVER_PORT}")
    run_server(host=settings.SERVER_HOST, port=settings.SERVER_PORT)


if __name__ == "__main__":
    main()
