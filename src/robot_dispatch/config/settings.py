import os
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    ROBOT_SOURCE_URL: str = os.getenv(
        "ROBOT_SOURCE_URL",
        "https://svtrobotics.free.beeceptor.com/robots"
    )
    ROBOT_SOURCE_MODE: str = "http"  # "http" or "fixture"
    ROBOT_SOURCE_TIMEOUT_SECONDS: float = 10.0
    ROBOT_SOURCE_MAX_RETRIES: int = 0  # transport-level only

    # Selection
    DEFAULT_WITHIN_DISTANCE: float = 10.0  # Units on the robot plane

    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 8000
    LOG_LEVEL: str = "INFO"


settings = Settings()
