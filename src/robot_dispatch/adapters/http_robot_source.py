import logging
import requests
from typing import List, Optional
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from robot_dispatch.adapters.robot_payload import parse_robot_list
from robot_dispatch.domain.errors import SourceUnavailableError
from robot_dispatch.domain.robot import Robot
from robot_dispatch.interfaces.robot_source import RobotSource

logger = logging.getLogger(__name__)


class HttpRobotSource(RobotSource):
    """
    Reads available robots from the robot-listing REST endpoint.
    Normalizes every transport or payload failure into SourceUnavailableError.
    """

    def __init__(
        self,
        url: str,
        timeout: float = 10,
        max_retries: int = 0,
        session: Optional[requests.Session] = None,
    ):
        self.url = url
        self.timeout = timeout
        self.session = session or self._create_session(max_retries)

    def _create_session(self, max_retries: int) -> requests.Session:
        session = requests.Session()
        retry_strategy = Retry(
            total=max_retries,
            backoff_factor=0.5,
            status_forcelist=[502, 503, 504],
            allowed_methods=["GET"]
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        return session

    def fetch(self) -> List[Robot]:
        try:
            response = self.session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Robot source network error: {e}")
            raise SourceUnavailableError(f"Error retrieving robots: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            # json and requests decode errors both subclass ValueError
            logger.error(f"Robot source invalid JSON: {e}")
            raise SourceUnavailableError("Invalid JSON response from robot source") from e

        robots = parse_robot_list(payload)
        logger.debug(f"Fetched {len(robots)} robots from {self.url}")
        return robots
