import json
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.concurrency import run_in_threadpool
import uvicorn

from robot_dispatch.config.settings import settings
from robot_dispatch.domain.selection_request import SelectionRequest
from robot_dispatch.observability.structured_runtime_logger import StructuredRuntimeLogger
from robot_dispatch.services.robot_enrichment import is_number
from robot_dispatch.services.robot_finder import RobotFinder

app = FastAPI()

MISSING_PARAMETERS = "Request is missing one or more parameters"
UNEXPECTED_ERROR = "Unexpected error handling request. Please try again."

# Dependencies (Injected in real app)
robot_finder: RobotFinder = None  # type: ignore
default_within_distance: float = settings.DEFAULT_WITHIN_DISTANCE
runtime_logger = StructuredRuntimeLogger()


def setup_dependencies(
    finder: RobotFinder,
    within_distance: Optional[float] = None,
    logger: Optional[StructuredRuntimeLogger] = None,
):
    global robot_finder, default_within_distance, runtime_logger
    robot_finder = finder
    if within_distance is not None:
        default_within_distance = float(within_distance)
    runtime_logger = logger or StructuredRuntimeLogger()


def _reject(reason: str, detail: str, load_id: Any = None) -> HTTPException:
    runtime_logger.request_rejected(reason, load_id=load_id)
    return HTTPException(status_code=400, detail=detail)


@app.post("/v1/move")
async def move(request: Request):
    # 1. Parse Body
    try:
        payload = json.loads(await request.body())
    except Exception:
        raise _reject("invalid_json", "Invalid JSON")
    if not isinstance(payload, dict):
        raise _reject("invalid_json", "Invalid JSON")

    # 2. Required parameters
    load_id = payload.get("loadId")
    x = payload.get("x")
    y = payload.get("y")
    if load_id is None or x is None or y is None:
        raise _reject("missing_parameters", MISSING_PARAMETERS)

    within_distance = payload.get("withinDistance")
    if within_distance is None:
        within_distance = default_within_distance

    if not is_number(x) or not is_number(y):
        raise _reject("invalid_target", "x and y must be numbers", load_id=load_id)
    if not is_number(within_distance) or within_distance < 0:
        raise _reject("invalid_within_distance", "withinDistance must be a non-negative number", load_id=load_id)

    selection = SelectionRequest(x=x, y=y, within_distance=within_distance)

    # 3. Select (robot fetch blocks on the network)
    try:
        robot = await run_in_threadpool(robot_finder.find_robot, selection)
    except Exception as e:
        runtime_logger.request_failed(load_id, e)
        raise HTTPException(status_code=500, detail=UNEXPECTED_ERROR)

    # 4. Format response
    if robot is None:
        runtime_logger.no_robot(load_id, x, y, within_distance)
        return Response(status_code=204)

    runtime_logger.robot_selected(load_id, robot)
    return {"loadId": load_id, **robot.to_payload()}


def run_server(host=settings.SERVER_HOST, port=settings.SERVER_PORT):
    uvicorn.run(app, host=host, port=port)
