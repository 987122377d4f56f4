import logging

import pytest

from robot_dispatch.adapters.static_robot_source import StaticRobotSource
from robot_dispatch.domain.errors import InvalidInputError, SourceUnavailableError
from robot_dispatch.domain.robot import Robot
from robot_dispatch.domain.selection_request import SelectionRequest
from robot_dispatch.interfaces.robot_source import RobotSource
from robot_dispatch.interfaces.selection_policy import SelectionPolicy
from robot_dispatch.services.robot_finder import RobotFinder


# --- Mocks ---

class FailingRobotSource(RobotSource):
    def fetch(self):
        raise SourceUnavailableError("robot service down")


class ClosestOnlyPolicy(SelectionPolicy):
    def select(self, robots, within_distance):
        return min(robots, key=lambda r: r.distance) if robots else None


# --- Tests ---

def make_finder(robots):
    return RobotFinder(StaticRobotSource(robots))


def test_find_robot_prefers_battery_within_range():
    finder = make_finder([Robot("A", 50, 0, 3), Robot("B", 90, 0, 4)])

    robot = finder.find_robot(SelectionRequest(0, 0, 5))

    assert robot.robot_id == "B"
    assert robot.distance == 4.0


def test_find_robot_with_single_candidate():
    finder = make_finder([Robot("A", 50, 0, 3), Robot("B", 90, 0, 4)])
    assert finder.find_robot(SelectionRequest(0, 0, 3.5)).robot_id == "A"


def test_find_robot_none_in_range():
    finder = make_finder([Robot("A", 50, 0, 3), Robot("B", 90, 0, 4)])
    assert finder.find_robot(SelectionRequest(0, 0, 1)) is None


def test_find_robot_with_empty_source():
    assert make_finder([]).find_robot(SelectionRequest(0, 0, 10)) is None


def test_find_robot_uses_injected_policy():
    finder = RobotFinder(
        StaticRobotSource([Robot("A", 50, 0, 3), Robot("B", 90, 0, 4)]),
        policy=ClosestOnlyPolicy(),
    )
    assert finder.find_robot(SelectionRequest(0, 0, 5)).robot_id == "A"


def test_source_failure_propagates(caplog):
    finder = RobotFinder(FailingRobotSource())

    with caplog.at_level(logging.WARNING):
        with pytest.raises(SourceUnavailableError):
            finder.find_robot(SelectionRequest(1, 2, 10))

    assert "fetch failed" in caplog.text


def test_malformed_robot_propagates_invalid_input(caplog):
    finder = make_finder([Robot("A", 50, 0, 3), Robot("B", 90, None, 4)])

    with caplog.at_level(logging.WARNING):
        with pytest.raises(InvalidInputError):
            finder.find_robot(SelectionRequest(0, 0, 5))

    assert "robots=2" in caplog.text


def test_fixture_snapshot_selection():
    finder = RobotFinder(StaticRobotSource.from_fixture())

    # Robot "1" sits exactly on the target; nothing else is within one unit
    robot = finder.find_robot(SelectionRequest(48, 92, 1))

    assert robot.robot_id == "1"
    assert robot.distance == 0


def test_huge_robot_coordinate_propagates_invalid_input(caplog):
    finder = make_finder([Robot("A", 50, 10 ** 400, 0)])

    with caplog.at_level(logging.WARNING):
        with pytest.raises(InvalidInputError):
            finder.find_robot(SelectionRequest(0, 0, 5))

    assert "enrich failed" in caplog.text
