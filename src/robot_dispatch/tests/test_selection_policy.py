from robot_dispatch.domain.robot import EnrichedRobot, Robot
from robot_dispatch.services.robot_enrichment import enrich_robots
from robot_dispatch.services.selection_policy import (
    BatteryWithinDistancePolicy,
    filter_by_distance,
    sort_by_battery,
    sort_by_distance,
)


def enriched(robot_id, battery, distance):
    return EnrichedRobot(robot_id, battery, 0, distance, distance)


def scenario():
    return enrich_robots([Robot("A", 50, 0, 3), Robot("B", 90, 0, 4)], 0, 0)


def test_both_within_range_picks_higher_battery():
    chosen = BatteryWithinDistancePolicy().select(scenario(), 5)
    assert chosen.robot_id == "B"


def test_single_candidate_wins_despite_lower_battery():
    chosen = BatteryWithinDistancePolicy().select(scenario(), 3.5)
    assert chosen.robot_id == "A"


def test_no_candidate_returns_none():
    assert BatteryWithinDistancePolicy().select(scenario(), 1) is None


def test_empty_list_returns_none():
    assert BatteryWithinDistancePolicy().select([], 10) is None


def test_threshold_is_inclusive():
    chosen = BatteryWithinDistancePolicy().select(scenario(), 3)
    assert chosen.robot_id == "A"


def test_equal_battery_falls_back_to_closest():
    robots = [enriched("far", 80, 9), enriched("near", 80, 2), enriched("low", 10, 1)]
    chosen = BatteryWithinDistancePolicy().select(robots, 10)
    assert chosen.robot_id == "near"


def test_equal_battery_and_distance_keeps_source_order():
    robots = [enriched("first", 70, 4), enriched("second", 70, 4)]
    chosen = BatteryWithinDistancePolicy().select(robots, 10)
    assert chosen.robot_id == "first"


def test_robots_out_of_range_are_ignored_even_with_full_battery():
    robots = [enriched("full", 100, 11), enriched("weak", 5, 6)]
    chosen = BatteryWithinDistancePolicy().select(robots, 10)
    assert chosen.robot_id == "weak"


def test_helpers_return_new_lists():
    robots = [enriched("a", 10, 5), enriched("b", 90, 1), enriched("c", 50, 3)]
    original = list(robots)

    assert [r.robot_id for r in sort_by_distance(robots)] == ["b", "c", "a"]
    assert [r.robot_id for r in sort_by_battery(robots)] == ["b", "c", "a"]
    assert [r.robot_id for r in filter_by_distance(robots, 3)] == ["b", "c"]
    assert robots == original
