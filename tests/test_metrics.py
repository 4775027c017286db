# tests/test_metrics.py
import math

import pytest
from pydantic import ValidationError

from routefinder.models.graph import City
from routefinder.models.routing import TravelTime
from routefinder.services.metrics import (
    compute_metrics,
    format_distance,
    format_summary,
    segment_distance,
    split_hours,
)


def test_segment_distance():
    assert segment_distance(City(name="A", x=0, y=0), City(name="B", x=3, y=4)) == 5.0


def test_distance_uses_positions_not_road_distance(small_graph):
    # Road costs are 2 + 3, positions are 5 + 6 apart
    metrics = compute_metrics(small_graph, ["A", "B", "C"], include_time=True)

    assert metrics.distance == pytest.approx(11.0)
    # 5 / 50 + 6 / 60
    assert metrics.time_hours == pytest.approx(0.2)


def test_time_is_optional(small_graph):
    metrics = compute_metrics(small_graph, ["A", "B", "C"])

    assert metrics.distance == pytest.approx(11.0)
    assert metrics.time_hours is None


@pytest.mark.parametrize("path", [[], ["A"]])
def test_short_paths_are_zero(small_graph, path):
    metrics = compute_metrics(small_graph, path, include_time=True)
    assert metrics.distance == 0.0
    assert metrics.time_hours == 0.0


def test_segment_without_road_skips_time_only(small_graph):
    # There is no road B -> A
    metrics = compute_metrics(small_graph, ["A", "B", "A"], include_time=True)

    assert metrics.distance == pytest.approx(10.0)
    assert metrics.time_hours == pytest.approx(5.0 / 50)

    metrics = compute_metrics(small_graph, ["C", "A"], include_time=True)
    assert metrics.distance == pytest.approx(math.hypot(3.0, 10.0))
    assert metrics.time_hours == pytest.approx(math.hypot(3.0, 10.0) / 100)


@pytest.mark.parametrize(
    "hours,expected",
    [
        (0.0, TravelTime(hours=0, minutes=0)),
        (0.8734, TravelTime(hours=0, minutes=52)),
        (1.75, TravelTime(hours=1, minutes=45)),
        (2.999, TravelTime(hours=2, minutes=59)),
    ],
)
def test_split_hours_rounds_minutes_down(hours, expected):
    assert split_hours(hours) == expected


def test_format_distance():
    assert format_distance(87.3449) == "87.34"
    assert format_distance(87.3449, 1) == "87.3"
    assert format_distance(0.0) == "0.00"


def test_format_summary():
    assert format_summary(87.3449, TravelTime(hours=0, minutes=52)) == "Distance: 87.34 km, Time: 0 H 52 M"
    assert format_summary(87.3449) == "Distance: 87.34 km"


def test_metrics_are_immutable(small_graph):
    metrics = compute_metrics(small_graph, ["A", "B"], include_time=True)

    with pytest.raises(ValidationError):
        metrics.distance = 0.0
