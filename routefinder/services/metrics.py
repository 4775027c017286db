# routefinder/services/metrics.py
import math
from typing import List, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from routefinder.core.logger import logger
from routefinder.models.graph import City
from routefinder.models.routing import TravelTime
from routefinder.services.road_graph import RoadGraph


class RouteMetrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Straight-line length of the path in canvas units
    distance: float
    # Hours, or None when travel time was not requested
    time_hours: Optional[float] = None


def segment_distance(a: City, b: City) -> float:
    """
    Euclidean distance between two planar city positions.
    """
    return math.hypot(a.x - b.x, a.y - b.y)


def compute_metrics(graph: RoadGraph, path: Sequence[str], include_time: bool = False) -> RouteMetrics:
    """
    Aggregate distance (and optionally travel time) along a path.

    Distance is measured between city positions, not taken from
    Road.distance. Each segment's time is its straight-line length divided by
    the max_speed of the road joining the two cities; a segment with no such
    road contributes no time.

    Paths with fewer than two cities have zero distance and zero time.
    """
    total_distance = 0.0
    total_time = 0.0

    if len(path) < 2:
        return RouteMetrics(distance=0.0, time_hours=0.0 if include_time else None)

    cities: List[City] = [graph.city(name) for name in path]

    for a, b in zip(cities[:-1], cities[1:]):
        dist = segment_distance(a, b)
        total_distance += dist

        if not include_time:
            continue

        road = graph.find_road(a.name, b.name)
        if road is None:
            logger.warning(f"No road {a.name} -> {b.name}; segment left out of travel time")
            continue

        total_time += dist / road.max_speed

    return RouteMetrics(
        distance=total_distance,
        time_hours=total_time if include_time else None,
    )


def split_hours(time_hours: float) -> TravelTime:
    """
    Split a duration in hours into whole hours and rounded-down minutes.
    """
    if time_hours <= 0:
        return TravelTime(hours=0, minutes=0)

    hours = int(time_hours)
    minutes = int((time_hours - hours) * 60)
    return TravelTime(hours=hours, minutes=minutes)


def format_distance(distance: float, decimals: int = 2) -> str:
    return f"{distance:.{decimals}f}"


def format_summary(distance: float, time: Optional[TravelTime] = None, decimals: int = 2) -> str:
    """
    Display line for a route, e.g. "Distance: 87.34 km, Time: 0 H 52 M".
    """
    text = f"Distance: {format_distance(distance, decimals)} km"
    if time is not None:
        text += f", Time: {time.hours} H {time.minutes} M"
    return text
