# routefinder/services/shortest_path.py
"""
Single-source shortest path over a RoadGraph.

Plain Dijkstra relaxation with a linear scan for the next city to settle
(no heap). That is O(V^2), which is fine for the few dozen cities this
service deals with.

Road distances must be non-negative; RoadGraph.build() rejects negative ones.
"""

import math
from typing import Dict, List, Optional, Tuple

from routefinder.core.errors import CityNotFoundError
from routefinder.services.road_graph import RoadGraph


def shortest_path(graph: RoadGraph, start: str, end: str) -> Tuple[List[str], float]:
    """
    Compute the minimum total Road.distance path from `start` to `end`.

    Returns
    -------
    list[str], float
        City names from start to end (inclusive) and the path cost.
        ``([start], 0.0)`` when start == end.
        ``([], inf)`` when end cannot be reached from start.

    Raises CityNotFoundError if either name is not in the graph.
    """
    for name in (start, end):
        if not graph.has_city(name):
            raise CityNotFoundError(name)

    # Dict as an ordered set: iteration follows graph construction order
    unsettled: Dict[str, None] = dict.fromkeys(graph.city_names())
    distance: Dict[str, float] = {start: 0.0}
    previous: Dict[str, Optional[str]] = {start: None}

    while unsettled:
        to_open: Optional[str] = None
        best = math.inf

        for name in unsettled:
            d = distance.get(name)
            if d is not None and d < best:
                to_open = name
                best = d

        # Every remaining city is unreachable
        if to_open is None:
            return [], math.inf

        if to_open == end:
            break

        for road in graph.roads_from(to_open):
            candidate = best + road.distance
            known = distance.get(road.destination)
            if known is None or candidate < known:
                distance[road.destination] = candidate
                previous[road.destination] = to_open

        del unsettled[to_open]

    # reconstruct path
    path: List[str] = []
    node: Optional[str] = end
    while node is not None:
        path.append(node)
        node = previous[node]
    path.reverse()

    return path, distance[end]
