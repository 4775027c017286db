# routefinder/services/routing_service.py

from time import perf_counter
from typing import List, Optional

from routefinder.core.config import settings
from routefinder.core.logger import logger
from routefinder.models.routing import (
    CityOut,
    CityPoint,
    RoadOut,
    RouteResult,
    RouteStatus,
    TravelTime,
)
from routefinder.services.metrics import (
    compute_metrics,
    format_distance,
    format_summary,
    split_hours,
)
from routefinder.services.road_graph import RoadGraph
from routefinder.services.shortest_path import shortest_path


class RoutingService:
    """
    Route query facade over a read-only RoadGraph:
    - resolves start/end city names
    - computes the shortest path (by Road.distance)
    - derives straight-line distance and travel time along it
    - packages everything into a RouteResult

    Unknown cities and unreachable destinations come back as results with a
    status, never as exceptions.
    """

    def __init__(
        self,
        graph: RoadGraph,
        include_time: bool = settings.INCLUDE_TRAVEL_TIME,
        distance_decimals: int = settings.DISTANCE_DECIMALS,
    ) -> None:
        self.graph = graph
        self.include_time = include_time
        self.distance_decimals = distance_decimals
        logger.info(f"RoutingService initialised over {len(graph)} cities.")

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def find_route(
        self,
        start_name: str,
        end_name: str,
        include_time: Optional[bool] = None,
    ) -> RouteResult:
        """
        Main entry point for the /route endpoint.

        1. Check both city names.
        2. Compute shortest path (by Road.distance).
        3. Aggregate straight-line distance and, if requested, travel time.
        """
        t0 = perf_counter()
        with_time = self.include_time if include_time is None else include_time

        logger.info("Received routing request {} -> {}", start_name, end_name)

        # 1) Name resolution
        unknown = [n for n in dict.fromkeys((start_name, end_name)) if not self.graph.has_city(n)]
        if unknown:
            message = "Unknown city: " + ", ".join(unknown)
            logger.info(message)
            return RouteResult(
                status=RouteStatus.INVALID_CITY,
                start=start_name,
                end=end_name,
                message=message,
            )

        # 2) Shortest path
        t_sp0 = perf_counter()
        path, cost = shortest_path(self.graph, start_name, end_name)
        t_sp1 = perf_counter()
        logger.info(
            "Shortest path with {} cities found in {:.3f} ms",
            len(path),
            (t_sp1 - t_sp0) * 1000.0,
        )

        if len(path) < 2 and start_name != end_name:
            logger.info("No route from {} to {}", start_name, end_name)
            return RouteResult(
                status=RouteStatus.NO_ROUTE,
                start=start_name,
                end=end_name,
                message=f"No route from {start_name} to {end_name}",
            )

        # 3) Metrics
        metrics = compute_metrics(self.graph, path, include_time=with_time)
        total_time: Optional[TravelTime] = None
        if metrics.time_hours is not None:
            total_time = split_hours(metrics.time_hours)

        summary = format_summary(metrics.distance, total_time, self.distance_decimals)

        t1 = perf_counter()
        logger.info(f"Route summary: {summary} (road distance {cost:g})")
        logger.info("Total routing time: {:.3f} ms", (t1 - t0) * 1000.0)

        return RouteResult(
            status=RouteStatus.FOUND,
            start=start_name,
            end=end_name,
            path=self._build_points(path),
            road_distance=cost,
            total_distance=metrics.distance,
            distance_text=format_distance(metrics.distance, self.distance_decimals),
            total_time=total_time,
            summary=summary,
        )

    def list_cities(self) -> List[CityOut]:
        """
        All cities with their outgoing roads, for whatever draws the map.
        """
        return [
            CityOut(
                name=city.name,
                x=city.x,
                y=city.y,
                roads=[
                    RoadOut(
                        destination=road.destination,
                        distance=road.distance,
                        max_speed=road.max_speed,
                    )
                    for road in self.graph.roads_from(city.name)
                ],
            )
            for city in self.graph.cities()
        ]

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _build_points(self, path: List[str]) -> List[CityPoint]:
        points: List[CityPoint] = []
        for name in path:
            city = self.graph.city(name)
            points.append(CityPoint(name=city.name, x=city.x, y=city.y))
        return points
