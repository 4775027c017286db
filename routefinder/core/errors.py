# routefinder/core/errors.py


class RouteFinderError(Exception):
    """
    Base class for all errors raised by the routing core.
    """


class GraphBuildError(RouteFinderError, ValueError):
    """
    Raised when the road graph cannot be built from the supplied input
    (duplicate city names, invalid road values, malformed tuples).
    """


class CityNotFoundError(RouteFinderError, KeyError):
    """
    Raised by direct graph lookups for a city name that is not in the graph.

    The route facade checks names before querying, so this never reaches
    callers of RoutingService.find_route().
    """

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown city: {self.name!r}"
