# routefinder/models/routing.py

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class CityPoint(BaseModel):
    """
    A city as it appears in a route: name plus planar canvas position.
    """
    name: str
    x: float
    y: float


class RoadOut(BaseModel):
    destination: str
    distance: float
    max_speed: float


class CityOut(CityPoint):
    """
    A city with its outgoing roads, as listed by GET /route/cities.
    """
    roads: List[RoadOut] = Field(default_factory=list)


class TravelTime(BaseModel):
    """
    Travel time split into whole hours and rounded-down remainder minutes.
    """
    hours: int
    minutes: int


class RouteStatus(str, Enum):
    FOUND = "found"
    NO_ROUTE = "no_route"
    INVALID_CITY = "invalid_city"


class RouteRequest(BaseModel):
    """
    Request body for the /route endpoint.
    """
    start: str
    end: str
    # None -> use the server default (settings.INCLUDE_TRAVEL_TIME)
    include_time: Optional[bool] = None


class RouteResult(BaseModel):
    """
    Outcome of a route query.

    The three outcomes are told apart by `status`, never by exceptions:

    - found:        `path` holds start..end (a single city when start == end)
                    and the distance fields are set.
    - no_route:     both cities exist but no directed path joins them;
                    `path` is empty.
    - invalid_city: start and/or end is not a known city; `message` names it.

    `road_distance` is the sum of Road.distance along the path (the cost the
    shortest-path search minimised). `total_distance` is the sum of straight
    line distances between consecutive city positions. The two are reported
    separately and can differ.
    """
    status: RouteStatus
    start: str
    end: str
    path: List[CityPoint] = Field(default_factory=list)
    road_distance: Optional[float] = None
    total_distance: Optional[float] = None
    distance_text: Optional[str] = None
    total_time: Optional[TravelTime] = None
    summary: Optional[str] = None
    message: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.status is RouteStatus.FOUND

    @property
    def city_names(self) -> List[str]:
        return [c.name for c in self.path]
