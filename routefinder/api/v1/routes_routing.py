# routefinder/api/v1/routes_routing.py
from typing import List

from fastapi import APIRouter

from routefinder.models.routing import CityOut, RouteRequest, RouteResult
from routefinder.services.dataset import build_default_graph
from routefinder.services.routing_service import RoutingService

router = APIRouter(
    prefix="/route",
    tags=["routing"],
)

# Single shared instances; the graph is read-only after build
road_graph = build_default_graph()
routing_service = RoutingService(graph=road_graph)


@router.get(
    "/cities",
    response_model=List[CityOut],
    summary="List cities and their outgoing roads",
)
async def list_cities() -> List[CityOut]:
    return routing_service.list_cities()


@router.post(
    "/",
    response_model=RouteResult,
    summary="Compute the shortest route between two cities",
)
async def find_route(request: RouteRequest) -> RouteResult:
    """
    Compute the shortest route between two named cities.

    Always answers 200; `status` tells a found route apart from
    "no_route" and "invalid_city".
    """
    return routing_service.find_route(
        request.start,
        request.end,
        include_time=request.include_time,
    )
