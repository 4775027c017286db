# routefinder/api/v1/routes_health.py
from fastapi import APIRouter

from routefinder.api.v1.routes_routing import road_graph
from routefinder.core.config import settings

router = APIRouter(
    prefix="/health",
    tags=["health"],
)


@router.get("/", summary="Health check")
async def health_check():
    """
    Health check: the API is up and the road graph is loaded.
    """
    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "cities": len(road_graph),
        "skipped_roads": len(road_graph.skipped_roads),
    }
