# routefinder/main.py

from fastapi import FastAPI

from routefinder.api.v1 import routes_health, routes_routing
from routefinder.core.config import settings
from routefinder.core.logger import logger


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Shortest routes between the cities of a small fixed road network.",
    )

    # Routers
    app.include_router(routes_health.router, prefix="", tags=["health"])
    app.include_router(routes_routing.router, prefix="", tags=["routing"])

    logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} ({settings.ENVIRONMENT}) ready")
    return app


app = create_app()
