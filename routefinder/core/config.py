# routefinder/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables (.env file).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    APP_NAME: str = "Route Finder API"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Canvas projection of the bundled city dataset (lat/lon -> planar x/y)
    MAP_CENTER_LAT: float = 42.7
    MAP_CENTER_LON: float = 23.32
    MAP_SCALE_FACTOR: float = 120.0
    CANVAS_CENTER_X: float = 0.0
    CANVAS_CENTER_Y: float = 300.0

    # Route result presentation
    DISTANCE_DECIMALS: int = 2
    INCLUDE_TRAVEL_TIME: bool = True


settings = Settings()
