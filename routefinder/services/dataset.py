# routefinder/services/dataset.py
from typing import Dict, List, Optional, Tuple

from routefinder.core.config import Settings, settings as default_settings
from routefinder.services.road_graph import RoadGraph

# City -> (latitude, longitude) in degrees
CITY_COORDINATES: Dict[str, Tuple[float, float]] = {
    "Varna": (43.2167, 27.9167),
    "Burgas": (42.5083, 27.4678),
    "Dobrich": (43.5667, 27.8333),
    "Silistra": (44.1167, 27.2667),
    "Razgrad": (43.5333, 26.5167),
    "Tyrgowishte": (43.2506, 26.5725),
    "Shumen": (43.2833, 26.9333),
    "Veliko Tarnovo": (43.083, 25.65),
    "Sliven": (42.6833, 26.3333),
    "Yambol": (42.4837, 26.5107),
    "Kazanlak": (42.617, 25.4),
    "Stara Zagora": (42.433, 25.65),
}

DEFAULT_MAX_SPEED_KMH = 100.0

# Two-way roads: (city, city, distance km). Each becomes a road in both directions.
TWO_WAY_ROADS: List[Tuple[str, str, float]] = [
    ("Varna", "Burgas", 87),
    ("Dobrich", "Varna", 40),
    ("Varna", "Razgrad", 130),
    ("Razgrad", "Silistra", 120),
    ("Dobrich", "Silistra", 76),
    ("Dobrich", "Razgrad", 168),
    ("Shumen", "Razgrad", 50),
    ("Shumen", "Tyrgowishte", 41),
    ("Shumen", "Burgas", 96),
    ("Tyrgowishte", "Razgrad", 32),
    ("Shumen", "Varna", 90),
    ("Shumen", "Dobrich", 95),
    ("Shumen", "Sliven", 82),
    ("Burgas", "Sliven", 115),
    ("Yambol", "Sliven", 28),
    ("Yambol", "Burgas", 79),
    ("Veliko Tarnovo", "Razgrad", 79),
    ("Veliko Tarnovo", "Sliven", 79),
    ("Tyrgowishte", "Sliven", 112),
    ("Veliko Tarnovo", "Tyrgowishte", 112),
    ("Stara Zagora", "Sliven", 63),
    ("Stara Zagora", "Yambol", 63),
    ("Stara Zagora", "Kazanlak", 33),
    ("Veliko Tarnovo", "Kazanlak", 33),
    ("Sliven", "Kazanlak", 84),
]


def directed_roads(
    two_way: List[Tuple[str, str, float]] = TWO_WAY_ROADS,
    max_speed: float = DEFAULT_MAX_SPEED_KMH,
) -> List[Tuple[str, str, float, float]]:
    """
    Expand two-way roads into (origin, destination, distance, max_speed)
    tuples, forward direction first.
    """
    roads: List[Tuple[str, str, float, float]] = []
    for a, b, distance in two_way:
        roads.append((a, b, float(distance), max_speed))
        roads.append((b, a, float(distance), max_speed))
    return roads


def project_to_canvas(
    lat: float,
    lon: float,
    scale_factor: float,
    center_lat: float,
    center_lon: float,
    canvas_center_x: float = 0.0,
    canvas_center_y: float = 0.0,
) -> Tuple[float, float]:
    """
    Flat (equirectangular) projection of lat/lon onto canvas coordinates.

    Degrees are scaled linearly around the map centre; canvas y grows
    southwards. Good enough for drawing a region a few hundred km across.
    """
    relative_x = lon - center_lon
    relative_y = center_lat - lat

    x = canvas_center_x + relative_x * scale_factor
    y = canvas_center_y + relative_y * scale_factor
    return x, y


def projected_cities(
    config: Settings,
    coordinates: Dict[str, Tuple[float, float]] = CITY_COORDINATES,
) -> Dict[str, Tuple[float, float]]:
    return {
        name: project_to_canvas(
            lat,
            lon,
            scale_factor=config.MAP_SCALE_FACTOR,
            center_lat=config.MAP_CENTER_LAT,
            center_lon=config.MAP_CENTER_LON,
            canvas_center_x=config.CANVAS_CENTER_X,
            canvas_center_y=config.CANVAS_CENTER_Y,
        )
        for name, (lat, lon) in coordinates.items()
    }


def build_default_graph(config: Optional[Settings] = None) -> RoadGraph:
    """
    Road graph of the bundled city dataset, projected with the configured
    map centre and scale.
    """
    config = config or default_settings
    return RoadGraph.build(projected_cities(config), directed_roads())
