# tests/conftest.py
import os
import sys

import pytest

# Add the project root directory to sys.path so that "import routefinder" works
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from routefinder.core.config import Settings  # noqa: E402
from routefinder.services.dataset import build_default_graph  # noqa: E402
from routefinder.services.road_graph import RoadGraph  # noqa: E402


@pytest.fixture
def dataset_graph() -> RoadGraph:
    """
    The bundled Bulgarian city network with default projection settings.
    """
    return build_default_graph(Settings())


@pytest.fixture
def small_graph() -> RoadGraph:
    """
    A -> B -> C chain plus a dearer direct A -> C road and a one-way C -> A.
    D is isolated.
    """
    return RoadGraph.build(
        {"A": (0.0, 0.0), "B": (3.0, 4.0), "C": (3.0, 10.0), "D": (50.0, 50.0)},
        [
            ("A", "B", 2, 50),
            ("B", "C", 3, 60),
            ("A", "C", 10, 100),
            ("C", "A", 1, 100),
        ],
    )
