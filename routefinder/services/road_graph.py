# routefinder/services/road_graph.py
from typing import Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

import networkx as nx

from routefinder.core.errors import CityNotFoundError, GraphBuildError
from routefinder.core.logger import logger
from routefinder.models.graph import City, Road

CityInput = Union[Mapping[str, Tuple[float, float]], Sequence[Tuple[str, float, float]]]
RoadInput = Union[Road, Tuple[str, str, float, float]]


class RoadGraph:
    # Read-only directed road network keyed by city name.

    def __init__(self, graph: nx.MultiDiGraph, skipped_roads: Optional[List[Road]] = None) -> None:
        # Underlying networkx graph: nodes carry x/y, edges carry distance/max_speed
        self.graph = graph
        # Road tuples dropped at build time because a city name did not resolve
        self.skipped_roads: List[Road] = list(skipped_roads or [])

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #

    @classmethod
    def build(cls, cities: CityInput, roads: Iterable[RoadInput]) -> "RoadGraph":
        """
        Build a graph from named positions and directed road tuples.

        `cities` is either a mapping name -> (x, y) or a sequence of
        (name, x, y) triples; a repeated name raises GraphBuildError.

        Each road is a Road or an (origin, destination, distance, max_speed)
        tuple. Roads naming an unknown city are skipped and recorded on
        `skipped_roads`; invalid road values raise GraphBuildError.
        """
        G = nx.MultiDiGraph()

        for city in cls._parse_cities(cities):
            if city.name in G:
                raise GraphBuildError(f"Duplicate city name: {city.name!r}")
            G.add_node(city.name, x=city.x, y=city.y)

        skipped: List[Road] = []
        for order, raw in enumerate(roads):
            try:
                road = Road.from_tuple(raw)
            except (ValueError, TypeError) as exc:
                raise GraphBuildError(f"Invalid road {raw!r}: {exc}") from exc

            if road.origin not in G or road.destination not in G:
                logger.warning(
                    "Skipping road {} -> {}: unknown city name",
                    road.origin,
                    road.destination,
                )
                skipped.append(road)
                continue

            G.add_edge(
                road.origin,
                road.destination,
                distance=float(road.distance),
                max_speed=float(road.max_speed),
                order=order,
            )

        logger.info(
            f"Road graph ready: {G.number_of_nodes()} cities, "
            f"{G.number_of_edges()} roads, {len(skipped)} skipped"
        )
        # Read-only from here on: add_edge/remove_node raise NetworkXError
        return cls(nx.freeze(G), skipped)

    @staticmethod
    def _parse_cities(cities: CityInput) -> Iterator[City]:
        items = cities.items() if isinstance(cities, Mapping) else cities
        for item in items:
            try:
                if isinstance(cities, Mapping):
                    name, (x, y) = item
                else:
                    name, x, y = item
                yield City(name=name, x=x, y=y)
            except (ValueError, TypeError) as exc:
                raise GraphBuildError(f"Invalid city {item!r}: {exc}") from exc

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def __len__(self) -> int:
        return self.graph.number_of_nodes()

    def __contains__(self, name: object) -> bool:
        return name in self.graph

    def has_city(self, name: str) -> bool:
        return name in self.graph

    def city(self, name: str) -> City:
        if name not in self.graph:
            raise CityNotFoundError(name)
        data = self.graph.nodes[name]
        return City(name=name, x=data["x"], y=data["y"])

    def city_names(self) -> List[str]:
        """
        City names in construction order. The shortest-path search scans
        cities in this order, which fixes its tie-break.
        """
        return list(self.graph.nodes)

    def cities(self) -> List[City]:
        return [self.city(name) for name in self.graph.nodes]

    def roads_from(self, name: str) -> List[Road]:
        """
        Outgoing roads of a city, in the order they were passed to build().
        """
        if name not in self.graph:
            raise CityNotFoundError(name)
        return [
            Road(
                origin=u,
                destination=v,
                distance=data["distance"],
                max_speed=data["max_speed"],
            )
            for u, v, data in sorted(
                self.graph.out_edges(name, data=True),
                key=lambda edge: edge[2]["order"],
            )
        ]

    def find_road(self, origin: str, destination: str) -> Optional[Road]:
        """
        First road from origin to destination, or None.
        """
        edge_dict = self.graph.get_edge_data(origin, destination, default=None)
        if not edge_dict:
            return None

        # MultiDiGraph: pick the first edge key
        first_key = next(iter(edge_dict))
        data = edge_dict[first_key]
        return Road(
            origin=origin,
            destination=destination,
            distance=data["distance"],
            max_speed=data["max_speed"],
        )

    def roads(self) -> List[Road]:
        roads: List[Road] = []
        for name in self.graph.nodes:
            roads.extend(self.roads_from(name))
        return roads
