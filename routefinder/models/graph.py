# routefinder/models/graph.py

from pydantic import BaseModel, ConfigDict, Field, field_validator


class City(BaseModel):
    """
    A graph node: a uniquely named city with a planar (already projected)
    position. Two cities are the same city when their names match.
    """
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    name: str
    x: float
    y: float

    @field_validator("name")
    @classmethod
    def _non_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("city name must not be empty")
        return v


class Road(BaseModel):
    """
    A one-directional road from `origin` to `destination`.

    A two-way street is two Road entries (A -> B and B -> A); nothing keeps
    their values in sync.

    - distance:  path-selection weight (km in the bundled dataset)
    - max_speed: speed limit, used only for travel time (km/h)
    """
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    origin: str
    destination: str
    distance: float = Field(ge=0)
    max_speed: float = Field(gt=0)

    @classmethod
    def from_tuple(cls, value: "Road | tuple") -> "Road":
        """
        Accept either a Road or an (origin, destination, distance, max_speed)
        tuple.
        """
        if isinstance(value, Road):
            return value
        origin, destination, distance, max_speed = value
        return cls(
            origin=origin,
            destination=destination,
            distance=distance,
            max_speed=max_speed,
        )
