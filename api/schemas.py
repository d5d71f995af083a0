from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from engine.models import Coordinates, EstimateSource, RouteEstimate, RouteQuery


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LatLng(CamelModel):
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)

    def to_coordinates(self) -> Coordinates:
        return Coordinates(lat=self.lat, lon=self.lng)


class RouteRequest(CamelModel):
    from_city: str
    to_city: str
    from_coords: Optional[LatLng] = None
    to_coords: Optional[LatLng] = None
    mode: str

    def to_query(self) -> RouteQuery:
        return RouteQuery(
            origin_city=self.from_city,
            destination_city=self.to_city,
            mode=self.mode,
            origin_coordinates=self.from_coords.to_coordinates() if self.from_coords else None,
            destination_coordinates=self.to_coords.to_coordinates() if self.to_coords else None,
        )


class RouteResponse(CamelModel):
    distance: Union[int, float]
    duration: Union[int, float]
    min_price: Union[int, float]
    max_price: Union[int, float]
    mode: str
    from_city: str
    to_city: str
    is_estimate: bool
    source: EstimateSource

    @classmethod
    def from_estimate(cls, estimate: RouteEstimate, query: RouteQuery) -> "RouteResponse":
        return cls(
            distance=estimate.distance_km,
            duration=estimate.duration_hours,
            min_price=estimate.min_price,
            max_price=estimate.max_price,
            mode=estimate.mode,
            from_city=query.origin_city,
            to_city=query.destination_city,
            is_estimate=estimate.is_estimate,
            source=estimate.source,
        )


class ItineraryRequest(CamelModel):
    destination: str = Field(min_length=1)
    duration: int = Field(ge=1, le=30)
    budget: Optional[str] = None
    interests: List[str] = Field(default_factory=list)
    travel_style: Optional[str] = None


class ItineraryResponse(BaseModel):
    itinerary: Any


class HealthResponse(CamelModel):
    status: str = "ok"
    ai_enabled: bool
