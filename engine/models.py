"""Value objects shared by the route estimator, the tables and the API."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional, Tuple


class TravelMode(str, Enum):
    TRAIN = "train"
    FLIGHT = "flight"
    BUS = "bus"
    CAR = "car"
    BIKE = "bike"
    TAXI = "taxi"
    WALKING = "walking"


class EstimateSource(str, Enum):
    CACHED_DATA = "cached_data"
    AI_ESTIMATE = "ai_estimate"
    FORMULA_ESTIMATE = "formula_estimate"


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lon: float


@dataclass(frozen=True)
class RouteQuery:
    """One estimation request. Mode is free text so unknown modes survive."""
    origin_city: str
    destination_city: str
    mode: str = TravelMode.CAR.value
    origin_coordinates: Optional[Coordinates] = None
    destination_coordinates: Optional[Coordinates] = None

    @property
    def mode_key(self) -> str:
        return (self.mode or "").strip().lower()


@dataclass(frozen=True)
class RouteEstimate:
    distance_km: float
    duration_hours: float
    min_price: float
    max_price: float
    mode: str
    source: EstimateSource

    @property
    def is_estimate(self) -> bool:
        return self.source is not EstimateSource.CACHED_DATA


@dataclass(frozen=True)
class ModeFare:
    duration_hours: float
    min_price: float
    max_price: float


@dataclass(frozen=True)
class KnownRoute:
    """
    A hand-curated city pair.

    Modes the route does not offer are simply missing from `fares`.
    """
    origin: str
    destination: str
    distance_km: float
    fares: Mapping[str, ModeFare] = field(default_factory=dict)

    def fare_for(self, mode: str) -> Optional[ModeFare]:
        fare = self.fares.get(mode)
        if fare is None or fare.duration_hours <= 0:
            return None
        return fare


@dataclass(frozen=True)
class ModeProfile:
    average_speed_kmph: float
    price_rate_per_km: Tuple[float, float]
