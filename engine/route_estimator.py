"""
Route distance, duration and fare estimation.

Tiers are tried in order; the first one that returns an estimate wins:
  1. known_route_tier  hand-curated city pairs
  2. ai_tier           Groq estimate for trips over AI_MIN_DISTANCE_KM
  3. formula_tier      per-mode speed and per-km rates, always succeeds

Tiers 2 and 3 work from road_distance_km(): haversine distance between the
coordinates times ROAD_DISTANCE_FACTOR, or DEFAULT_DISTANCE_KM without them.
"""

import logging
import math
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

from data.constants import (
    AI_MIN_DISTANCE_KM,
    DEFAULT_DISTANCE_KM,
    DEFAULT_PROFILE_MODE,
    KNOWN_ROUTES,
    MODE_PROFILES,
    ROAD_DISTANCE_FACTOR,
)
from engine.ai_client import GroqTravelClient
from engine.models import (
    EstimateSource,
    KnownRoute,
    ModeProfile,
    RouteEstimate,
    RouteQuery,
)
from utilities.helpers import haversine_km, round_half_up, route_key

Tier = Callable[[RouteQuery], Optional[RouteEstimate]]


def index_routes(routes: Iterable[KnownRoute]) -> Mapping[FrozenSet[str], KnownRoute]:
    """Read-only table keyed by the unordered, normalised city pair."""
    return MappingProxyType({route_key(r.origin, r.destination): r for r in routes})


def road_distance_km(query: RouteQuery) -> float:
    origin, destination = query.origin_coordinates, query.destination_coordinates
    if origin is None or destination is None:
        return DEFAULT_DISTANCE_KM
    straight = haversine_km(origin.lat, origin.lon, destination.lat, destination.lon)
    return round_half_up(straight * ROAD_DISTANCE_FACTOR)


def formula_estimate(
    distance_km: float,
    mode: str,
    profiles: Mapping[str, ModeProfile] = MODE_PROFILES,
) -> Tuple[float, int, int]:
    """(duration_hours, min_price, max_price); unknown modes use the car profile."""
    profile = profiles.get((mode or "").strip().lower()) or profiles[DEFAULT_PROFILE_MODE]
    rate_min, rate_max = profile.price_rate_per_km
    duration = distance_km / profile.average_speed_kmph
    return duration, round_half_up(distance_km * rate_min), round_half_up(distance_km * rate_max)


def _fare_from_ai(data: Optional[Dict[str, Any]]) -> Optional[Tuple[float, int, int]]:
    if not data:
        return None
    try:
        duration = float(data["duration"])
        min_price = float(data["minPrice"])
        max_price = float(data["maxPrice"])
    except (KeyError, TypeError, ValueError, OverflowError) as e:
        logging.warning("AI route estimate missing fields: %s (%s)", data, e)
        return None
    values = (duration, min_price, max_price)
    if not all(math.isfinite(v) and v >= 0 for v in values):
        logging.warning("AI route estimate has non-finite or negative values: %s", data)
        return None
    if duration == 0 or min_price > max_price:
        logging.warning("AI route estimate is inconsistent: %s", data)
        return None
    return duration, round_half_up(min_price), round_half_up(max_price)


class RouteEstimator:
    def __init__(
        self,
        ai_client: Optional[GroqTravelClient] = None,
        known_routes: Iterable[KnownRoute] = KNOWN_ROUTES,
        mode_profiles: Mapping[str, ModeProfile] = MODE_PROFILES,
    ):
        self.ai_client = ai_client
        self.known_routes = index_routes(known_routes)
        self.mode_profiles = mode_profiles

    @property
    def tiers(self) -> Tuple[Tier, ...]:
        return (self.known_route_tier, self.ai_tier)

    def estimate(self, query: RouteQuery) -> RouteEstimate:
        for tier in self.tiers:
            result = tier(query)
            if result is not None:
                return result
        return self.formula_tier(query)

    def known_route_tier(self, query: RouteQuery) -> Optional[RouteEstimate]:
        route = self.known_routes.get(route_key(query.origin_city, query.destination_city))
        if route is None:
            return None
        fare = route.fare_for(query.mode_key)
        if fare is None:
            logging.info("%s not offered on %s-%s; skipping known route.",
                         query.mode, route.origin, route.destination)
            return None
        logging.info("Using known route %s-%s (%s)", route.origin, route.destination, query.mode)
        return RouteEstimate(
            distance_km=route.distance_km,
            duration_hours=fare.duration_hours,
            min_price=fare.min_price,
            max_price=fare.max_price,
            mode=query.mode,
            source=EstimateSource.CACHED_DATA,
        )

    def ai_tier(self, query: RouteQuery) -> Optional[RouteEstimate]:
        if self.ai_client is None:
            return None
        distance = road_distance_km(query)
        if distance <= AI_MIN_DISTANCE_KM:
            return None

        try:
            data = self.ai_client.estimate_route(
                query.mode, query.origin_city, query.destination_city, distance,
            )
            fare = _fare_from_ai(data)
        except Exception as e:
            logging.warning("AI estimation failed, using fallback: %s", e)
            return None

        if fare is None:
            return None
        duration, min_price, max_price = fare
        logging.info("AI estimate for %s → %s (%s, %s km)",
                     query.origin_city, query.destination_city, query.mode, distance)
        return RouteEstimate(
            distance_km=distance,
            duration_hours=duration,
            min_price=min_price,
            max_price=max_price,
            mode=query.mode,
            source=EstimateSource.AI_ESTIMATE,
        )

    def formula_tier(self, query: RouteQuery) -> RouteEstimate:
        distance = road_distance_km(query)
        duration, min_price, max_price = formula_estimate(distance, query.mode, self.mode_profiles)
        logging.info("Formula estimate for %s → %s (%s, %s km)",
                     query.origin_city, query.destination_city, query.mode, distance)
        return RouteEstimate(
            distance_km=distance,
            duration_hours=duration,
            min_price=min_price,
            max_price=max_price,
            mode=query.mode,
            source=EstimateSource.FORMULA_ESTIMATE,
        )
