from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

from engine.models import KnownRoute, ModeFare, ModeProfile, TravelMode

# Distance & fare assumptions

ROAD_DISTANCE_FACTOR = 1.3      # roads run ~1.3x the straight line
DEFAULT_DISTANCE_KM = 500       # used when coordinates are missing
AI_MIN_DISTANCE_KM = 100        # shorter trips skip the AI tier
DEFAULT_PROFILE_MODE = TravelMode.CAR.value

MODE_PROFILES: Mapping[str, ModeProfile] = MappingProxyType({
    TravelMode.TRAIN.value: ModeProfile(60, (0.8, 4)),
    TravelMode.FLIGHT.value: ModeProfile(500, (4, 15)),
    TravelMode.BUS.value: ModeProfile(45, (0.7, 2.5)),
    TravelMode.CAR.value: ModeProfile(50, (8, 15)),
    TravelMode.BIKE.value: ModeProfile(40, (3, 5)),
    TravelMode.TAXI.value: ModeProfile(40, (12, 25)),
    TravelMode.WALKING.value: ModeProfile(5, (0, 0)),
})

CITY_ALIASES: Mapping[str, str] = MappingProxyType({
    "bengaluru": "bangalore",
    "bombay": "mumbai",
    "new delhi": "delhi",
    "madras": "chennai",
    "calcutta": "kolkata",
})


def _fares(**modes) -> Mapping[str, ModeFare]:
    return MappingProxyType({mode: ModeFare(*values) for mode, values in modes.items()})


# Known routes (duration hours, min INR, max INR). A missing mode is not offered.

KNOWN_ROUTES: Tuple[KnownRoute, ...] = (
    KnownRoute("Delhi", "Agra", 233, _fares(
        train=(2, 250, 2500), bus=(4, 200, 800), car=(3.5, 2000, 4000),
    )),
    KnownRoute("Delhi", "Jaipur", 280, _fares(
        train=(4.5, 300, 3000), bus=(5.5, 400, 1200), car=(5, 2500, 5000),
        flight=(1, 3000, 8000),
    )),
    KnownRoute("Mumbai", "Pune", 150, _fares(
        train=(3, 150, 800), bus=(3.5, 200, 600), car=(3, 1500, 3000),
    )),
    KnownRoute("Mumbai", "Goa", 590, _fares(
        train=(10, 400, 3500), bus=(12, 600, 1500), car=(9, 5000, 10000),
        flight=(1, 2500, 8000),
    )),
    KnownRoute("Bangalore", "Chennai", 350, _fares(
        train=(5, 300, 2500), bus=(6, 500, 1500), car=(5.5, 3500, 6000),
        flight=(1, 2000, 6000),
    )),
    KnownRoute("Kolkata", "Darjeeling", 615, _fares(
        train=(10, 400, 3000), bus=(14, 500, 1200), car=(12, 6000, 10000),
    )),
)

# State capitals for the route planner pickers

STATE_CAPITALS: List[Dict[str, Any]] = [
    {"state": "Delhi", "capital": "Delhi", "lat": 28.6139, "lon": 77.2090},
    {"state": "Uttar Pradesh", "capital": "Lucknow", "lat": 26.8467, "lon": 80.9462},
    {"state": "Rajasthan", "capital": "Jaipur", "lat": 26.9124, "lon": 75.7873},
    {"state": "Maharashtra", "capital": "Mumbai", "lat": 19.0760, "lon": 72.8777},
    {"state": "Goa", "capital": "Panaji", "lat": 15.4909, "lon": 73.8278},
    {"state": "Karnataka", "capital": "Bangalore", "lat": 12.9716, "lon": 77.5946},
    {"state": "Tamil Nadu", "capital": "Chennai", "lat": 13.0827, "lon": 80.2707},
    {"state": "Kerala", "capital": "Thiruvananthapuram", "lat": 8.5241, "lon": 76.9366},
    {"state": "West Bengal", "capital": "Kolkata", "lat": 22.5726, "lon": 88.3639},
    {"state": "Punjab", "capital": "Chandigarh", "lat": 30.7333, "lon": 76.7794},
    {"state": "Himachal Pradesh", "capital": "Shimla", "lat": 31.1048, "lon": 77.1734},
    {"state": "Telangana", "capital": "Hyderabad", "lat": 17.3850, "lon": 78.4867},
]

TRAVEL_MODES: List[str] = [m.value for m in TravelMode]
