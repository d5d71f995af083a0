import pytest

from data.constants import KNOWN_ROUTES, MODE_PROFILES
from engine.models import (
    Coordinates,
    EstimateSource,
    KnownRoute,
    ModeFare,
    RouteQuery,
)
from engine.route_estimator import RouteEstimator, formula_estimate, road_distance_km
from tests.conftest import chat_response
from utilities.helpers import haversine_km

DELHI = Coordinates(28.6139, 77.2090)
AGRA = Coordinates(27.1767, 78.0081)


@pytest.fixture
def estimator():
    return RouteEstimator()


def test_known_route_hit(estimator):
    result = estimator.estimate(RouteQuery("Delhi", "Agra", "train"))
    assert result.distance_km == 233
    assert result.duration_hours == 2
    assert result.min_price == 250
    assert result.max_price == 2500
    assert result.source is EstimateSource.CACHED_DATA
    assert result.is_estimate is False


@pytest.mark.parametrize("route", KNOWN_ROUTES, ids=lambda r: f"{r.origin}-{r.destination}")
def test_known_routes_are_direction_independent(estimator, route):
    for mode in route.fares:
        forward = estimator.estimate(RouteQuery(route.origin, route.destination, mode))
        backward = estimator.estimate(RouteQuery(route.destination, route.origin, mode))
        assert forward.source is EstimateSource.CACHED_DATA
        assert (forward.distance_km, forward.duration_hours, forward.min_price, forward.max_price) == \
            (backward.distance_km, backward.duration_hours, backward.min_price, backward.max_price)


def test_known_route_lookup_ignores_case_and_aliases(estimator):
    result = estimator.estimate(RouteQuery("bengaluru", "Chennai, Tamil Nadu", "Train"))
    assert result.source is EstimateSource.CACHED_DATA
    assert result.distance_km == 350
    assert result.mode == "Train"


def test_mode_not_offered_falls_through(estimator):
    result = estimator.estimate(RouteQuery("Delhi", "Agra", "flight"))
    assert result.source is EstimateSource.FORMULA_ESTIMATE
    assert result.duration_hours > 0
    assert result.distance_km == 500


def test_mode_not_offered_uses_coordinates(estimator):
    result = estimator.estimate(RouteQuery("Delhi", "Agra", "flight", DELHI, AGRA))
    expected = round(haversine_km(DELHI.lat, DELHI.lon, AGRA.lat, AGRA.lon) * 1.3)
    assert result.distance_km == expected
    assert result.source is EstimateSource.FORMULA_ESTIMATE


def test_zero_duration_entry_is_treated_as_not_offered():
    routes = [KnownRoute("Mumbai", "Pune", 150, {"flight": ModeFare(0, 0, 0)})]
    result = RouteEstimator(known_routes=routes).estimate(RouteQuery("Pune", "Mumbai", "flight"))
    assert result.source is EstimateSource.FORMULA_ESTIMATE


def test_road_distance_applies_road_factor():
    query = RouteQuery("A", "B", "car", Coordinates(0, 0), Coordinates(1, 0))
    # one degree of latitude is ~111.195 km
    assert road_distance_km(query) == 145


def test_road_distance_defaults_without_coordinates():
    assert road_distance_km(RouteQuery("A", "B", "car", Coordinates(0, 0), None)) == 500


def test_formula_estimate():
    assert formula_estimate(500, "train") == (pytest.approx(500 / 60), 400, 2000)
    assert formula_estimate(500, "car") == (10, 4000, 7500)
    assert formula_estimate(10, "walking") == (2, 0, 0)


def test_unknown_mode_uses_car_profile(estimator):
    result = estimator.estimate(RouteQuery("Nowhere", "Elsewhere", "teleport"))
    duration, min_price, max_price = formula_estimate(500, "car")
    assert result.mode == "teleport"
    assert result.source is EstimateSource.FORMULA_ESTIMATE
    assert result.is_estimate is True
    assert (result.duration_hours, result.min_price, result.max_price) == (duration, min_price, max_price)


def test_formula_is_deterministic():
    assert formula_estimate(321, "bus", MODE_PROFILES) == formula_estimate(321, "bus", MODE_PROFILES)


def test_ai_tier_skipped_without_client(estimator):
    assert estimator.ai_client is None
    assert estimator.ai_tier(RouteQuery("Pune", "Nagpur", "bus")) is None


def test_ai_tier_used_for_long_trips(ai_client, groq_sdk):
    groq_sdk.chat.completions.create.return_value = chat_response(
        'Here you go: {"duration": 7.5, "minPrice": 900, "maxPrice": 2400.4} Safe travels!'
    )
    result = RouteEstimator(ai_client=ai_client).estimate(RouteQuery("Pune", "Nagpur", "bus"))

    assert result.source is EstimateSource.AI_ESTIMATE
    assert result.is_estimate is True
    assert result.distance_km == 500
    assert (result.duration_hours, result.min_price, result.max_price) == (7.5, 900, 2400)
    groq_sdk.chat.completions.create.assert_called_once()


def test_ai_tier_not_called_for_short_trips(ai_client, groq_sdk):
    query = RouteQuery("A", "B", "taxi", Coordinates(0, 0), Coordinates(0.5, 0))
    result = RouteEstimator(ai_client=ai_client).estimate(query)

    assert result.source is EstimateSource.FORMULA_ESTIMATE
    groq_sdk.chat.completions.create.assert_not_called()


def test_ai_tier_not_called_for_known_routes(ai_client, groq_sdk):
    result = RouteEstimator(ai_client=ai_client).estimate(RouteQuery("Mumbai", "Goa", "flight"))
    assert result.source is EstimateSource.CACHED_DATA
    groq_sdk.chat.completions.create.assert_not_called()


@pytest.mark.parametrize("content", [
    "I cannot estimate that.",
    '{"duration": "soon", "minPrice": 1, "maxPrice": 2}',
    '{"duration": 4}',
    '{"duration": 4, "minPrice": 100',
    "",
    None,
    '{"duration": 5, "minPrice": Infinity, "maxPrice": 10}',
    '{"duration": NaN, "minPrice": 1, "maxPrice": 2}',
    '{"duration": 5, "minPrice": 1, "maxPrice": 1e999}',
    '{"duration": 5, "minPrice": 1' + "0" * 400 + ', "maxPrice": 2}',
    '{"duration": 5, "minPrice": -100, "maxPrice": 200}',
    '{"duration": 5, "minPrice": 900, "maxPrice": 200}',
    '{"duration": 0, "minPrice": 100, "maxPrice": 200}',
])
def test_bad_ai_reply_matches_formula_result(ai_client, groq_sdk, content):
    groq_sdk.chat.completions.create.return_value = chat_response(content)
    query = RouteQuery("Pune", "Nagpur", "bus")

    with_ai = RouteEstimator(ai_client=ai_client).estimate(query)
    without_ai = RouteEstimator().estimate(query)

    assert with_ai == without_ai
    assert with_ai.source is EstimateSource.FORMULA_ESTIMATE
    groq_sdk.chat.completions.create.assert_called_once()


def test_ai_exception_falls_through(ai_client, groq_sdk):
    groq_sdk.chat.completions.create.side_effect = ConnectionError("gateway down")
    result = RouteEstimator(ai_client=ai_client).estimate(RouteQuery("Pune", "Nagpur", "bus"))

    assert result.source is EstimateSource.FORMULA_ESTIMATE
    groq_sdk.chat.completions.create.assert_called_once()
