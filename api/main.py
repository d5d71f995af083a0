"""
Yatra Planner API.

POST /estimate-route      distance / duration / fare for one travel mode
POST /generate-itinerary  day-by-day plan from the LLM
GET  /health              liveness + whether AI features are on

Run locally:
    uvicorn api.main:app --reload
"""

import logging
from functools import lru_cache
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.schemas import (
    HealthResponse,
    ItineraryRequest,
    ItineraryResponse,
    RouteRequest,
    RouteResponse,
)
from config.settings import Settings, configure_logging
from engine.ai_client import GroqTravelClient
from engine.itinerary import ItineraryError, generate_itinerary
from engine.route_estimator import RouteEstimator

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
}


@lru_cache
def get_settings() -> Settings:
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    return settings


@lru_cache
def get_ai_client() -> Optional[GroqTravelClient]:
    return GroqTravelClient.from_settings(get_settings())


def get_estimator(ai_client: Optional[GroqTravelClient] = Depends(get_ai_client)) -> RouteEstimator:
    return RouteEstimator(ai_client=ai_client)


app = FastAPI(title="Yatra Planner API", version="0.1.0")


@app.middleware("http")
async def cors(request: Request, call_next):
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)
    try:
        response = await call_next(request)
    except Exception as e:
        logging.exception("Unhandled error on %s %s", request.method, request.url.path)
        response = JSONResponse(status_code=500, content={"error": str(e) or e.__class__.__name__})
    for key, value in CORS_HEADERS.items():
        response.headers[key] = value
    return response


@app.exception_handler(RequestValidationError)
async def invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()) if part != 'body') or 'body'}: {err.get('msg')}"
        for err in exc.errors()
    )
    logging.warning("Rejected %s %s: %s", request.method, request.url.path, problems)
    return JSONResponse(status_code=500, content={"error": problems or "Invalid request body"})


@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # the framework reports unreadable bodies as 400
    status = 500 if exc.status_code == 400 else exc.status_code
    return JSONResponse(status_code=status, content={"error": str(exc.detail)})


@app.get("/health", response_model=HealthResponse)
def health(ai_client: Optional[GroqTravelClient] = Depends(get_ai_client)) -> HealthResponse:
    return HealthResponse(ai_enabled=ai_client is not None)


@app.post("/estimate-route", response_model=RouteResponse)
def estimate_route(payload: RouteRequest, estimator: RouteEstimator = Depends(get_estimator)) -> RouteResponse:
    query = payload.to_query()
    logging.info("Route request: %s → %s (%s)", query.origin_city, query.destination_city, query.mode)
    estimate = estimator.estimate(query)
    return RouteResponse.from_estimate(estimate, query)


@app.post("/generate-itinerary", response_model=ItineraryResponse)
def create_itinerary(
    payload: ItineraryRequest,
    ai_client: Optional[GroqTravelClient] = Depends(get_ai_client),
):
    try:
        itinerary = generate_itinerary(
            ai_client,
            destination=payload.destination,
            duration=payload.duration,
            budget=payload.budget,
            interests=payload.interests,
            travel_style=payload.travel_style,
        )
    except ItineraryError as e:
        logging.warning("Error generating itinerary: %s", e.message)
        return JSONResponse(status_code=e.status_code, content={"error": e.message})
    return ItineraryResponse(itinerary=itinerary)
