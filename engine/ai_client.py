import logging
from typing import Any, Dict, List, Optional

from groq import Groq

from config.settings import Settings
from data.prompts import (
    ITINERARY_SYSTEM_PROMPT,
    ROUTE_SYSTEM_PROMPT,
    itinerary_user_prompt,
    route_user_prompt,
)
from utilities.helpers import extract_json_object


class GroqTravelClient:
    """
    Thin wrapper around the Groq chat-completion API.

    - One request per call: SDK retries are disabled
    - Every call is bounded by `timeout` seconds
    - Errors from the SDK propagate; callers decide how to degrade
    """

    def __init__(
        self,
        api_key: str,
        route_model: str = Settings.route_model,
        itinerary_model: str = Settings.itinerary_model,
        timeout: float = Settings.ai_timeout_sec,
        client: Optional[Any] = None,
    ):
        self.route_model = route_model
        self.itinerary_model = itinerary_model
        self._client = client or Groq(api_key=api_key, timeout=timeout, max_retries=0)

    @classmethod
    def from_settings(cls, settings: Settings) -> Optional["GroqTravelClient"]:
        if not settings.ai_enabled:
            logging.warning("GROQ_API_KEY not set; AI estimates and itineraries are disabled.")
            return None
        logging.info("Groq LLM available. Route estimates & itineraries will use %s / %s.",
                     settings.route_model, settings.itinerary_model)
        return cls(
            api_key=settings.groq_api_key,
            route_model=settings.route_model,
            itinerary_model=settings.itinerary_model,
            timeout=settings.ai_timeout_sec,
        )

    def complete(self, model: str, messages: List[Dict[str, str]], **kwargs: Any) -> str:
        resp = self._client.chat.completions.create(model=model, messages=messages, **kwargs)
        if not resp.choices:
            return ""
        return resp.choices[0].message.content or ""

    def estimate_route(
        self,
        mode: str,
        origin: str,
        destination: str,
        distance_km: float,
    ) -> Optional[Dict[str, Any]]:
        """Ask for {duration, minPrice, maxPrice}; None when the reply has no JSON object."""
        raw_text = self.complete(
            self.route_model,
            [
                {"role": "system", "content": ROUTE_SYSTEM_PROMPT},
                {"role": "user", "content": route_user_prompt(mode, origin, destination, distance_km)},
            ],
            temperature=0.2,
        )
        return extract_json_object(raw_text)

    def generate_itinerary(
        self,
        destination: str,
        duration: int,
        budget: Optional[str] = None,
        travel_style: Optional[str] = None,
        interests: Optional[List[str]] = None,
    ) -> str:
        return self.complete(
            self.itinerary_model,
            [
                {"role": "system", "content": ITINERARY_SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": itinerary_user_prompt(destination, duration, budget, travel_style, interests),
                },
            ],
            temperature=0.7,
        )
