import logging
from typing import Any, Dict, List, Optional

import groq

from engine.ai_client import GroqTravelClient
from utilities.helpers import json_from_fenced_text


class ItineraryError(Exception):
    """Itinerary generation failed; `status_code` is what the API should answer with."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def generate_itinerary(
    client: Optional[GroqTravelClient],
    destination: str,
    duration: int,
    budget: Optional[str] = None,
    interests: Optional[List[str]] = None,
    travel_style: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Ask the LLM for a day-by-day plan.

    Returns the parsed itinerary, or {"raw": <text>, "parseError": True}
    when the model did not return valid JSON.
    """
    if client is None:
        raise ItineraryError("GROQ_API_KEY is not configured")

    logging.info("Generating itinerary for %s (%s days, budget=%s, style=%s, interests=%s)",
                 destination, duration, budget, travel_style, interests)

    try:
        content = client.generate_itinerary(
            destination,
            duration,
            budget=budget,
            travel_style=travel_style,
            interests=interests,
        )
    except groq.RateLimitError:
        raise ItineraryError("Rate limit exceeded. Please try again later.", 429)
    except groq.APIStatusError as e:
        if e.status_code == 402:
            raise ItineraryError("AI credits exhausted. Please add credits.", 402)
        logging.warning("AI gateway error: %s %s", e.status_code, e.message)
        raise ItineraryError(f"AI gateway error: {e.status_code}")
    except groq.APIError as e:
        logging.warning("AI request failed: %s", e)
        raise ItineraryError(str(e))

    if not content:
        raise ItineraryError("No content in AI response")

    itinerary = json_from_fenced_text(content)
    if itinerary is None:
        return {"raw": content, "parseError": True}

    logging.info("Successfully generated itinerary for %s", destination)
    return itinerary
