"""General utility functions for the route and trip planners."""

import json
import logging
import math
import re
from typing import Any, Dict, FrozenSet, Optional

from data.constants import CITY_ALIASES


def normalize_city_name(city: str) -> str:
    """Convert 'Bengaluru, Karnataka' → 'bangalore'. Helps with dict lookups."""
    if not city:
        return ""
    main = city.split(",")[0].strip().lower()
    return CITY_ALIASES.get(main, main)


def route_key(origin: str, destination: str) -> FrozenSet[str]:
    """Unordered city-pair key, so A→B and B→A hit the same entry."""
    return frozenset((normalize_city_name(origin), normalize_city_name(destination)))


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (2.5 → 3, not 2)."""
    return int(math.floor(value + 0.5))


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate great-circle distance between two points (km)."""
    R = 6371.0
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(dlon / 2) ** 2
    )
    return 2 * R * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def format_duration(hours: float) -> str:
    """3.25 → '3h 15m', 0.5 → '30 min'."""
    if hours < 1:
        return f"{round_half_up(hours * 60)} min"
    h = int(hours)
    m = round_half_up((hours - h) * 60)
    if m == 60:
        h, m = h + 1, 0
    return f"{h}h {m}m" if m else f"{h}h"


def extract_json_object(text: str) -> Optional[Dict[str, Any]]:
    """
    Pull the first balanced {...} block out of raw LLM output and parse it.
    - Braces inside JSON strings are ignored
    - Returns None (and logs) when there is no block or it does not parse
    """
    if not text:
        return None

    start = text.find("{")
    if start == -1:
        logging.warning("No JSON object in LLM output: %.200s", text)
        return None

    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                block = text[start:i + 1]
                try:
                    data = json.loads(block)
                except ValueError as e:
                    logging.warning("Failed to parse LLM JSON: %s\nRaw: %.200s", e, block)
                    return None
                return data if isinstance(data, dict) else None

    logging.warning("Unbalanced JSON object in LLM output: %.200s", text)
    return None


_FENCE_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```")


def json_from_fenced_text(text: str) -> Optional[Any]:
    """
    Try to extract JSON from raw LLM output.
    - Uses the body of the first ``` fence if present (with or without a json tag)
    - Trims whitespace
    - Logs on failure instead of crashing
    """
    match = _FENCE_RE.search(text)
    body = match.group(1) if match else text
    body = body.strip()

    try:
        return json.loads(body)
    except ValueError as e:
        logging.warning("Failed to parse LLM JSON: %s\nRaw: %.200s", e, body)
        return None
