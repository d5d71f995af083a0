import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# NOTE:
#   - For production, do NOT hardcode keys here.
#   - Instead set environment variables (or a .env file) before running:
#       export GROQ_API_KEY="..."
#       export API_BASE_URL="http://localhost:8000"


@dataclass(frozen=True)
class Settings:
    groq_api_key: Optional[str] = None
    route_model: str = "llama-3.1-8b-instant"
    itinerary_model: str = "llama-3.3-70b-versatile"
    ai_timeout_sec: float = 15.0
    log_level: str = "INFO"
    api_base_url: str = "http://localhost:8000"

    @property
    def ai_enabled(self) -> bool:
        return bool(self.groq_api_key)

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        return cls(
            groq_api_key=(os.getenv("GROQ_API_KEY") or "").strip() or None,
            route_model=os.getenv("GROQ_ROUTE_MODEL", cls.route_model),
            itinerary_model=os.getenv("GROQ_ITINERARY_MODEL", cls.itinerary_model),
            ai_timeout_sec=float(os.getenv("AI_TIMEOUT_SEC", str(cls.ai_timeout_sec))),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
            api_base_url=os.getenv("API_BASE_URL", cls.api_base_url).rstrip("/"),
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="[%(levelname)s] %(message)s",
    )
