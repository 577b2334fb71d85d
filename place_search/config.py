# place_search/config.py
from dataclasses import dataclass
from typing import Optional
import os

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    api_key: str
    timeout_sec: int = 20

    # Google Places web service root; endpoints are "<base>/<name>/json"
    base_url: str = "https://maps.googleapis.com/maps/api/place"

    # None means "use the system locale"
    default_language: Optional[str] = None

    # Console lookup
    suggestion_limit: int = 6


def load_settings() -> Settings:
    # Local .env is optional; real environment variables win
    load_dotenv()

    key = os.getenv("GOOGLE_MAPS_API_KEY", "").strip()
    if not key:
        raise ValueError(
            "Missing GOOGLE_MAPS_API_KEY.\n"
            "Add it to a .env file locally or export it in your shell.\n"
            "Example (local): export GOOGLE_MAPS_API_KEY='YOUR_KEY'"
        )

    timeout = os.getenv("PLACE_SEARCH_TIMEOUT_SEC", "").strip()
    language = os.getenv("PLACE_SEARCH_LANGUAGE", "").strip()

    return Settings(
        api_key=key,
        timeout_sec=int(timeout) if timeout else Settings.timeout_sec,
        default_language=language or None,
    )
