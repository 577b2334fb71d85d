# place_search/lookup.py
import argparse
import asyncio
import logging
from typing import List, Optional

import requests

from .address import AddressSummary
from .client import PlaceSearchClient
from .config import Settings, load_settings
from .errors import DecodingError, PlaceSearchError
from .http_client import HttpClient
from .models import USE_SYSTEM_LOCALE, AutocompletePrediction, PlaceDetailsFields, ResultsLanguage


def format_suggestions(predictions: List[AutocompletePrediction]) -> List[str]:
    lines = []
    for i, p in enumerate(predictions, start=1):
        text = p.structured_formatting
        line = f"{i}. {text.main_text}"
        if text.secondary_text:
            line += f", {text.secondary_text}"
        if p.distance_meters is not None:
            line += f" ({p.distance_meters / 1000:.1f} km)"
        lines.append(line)
    return lines


def choose(predictions: List[AutocompletePrediction], answer: str) -> Optional[AutocompletePrediction]:
    """1-based pick from the printed list; anything else means no choice."""
    answer = answer.strip()
    if not answer.isdigit():
        return None
    idx = int(answer)
    if 1 <= idx <= len(predictions):
        return predictions[idx - 1]
    return None


async def lookup(client: PlaceSearchClient, settings: Settings) -> Optional[AddressSummary]:
    language = ResultsLanguage(settings.default_language) if settings.default_language else USE_SYSTEM_LOCALE

    text = input("Enter a city/address (example: 'Lewisville, TX'): ").strip()
    if not text:
        return None

    predictions = await client.autocomplete(text, language=language)
    predictions = predictions[: settings.suggestion_limit]
    if not predictions:
        print("No suggestions.")
        return None

    print()
    for line in format_suggestions(predictions):
        print(line)

    picked = choose(predictions, input("\nSelect the best match (number): "))
    if picked is None:
        print("Nothing selected.")
        return None

    details = await client.fetch_place_details(
        picked.place_id,
        fields=[PlaceDetailsFields.ADDRESS_COMPONENT, PlaceDetailsFields.GEOMETRY],
        language=language,
    )
    return AddressSummary.from_details(details)


def run(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Resolve an address with Places Autocomplete + Details.")
    parser.add_argument("-v", "--verbose", action="store_true", help="log requests")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings()
    http = HttpClient(timeout_sec=settings.timeout_sec)
    client = PlaceSearchClient(settings.api_key, http=http, base_url=settings.base_url)

    print("\n=== Place Search ===\n")
    try:
        summary = asyncio.run(lookup(client, settings))
    except (PlaceSearchError, DecodingError, requests.RequestException) as e:
        print(f"Lookup failed: {e}")
        return 1
    finally:
        http.close()

    if summary is None:
        return 1

    print(f"\nResolved: {summary.label()}")
    print(f"Lat/Lon: {summary.lat:.5f}, {summary.lng:.5f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(run())
