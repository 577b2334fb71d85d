import json
import sys
from pathlib import Path
from typing import List, Optional

import pytest
import requests

# Ensure the repo root is on sys.path for direct pytest runs
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from place_search.client import PlaceSearchClient  # noqa: E402


def make_response(status_code: int = 200, payload=None, text: Optional[str] = None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    body = text if text is not None else json.dumps(payload or {})
    resp._content = body.encode("utf-8")
    resp.encoding = "utf-8"
    return resp


class DummyHttp:
    def __init__(self):
        self.urls: List[str] = []
        self.response = make_response(payload={"status": "OK", "predictions": []})

    def get(self, url):
        self.urls.append(url)
        return self.response


class DummyLocale:
    def __init__(self, language: Optional[str] = "en", region: Optional[str] = "US"):
        self.language = language
        self.region = region

    def language_code(self):
        return self.language

    def region_code(self):
        return self.region


@pytest.fixture
def http():
    return DummyHttp()


@pytest.fixture
def system_locale():
    return DummyLocale()


@pytest.fixture
def client(http, system_locale):
    return PlaceSearchClient("test-key", http=http, system_locale=system_locale)


@pytest.fixture
def autocomplete_payload():
    return {
        "status": "OK",
        "predictions": [
            {
                "description": "Plano, TX, USA",
                "distance_meters": 1520.5,
                "place_id": "ChIJ-plano",
                "structured_formatting": {"main_text": "Plano", "secondary_text": "TX, USA"},
                "types": ["locality", "political"],
            },
            {
                "description": "Plano Parkway, Plano, TX, USA",
                "place_id": "ChIJ-parkway",
                "structured_formatting": {"main_text": "Plano Parkway", "secondary_text": "Plano, TX, USA"},
            },
        ],
    }


@pytest.fixture
def details_payload():
    return {
        "status": "OK",
        "result": {
            "address_components": [
                {"long_name": "Plano", "short_name": "Plano", "types": ["locality", "political"]},
                {"long_name": "Collin County", "short_name": "Collin County", "types": ["administrative_area_level_2", "political"]},
                {"long_name": "Texas", "short_name": "TX", "types": ["administrative_area_level_1", "political"]},
                {"long_name": "United States", "short_name": "US", "types": ["country", "political"]},
                {"long_name": "75074", "short_name": "75074", "types": ["postal_code"]},
            ],
            "formatted_address": "Plano, TX 75074, USA",
            "geometry": {"location": {"lat": 33.0198431, "lng": -96.6988856}},
        },
    }
