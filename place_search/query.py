# place_search/query.py
"""Pure request assembly: options -> parameter dict -> query string."""
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence
from urllib.parse import quote

from .models import (
    USE_SYSTEM_LOCALE,
    AutocompleteCountry,
    AutocompleteType,
    Coordinate,
    PlaceDetailsFields,
    ResultsLanguage,
)
from .system_locale import SystemLocale

# Characters left as-is in values other than "input".
# Keeps "country:us|ca", "(cities)" and "lat,lng" readable on the wire.
VALUE_SAFE_CHARS = ",:|()"


@dataclass(frozen=True)
class AutocompleteOptions:
    type: Optional[AutocompleteType] = None
    origin: Optional[Coordinate] = None
    location: Optional[Coordinate] = None
    radius_in_meters: Optional[int] = None
    countries: Sequence[AutocompleteCountry] = ()
    language: ResultsLanguage = USE_SYSTEM_LOCALE


@dataclass(frozen=True)
class PlaceDetailsOptions:
    fields: Sequence[PlaceDetailsFields] = ()
    language: ResultsLanguage = USE_SYSTEM_LOCALE


def format_coordinate(coord: Coordinate) -> str:
    lat, lng = coord
    return f"{lat},{lng}"


def encode_input(text: str) -> str:
    # No safe characters: '&', '=', '+', '/', space and '#' are all escaped
    return quote(text, safe="")


def components_filter(countries: Iterable[AutocompleteCountry], system: SystemLocale) -> Optional[str]:
    codes = [c for c in (country.resolve(system) for country in countries) if c]
    if not codes:
        return None
    return "country:" + "|".join(codes)


def unique_fields(fields: Iterable[PlaceDetailsFields]) -> List[str]:
    """Wire values, first occurrence wins."""
    out: List[str] = []
    for f in fields:
        value = PlaceDetailsFields(f).value
        if value not in out:
            out.append(value)
    return out


def autocomplete_params(
    input: str,
    api_key: str,
    session_token: str,
    options: AutocompleteOptions,
    system: SystemLocale,
) -> Dict[str, str]:
    params = {
        "input": encode_input(input),
        "key": api_key,
        "sessiontoken": session_token,
    }

    if options.type is not None:
        params["type"] = AutocompleteType(options.type).value

    if options.origin is not None:
        params["origin"] = format_coordinate(options.origin)

    if options.location is not None:
        params["location"] = format_coordinate(options.location)

    if options.radius_in_meters is not None:
        params["radius"] = str(int(options.radius_in_meters))

    components = components_filter(options.countries, system)
    if components:
        params["components"] = components

    language = options.language.resolve(system)
    if language:
        params["language"] = language

    return params


def place_details_params(
    place_id: str,
    api_key: str,
    session_token: str,
    options: PlaceDetailsOptions,
    system: SystemLocale,
) -> Dict[str, str]:
    params = {
        "place_id": place_id,
        "key": api_key,
        "sessiontoken": session_token,
    }

    fields = unique_fields(options.fields)
    if fields:
        params["fields"] = ",".join(fields)

    language = options.language.resolve(system)
    if language:
        params["language"] = language

    return params


def build_query(params: Dict[str, str]) -> str:
    """
    key=value pairs joined by '&'. "input" arrives already encoded;
    every other value is escaped here, keeping VALUE_SAFE_CHARS.
    """
    pairs = []
    for key, value in params.items():
        if key != "input":
            value = quote(value, safe=VALUE_SAFE_CHARS)
        pairs.append(f"{key}={value}")
    return "&".join(pairs)
