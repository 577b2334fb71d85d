# place_search/__init__.py
from .client import PlaceSearchClient
from .errors import DecodingError, InvalidResponse, PlaceSearchError, ServerError
from .models import (
    USE_SYSTEM_LOCALE,
    USE_SYSTEM_REGION,
    AddressComponent,
    AutocompleteCountry,
    AutocompletePrediction,
    AutocompleteType,
    PlaceDetailsFields,
    PlaceDetailsResult,
    ResultsLanguage,
)

__all__ = [
    "PlaceSearchClient",
    "PlaceSearchError",
    "InvalidResponse",
    "ServerError",
    "DecodingError",
    "USE_SYSTEM_LOCALE",
    "USE_SYSTEM_REGION",
    "AddressComponent",
    "AutocompleteCountry",
    "AutocompletePrediction",
    "AutocompleteType",
    "PlaceDetailsFields",
    "PlaceDetailsResult",
    "ResultsLanguage",
]
