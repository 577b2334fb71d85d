# place_search/models.py
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from .errors import DecodingError
from .system_locale import SystemLocale

# (lat, lng)
Coordinate = Tuple[float, float]


class AutocompleteType(str, Enum):
    GEOCODE = "geocode"
    ADDRESS = "address"
    ESTABLISHMENT = "establishment"
    CITIES = "(cities)"
    REGIONS = "(regions)"


class PlaceDetailsFields(str, Enum):
    ADDRESS_COMPONENT = "address_component"
    GEOMETRY = "geometry"


@dataclass(frozen=True)
class ResultsLanguage:
    """Explicit language code, or code=None for the system locale at call time."""
    code: Optional[str] = None

    def resolve(self, system: SystemLocale) -> Optional[str]:
        code = system.language_code() if self.code is None else self.code
        return code or None


@dataclass(frozen=True)
class AutocompleteCountry:
    """Explicit country code, or code=None for the system region at call time."""
    code: Optional[str] = None

    def resolve(self, system: SystemLocale) -> Optional[str]:
        code = system.region_code() if self.code is None else self.code
        return code or None


USE_SYSTEM_LOCALE = ResultsLanguage()
USE_SYSTEM_REGION = AutocompleteCountry()

LanguageArg = Union[ResultsLanguage, str]
CountryArg = Union[AutocompleteCountry, str]


def as_language(value: LanguageArg) -> ResultsLanguage:
    return value if isinstance(value, ResultsLanguage) else ResultsLanguage(value)


def as_country(value: CountryArg) -> AutocompleteCountry:
    return value if isinstance(value, AutocompleteCountry) else AutocompleteCountry(value)


# -------------------------
# Decoding helpers
# -------------------------

def _field(data: Any, key: str, path: str) -> Any:
    if not isinstance(data, dict):
        raise DecodingError(f"expected an object, got {type(data).__name__}", path)
    if key not in data or data[key] is None:
        raise DecodingError(f"missing key '{key}'", path)
    return data[key]


def _str(data: Any, key: str, path: str) -> str:
    value = _field(data, key, path)
    if not isinstance(value, str):
        raise DecodingError(f"'{key}' is not a string", path)
    return value


def _float(value: Any, key: str, path: str) -> float:
    # bool is an int subclass; JSON true/false is not a number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodingError(f"'{key}' is not a number", path)
    return float(value)


def _list(data: Any, key: str, path: str) -> list:
    value = _field(data, key, path)
    if not isinstance(value, list):
        raise DecodingError(f"'{key}' is not an array", path)
    return value


# -------------------------
# Autocomplete
# -------------------------

@dataclass(frozen=True)
class StructuredFormatting:
    main_text: str
    secondary_text: str

    @classmethod
    def from_dict(cls, data: Dict, path: str = "structured_formatting") -> "StructuredFormatting":
        return cls(
            main_text=_str(data, "main_text", path),
            secondary_text=_str(data, "secondary_text", path),
        )


@dataclass(frozen=True)
class AutocompletePrediction:
    place_id: str
    structured_formatting: StructuredFormatting
    distance_meters: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict, path: str = "prediction") -> "AutocompletePrediction":
        distance = data.get("distance_meters") if isinstance(data, dict) else None
        return cls(
            place_id=_str(data, "place_id", path),
            structured_formatting=StructuredFormatting.from_dict(
                _field(data, "structured_formatting", path), f"{path}.structured_formatting"
            ),
            distance_meters=None if distance is None else _float(distance, "distance_meters", path),
        )


def decode_autocomplete(body: Any) -> List[AutocompletePrediction]:
    """Top-level autocomplete payload -> predictions, in payload order."""
    return [
        AutocompletePrediction.from_dict(p, f"predictions[{i}]")
        for i, p in enumerate(_list(body, "predictions", "$"))
    ]


# -------------------------
# Place Details
# -------------------------

@dataclass(frozen=True)
class AddressComponent:
    long_name: str
    short_name: str
    types: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict, path: str = "address_component") -> "AddressComponent":
        types = _list(data, "types", path)
        if not all(isinstance(t, str) for t in types):
            raise DecodingError("'types' must contain strings", path)
        return cls(
            long_name=_str(data, "long_name", path),
            short_name=_str(data, "short_name", path),
            types=tuple(types),
        )


@dataclass(frozen=True)
class Location:
    lat: float
    lng: float


@dataclass(frozen=True)
class Geometry:
    location: Location

    @classmethod
    def from_dict(cls, data: Dict, path: str = "geometry") -> "Geometry":
        loc = _field(data, "location", path)
        loc_path = f"{path}.location"
        return cls(location=Location(
            lat=_float(_field(loc, "lat", loc_path), "lat", loc_path),
            lng=_float(_field(loc, "lng", loc_path), "lng", loc_path),
        ))


@dataclass(frozen=True)
class PlaceDetailsResult:
    address_components: Tuple[AddressComponent, ...]
    geometry: Geometry

    @classmethod
    def from_dict(cls, data: Dict, path: str = "result") -> "PlaceDetailsResult":
        components = _list(data, "address_components", path)
        return cls(
            address_components=tuple(
                AddressComponent.from_dict(c, f"{path}.address_components[{i}]")
                for i, c in enumerate(components)
            ),
            geometry=Geometry.from_dict(_field(data, "geometry", path), f"{path}.geometry"),
        )

    def address_component(self, of_type: str) -> Optional[AddressComponent]:
        for component in self.address_components:
            if of_type in component.types:
                return component
        return None


def decode_place_details(body: Any) -> PlaceDetailsResult:
    return PlaceDetailsResult.from_dict(_field(body, "result", "$"))
