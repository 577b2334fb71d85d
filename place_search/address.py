# place_search/address.py
from dataclasses import dataclass
from typing import Optional

from .models import PlaceDetailsResult


@dataclass(frozen=True)
class AddressSummary:
    city: Optional[str]
    state: Optional[str]
    zip: Optional[str]
    country: Optional[str]
    lat: float
    lng: float

    @classmethod
    def from_details(cls, result: PlaceDetailsResult) -> "AddressSummary":
        """
        Extracts city/state/zip/country from the details' address_components.
        """
        def pick(of_type: str, short: bool = False) -> Optional[str]:
            comp = result.address_component(of_type)
            if comp is None:
                return None
            return comp.short_name if short else comp.long_name

        loc = result.geometry.location
        return cls(
            city=pick("locality"),
            state=pick("administrative_area_level_1", short=True),
            zip=pick("postal_code"),
            country=pick("country", short=True),
            lat=loc.lat,
            lng=loc.lng,
        )

    def label(self) -> str:
        parts = [p for p in (self.city, self.state, self.zip, self.country) if p]
        return ", ".join(parts) if parts else f"({self.lat:.5f}, {self.lng:.5f})"
