# place_search/client.py
import asyncio
import logging
import uuid
from typing import Any, Dict, Iterable, List, Optional

import requests

from .errors import DecodingError, InvalidResponse, ServerError
from .http_client import HttpClient
from .models import (
    USE_SYSTEM_LOCALE,
    AutocompletePrediction,
    AutocompleteType,
    Coordinate,
    CountryArg,
    LanguageArg,
    PlaceDetailsFields,
    PlaceDetailsResult,
    as_country,
    as_language,
    decode_autocomplete,
    decode_place_details,
)
from .query import (
    AutocompleteOptions,
    PlaceDetailsOptions,
    autocomplete_params,
    build_query,
    place_details_params,
)
from .system_locale import SystemLocale

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://maps.googleapis.com/maps/api/place"


class PlaceSearchClient:
    """
    Async client for Places Autocomplete + Place Details.

    One session token per instance: every autocomplete keystroke and the
    final details lookup made through the same client are billed as one
    session. Make a new client for a new search session.

    Calls are single-shot (no retry). The blocking HTTP request runs in a
    worker thread.
    """

    def __init__(
        self,
        api_key: str,
        http: Optional[HttpClient] = None,
        system_locale: Optional[SystemLocale] = None,
        session_token: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
    ):
        self.api_key = api_key
        self._owns_http = http is None
        self.http = http or HttpClient()
        self.system_locale = system_locale or SystemLocale()
        self.base_url = base_url.rstrip("/")
        self._session_token = session_token or str(uuid.uuid4()).upper()

    @property
    def session_token(self) -> str:
        return self._session_token

    def close(self) -> None:
        """Closes the transport only if this client created it."""
        if self._owns_http:
            self.http.close()

    async def autocomplete(
        self,
        input: str,
        type: Optional[AutocompleteType] = None,
        origin: Optional[Coordinate] = None,
        location: Optional[Coordinate] = None,
        radius_in_meters: Optional[int] = None,
        countries: Iterable[CountryArg] = (),
        language: LanguageArg = USE_SYSTEM_LOCALE,
    ) -> List[AutocompletePrediction]:
        options = AutocompleteOptions(
            type=type,
            origin=origin,
            location=location,
            radius_in_meters=radius_in_meters,
            countries=tuple(as_country(c) for c in countries),
            language=as_language(language),
        )
        params = autocomplete_params(input, self.api_key, self._session_token, options, self.system_locale)
        body = await self._get_json("autocomplete", params)
        predictions = decode_autocomplete(body)
        logger.debug("autocomplete: %d predictions", len(predictions))
        return predictions

    async def fetch_place_details(
        self,
        place_id: str,
        fields: Iterable[PlaceDetailsFields] = (),
        language: LanguageArg = USE_SYSTEM_LOCALE,
    ) -> PlaceDetailsResult:
        options = PlaceDetailsOptions(fields=tuple(fields), language=as_language(language))
        params = place_details_params(place_id, self.api_key, self._session_token, options, self.system_locale)
        body = await self._get_json("details", params)
        return decode_place_details(body)

    def url_for(self, endpoint: str, params: Dict[str, str]) -> str:
        return f"{self.base_url}/{endpoint}/json?{build_query(params)}"

    async def _get_json(self, endpoint: str, params: Dict[str, str]) -> Any:
        logger.debug(
            "Places %s request: params=%s",
            endpoint,
            sorted(k for k in params if k != "key"),
        )
        resp = await asyncio.to_thread(self.http.get, self.url_for(endpoint, params))

        if not isinstance(resp, requests.Response):
            raise InvalidResponse(resp)
        if resp.status_code != 200:
            raise ServerError(resp.status_code, resp.text or "")

        try:
            body = resp.json()
        except ValueError as e:
            raise DecodingError(f"body is not JSON ({e})") from e

        # Google reports most API errors as HTTP 200 + a status field
        if isinstance(body, dict):
            status = body.get("status")
            if status not in (None, "OK", "ZERO_RESULTS"):
                logger.warning(
                    "Places %s error: status=%s, msg=%s",
                    endpoint,
                    status,
                    body.get("error_message"),
                )
        return body
