import pytest

from place_search.errors import DecodingError, PlaceSearchError
from place_search.models import (
    AddressComponent,
    AutocompleteCountry,
    Geometry,
    Location,
    PlaceDetailsResult,
    ResultsLanguage,
    as_country,
    as_language,
    decode_autocomplete,
    decode_place_details,
)


def _result(components):
    return PlaceDetailsResult(
        address_components=components,
        geometry=Geometry(location=Location(lat=1.0, lng=2.0)),
    )


def test_address_component_first_match():
    locality = AddressComponent("Plano", "Plano", ("locality", "political"))
    result = _result((
        AddressComponent("Texas", "TX", ("administrative_area_level_1", "political")),
        locality,
        AddressComponent("Other", "Other", ("locality",)),
    ))
    assert result.address_component("locality") is locality


def test_address_component_no_match():
    result = _result((AddressComponent("Texas", "TX", ("administrative_area_level_1", "political")),))
    assert result.address_component("locality") is None


def test_decode_autocomplete(autocomplete_payload):
    predictions = decode_autocomplete(autocomplete_payload)
    assert [p.place_id for p in predictions] == ["ChIJ-plano", "ChIJ-parkway"]
    assert predictions[0].distance_meters == 1520.5
    assert predictions[0].structured_formatting.main_text == "Plano"
    assert predictions[1].distance_meters is None


def test_decode_autocomplete_missing_predictions():
    with pytest.raises(DecodingError):
        decode_autocomplete({"status": "REQUEST_DENIED"})


def test_decode_autocomplete_bad_prediction_reports_path():
    body = {"predictions": [{"place_id": "x", "structured_formatting": {"main_text": "A"}}]}
    with pytest.raises(DecodingError) as exc:
        decode_autocomplete(body)
    assert "predictions[0].structured_formatting" in str(exc.value)


def test_decode_place_details(details_payload):
    result = decode_place_details(details_payload)
    assert len(result.address_components) == 5
    assert result.address_components[2].short_name == "TX"
    assert result.geometry.location == Location(lat=33.0198431, lng=-96.6988856)


def test_decode_place_details_rejects_non_numeric_lat(details_payload):
    details_payload["result"]["geometry"]["location"]["lat"] = "33.0"
    with pytest.raises(DecodingError):
        decode_place_details(details_payload)


def test_decoding_error_is_not_a_place_search_error():
    assert not issubclass(DecodingError, PlaceSearchError)
    assert issubclass(DecodingError, ValueError)


def test_plain_strings_become_explicit_variants():
    assert as_language("de") == ResultsLanguage("de")
    assert as_country("us") == AutocompleteCountry("us")
    lang = ResultsLanguage("it")
    assert as_language(lang) is lang


def test_decoded_details_are_immutable_and_hashable(details_payload):
    result = decode_place_details(details_payload)
    assert isinstance(result.address_components, tuple)
    assert result.address_components[0].types == ("locality", "political")
    assert hash(result) == hash(decode_place_details(details_payload))
    assert len({result, decode_place_details(details_payload)}) == 1
