import pytest
import requests

from conftest import FakeResponse, FakeSession, geocode_payload
from gmapkit.config import GEOCODE_URL
from gmapkit.errors import GeocodeError
from gmapkit.geometry import LatLng
from gmapkit.services import geocoder as geocoder_module
from gmapkit.services.geocoder import Geocoder


def test_geocode_parses_first_result():
    session = FakeSession(FakeResponse(geocode_payload()))
    result = Geocoder(api_key="KEY", session=session).geocode("New York, NY")

    assert result.location == LatLng(40.7128, -74.006)
    assert result.formatted_address == "New York, NY, USA"
    assert result.location_type == "APPROXIMATE"
    assert result.viewport.contains(result.location)
    assert result.raw["formatted_address"] == "New York, NY, USA"

    call = session.calls[0]
    assert call["url"] == GEOCODE_URL
    assert call["params"] == {"address": "New York, NY", "key": "KEY"}
    assert call["timeout"] == 30


def test_language_region_and_bounds_are_sent(nyc_bounds):
    session = FakeSession(FakeResponse(geocode_payload()))
    Geocoder(language="fr", region="us", session=session).geocode("Main St", bounds=nyc_bounds)
    params = session.calls[0]["params"]
    assert params["language"] == "fr"
    assert params["region"] == "us"
    assert params["bounds"] == "40.5,-74.3|40.9,-73.7"
    assert "key" not in params


def test_results_are_cached_per_query():
    session = FakeSession(FakeResponse(geocode_payload()), FakeResponse(geocode_payload(1, 2)))
    g = Geocoder(session=session)
    first = g.geocode("New York, NY")
    assert g.geocode("New York, NY") is first
    assert len(session.calls) == 1

    g.clear_cache()
    assert g.geocode("New York, NY").location == LatLng(1, 2)
    assert len(session.calls) == 2


def test_reverse_geocode():
    session = FakeSession(FakeResponse(geocode_payload()))
    result = Geocoder(session=session).reverse_geocode((40.7128, -74.006))
    assert session.calls[0]["params"] == {"latlng": "40.7128,-74.006"}
    assert result.formatted_address == "New York, NY, USA"


def test_non_ok_status_raises():
    session = FakeSession(FakeResponse({"status": "REQUEST_DENIED", "error_message": "bad key", "results": []}))
    with pytest.raises(GeocodeError) as exc_info:
        Geocoder(session=session).geocode("New York, NY")
    assert exc_info.value.status == "REQUEST_DENIED"
    assert exc_info.value.message == "bad key"
    assert exc_info.value.query == "New York, NY"
    assert "bad key" in str(exc_info.value)


def test_ok_without_results_raises_zero_results():
    session = FakeSession(FakeResponse({"status": "OK", "results": []}))
    with pytest.raises(GeocodeError) as exc_info:
        Geocoder(session=session).geocode("nowhere")
    assert exc_info.value.status == "ZERO_RESULTS"


def test_malformed_result_raises():
    session = FakeSession(FakeResponse({"status": "OK", "results": [{"geometry": {}}]}))
    with pytest.raises(GeocodeError) as exc_info:
        Geocoder(session=session).geocode("somewhere")
    assert exc_info.value.status == "INVALID_RESPONSE"


@pytest.mark.parametrize("failure, text", [
    (requests.ConnectionError("refused"), "refused"),
    (requests.Timeout("slow"), "timed out"),
    (FakeResponse(status_code=500), "500"),
    (FakeResponse(payload=None), "invalid JSON"),
])
def test_transport_failures_become_request_failed(failure, text):
    session = FakeSession(failure)
    with pytest.raises(GeocodeError) as exc_info:
        Geocoder(session=session).geocode("New York, NY")
    assert exc_info.value.status == "REQUEST_FAILED"
    assert text in str(exc_info.value)


def test_failures_are_not_cached():
    session = FakeSession(requests.ConnectionError("refused"), FakeResponse(geocode_payload()))
    g = Geocoder(session=session)
    with pytest.raises(GeocodeError):
        g.geocode("New York, NY")
    assert g.geocode("New York, NY").location == LatLng(40.7128, -74.006)


def test_default_geocoder_reads_environment(monkeypatch):
    monkeypatch.setattr(geocoder_module, "_default_geocoder", None)
    monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "ENVKEY")
    g = geocoder_module.default_geocoder()
    assert g.api_key == "ENVKEY"
    assert geocoder_module.default_geocoder() is g


def test_module_level_geocode_uses_default(monkeypatch):
    session = FakeSession(FakeResponse(geocode_payload()))
    monkeypatch.setattr(geocoder_module, "_default_geocoder", Geocoder(session=session))
    assert geocoder_module.geocode("New York, NY").location == LatLng(40.7128, -74.006)
