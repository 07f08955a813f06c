import io

import pytest
import requests
from PIL import Image

from gmapkit.config import ENV_VARS, MapsConfig
from gmapkit.geometry import LatLng, LatLngBounds
from gmapkit.services.geocoder import GeocodeResult


class FakeResponse:
    def __init__(self, payload=None, content=b"", status_code=200):
        self.payload = payload
        self.content = content
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        if self.payload is None:
            raise ValueError("No JSON object could be decoded")
        return self.payload


class FakeSession:
    """Stands in for requests: returns canned responses and records every call."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": dict(params or {}), "headers": headers, "timeout": timeout})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class FakeGeocoder:
    def __init__(self, location=(40.7128, -74.006), address="New York, NY, USA"):
        self.location = LatLng(*location)
        self.address = address
        self.queries = []

    def geocode(self, address, bounds=None):
        self.queries.append(address)
        return GeocodeResult(location=self.location, formatted_address=self.address)


def png_bytes(width, height):
    buf = io.BytesIO()
    Image.new("RGBA", (width, height)).save(buf, format="PNG")
    return buf.getvalue()


def geocode_payload(lat=40.7128, lng=-74.006, address="New York, NY, USA"):
    return {
        "status": "OK",
        "results": [{
            "formatted_address": address,
            "geometry": {
                "location": {"lat": lat, "lng": lng},
                "location_type": "APPROXIMATE",
                "viewport": {
                    "southwest": {"lat": lat - 0.1, "lng": lng - 0.1},
                    "northeast": {"lat": lat + 0.1, "lng": lng + 0.1},
                },
            },
        }],
    }


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for env in ENV_VARS.values():
        monkeypatch.delenv(env, raising=False)


@pytest.fixture
def config():
    return MapsConfig()


@pytest.fixture
def fake_geocoder():
    return FakeGeocoder()


@pytest.fixture
def nyc_bounds():
    return LatLngBounds(LatLng(40.5, -74.3), LatLng(40.9, -73.7))
