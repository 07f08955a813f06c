# gmapkit/services/geocoder.py
# Address <-> coordinate lookups against the Geocoding web service (JSON output).

import logging
from dataclasses import dataclass, field

import requests

from ..config import GEOCODE_URL, HTTP_TIMEOUT, USER_AGENT, MapsConfig
from ..errors import GeocodeError, InvalidPositionError
from ..geometry import LatLng, LatLngBounds

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeocodeResult:
    location: LatLng
    formatted_address: str | None = None
    location_type: str | None = None
    viewport: LatLngBounds | None = None
    raw: dict = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_json(cls, item: dict) -> "GeocodeResult":
        geom = item.get("geometry") or {}
        loc = geom.get("location")
        if not loc:
            raise ValueError("result without geometry.location")
        viewport = None
        vp = geom.get("viewport")
        if vp:
            viewport = LatLngBounds(
                LatLng(vp["southwest"]["lat"], vp["southwest"]["lng"]),
                LatLng(vp["northeast"]["lat"], vp["northeast"]["lng"]),
            )
        return cls(
            location=LatLng(loc["lat"], loc["lng"]),
            formatted_address=item.get("formatted_address"),
            location_type=geom.get("location_type"),
            viewport=viewport,
            raw=item,
        )


class Geocoder:
    def __init__(self, api_key: str | None = None, language: str | None = None, region: str | None = None,
                 session=None, timeout: float = HTTP_TIMEOUT, url: str = GEOCODE_URL):
        self.api_key = api_key
        self.language = language
        self.region = region
        self.session = session
        self.timeout = timeout
        self.url = url
        self._cache = {}

    @classmethod
    def from_config(cls, config: MapsConfig, session=None) -> "Geocoder":
        return cls(config.api_key, config.language, config.region, session=session, timeout=config.timeout)

    def geocode(self, address: str, bounds: LatLngBounds | None = None) -> GeocodeResult:
        """First match for address; bounds biases the lookup toward a viewport."""
        params = {"address": address}
        if bounds is not None:
            sw, ne = bounds.south_west, bounds.north_east
            params["bounds"] = f"{sw.lat},{sw.lng}|{ne.lat},{ne.lng}"
        return self._lookup(address, params)

    def reverse_geocode(self, position) -> GeocodeResult:
        latlng = str(LatLng.parse(position))
        return self._lookup(latlng, {"latlng": latlng})

    def clear_cache(self) -> None:
        self._cache.clear()

    def _lookup(self, query: str, params: dict) -> GeocodeResult:
        cache_key = tuple(sorted(params.items()))
        if cache_key in self._cache:
            return self._cache[cache_key]

        for name, value in (("key", self.api_key), ("language", self.language), ("region", self.region)):
            if value:
                params[name] = value

        payload = self._request(query, params)
        status = payload.get("status", "UNKNOWN_ERROR")
        if status != "OK":
            raise GeocodeError(status, query, payload.get("error_message"))
        results = payload.get("results") or []
        if not results:
            raise GeocodeError("ZERO_RESULTS", query)
        try:
            result = GeocodeResult.from_json(results[0])
        except (KeyError, TypeError, ValueError) as e:
            raise GeocodeError("INVALID_RESPONSE", query, str(e)) from e

        self._cache[cache_key] = result
        return result

    def _request(self, query: str, params: dict) -> dict:
        http = self.session or requests
        logger.debug("Geocoding %r", query)
        try:
            r = http.get(self.url, params=params, headers={"User-Agent": USER_AGENT}, timeout=self.timeout)
            r.raise_for_status()
            return r.json()
        except requests.exceptions.Timeout as e:
            raise GeocodeError("REQUEST_FAILED", query, f"timed out after {self.timeout} seconds") from e
        except requests.RequestException as e:
            raise GeocodeError("REQUEST_FAILED", query, str(e)) from e
        except ValueError as e:
            raise GeocodeError("REQUEST_FAILED", query, f"invalid JSON: {e}") from e


_default_geocoder = None


def default_geocoder() -> Geocoder:
    """Shared instance configured from the environment."""
    global _default_geocoder
    if _default_geocoder is None:
        _default_geocoder = Geocoder.from_config(MapsConfig.load())
    return _default_geocoder


def geocode(address: str, bounds: LatLngBounds | None = None) -> GeocodeResult:
    return default_geocoder().geocode(address, bounds)


def resolve_position(value, geocoder=None) -> LatLng:
    """A position, a geocode result or an address; addresses are geocoded right away."""
    if isinstance(value, GeocodeResult):
        return value.location
    if isinstance(value, str):
        try:
            return LatLng.parse(value)
        except InvalidPositionError:
            return (geocoder or default_geocoder()).geocode(value).location
    return LatLng.parse(value)
