# gmapkit/__init__.py
# Google Maps markup for server-rendered pages.

from .config import MapsConfig
from .errors import ConfigError, GeocodeError, GMapKitError, InvalidPositionError
from .events import DomEventListener, EventListener
from .geometry import LatLng, LatLngBounds
from .google_map import GoogleMap
from .overlays import (
    BicyclingLayer,
    Circle,
    GroundOverlay,
    InfoWindow,
    KmlLayer,
    Marker,
    MarkerIcon,
    MarkerShape,
    Polygon,
    Polyline,
    Rectangle,
    TrafficLayer,
    TransitLayer,
)
from .services import GeocodeResult, Geocoder, geocode

__version__ = "0.1.0"

__all__ = [
    "BicyclingLayer",
    "Circle",
    "ConfigError",
    "DomEventListener",
    "EventListener",
    "GMapKitError",
    "GeocodeError",
    "GeocodeResult",
    "Geocoder",
    "GoogleMap",
    "GroundOverlay",
    "InfoWindow",
    "InvalidPositionError",
    "KmlLayer",
    "LatLng",
    "LatLngBounds",
    "MapsConfig",
    "Marker",
    "MarkerIcon",
    "MarkerShape",
    "Polygon",
    "Polyline",
    "Rectangle",
    "TrafficLayer",
    "TransitLayer",
    "geocode",
]
