from .info_window import InfoWindow
from .layers import BicyclingLayer, GroundOverlay, KmlLayer, TrafficLayer, TransitLayer
from .marker import Marker
from .marker_icon import MarkerIcon, fetch_image_size
from .marker_shape import MarkerShape
from .shapes import Circle, Polygon, Polyline, Rectangle

__all__ = [
    "BicyclingLayer",
    "Circle",
    "GroundOverlay",
    "InfoWindow",
    "KmlLayer",
    "Marker",
    "MarkerIcon",
    "MarkerShape",
    "Polygon",
    "Polyline",
    "Rectangle",
    "TrafficLayer",
    "TransitLayer",
    "fetch_image_size",
]
