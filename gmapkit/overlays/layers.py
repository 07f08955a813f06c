# gmapkit/overlays/layers.py
# Image and data layers: ground overlays, KML, traffic, bicycling, transit.

from ..core import MapObject
from ..geometry import LatLngBounds
from ..js import JsRaw, js_object, js_string


class GroundOverlay(MapObject):
    """Image stretched over a lat/lng box."""

    _name = "groundoverlay"

    def __init__(self, url: str, bounds, opacity=None, clickable: bool = True):
        super().__init__()
        if not isinstance(bounds, LatLngBounds):
            bounds = LatLngBounds.from_points(bounds)
        if bounds is None:
            raise ValueError("A ground overlay needs its corner points")
        if opacity is not None and not 0.0 <= opacity <= 1.0:
            raise ValueError("opacity must be between 0 and 1")
        self.url = url
        self.bounds = bounds
        self.opacity = opacity
        self.clickable = clickable

    def bounds_points(self) -> list:
        return [self.bounds.south_west, self.bounds.north_east]

    def render_js(self, map_name: str) -> str:
        opts = js_object({
            "map": JsRaw(map_name),
            "opacity": self.opacity,
            "clickable": None if self.clickable else False,
        })
        lines = [
            f"{self.get_name()} = new google.maps.GroundOverlay("
            f"{js_string(self.url)}, {self.bounds.to_js()}, {opts});"
        ]
        lines += self._listeners_js(map_name)
        return "\n".join(lines)


class KmlLayer(MapObject):
    _name = "kmllayer"

    def __init__(self, url: str, preserve_viewport: bool = False, suppress_info_windows: bool = False):
        super().__init__()
        self.url = url
        self.preserve_viewport = preserve_viewport
        self.suppress_info_windows = suppress_info_windows

    def render_js(self, map_name: str) -> str:
        opts = js_object({
            "url": self.url,
            "map": JsRaw(map_name),
            "preserveViewport": True if self.preserve_viewport else None,
            "suppressInfoWindows": True if self.suppress_info_windows else None,
        })
        lines = [f"{self.get_name()} = new google.maps.KmlLayer({opts});"]
        lines += self._listeners_js(map_name)
        return "\n".join(lines)


class _ProviderLayer(MapObject):
    _js_class = ""

    def render_js(self, map_name: str) -> str:
        name = self.get_name()
        return f"{name} = new google.maps.{self._js_class}();\n{name}.setMap({map_name});"


class TrafficLayer(_ProviderLayer):
    _name = "trafficlayer"
    _js_class = "TrafficLayer"


class BicyclingLayer(_ProviderLayer):
    _name = "bicyclinglayer"
    _js_class = "BicyclingLayer"


class TransitLayer(_ProviderLayer):
    _name = "transitlayer"
    _js_class = "TransitLayer"
