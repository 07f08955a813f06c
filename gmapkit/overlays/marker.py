# gmapkit/overlays/marker.py
# Map markers: fixed, geocoded or placed at the visitor's location.

from ..core import MapObject
from ..geometry import LatLng
from ..js import JsRaw, geolocation_js, js_object, js_string
from ..services.geocoder import default_geocoder, resolve_position
from .info_window import InfoWindow
from .marker_icon import MarkerIcon
from .marker_shape import MarkerShape

ANIMATIONS = {"bounce": "BOUNCE", "drop": "DROP"}


class Marker(MapObject):
    """Marker at a position.

    ``content`` becomes an info window opened by clicking the marker. ``icon``
    is a MarkerIcon or a plain image URL.
    """

    _name = "marker"

    def __init__(self, position=None, title=None, content=None, icon=None, shape=None, label=None,
                 animation=None, draggable=False, clickable=True, opacity=None, z_index=None,
                 visible=True):
        super().__init__()
        self.position = None if position is None else LatLng.parse(position)
        self.title = title
        self.label = label
        self.icon = None
        self.shape = None
        self.animation = None
        self.info_window = None
        self.draggable = draggable
        self.clickable = clickable
        self.opacity = opacity
        self.z_index = z_index
        self.visible = visible
        # browser geolocation settings, set by from_user_location
        self.geolocation = None

        if content is not None:
            self.set_content(content)
        if icon is not None:
            self.set_icon(icon)
        if shape is not None:
            self.set_shape(shape)
        if animation is not None:
            self.set_animation(animation)

    @classmethod
    def from_position(cls, position, **options) -> "Marker":
        return cls(position, **options)

    @classmethod
    def from_location(cls, address: str, geocoder=None, **options) -> "Marker":
        """Geocode address now; GeocodeError propagates."""
        result = (geocoder or default_geocoder()).geocode(address)
        return cls(result.location, **options)

    @classmethod
    def from_user_location(cls, timeout=None, high_accuracy: bool = False, backup=None, geocoder=None,
                           **options) -> "Marker":
        """backup takes what GoogleMap.center_on_user takes, addresses included."""
        marker = cls(None, **options)
        marker.geolocation = {
            "timeout": timeout,
            "high_accuracy": high_accuracy,
            "backup": None if backup is None else resolve_position(backup, geocoder),
        }
        return marker

    def set_position(self, position):
        self.position = LatLng.parse(position)
        return self

    def set_title(self, title: str):
        self.title = title
        return self

    def set_content(self, content: str):
        if self.info_window is None:
            self.info_window = InfoWindow(content)
        else:
            self.info_window.set_content(content)
        return self

    def set_icon(self, icon):
        if not isinstance(icon, (MarkerIcon, str)):
            raise TypeError("icon must be a MarkerIcon or an image URL")
        self.icon = icon
        return self

    def set_shape(self, shape: MarkerShape):
        self.shape = shape
        return self

    def set_animation(self, animation: str):
        key = animation.lower()
        if key not in ANIMATIONS:
            raise ValueError(f"animation must be one of {sorted(ANIMATIONS)}, got {animation!r}")
        self.animation = key
        return self

    def bounds_points(self) -> list:
        return [] if self.position is None else [self.position]

    def declarations(self) -> list[str]:
        names = [self.get_name()]
        if self.info_window is not None:
            names.append(self.info_window.get_name())
        return names

    def options_js(self, map_name: str) -> str:
        return js_object({
            "position": self.position,
            "map": JsRaw(map_name),
            "title": self.title,
            "label": self.label,
            "icon": self.icon,
            "shape": self.shape,
            "animation": JsRaw(f"google.maps.Animation.{ANIMATIONS[self.animation]}") if self.animation else None,
            "draggable": True if self.draggable else None,
            "clickable": None if self.clickable else False,
            "opacity": self.opacity,
            "zIndex": self.z_index,
            "visible": None if self.visible else False,
        })

    def render_js(self, map_name: str, shared_info_window: str | None = None) -> str:
        name = self.get_name()
        lines = [f"{name} = new google.maps.Marker({self.options_js(map_name)});"]

        if self.info_window is not None:
            if shared_info_window:
                lines.append(
                    f'{name}.addListener("click", function () {{ '
                    f"{shared_info_window}.setContent({js_string(self.info_window.content)}); "
                    f"{shared_info_window}.open({{anchor: {name}, map: {map_name}}}); }});"
                )
            else:
                iw = self.info_window.get_name()
                lines.append(f"{iw} = new google.maps.InfoWindow({self.info_window.options_js()});")
                lines.append(
                    f'{name}.addListener("click", function () {{ '
                    f"{iw}.open({{anchor: {name}, map: {map_name}}}); }});"
                )

        if self.geolocation is not None:
            backup = self.geolocation["backup"]
            on_fail = f"{name}.setPosition({backup.to_js()});" if backup is not None else ""
            lines.append(geolocation_js(
                f"{name}.setPosition(user_position);",
                on_fail,
                timeout=self.geolocation["timeout"],
                high_accuracy=self.geolocation["high_accuracy"],
            ))

        lines += self._listeners_js(map_name)
        return "\n".join(lines)
