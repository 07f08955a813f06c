# gmapkit/overlays/info_window.py
# Popup bubbles, standalone or owned by a marker.

from ..core import MapObject
from ..geometry import LatLng
from ..js import JsRaw, js_object


class InfoWindow(MapObject):
    _name = "infowindow"

    def __init__(self, content: str, max_width=None, pixel_offset=None, position=None,
                 disable_auto_pan: bool = False, open_on_load: bool = False):
        super().__init__()
        self.content = content
        self.max_width = None if max_width is None else int(max_width)
        self.pixel_offset = pixel_offset
        self.position = None if position is None else LatLng.parse(position)
        self.disable_auto_pan = disable_auto_pan
        self.open_on_load = open_on_load

    def set_content(self, content: str):
        self.content = content
        return self

    def set_position(self, position):
        self.position = LatLng.parse(position)
        return self

    def options_js(self) -> str:
        offset = None
        if self.pixel_offset is not None:
            x, y = self.pixel_offset
            offset = JsRaw(f"new google.maps.Size({int(x)}, {int(y)})")
        return js_object({
            "content": self.content,
            "maxWidth": self.max_width,
            "pixelOffset": offset,
            "position": self.position,
            "disableAutoPan": self.disable_auto_pan or None,
        })

    def bounds_points(self) -> list:
        return [self.position] if self.position is not None and self.open_on_load else []

    def render_js(self, map_name: str) -> str:
        name = self.get_name()
        lines = [f"{name} = new google.maps.InfoWindow({self.options_js()});"]
        if self.open_on_load and self.position is not None:
            lines.append(f"{name}.open({{map: {map_name}}});")
        lines += self._listeners_js(map_name)
        return "\n".join(lines)
