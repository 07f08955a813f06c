# gmapkit/google_map.py
# The map: view options, overlays, geolocation, and the generated header script,
# map script and container markup.

import html
import logging
import sys
import textwrap
from urllib.parse import urlencode

import folium

from . import config as cfg
from .config import MapsConfig
from .core import MapObject
from .events import DomEventListener, EventListener
from .geometry import LatLng, LatLngBounds
from .js import JsRaw, geolocation_js, is_js_name, js_function, js_identifier, js_object, js_string
from .overlays.marker import Marker
from .services.geocoder import default_geocoder, resolve_position

logger = logging.getLogger(__name__)

CONTROLS = {
    "zoom": "zoomControl",
    "map_type": "mapTypeControl",
    "scale": "scaleControl",
    "street_view": "streetViewControl",
    "fullscreen": "fullscreenControl",
    "rotate": "rotateControl",
}


def _css_length(value) -> str:
    if isinstance(value, bool):
        raise ValueError(f"Not a CSS length: {value!r}")
    if isinstance(value, (int, float)):
        return f"{value:g}px"
    value = str(value).strip()
    if not value:
        raise ValueError("Empty CSS length")
    if value.isdigit():
        return value + "px"
    return value


def _call(function: str, *args: str) -> str:
    code = js_function(function)
    if not is_js_name(code):
        code = f"({code})"
    return f"{code}({', '.join(args)});"


def _element(text: str) -> folium.Element:
    # text is emitted verbatim, never parsed as a template
    el = folium.Element("{{ this.text }}")
    el.text = text
    return el


class GoogleMap:
    """A Google Maps widget and everything placed on it.

    Typical use:

        gmap = GoogleMap()
        gmap.set_size("500px", "500px").set_zoom(16)
        Marker((40.71, -74.0), title="Here").add_to(gmap)
        print(gmap.header_js(), gmap.map_js(), gmap.map_html())
    """

    def __init__(self, map_id: str = cfg.DEFAULT_MAP_ID, config: MapsConfig | None = None,
                 width=cfg.DEFAULT_WIDTH, height=cfg.DEFAULT_HEIGHT, zoom: int = cfg.DEFAULT_ZOOM,
                 center=None, map_type: str = cfg.DEFAULT_MAP_TYPE):
        self.map_id = map_id
        self.config = config if config is not None else MapsConfig.load()
        self.width = _css_length(width)
        self.height = _css_length(height)
        self.zoom = None
        self.set_zoom(zoom)
        self.center = None if center is None else resolve_position(center)
        self.map_type = None
        self.set_map_type(map_type)
        self.min_zoom = None
        self.max_zoom = None
        self.styles = None
        self.options = {}
        self.auto_encompass = True

        self.geolocation = None
        self.center_on_user_enabled = False
        self.geolocation_backup = None
        self.geolocation_success_callback = None
        self.geolocation_fail_callback = None

        self.loading_content = None
        self.shared_info_window = False

        self._objects = []
        self._listeners = []

    def get_name(self) -> str:
        return f"map_{js_identifier(self.map_id)}"

    # ---------- dimensions / view ----------
    def set_width(self, width):
        self.width = _css_length(width)
        return self

    def set_height(self, height):
        self.height = _css_length(height)
        return self

    def set_size(self, width, height):
        return self.set_width(width).set_height(height)

    def set_zoom(self, zoom: int):
        zoom = int(zoom)
        if not cfg.MIN_ZOOM <= zoom <= cfg.MAX_ZOOM:
            raise ValueError(f"Zoom must be between {cfg.MIN_ZOOM} and {cfg.MAX_ZOOM}, got {zoom}")
        self.zoom = zoom
        return self

    def set_min_zoom(self, zoom: int):
        self.min_zoom = int(zoom)
        return self

    def set_max_zoom(self, zoom: int):
        self.max_zoom = int(zoom)
        return self

    def set_center(self, position):
        self.center = resolve_position(position)
        return self

    def set_center_by_location(self, address: str, geocoder=None):
        self.center = (geocoder or default_geocoder()).geocode(address).location
        return self

    def set_map_type(self, map_type: str):
        map_type = map_type.lower()
        if map_type not in cfg.MAP_TYPES:
            raise ValueError(f"Map type must be one of {cfg.MAP_TYPES}, got {map_type!r}")
        self.map_type = map_type
        return self

    def set_styles(self, styles: list):
        self.styles = styles
        return self

    def enable_control(self, control: str):
        self.options[self._control_option(control)] = True
        return self

    def disable_control(self, control: str):
        self.options[self._control_option(control)] = False
        return self

    def _control_option(self, control: str) -> str:
        if control not in CONTROLS:
            raise ValueError(f"Unknown control {control!r}; expected one of {sorted(CONTROLS)}")
        return CONTROLS[control]

    def set_draggable(self, draggable: bool = True):
        self.options["draggable"] = bool(draggable)
        return self

    def set_scrollwheel(self, enabled: bool = True):
        self.options["scrollwheel"] = bool(enabled)
        return self

    def disable_double_click_zoom(self):
        self.options["disableDoubleClickZoom"] = True
        return self

    def disable_default_ui(self):
        self.options["disableDefaultUI"] = True
        return self

    def disable_auto_encompass(self):
        self.auto_encompass = False
        return self

    # ---------- geolocation ----------
    def enable_geolocation(self, timeout=None, high_accuracy: bool = False):
        """timeout is in milliseconds, as the browser API expects."""
        self.geolocation = {"timeout": timeout, "high_accuracy": high_accuracy}
        return self

    def center_on_user(self, backup=None, geocoder=None):
        """Center on the visitor; backup is used when that fails.

        backup may be a position, a geocode result or an address, geocoded right away.
        """
        if self.geolocation is None:
            self.enable_geolocation()
        self.center_on_user_enabled = True
        self.geolocation_backup = None if backup is None else resolve_position(backup, geocoder)
        return self

    def set_geolocation_success_callback(self, callback: str):
        self.geolocation_success_callback = callback
        return self

    def set_geolocation_fail_callback(self, callback: str):
        self.geolocation_fail_callback = callback
        return self

    def set_loading_content(self, content: str):
        self.loading_content = content
        return self

    def compress_info_windows(self, enabled: bool = True):
        self.shared_info_window = enabled
        return self

    # ---------- objects ----------
    def add_object(self, obj):
        if not isinstance(obj, (MapObject, EventListener, DomEventListener)):
            raise TypeError(f"Cannot add {type(obj).__name__} to a map")
        if obj not in self._objects:
            self._objects.append(obj)
        return self

    def add_objects(self, objs):
        for obj in objs:
            self.add_object(obj)
        return self

    def add_listener(self, event: str, function: str, once: bool = False):
        self._listeners.append(EventListener(self, event, function, once))
        return self

    def get_objects(self) -> list:
        return list(self._objects)

    def get_markers(self) -> list:
        return [o for o in self._objects if isinstance(o, Marker)]

    def bounds(self) -> LatLngBounds | None:
        points = []
        for obj in self._objects:
            if isinstance(obj, MapObject):
                points.extend(obj.bounds_points())
        return LatLngBounds.from_points(points)

    # ---------- output ----------
    def api_url(self) -> str:
        params = {}
        conf = self.config
        if conf.api_key:
            params["key"] = conf.api_key
        if conf.version:
            params["v"] = conf.version
        if conf.language:
            params["language"] = conf.language
        if conf.region:
            params["region"] = conf.region
        if conf.libraries:
            params["libraries"] = ",".join(conf.libraries)
        if not params:
            return cfg.MAPS_JS_URL
        return cfg.MAPS_JS_URL + "?" + urlencode(params, safe=",")

    def header_js(self) -> str:
        return folium.JavascriptLink(self.api_url()).render()

    def map_html(self) -> str:
        style = f"width:{self.width};height:{self.height};"
        inner = self.loading_content or ""
        return f'<div id="{html.escape(self.map_id)}" style="{style}">{inner}</div>'

    def map_js(self) -> str:
        return f'<script type="text/javascript">\n{self.script_js()}\n</script>'

    def print_header_js(self, file=None) -> None:
        print(self.header_js(), file=file or sys.stdout)

    def print_map_js(self, file=None) -> None:
        print(self.map_js(), file=file or sys.stdout)

    def print_map(self, file=None) -> None:
        print(self.map_html(), file=file or sys.stdout)

    def _initial_view(self):
        """(center, fit_bounds) for the map before any geolocation answer."""
        if self.center is not None:
            return self.center, None
        bounds = self.bounds() if self.auto_encompass else None
        if bounds is None:
            return LatLng(*cfg.DEFAULT_CENTER), None
        if bounds.is_point():
            return bounds.south_west, None
        return bounds.center(), bounds

    def _info_window_name(self) -> str:
        return f"{self.get_name()}_info_window"

    def script_js(self) -> str:
        """Inline script: globals, the initializer and its window load hook."""
        name = self.get_name()
        init = f"initialize_{name}"
        center, fit = self._initial_view()

        declared = [name]
        if self.shared_info_window:
            declared.append(self._info_window_name())
        for obj in self._objects:
            if isinstance(obj, Marker) and self.shared_info_window:
                declared.append(obj.get_name())
            elif isinstance(obj, MapObject):
                declared.extend(obj.declarations())

        body = []
        if self.loading_content:
            body.append('container.innerHTML = "";')
        options = {
            "zoom": self.zoom,
            "center": JsRaw("center"),
            "mapTypeId": self.map_type,
            "minZoom": self.min_zoom,
            "maxZoom": self.max_zoom,
            "styles": self.styles,
        }
        options.update(self.options)
        body.append(f"{name} = new google.maps.Map(container, {js_object(options)});")
        if fit is not None:
            body.append(f"if (fit) {{ {name}.fitBounds({fit.to_js()}); }}")
        if self.shared_info_window:
            body.append(f"{self._info_window_name()} = new google.maps.InfoWindow();")

        shared = self._info_window_name() if self.shared_info_window else None
        listeners = []
        for obj in self._objects:
            if isinstance(obj, Marker):
                body.append(obj.render_js(name, shared_info_window=shared))
            elif isinstance(obj, MapObject):
                body.append(obj.render_js(name))
            else:
                listeners.append(obj.render_js(name))
        body.extend(listeners)
        body.extend(listener.render_js(name) for listener in self._listeners)

        lines = [f"var {', '.join(declared)};", f"function {init}() {{"]
        lines.append(f"  var container = document.getElementById({js_string(self.map_id)});")
        lines.append("  function build(center, fit) {")
        lines.append(textwrap.indent("\n".join(body), "    "))
        lines.append("  }")
        lines.append(textwrap.indent(self._startup_js(center), "  "))
        lines.append("}")
        lines.append(f'window.addEventListener("load", {init});')
        return "\n".join(lines)

    def _startup_js(self, center: LatLng) -> str:
        static = f"build({center.to_js()}, true);"
        if self.geolocation is None:
            return static

        success, fail = [], []
        if self.geolocation_success_callback:
            success.append(_call(self.geolocation_success_callback, "user_position"))
        if self.geolocation_fail_callback:
            fail.append(_call(self.geolocation_fail_callback))

        opts = {"timeout": self.geolocation["timeout"], "high_accuracy": self.geolocation["high_accuracy"]}
        if self.center_on_user_enabled:
            backup = self.geolocation_backup
            fallback = f"build({backup.to_js()}, false);" if backup is not None else static
            return geolocation_js(
                "\n    ".join(["build(user_position, false);"] + success),
                "\n    ".join([fallback] + fail),
                **opts,
            )

        if not success and not fail:
            logger.debug("Geolocation enabled on %s without callbacks or centering; nothing to request", self.map_id)
            return static
        return static + "\n" + geolocation_js("\n    ".join(success), "\n    ".join(fail), **opts)

    def figure(self, title: str | None = None, figure: folium.Figure | None = None) -> folium.Figure:
        """Standalone page holding this map. Pass an existing figure to put several maps on one page."""
        fig = figure if figure is not None else folium.Figure(title=title)
        fig.header.add_child(folium.JavascriptLink(self.api_url()), name="google_maps_api")
        fig.html.add_child(_element(self.map_html()), name=f"{self.get_name()}_html")
        fig.script.add_child(_element(self.script_js()), name=f"{self.get_name()}_script")
        return fig

    def render(self, title: str | None = None) -> str:
        return self.figure(title).render()

    def save(self, path, title: str | None = None) -> None:
        self.figure(title).save(path)
        logger.info("Saved map %s to %s", self.map_id, path)