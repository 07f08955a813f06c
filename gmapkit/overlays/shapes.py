# gmapkit/overlays/shapes.py
# Vector overlays: polylines, polygons, circles and rectangles.

import numbers

from ..core import MapObject
from ..geometry import LatLng, LatLngBounds
from ..js import JsRaw, js_object


class Shape(MapObject):
    _js_class = ""

    def __init__(self, stroke_color=None, stroke_opacity=None, stroke_weight=None,
                 fill_color=None, fill_opacity=None, clickable=True, editable=False,
                 draggable=False, geodesic=False, z_index=None):
        super().__init__()
        self.stroke_color = stroke_color
        self.stroke_opacity = stroke_opacity
        self.stroke_weight = stroke_weight
        self.fill_color = fill_color
        self.fill_opacity = fill_opacity
        self.clickable = clickable
        self.editable = editable
        self.draggable = draggable
        self.geodesic = geodesic
        self.z_index = z_index

    def set_stroke(self, color=None, opacity=None, weight=None):
        if color is not None:
            self.stroke_color = color
        if opacity is not None:
            self.stroke_opacity = opacity
        if weight is not None:
            self.stroke_weight = weight
        return self

    def set_fill(self, color=None, opacity=None):
        if color is not None:
            self.fill_color = color
        if opacity is not None:
            self.fill_opacity = opacity
        return self

    def geometry_options(self) -> dict:
        return {}

    def style_options(self) -> dict:
        return {
            "strokeColor": self.stroke_color,
            "strokeOpacity": self.stroke_opacity,
            "strokeWeight": self.stroke_weight,
            "fillColor": self.fill_color,
            "fillOpacity": self.fill_opacity,
            "clickable": None if self.clickable else False,
            "editable": True if self.editable else None,
            "draggable": True if self.draggable else None,
            "geodesic": True if self.geodesic else None,
            "zIndex": self.z_index,
        }

    def options_js(self, map_name: str) -> str:
        opts = {"map": JsRaw(map_name)}
        opts.update(self.geometry_options())
        opts.update(self.style_options())
        return js_object(opts)

    def render_js(self, map_name: str) -> str:
        lines = [f"{self.get_name()} = new google.maps.{self._js_class}({self.options_js(map_name)});"]
        lines += self._listeners_js(map_name)
        return "\n".join(lines)


class Polyline(Shape):
    _name = "polyline"
    _js_class = "Polyline"

    def __init__(self, path, **options):
        super().__init__(**options)
        self.path = [LatLng.parse(p) for p in path]
        if len(self.path) < 2:
            raise ValueError("A polyline needs at least two points")

    def add_point(self, point):
        self.path.append(LatLng.parse(point))
        return self

    def style_options(self) -> dict:
        opts = super().style_options()
        opts.pop("fillColor")
        opts.pop("fillOpacity")
        return opts

    def geometry_options(self) -> dict:
        return {"path": self.path}

    def bounds_points(self) -> list:
        return list(self.path)


class Polygon(Shape):
    """Closed shape; ``paths`` is one ring or a list of rings (outer ring first, holes after)."""

    _name = "polygon"
    _js_class = "Polygon"

    def __init__(self, paths, **options):
        super().__init__(**options)
        paths = list(paths)
        if paths and isinstance(paths[0], (list, tuple)) and paths[0] and not _is_pair(paths[0]):
            rings = paths
        else:
            rings = [paths]
        self.paths = [[LatLng.parse(p) for p in ring] for ring in rings]
        for ring in self.paths:
            if len(ring) < 3:
                raise ValueError("Each polygon ring needs at least three points")

    def geometry_options(self) -> dict:
        return {"paths": self.paths if len(self.paths) > 1 else self.paths[0]}

    def bounds_points(self) -> list:
        return [p for ring in self.paths for p in ring]


class Circle(Shape):
    _name = "circle"
    _js_class = "Circle"

    def __init__(self, center, radius, **options):
        super().__init__(**options)
        self.center = LatLng.parse(center)
        if radius <= 0:
            raise ValueError("Circle radius must be positive (meters)")
        self.radius = float(radius)

    def geometry_options(self) -> dict:
        return {"center": self.center, "radius": self.radius}

    def bounds_points(self) -> list:
        return [self.center]


class Rectangle(Shape):
    _name = "rectangle"
    _js_class = "Rectangle"

    def __init__(self, bounds, **options):
        super().__init__(**options)
        if not isinstance(bounds, LatLngBounds):
            bounds = LatLngBounds.from_points(bounds)
        if bounds is None:
            raise ValueError("A rectangle needs its corner points")
        self.bounds = bounds

    def geometry_options(self) -> dict:
        return {"bounds": self.bounds}

    def bounds_points(self) -> list:
        return [self.bounds.south_west, self.bounds.north_east]


def _is_pair(value) -> bool:
    return (isinstance(value, (list, tuple)) and len(value) == 2
            and all(isinstance(v, numbers.Real) and not isinstance(v, bool) for v in value))
