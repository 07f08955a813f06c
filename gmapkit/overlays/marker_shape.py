# gmapkit/overlays/marker_shape.py
# Clickable region of a marker image.

from ..js import js_object

SHAPE_TYPES = ("circle", "poly", "rect")


class MarkerShape:
    def __init__(self, type: str, coords):
        if type not in SHAPE_TYPES:
            raise ValueError(f"Shape type must be one of {SHAPE_TYPES}, got {type!r}")
        coords = [int(c) for c in coords]
        if type == "circle" and len(coords) != 3:
            raise ValueError("circle needs x, y, radius")
        if type == "rect" and len(coords) != 4:
            raise ValueError("rect needs x1, y1, x2, y2")
        if type == "poly" and (len(coords) < 6 or len(coords) % 2):
            raise ValueError("poly needs at least three x, y pairs")
        self.type = type
        self.coords = coords

    @classmethod
    def circle(cls, x, y, radius) -> "MarkerShape":
        return cls("circle", [x, y, radius])

    @classmethod
    def rect(cls, x1, y1, x2, y2) -> "MarkerShape":
        return cls("rect", [x1, y1, x2, y2])

    @classmethod
    def poly(cls, points) -> "MarkerShape":
        return cls("poly", [c for xy in points for c in xy])

    def to_js(self) -> str:
        return js_object({"type": self.type, "coords": self.coords})
