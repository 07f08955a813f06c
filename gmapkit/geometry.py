# gmapkit/geometry.py
# Coordinates and bounding boxes, with their google.maps constructors.

from dataclasses import dataclass

from .errors import InvalidPositionError


@dataclass(frozen=True)
class LatLng:
    lat: float
    lng: float

    def __post_init__(self):
        try:
            lat, lng = float(self.lat), float(self.lng)
        except (TypeError, ValueError):
            raise InvalidPositionError(f"Not a coordinate: ({self.lat!r}, {self.lng!r})")
        if not -90.0 <= lat <= 90.0:
            raise InvalidPositionError(f"Latitude out of range: {lat}")
        if not -180.0 <= lng <= 180.0:
            raise InvalidPositionError(f"Longitude out of range: {lng}")
        object.__setattr__(self, "lat", lat)
        object.__setattr__(self, "lng", lng)

    @classmethod
    def parse(cls, value) -> "LatLng":
        """Accept a LatLng, a (lat, lng) pair or a "lat,lng" string."""
        if isinstance(value, LatLng):
            return value
        if isinstance(value, str):
            parts = value.split(",")
            if len(parts) != 2:
                raise InvalidPositionError(f"Expected 'lat,lng', got {value!r}")
            return cls(parts[0].strip(), parts[1].strip())
        if isinstance(value, (tuple, list)) and len(value) == 2:
            return cls(value[0], value[1])
        raise InvalidPositionError(f"Cannot read a position from {value!r}")

    def to_js(self) -> str:
        return f"new google.maps.LatLng({self.lat!r}, {self.lng!r})"

    def __str__(self):
        return f"{self.lat},{self.lng}"


@dataclass(frozen=True)
class LatLngBounds:
    south_west: LatLng
    north_east: LatLng

    @classmethod
    def from_points(cls, points) -> "LatLngBounds | None":
        pts = [LatLng.parse(p) for p in points]
        if not pts:
            return None
        return cls(
            LatLng(min(p.lat for p in pts), min(p.lng for p in pts)),
            LatLng(max(p.lat for p in pts), max(p.lng for p in pts)),
        )

    def extend(self, point) -> "LatLngBounds":
        return LatLngBounds.from_points([self.south_west, self.north_east, point])

    def center(self) -> LatLng:
        return LatLng(
            (self.south_west.lat + self.north_east.lat) / 2,
            (self.south_west.lng + self.north_east.lng) / 2,
        )

    def contains(self, point) -> bool:
        p = LatLng.parse(point)
        return (self.south_west.lat <= p.lat <= self.north_east.lat
                and self.south_west.lng <= p.lng <= self.north_east.lng)

    def is_point(self) -> bool:
        return self.south_west == self.north_east

    def to_js(self) -> str:
        return f"new google.maps.LatLngBounds({self.south_west.to_js()}, {self.north_east.to_js()})"
