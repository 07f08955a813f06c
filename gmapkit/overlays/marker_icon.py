# gmapkit/overlays/marker_icon.py
# Custom marker images with size, anchor and sprite origin.
#
# Example:
#   icon = MarkerIcon("https://example.com/pin.png").set_size(30, 30)
#   marker.set_icon(icon)

import io
import logging

import requests
from PIL import Image

from ..config import HTTP_TIMEOUT, USER_AGENT
from ..js import JsRaw, js_object

logger = logging.getLogger(__name__)


def fetch_image_size(url: str, timeout: float = HTTP_TIMEOUT, session=None) -> tuple[int, int] | None:
    """Return (width, height) of the image at url (http(s) or local path), or None if it can't be read."""
    try:
        if url.startswith(("http://", "https://")):
            http = session or requests
            r = http.get(url, headers={"User-Agent": USER_AGENT}, timeout=timeout)
            r.raise_for_status()
            source = io.BytesIO(r.content)
        else:
            source = url
        with Image.open(source) as img:
            return img.size
    except (requests.RequestException, OSError, Image.DecompressionBombError) as e:
        logger.warning("Could not read image size of %s: %s", url, e)
        return None


def _point(x, y) -> JsRaw:
    return JsRaw(f"new google.maps.Point({x}, {y})")


def _size(w, h) -> JsRaw:
    return JsRaw(f"new google.maps.Size({w}, {h})")


class MarkerIcon:
    """Marker image.

    Dimensions not given are read from the image itself. Unless set explicitly
    the anchor follows the size, (width // 2, height), i.e. the bottom centre of
    the image sits on the marked coordinate. The origin only matters for sprites
    and defaults to (0, 0).
    """

    def __init__(self, url: str, width=None, height=None, anchor_x=None, anchor_y=None,
                 origin_x=0, origin_y=0):
        self.url = url
        self.width = None
        self.height = None
        self.scaled_size = None

        if width is None or height is None:
            size = fetch_image_size(url)
            if size is not None:
                self.width, self.height = size
        if width is not None:
            self.width = int(width)
        if height is not None:
            self.height = int(height)

        self._anchor_x = None if anchor_x is None else int(anchor_x)
        self._anchor_y = None if anchor_y is None else int(anchor_y)
        self.origin_x = int(origin_x)
        self.origin_y = int(origin_y)

    @classmethod
    def create(cls, url: str, *args, **options) -> "MarkerIcon":
        return cls(url, *args, **options)

    @property
    def anchor_x(self):
        if self._anchor_x is not None:
            return self._anchor_x
        return None if self.width is None else self.width // 2

    @property
    def anchor_y(self):
        if self._anchor_y is not None:
            return self._anchor_y
        return self.height

    @property
    def anchor(self) -> tuple:
        return self.anchor_x, self.anchor_y

    @property
    def origin(self) -> tuple:
        return self.origin_x, self.origin_y

    def set_width(self, width):
        self.width = int(width)
        return self

    def set_height(self, height):
        self.height = int(height)
        return self

    def set_size(self, width, height):
        self.width = int(width)
        self.height = int(height)
        return self

    def set_scaled_size(self, width, height):
        self.scaled_size = (int(width), int(height))
        return self

    def set_anchor(self, x=None, y=None):
        if x is not None:
            self._anchor_x = int(x)
        if y is not None:
            self._anchor_y = int(y)
        return self

    def set_origin(self, x=None, y=None):
        if x is not None:
            self.origin_x = int(x)
        if y is not None:
            self.origin_y = int(y)
        return self

    def to_js(self) -> str:
        icon = {"url": self.url}
        if self.width is not None and self.height is not None:
            icon["size"] = _size(self.width, self.height)
        if self.scaled_size is not None:
            icon["scaledSize"] = _size(*self.scaled_size)
        icon["origin"] = _point(self.origin_x, self.origin_y)
        if None not in self.anchor:
            icon["anchor"] = _point(*self.anchor)
        return js_object(icon)

    def __str__(self):
        return self.url

    def __repr__(self):
        return f"MarkerIcon({self.url!r}, width={self.width}, height={self.height})"
