# gmapkit/core.py
# Base class for everything a map can hold: naming, chaining and listeners.

import uuid

from .events import EventListener


class MapObject:
    _name = "object"

    def __init__(self):
        self._id = uuid.uuid4().hex
        self._listeners = []

    def get_name(self) -> str:
        """JavaScript variable holding this object once the map is built."""
        return f"{self._name}_{self._id}"

    def add_to(self, gmap):
        gmap.add_object(self)
        return self

    def add_listener(self, event: str, function: str, once: bool = False):
        self._listeners.append(EventListener(self, event, function, once))
        return self

    def bounds_points(self) -> list:
        # positions known server-side, used to auto-fit the map
        return []

    def declarations(self) -> list[str]:
        return [self.get_name()]

    def render_js(self, map_name: str) -> str:
        raise NotImplementedError

    def _listeners_js(self, map_name: str) -> list[str]:
        return [listener.render_js(map_name) for listener in self._listeners]
