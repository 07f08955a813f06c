# gmapkit/events.py
# Event listeners attached when the map initializer runs.

from .js import js_function, js_string


class EventListener:
    """google.maps.event listener on the map or one of its overlays."""

    def __init__(self, target, event: str, function: str, once: bool = False):
        self.target = target
        self.event = event
        self.function = function
        self.once = once

    def add_to(self, gmap):
        gmap.add_object(self)
        return self

    def render_js(self, map_name: str) -> str:
        method = "addListenerOnce" if self.once else "addListener"
        target = self.target.get_name() if self.target is not None else map_name
        return f"google.maps.event.{method}({target}, {js_string(self.event)}, {js_function(self.function)});"


class DomEventListener:
    """Plain DOM listener, looked up by element id."""

    def __init__(self, element_id: str, event: str, function: str):
        self.element_id = element_id
        self.event = event
        self.function = function

    def add_to(self, gmap):
        gmap.add_object(self)
        return self

    def render_js(self, map_name: str) -> str:
        return (
            "(function (el) { if (el) { el.addEventListener("
            f"{js_string(self.event)}, {js_function(self.function)}); }} }})"
            f"(document.getElementById({js_string(self.element_id)}));"
        )
