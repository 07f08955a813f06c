# gmapkit/js.py
# Helpers that turn Python values into JavaScript source safe to inline in <script> tags.

import json
import math
import re

# characters that could close a <script> element or start an HTML entity
_SCRIPT_UNSAFE = {"<": "\\u003c", ">": "\\u003e", "&": "\\u0026"}
_IDENT_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_NAME_RE = re.compile(r"^[A-Za-z_$][\w$]*(\.[A-Za-z_$][\w$]*)*$")
_FUNCTION_RE = re.compile(r"^\s*(async\s+)?function\b|^\s*\(?[\w\s,]*\)?\s*=>", re.S)


class JsRaw:
    """Verbatim JavaScript expression."""

    def __init__(self, code: str):
        self.code = code

    def to_js(self) -> str:
        return self.code

    def __eq__(self, other):
        return isinstance(other, JsRaw) and other.code == self.code

    def __repr__(self):
        return f"JsRaw({self.code!r})"


def js_string(text) -> str:
    out = json.dumps(str(text))
    for ch, esc in _SCRIPT_UNSAFE.items():
        out = out.replace(ch, esc)
    return out


def js_value(value) -> str:
    if value is None:
        return "null"
    if hasattr(value, "to_js"):
        return value.to_js()
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"Cannot express {value!r} in JavaScript")
        return repr(value)
    if isinstance(value, str):
        return js_string(value)
    if isinstance(value, dict):
        return js_object(value)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(js_value(v) for v in value) + "]"
    raise TypeError(f"No JavaScript form for {type(value).__name__}")


def js_object(items: dict) -> str:
    parts = []
    for key, value in items.items():
        if value is None:
            continue
        name = key if _IDENT_RE.match(key) else js_string(key)
        parts.append(f"{name}: {js_value(value)}")
    return "{" + ", ".join(parts) + "}"


def js_identifier(text: str) -> str:
    ident = re.sub(r"\W", "_", str(text))
    if not ident or ident[0].isdigit():
        ident = "_" + ident
    return ident


def geolocation_js(on_success: str, on_fail: str, timeout=None, high_accuracy: bool = False) -> str:
    """Browser geolocation request; on_success sees the answer as `user_position` (a google.maps.LatLng)."""
    opts = js_object({
        "enableHighAccuracy": True if high_accuracy else None,
        "timeout": None if timeout is None else int(timeout),
    })
    return (
        "if (navigator.geolocation) {\n"
        "  navigator.geolocation.getCurrentPosition(function (position) {\n"
        "    var user_position = new google.maps.LatLng(position.coords.latitude, position.coords.longitude);\n"
        f"    {on_success}\n"
        f"  }}, function () {{\n    {on_fail}\n  }}, {opts});\n"
        f"}} else {{\n  {on_fail}\n}}"
    )


def is_js_name(code: str) -> bool:
    return bool(_NAME_RE.match(code.strip()))


def js_function(code: str) -> str:
    """Callback source: a bare name or a function literal is kept, anything else becomes a body."""
    code = code.strip()
    if is_js_name(code):
        return code
    if _FUNCTION_RE.match(code):
        return code
    return "function () { " + code + " }"
