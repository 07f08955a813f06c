# gmapkit/config.py
# Endpoints, map defaults and the per-project settings (JSON file, then environment).

import json
import os
from dataclasses import dataclass, field, fields
from pathlib import Path

from .errors import ConfigError

# ---------- endpoints ----------
MAPS_JS_URL = "https://maps.googleapis.com/maps/api/js"
GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"

HTTP_TIMEOUT = 30
USER_AGENT = "Mozilla/5.0 (compatible; gmapkit/0.1)"

# ---------- map defaults ----------
DEFAULT_MAP_ID = "map"
DEFAULT_WIDTH = "100%"
DEFAULT_HEIGHT = "400px"
DEFAULT_ZOOM = 7
DEFAULT_CENTER = (0.0, 0.0)
DEFAULT_MAP_TYPE = "roadmap"

MAP_TYPES = ("roadmap", "satellite", "hybrid", "terrain")
MIN_ZOOM, MAX_ZOOM = 0, 22

ENV_VARS = {
    "api_key": "GOOGLE_MAPS_API_KEY",
    "language": "GOOGLE_MAPS_LANGUAGE",
    "region": "GOOGLE_MAPS_REGION",
}


@dataclass
class MapsConfig:
    api_key: str | None = None
    language: str | None = None
    region: str | None = None
    libraries: list[str] = field(default_factory=list)
    version: str | None = None
    timeout: float = HTTP_TIMEOUT

    @classmethod
    def load(cls, path: str | None = None) -> "MapsConfig":
        """JSON file values first, environment variables fill whatever is left unset."""
        data = load_json(path)
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        for key, env in ENV_VARS.items():
            if data.get(key) is None and os.getenv(env):
                data[key] = os.getenv(env)
        return cls(**data)


def load_json(path: str | None) -> dict:
    if not path:
        return {}
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Config file not found: {path}")
    with p.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}")
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must hold an object: {path}")
    return data
