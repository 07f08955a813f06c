# gmapkit/errors.py
# Exception types raised by the package.


class GMapKitError(Exception):
    pass


class ConfigError(GMapKitError):
    pass


class InvalidPositionError(GMapKitError, ValueError):
    pass


class GeocodeError(GMapKitError):
    """Geocoding web service answered with anything other than OK."""

    def __init__(self, status: str, query: str, message: str | None = None):
        self.status = status
        self.query = query
        self.message = message
        text = f"Geocoding {query!r} failed: {status}"
        if message:
            text += f" ({message})"
        super().__init__(text)
