from .geocoder import GeocodeResult, Geocoder, default_geocoder, geocode, resolve_position

__all__ = ["GeocodeResult", "Geocoder", "default_geocoder", "geocode", "resolve_position"]
