from __future__ import annotations
import functools
from typing import Optional, Protocol, Tuple
from geopy.distance import geodesic
from geopy.exc import GeocoderTimedOut, GeocoderUnavailable
from geopy.geocoders import Nominatim
from app.config import settings
from app.utils.logger import get_logger

logger = get_logger(__name__)


class DistanceProvider(Protocol):
    """Non-negative distance between two "city, state, country" strings."""

    def __call__(self, location1: str, location2: str) -> float: ...


def _normalize(location: str) -> str:
    return " ".join(location.lower().split())


class GeopyDistanceProvider:
    """
    Geodesic distance between geocoded localities.

    Identical locations short-circuit to 0 without a lookup. A locality the
    geocoder cannot resolve yields `fallback_distance`.
    """

    def __init__(
        self,
        geolocator=None,
        unit: str = settings.DISTANCE_UNIT,
        fallback_distance: float = settings.LOCATION_FALLBACK_DISTANCE,
        timeout: int = settings.GEOCODER_TIMEOUT,
        cache_size: int = settings.GEOCODER_CACHE_SIZE,
    ):
        if unit not in {"miles", "km"}:
            raise ValueError(f"Unsupported distance unit: {unit}")
        self._geolocator = geolocator or Nominatim(user_agent=settings.GEOCODER_USER_AGENT)
        self.unit = unit
        self.fallback_distance = fallback_distance
        self.timeout = timeout
        # Least recently used localities are evicted past cache_size
        self._cached_geocode = functools.lru_cache(maxsize=cache_size)(self._geocode)

    def _geocode(self, location: str) -> Optional[Tuple[float, float]]:
        found = self._geolocator.geocode(location, timeout=self.timeout)
        if not found:
            return None
        return (found.latitude, found.longitude)

    def _get_lat_lon(self, location: str) -> Optional[Tuple[float, float]]:
        try:
            return self._cached_geocode(location)
        except (GeocoderTimedOut, GeocoderUnavailable) as e:
            # Raised before the cache stores anything, so a later run retries
            logger.warning(f"Geocoding failed for '{location}': {e}")
            return None

    def cache_info(self):
        return self._cached_geocode.cache_info()

    def __call__(self, location1: str, location2: str) -> float:
        if _normalize(location1) == _normalize(location2):
            return 0.0
        coords1 = self._get_lat_lon(location1)
        coords2 = self._get_lat_lon(location2)
        if coords1 is None or coords2 is None:
            return self.fallback_distance
        distance = geodesic(coords1, coords2)
        return distance.miles if self.unit == "miles" else distance.km


_default_provider: Optional[GeopyDistanceProvider] = None


def get_default_distance_provider() -> GeopyDistanceProvider:
    """Process-wide provider so the geocode cache is shared between runs."""
    global _default_provider
    if _default_provider is None:
        _default_provider = GeopyDistanceProvider()
    return _default_provider
