"""
Tests for the geopy-backed distance provider, using a fake geocoder.
"""
import pytest
from geopy.exc import GeocoderTimedOut

from app.services.location import GeopyDistanceProvider


class FakeLocation:
    def __init__(self, latitude, longitude):
        self.latitude = latitude
        self.longitude = longitude


class FakeGeolocator:
    def __init__(self, places, fail_with=None):
        self.places = places
        self.fail_with = fail_with
        self.lookups = []

    def geocode(self, query, timeout=None):
        self.lookups.append(query)
        if self.fail_with is not None:
            raise self.fail_with
        coords = self.places.get(query)
        return FakeLocation(*coords) if coords else None


AUSTIN = "Austin, Texas, United States"
DALLAS = "Dallas, Texas, United States"
PLACES = {AUSTIN: (30.2672, -97.7431), DALLAS: (32.7767, -96.7970)}


def test_identical_locations_skip_geocoding():
    geolocator = FakeGeolocator(PLACES)
    provider = GeopyDistanceProvider(geolocator=geolocator)
    assert provider(AUSTIN, "austin,  Texas,   United States") == 0.0
    assert geolocator.lookups == []


def test_geodesic_distance_in_miles_and_km():
    miles = GeopyDistanceProvider(geolocator=FakeGeolocator(PLACES), unit="miles")(AUSTIN, DALLAS)
    km = GeopyDistanceProvider(geolocator=FakeGeolocator(PLACES), unit="km")(AUSTIN, DALLAS)
    assert 180 < miles < 190
    assert km == pytest.approx(miles * 1.609344, rel=1e-3)


def test_distance_is_symmetric():
    provider = GeopyDistanceProvider(geolocator=FakeGeolocator(PLACES))
    assert provider(AUSTIN, DALLAS) == pytest.approx(provider(DALLAS, AUSTIN))


def test_lookups_are_cached():
    geolocator = FakeGeolocator(PLACES)
    provider = GeopyDistanceProvider(geolocator=geolocator)
    provider(AUSTIN, DALLAS)
    provider(DALLAS, AUSTIN)
    assert sorted(geolocator.lookups) == sorted([AUSTIN, DALLAS])


def test_cache_evicts_least_recently_used():
    geolocator = FakeGeolocator(PLACES)
    provider = GeopyDistanceProvider(geolocator=geolocator, cache_size=2)
    atlantis = "Atlantis, Nowhere, Ocean"

    provider(AUSTIN, DALLAS)
    provider(AUSTIN, atlantis)  # Austin is a hit; Dallas is evicted
    provider(DALLAS, atlantis)  # Dallas is looked up again and evicts Austin

    assert geolocator.lookups == [AUSTIN, DALLAS, atlantis, DALLAS]
    assert provider.cache_info().currsize == 2


def test_unresolvable_locations_do_not_grow_cache_past_limit():
    provider = GeopyDistanceProvider(geolocator=FakeGeolocator(PLACES), cache_size=16)
    for i in range(500):
        assert provider(AUSTIN, f"Nowhere {i}, Void, Ocean") == provider.fallback_distance
    assert provider.cache_info().currsize == 16


def test_unknown_location_uses_fallback():
    provider = GeopyDistanceProvider(geolocator=FakeGeolocator(PLACES), fallback_distance=42)
    assert provider(AUSTIN, "Atlantis, Nowhere, Ocean") == 42


def test_geocoder_timeout_uses_fallback_and_is_retried():
    geolocator = FakeGeolocator(PLACES, fail_with=GeocoderTimedOut("slow"))
    provider = GeopyDistanceProvider(geolocator=geolocator, fallback_distance=50)
    assert provider(AUSTIN, DALLAS) == 50
    geolocator.fail_with = None
    assert 180 < provider(AUSTIN, DALLAS) < 190


def test_rejects_unknown_unit():
    with pytest.raises(ValueError):
        GeopyDistanceProvider(geolocator=FakeGeolocator(PLACES), unit="furlongs")
