"""
table of supported geocoding vendors

order matters: it is the fallback order when no preference applies,
keyless providers go last
"""

from typing import Optional

from pydantic import TypeAdapter

from api.errors import VendorReportedFailure
from api.geocoding import ProviderAdapter, lenient_float
from models import (
    GoogleGeocodeResponse,
    MapQuestResponse,
    NominatimPlace,
    OpenCageResponse,
    PositionstackResponse,
)

DEFAULT_PROVIDER = "osm"


def _google(payload: GoogleGeocodeResponse) -> tuple[float, float]:
    if payload.status != "OK" or not payload.results:
        raise VendorReportedFailure(f"no results (status: {payload.status})")
    location = payload.results[0].geometry.location
    return location.lat, location.lng


def _positionstack(payload: PositionstackResponse) -> tuple[float, float]:
    if not payload.data:
        raise VendorReportedFailure("no results")
    first = payload.data[0]
    return first.latitude, first.longitude


def _opencage(payload: OpenCageResponse) -> tuple[float, float]:
    if not payload.results:
        raise VendorReportedFailure("no results")
    geometry = payload.results[0].geometry
    return geometry.lat, geometry.lng


def _nominatim_style(payload: list[NominatimPlace]) -> tuple[float, float]:
    # nominatim and locationiq send lat/lon as strings
    if not payload:
        raise VendorReportedFailure("no results")
    return lenient_float(payload[0].lat), lenient_float(payload[0].lon)


def _mapquest(payload: MapQuestResponse) -> tuple[float, float]:
    if payload.info.statuscode != 0 or not payload.results or not payload.results[0].locations:
        raise VendorReportedFailure("no results")
    lat_lng = payload.results[0].locations[0].latLng
    return lat_lng.lat, lat_lng.lng


_places = TypeAdapter(list[NominatimPlace])

PROVIDERS: tuple[ProviderAdapter, ...] = (
    ProviderAdapter(
        name="google",
        endpoint="https://maps.googleapis.com/maps/api/geocode/json",
        credential_var="GOOGLE_API_KEY",
        build_params=lambda address, key: {"address": address, "key": key},
        response_shape=TypeAdapter(GoogleGeocodeResponse),
        extract=_google,
    ),
    ProviderAdapter(
        name="positionstack",
        endpoint="http://api.positionstack.com/v1/forward",
        credential_var="POSITIONSTACK_KEY",
        build_params=lambda address, key: {"access_key": key, "query": address, "limit": 1},
        response_shape=TypeAdapter(PositionstackResponse),
        extract=_positionstack,
    ),
    ProviderAdapter(
        name="opencage",
        endpoint="https://api.opencagedata.com/geocode/v1/json",
        credential_var="OPENCAGE_KEY",
        build_params=lambda address, key: {"q": address, "key": key, "limit": 1},
        response_shape=TypeAdapter(OpenCageResponse),
        extract=_opencage,
    ),
    ProviderAdapter(
        name="locationiq",
        endpoint="https://us1.locationiq.com/v1/search.php",
        credential_var="LOCATIONIQ_KEY",
        build_params=lambda address, key: {"key": key, "q": address, "format": "json", "limit": 1},
        response_shape=_places,
        extract=_nominatim_style,
    ),
    ProviderAdapter(
        name="mapquest",
        endpoint="http://www.mapquestapi.com/geocoding/v1/address",
        credential_var="MAPQUEST_KEY",
        build_params=lambda address, key: {"key": key, "location": address},
        response_shape=TypeAdapter(MapQuestResponse),
        extract=_mapquest,
    ),
    ProviderAdapter(
        name="osm",
        endpoint="https://nominatim.openstreetmap.org/search",
        build_params=lambda address, key: {"q": address, "format": "json", "limit": 1},
        response_shape=_places,
        extract=_nominatim_style,
        send_user_agent=True,
    ),
)


def get_provider(name: str, providers=PROVIDERS) -> Optional[ProviderAdapter]:
    """exact, case-sensitive lookup by provider name"""
    for provider in providers:
        if provider.name == name:
            return provider
    return None


def provider_names(providers=PROVIDERS) -> list[str]:
    return [provider.name for provider in providers]
