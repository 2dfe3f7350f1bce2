"""
pydantic models for geocoding results and vendor response validation
"""

from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt


class GeocodeResult(BaseModel):
    """final resolved location, tagged with the provider that produced it"""
    provider: str = Field(description="name of the provider whose response was used")
    address: str = Field(description="address exactly as it was queried")
    latitude: float = Field(description="latitude in decimal degrees")
    longitude: float = Field(description="longitude in decimal degrees")


class GeocodeSuccess(BaseModel):
    """coordinates extracted from one provider response"""
    latitude: float
    longitude: float

    @property
    def ok(self) -> bool:
        return True


class GeocodeFailure(BaseModel):
    """reason a single provider call did not yield coordinates"""
    reason: str
    kind: str = "error"

    @property
    def ok(self) -> bool:
        return False


GeocodeOutcome = Union[GeocodeSuccess, GeocodeFailure]


class ProviderAttempt(BaseModel):
    """one failed attempt in the fallback audit trail"""
    provider: str
    reason: str
    kind: str


# api response validation models
class VendorModel(BaseModel):
    """base for vendor payloads: unknown fields are ignored"""
    model_config = ConfigDict(extra="ignore")


class LatLng(VendorModel):
    lat: StrictFloat = 0.0
    lng: StrictFloat = 0.0


class GoogleGeometry(VendorModel):
    location: LatLng = Field(default_factory=LatLng)


class GoogleResult(VendorModel):
    geometry: GoogleGeometry = Field(default_factory=GoogleGeometry)


class GoogleGeocodeResponse(VendorModel):
    """validation model for google geocoding api response"""
    results: list[GoogleResult] = []
    status: str = ""


class NominatimPlace(VendorModel):
    """
    one search hit from nominatim or locationiq

    both services return coordinates as strings, null is treated as empty
    """
    lat: Optional[str] = ""
    lon: Optional[str] = ""


class PositionstackPlace(VendorModel):
    latitude: StrictFloat = 0.0
    longitude: StrictFloat = 0.0


class PositionstackResponse(VendorModel):
    """validation model for positionstack forward geocoding response"""
    data: list[PositionstackPlace] = []


class OpenCageResult(VendorModel):
    geometry: LatLng = Field(default_factory=LatLng)


class OpenCageResponse(VendorModel):
    """validation model for opencage geocoding response"""
    results: list[OpenCageResult] = []


class MapQuestLocation(VendorModel):
    latLng: LatLng = Field(default_factory=LatLng)


class MapQuestResult(VendorModel):
    locations: list[MapQuestLocation] = []


class MapQuestInfo(VendorModel):
    statuscode: StrictInt = 0


class MapQuestResponse(VendorModel):
    """validation model for mapquest geocoding response"""
    results: list[MapQuestResult] = []
    info: MapQuestInfo = Field(default_factory=MapQuestInfo)


__all__ = [
    "GeocodeResult",
    "GeocodeSuccess",
    "GeocodeFailure",
    "GeocodeOutcome",
    "ProviderAttempt",
    "GoogleGeocodeResponse",
    "NominatimPlace",
    "PositionstackResponse",
    "OpenCageResponse",
    "MapQuestResponse",
]
