"""
geocoding vendor adapters
"""

from .errors import (
    CredentialMissing,
    DecodeError,
    GeocodingError,
    TotalExhaustion,
    TransportError,
    VendorReportedFailure,
)
from .geocoding import ProviderAdapter, lenient_float
from .providers import DEFAULT_PROVIDER, PROVIDERS, get_provider, provider_names

__all__ = [
    "CredentialMissing",
    "DecodeError",
    "GeocodingError",
    "TotalExhaustion",
    "TransportError",
    "VendorReportedFailure",
    "ProviderAdapter",
    "lenient_float",
    "DEFAULT_PROVIDER",
    "PROVIDERS",
    "get_provider",
    "provider_names",
]
