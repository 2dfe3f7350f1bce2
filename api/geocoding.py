"""
geocoding provider adapter: one http call, one vendor json shape, one coordinate pair
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

import requests
from pydantic import TypeAdapter, ValidationError

from api.errors import (
    CredentialMissing,
    DecodeError,
    GeocodingError,
    TransportError,
)
from backend.config import Settings
from models import GeocodeFailure, GeocodeOutcome, GeocodeSuccess

logger = logging.getLogger(__name__)

ParamsBuilder = Callable[[str, Optional[str]], dict]
Extractor = Callable[[Any], tuple[float, float]]


def lenient_float(value: Any) -> float:
    """
    convert a vendor coordinate string to float

    malformed input yields 0.0 instead of raising
    """
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.debug("could not parse coordinate %r, using 0.0", value)
        return 0.0


@dataclass(frozen=True)
class ProviderAdapter:
    """
    data-driven description of a geocoding vendor

    attributes:
        name: stable, unique provider identifier used on the command line
        endpoint: base url queried with GET
        build_params: (address, api_key) -> query parameters
        response_shape: pydantic TypeAdapter for the vendor json body
        extract: validated body -> (latitude, longitude), raises VendorReportedFailure
        credential_var: environment variable holding the api key, empty if none
        send_user_agent: attach the configured User-Agent header
    """
    name: str
    endpoint: str
    build_params: ParamsBuilder
    response_shape: TypeAdapter
    extract: Extractor
    credential_var: str = ""
    send_user_agent: bool = False

    @property
    def requires_credential(self) -> bool:
        return bool(self.credential_var)

    def credential_available(self, settings: Settings) -> bool:
        return not self.requires_credential or settings.has_credential(self.credential_var)

    def invoke(
        self,
        address: str,
        settings: Settings,
        session: Optional[requests.Session] = None,
    ) -> GeocodeOutcome:
        """
        geocode ``address`` with this provider

        args:
            address: free-text address, passed through unchanged
            settings: configuration source for the api key and timeout
            session: http session, defaults to the module-level requests api

        returns:
            GeocodeSuccess with the first candidate, or GeocodeFailure with a reason
        """
        try:
            latitude, longitude = self._geocode(address, settings, session)
        except GeocodingError as e:
            return GeocodeFailure(reason=str(e), kind=e.kind)
        return GeocodeSuccess(latitude=latitude, longitude=longitude)

    def _geocode(self, address, settings, session):
        api_key = None
        if self.requires_credential:
            api_key = settings.credential(self.credential_var)
            if api_key is None:
                raise CredentialMissing(f"{self.credential_var} not set")

        headers = {}
        if self.send_user_agent:
            headers["User-Agent"] = settings.user_agent

        http = session if session is not None else requests
        logger.debug("querying %s at %s", self.name, self.endpoint)
        try:
            response = http.get(
                self.endpoint,
                params=self.build_params(address, api_key),
                headers=headers,
                timeout=settings.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise TransportError(str(e)) from e

        try:
            payload = self.response_shape.validate_python(response.json())
        except ValidationError as e:
            raise DecodeError(f"unexpected response shape: {e.error_count()} validation error(s)") from e
        except ValueError as e:
            raise DecodeError(f"invalid json body: {e}") from e

        return self.extract(payload)
