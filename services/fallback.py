"""
provider fallback orchestration: try the preferred provider first, then the rest in table order
"""

import logging
from typing import Optional, Sequence

import requests

from api.errors import TotalExhaustion
from api.geocoding import ProviderAdapter
from api.providers import PROVIDERS, get_provider
from backend.config import Settings
from models import GeocodeResult, ProviderAttempt

logger = logging.getLogger(__name__)


class FallbackGeocoder:
    """resolves an address by walking the provider table until one succeeds"""

    def __init__(
        self,
        providers: Sequence[ProviderAdapter] = PROVIDERS,
        settings: Optional[Settings] = None,
        session: Optional[requests.Session] = None,
    ):
        self.providers = tuple(providers)
        self.settings = settings if settings is not None else Settings()
        self.session = session

    def attempt_order(self, preferred: str) -> list[ProviderAdapter]:
        """
        build the ordered attempt sequence for ``preferred``

        args:
            preferred: provider name requested by the user, may be unknown

        returns:
            the preferred provider (if known) followed by all others in table order
        """
        selected = get_provider(preferred, self.providers)
        if selected is None:
            logger.warning(
                "provider '%s' not recognized. Falling back to available providers.", preferred
            )
            return list(self.providers)

        if not selected.credential_available(self.settings):
            logger.warning(
                "API key for provider '%s' not set in environment variable %s. "
                "Falling back to other providers.",
                selected.name,
                selected.credential_var,
            )

        return [selected] + [p for p in self.providers if p.name != selected.name]

    def resolve(self, preferred: str, address: str) -> GeocodeResult:
        """
        geocode ``address``, starting with ``preferred``

        args:
            preferred: provider name to try first
            address: free-text address, passed to providers unchanged

        returns:
            GeocodeResult tagged with the provider that produced the coordinates

        raises:
            TotalExhaustion: if every provider failed, with the attempt audit trail
        """
        attempts: list[ProviderAttempt] = []
        for provider in self.attempt_order(preferred):
            outcome = provider.invoke(address, self.settings, self.session)
            if outcome.ok:
                return GeocodeResult(
                    provider=provider.name,
                    address=address,
                    latitude=outcome.latitude,
                    longitude=outcome.longitude,
                )
            logger.warning("provider %s failed: %s", provider.name, outcome.reason)
            attempts.append(
                ProviderAttempt(provider=provider.name, reason=outcome.reason, kind=outcome.kind)
            )

        raise TotalExhaustion(attempts)
