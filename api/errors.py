"""
error taxonomy for geocoding provider calls
"""


class GeocodingError(Exception):
    """base class for every geocoding failure"""

    kind = "error"


class CredentialMissing(GeocodingError):
    """the provider needs an api key that is not configured"""

    kind = "credential_missing"


class TransportError(GeocodingError):
    """the http request could not be completed or returned an error status"""

    kind = "transport"


class DecodeError(GeocodingError):
    """the response body is not json or does not match the vendor shape"""

    kind = "decode"


class VendorReportedFailure(GeocodingError):
    """the vendor answered but reported a non-ok status or zero results"""

    kind = "vendor_failure"


class TotalExhaustion(GeocodingError):
    """every provider in the attempt sequence failed"""

    kind = "exhausted"

    def __init__(self, attempts):
        self.attempts = list(attempts)
        super().__init__("All providers failed")
