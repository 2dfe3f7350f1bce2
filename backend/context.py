"""
output formatting for geocoding results
"""

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from models import GeocodeResult, ProviderAttempt


def format_result_json(result: "GeocodeResult") -> str:
    """
    render a result as the pretty-printed json object written to stdout

    args:
        result: GeocodeResult model instance

    returns:
        json text with keys provider, address, latitude, longitude
    """
    return result.model_dump_json(indent=2)


def format_attempts(attempts: Iterable["ProviderAttempt"]) -> str:
    """one-line summary of every failed attempt, in the order they were tried"""
    return "; ".join(f"{attempt.provider}: {attempt.reason}" for attempt in attempts)
