# geocode.py
"""
command line geocoder with automatic provider fallback

example: geocode --provider google "Eiffel Tower"
"""

import argparse
import logging
import sys

from api.errors import TotalExhaustion
from api.providers import DEFAULT_PROVIDER, PROVIDERS
from backend.config import Settings
from backend.context import format_attempts, format_result_json
from services.fallback import FallbackGeocoder


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geocode",
        usage="geocode --provider <provider> <address>",
        description="Resolve an address to coordinates, falling back across providers.",
    )
    parser.add_argument(
        "--provider",
        default=DEFAULT_PROVIDER,
        help=f"primary geocoding provider (default: {DEFAULT_PROVIDER})",
    )
    parser.add_argument(
        "--list-providers",
        action="store_true",
        help="show providers in fallback order with their credential state and exit",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    # flags are only read before the first address token
    parser.add_argument("address", nargs=argparse.REMAINDER, help="address tokens, joined with spaces")
    return parser


def list_providers(settings: Settings) -> None:
    for provider in PROVIDERS:
        if not provider.requires_credential:
            state = "no key needed"
        elif settings.has_credential(provider.credential_var):
            state = f"{provider.credential_var} set"
        else:
            state = f"{provider.credential_var} not set"
        print(f"{provider.name:<14} {state}")


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )
    settings = Settings.from_env()

    if args.list_providers:
        list_providers(settings)
        return 0

    if not args.address:
        parser.print_usage(sys.stderr)
        return 1

    address = " ".join(args.address)
    geocoder = FallbackGeocoder(settings=settings)
    try:
        result = geocoder.resolve(args.provider, address)
    except TotalExhaustion as exc:
        summary = format_attempts(exc.attempts)
        print(f"All providers failed ({summary})" if summary else "All providers failed", file=sys.stderr)
        return 1

    print(format_result_json(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
