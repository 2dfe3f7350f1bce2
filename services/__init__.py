"""
business logic services
"""

from .fallback import FallbackGeocoder

__all__ = ["FallbackGeocoder"]
