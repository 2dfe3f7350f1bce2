# backend/__init__.py
"""
configuration and output formatting for the geocoding cli
"""

from .config import Settings
from .context import format_attempts, format_result_json

__all__ = ["Settings", "format_attempts", "format_result_json"]
