"""
runtime configuration for the geocoding cli

credentials are looked up when a provider is called, not when settings are built
"""

import logging
import os
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "geofallback/0.1"

TIMEOUT_VAR = "GEOCODE_TIMEOUT"
USER_AGENT_VAR = "GEOCODE_USER_AGENT"


class Settings:
    """key-value configuration source injected into providers and the orchestrator"""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = os.environ if environ is None else environ

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "Settings":
        """
        build settings backed by the process environment

        args:
            dotenv_path: optional .env file; variables already set in the environment win

        returns:
            settings reading from os.environ
        """
        load_dotenv(dotenv_path or find_dotenv(usecwd=True))
        return cls(os.environ)

    def get(self, name: str, default: str = "") -> str:
        return self._environ.get(name) or default

    def credential(self, name: str) -> Optional[str]:
        """return the credential stored under ``name``, or None when unset or empty"""
        if not name:
            return None
        return self._environ.get(name) or None

    def has_credential(self, name: str) -> bool:
        return self.credential(name) is not None

    @property
    def timeout(self) -> Optional[float]:
        raw = self.get(TIMEOUT_VAR)
        if not raw:
            return None
        try:
            value = float(raw)
        except ValueError:
            logger.warning("ignoring %s=%r: not a number", TIMEOUT_VAR, raw)
            return None
        if value <= 0:
            logger.warning("ignoring %s=%r: must be positive", TIMEOUT_VAR, raw)
            return None
        return value

    @property
    def user_agent(self) -> str:
        return self.get(USER_AGENT_VAR, DEFAULT_USER_AGENT)
