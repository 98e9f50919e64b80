"""
Build and runtime flags consulted when computing default candidates.

Values are read from environment variables when the module is imported, so
they should be set before importing ``swappable``. Tests and applications may
also assign to the fields of the module-level ``settings`` instance directly.
Note that each service class computes its default candidates once, on first
use, and keeps them afterwards.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

__all__ = ["Settings", "settings"]

_TRUTHY = {"1", "true", "yes", "on"}


def _flag(environ: Mapping[str, str], key: str, default: str) -> bool:
    return environ.get(key, default).strip().lower() in _TRUTHY


def _env_name(environ: Mapping[str, str]) -> str:
    return environ.get("SWAPPABLE_ENV", "development")


def _debug(environ: Mapping[str, str]) -> bool:
    return _flag(environ, "SWAPPABLE_DEBUG", str(__debug__))


def _testing(environ: Mapping[str, str]) -> bool:
    return _flag(environ, "SWAPPABLE_TESTING", "false")


@dataclass
class Settings:
    """Flags describing the environment services are resolved in.

    Attributes:
        env: Deployment environment name, e.g. "development", "test" or
            "production" (``SWAPPABLE_ENV``).
        debug: Whether this is a debug build (``SWAPPABLE_DEBUG``). Defaults to
            ``__debug__``, so it is off when Python runs with ``-O``.
        testing: Whether code is currently running under test
            (``SWAPPABLE_TESTING``).
    """

    env: str = field(default_factory=lambda: _env_name(os.environ))
    debug: bool = field(default_factory=lambda: _debug(os.environ))
    testing: bool = field(default_factory=lambda: _testing(os.environ))

    @staticmethod
    def from_environ(environ: Mapping[str, str]) -> "Settings":
        """Build settings from an explicit mapping instead of ``os.environ``."""
        return Settings(_env_name(environ), _debug(environ), _testing(environ))


settings = Settings()
