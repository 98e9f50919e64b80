"""Swappable services.

Pick one implementation of a service out of an ordered list of named variants,
based on whether code is under test, whether this is a debug build and which
deployment environment is active, falling back to the service's main class.

Basic Usage:
    >>> import time
    >>> from swappable import ServiceRegistry, Service
    >>>
    >>> registry = ServiceRegistry()
    >>>
    >>> @registry.provides("service:clock")
    ... class Clock(Service):
    ...     def now(self): return time.time()
    >>>
    >>> @registry.provides("service:clock/-testing")
    ... class FrozenClock(Clock):
    ...     def now(self): return 0
    >>>
    >>> registry.lookup("service:clock").now()

The package consists of several modules:
    - service: the Service and AbstractService base classes
    - resolver: lookup of variants in a container
    - registry: an in-memory container
    - config: the environment flags behind the default candidates
    - exclusion: patterns for variants that cannot apply in an environment
    - props: construction props passed from a container to a service
    - domain: core domain models (Factory, Resolution)
    - errors: package-specific exceptions
"""

from swappable.domain import Factory, Resolution, ResolutionKind
from swappable.errors import (
    ConfigurationError,
    ConstructionError,
    ContractViolation,
    SwappableError,
)
from swappable.registry import ServiceRegistry
from swappable.resolver import resolve_variant
from swappable.service import AbstractService, Service

__all__ = [
    "AbstractService",
    "ConfigurationError",
    "ConstructionError",
    "ContractViolation",
    "Factory",
    "Resolution",
    "ResolutionKind",
    "Service",
    "ServiceRegistry",
    "SwappableError",
    "resolve_variant",
]
