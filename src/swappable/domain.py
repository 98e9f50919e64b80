"""Domain models used throughout the package."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

__all__ = [
    "SERVICE_PREFIX",
    "Factory",
    "Resolution",
    "ResolutionKind",
    "is_service_name",
]

SERVICE_PREFIX = "service:"


def is_service_name(name: Any) -> bool:
    """Check that ``name`` is a logical service name such as ``service:nested/foo``."""
    return isinstance(name, str) and name.startswith(SERVICE_PREFIX)


@dataclass(frozen=True)
class Factory:
    """A registration held by a container.

    Attributes:
        full_name: The fully-qualified name the factory is registered under.
        cls: The constructible class (or other callable) registered.
    """

    full_name: str
    cls: Callable


class ResolutionKind(Enum):
    FOUND = "found"
    USE_REQUESTER = "use_requester"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving a service class to an implementation.

    ``FOUND`` carries the variant class, ``USE_REQUESTER`` means the class whose
    construction was requested should be used itself, and ``NOT_FOUND`` means
    nothing is available at all.
    """

    kind: ResolutionKind
    service_class: Optional[type] = None

    @staticmethod
    def found(service_class: type) -> "Resolution":
        return Resolution(ResolutionKind.FOUND, service_class)

    @staticmethod
    def use_requester() -> "Resolution":
        return Resolution(ResolutionKind.USE_REQUESTER)

    @staticmethod
    def not_found() -> "Resolution":
        return Resolution(ResolutionKind.NOT_FOUND)
