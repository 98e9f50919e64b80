"""
Base classes for services whose implementation is chosen at construction time.

The "main" class of a service is registered under its logical name, e.g.
``service:foo``, and variants of it under ``service:foo/-<tag>``. When the
container constructs ``service:foo``, the main class looks for a variant
matching one of its candidates and instantiates that instead. If none is
registered, the main class is instantiated itself, unless it is abstract.

Example:
    >>> from swappable.registry import ServiceRegistry
    >>> registry = ServiceRegistry()
    >>>
    >>> @registry.provides("service:mailer")
    ... class Mailer(AbstractService):
    ...     def send(self, message): ...
    >>>
    >>> @registry.provides("service:mailer/-testing")
    ... class RecordingMailer(Mailer):
    ...     def send(self, message): self.sent.append(message)
    >>>
    >>> registry.lookup("service:mailer")  # a RecordingMailer while testing
"""

import logging
from typing import Any, ClassVar, Optional

from swappable.config import settings
from swappable.domain import Resolution, ResolutionKind, is_service_name
from swappable.errors import ConstructionError, ContractViolation
from swappable.props import owner_from_props, service_full_name
from swappable.resolver import resolve_variant

__all__ = ["Service", "AbstractService", "default_candidates"]

logger = logging.getLogger(__name__)


def default_candidates() -> list[str]:
    """Compute the default candidates from the current ``settings``.

    In priority order: "testing" while under test, "debug" in debug builds, the
    deployment environment name, and finally "default".
    """
    candidates = [settings.env, "default"]

    if settings.debug:
        candidates.insert(0, "debug")

    if settings.testing:
        candidates.insert(0, "testing")

    return candidates


class Service:
    """Base class for swappable services.

    Attributes:
        candidates: Explicit ordered list of variant tags to search for. When
            left as ``None`` the defaults from :func:`default_candidates` are
            used. Setting it, in the class body or by assignment, replaces the
            defaults entirely. To extend the defaults instead, override
            :meth:`get_candidates` and build on ``super().get_candidates()``.
        is_abstract: Whether the main class exists only to define the
            interface. Abstract services raise :class:`ConstructionError`
            rather than instantiating themselves when no variant is found.
        owner: The container that constructed this instance.
    """

    is_service_factory: ClassVar[bool] = True
    is_abstract: ClassVar[bool] = False
    candidates: ClassVar[Optional[list[str]]] = None

    def __init__(self, owner: Any):
        self.owner = owner

    @classmethod
    def get_candidates(cls) -> list[str]:
        if isinstance(cls.candidates, (list, tuple)):
            return list(cls.candidates)
        if cls.candidates is not None:
            return cls.candidates

        # Computed once per class; later changes to settings are not seen.
        if "_default_candidates" not in cls.__dict__:
            cls._default_candidates = default_candidates()
        return list(cls._default_candidates)

    @classmethod
    def resolve(cls, owner: Any, full_name: str, candidates: list[str]) -> Resolution:
        """Hook for overriding how variant classes are resolved.

        By default variants are looked up in the owner at runtime, which only
        works when every variant is registered with it.

        Args:
            owner: The container constructing the service.
            full_name: The logical name of the service, e.g. ``service:foo``.
            candidates: The result of :meth:`get_candidates`.

        Returns:
            The :class:`Resolution` to act upon.
        """
        variant = resolve_variant(owner, full_name, candidates)
        if variant is None:
            return Resolution.use_requester()
        return Resolution.found(variant)

    @classmethod
    def create(cls, props: Any) -> "Service":
        """Construct the service from the props a container passes to factories."""
        return cls.construct(owner_from_props(props), service_full_name(props))

    @classmethod
    def construct(cls, owner: Any, full_name: str) -> "Service":
        """Construct an instance of the best available implementation.

        Args:
            owner: The container; passed on to the constructed instance.
            full_name: The logical name the service was requested under.

        Raises:
            ContractViolation: If the name, candidates or resolution are malformed.
            ConstructionError: If no implementation is available.
        """
        if not is_service_name(full_name):
            raise ContractViolation(f"expected '{full_name}' to be a service name")

        candidates = cls.get_candidates()
        if (
            not isinstance(candidates, (list, tuple))
            or len(candidates) == 0
            or not all(isinstance(candidate, str) for candidate in candidates)
        ):
            raise ContractViolation(
                f"expected {cls.__name__}.candidates to be a non-empty list of strings, "
                f"got {candidates!r}"
            )

        resolution = cls.resolve(owner, full_name, candidates)
        if not isinstance(resolution, Resolution):
            raise ContractViolation(
                f"expected {cls.__name__}.resolve to return a Resolution, got {resolution!r}"
            )

        if resolution.kind is ResolutionKind.FOUND:
            service_class = resolution.service_class
            if not callable(service_class):
                raise ContractViolation(
                    f"expected {cls.__name__}.resolve to find a class, got {service_class!r}"
                )
        elif resolution.kind is ResolutionKind.USE_REQUESTER and not cls.is_abstract:
            service_class = cls
        else:
            raise ConstructionError(full_name, list(candidates))

        logger.debug("Constructing %s as %r", full_name, service_class)
        return service_class(owner)


class AbstractService(Service):
    """A :class:`Service` which is never instantiated as a fallback."""

    is_abstract: ClassVar[bool] = True
