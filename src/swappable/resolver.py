"""Lookup of service variants in a container.

A variant of ``service:foo`` tagged ``bar`` is registered as ``service:foo/-bar``.
Tags may themselves be paths: ``bar/baz`` is registered as
``service:foo/bar/-baz``, with only the trailing segment marked.
"""

import logging
from typing import Any, Optional, Sequence

from swappable.domain import is_service_name
from swappable.errors import ContractViolation

__all__ = ["resolve_variant", "variant_name"]

logger = logging.getLogger(__name__)


def variant_name(full_name: str, candidate: str) -> str:
    """Build the fully-qualified registration name of a variant.

    Example:
        >>> variant_name("service:foo", "bar/baz")
        'service:foo/bar/-baz'
    """
    *path, last = candidate.split("/")
    return "/".join([full_name, *path, f"-{last}"])


def resolve_variant(
    registry: Any, full_name: str, candidates: Sequence[str]
) -> Optional[type]:
    """Find the first registered variant of a service.

    Candidates are tried in order and the first one registered wins; later
    candidates are not consulted.

    Args:
        registry: A container exposing ``has_registration(name)`` and
            ``factory_for(name)``.
        full_name: The logical name of the service, e.g. ``service:foo``. The
            service itself must be registered.
        candidates: Ordered variant tags to try, e.g. ``["debug", "default"]``.

    Returns:
        The class registered for the first matching candidate, or ``None`` if
        none of them are registered.

    Raises:
        ContractViolation: If the registry, name, candidates or a matching
            factory are malformed, or the service itself is not registered.
    """
    _validate_registry(registry)

    if not is_service_name(full_name):
        raise ContractViolation(f"expected '{full_name}' to be a service name")

    if not registry.has_registration(full_name):
        raise ContractViolation(f"expected '{full_name}' to be registered")

    if not isinstance(candidates, (list, tuple)) or not all(
        isinstance(candidate, str) for candidate in candidates
    ):
        raise ContractViolation(
            f"expected candidates to be a list of strings, got {candidates!r}"
        )

    for candidate in candidates:
        candidate_name = variant_name(full_name, candidate)
        if not registry.has_registration(candidate_name):
            logger.debug("No variant registered as %s", candidate_name)
            continue

        factory = registry.factory_for(candidate_name)
        if factory is None or not callable(getattr(factory, "cls", None)):
            raise ContractViolation(
                f"expected '{candidate_name}' to be a valid factory"
            )

        logger.debug("Resolved %s to %s", full_name, candidate_name)
        return factory.cls

    logger.debug("No variant of %s found among %s", full_name, candidates)
    return None


def _validate_registry(registry: Any):
    for method in ("has_registration", "factory_for"):
        if not callable(getattr(registry, method, None)):
            raise ContractViolation(f"expected registry.{method} to be a function")
