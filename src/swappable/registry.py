"""An in-memory container implementing the registry interface services resolve against."""

import logging
from typing import Any, Callable, Optional, Sequence

from swappable.config import Settings
from swappable.domain import Factory
from swappable.errors import ContractViolation
from swappable.exclusion import excluded_patterns, is_excluded
from swappable.props import make_props

__all__ = ["ServiceRegistry"]

logger = logging.getLogger(__name__)


class ServiceRegistry:
    """Registry of service classes by full name, with singleton lookup.

    Registrations whose names match one of the ``exclude`` patterns are
    skipped, as though the variant had never been part of the application.
    """

    def __init__(self, exclude: Sequence[str] = ()):
        self._exclude = list(exclude)
        self._factories: dict[str, Factory] = {}
        self._instances: dict[str, Any] = {}

    @staticmethod
    def for_settings(settings: Settings, user_excludes: Any = ()) -> "ServiceRegistry":
        """Create a registry excluding variants that cannot apply under ``settings``.

        Raises:
            ConfigurationError: If ``user_excludes`` is not a list of glob patterns.
        """
        return ServiceRegistry(excluded_patterns(settings, user_excludes))

    def register(self, full_name: str, cls: Callable):
        """Register a class under a full name.

        Args:
            full_name: The name to register under, e.g. ``service:foo/-debug``.
            cls: The class, or other callable, to construct.

        Raises:
            ContractViolation: If ``cls`` is not callable or the name is taken.
        """
        if not callable(cls):
            raise ContractViolation(f"{cls!r} registered as '{full_name}' is not callable")

        if full_name in self._factories:
            raise ContractViolation(f"Duplicate registration '{full_name}'")

        if is_excluded(full_name, self._exclude):
            logger.debug("Excluding %s from registration", full_name)
            return

        logger.debug("Registering %s as %r", full_name, cls)
        self._factories[full_name] = Factory(full_name, cls)

    def provides(self, full_name: str) -> Callable:
        """Decorator to register a class under ``full_name``.

        Example:
            @registry.provides("service:foo/-debug")
            class DebugFoo(Foo):
                ...
        """
        def decorator(cls):
            self.register(full_name, cls)
            return cls

        return decorator

    def has_registration(self, full_name: str) -> bool:
        return full_name in self._factories

    def factory_for(self, full_name: str) -> Optional[Factory]:
        return self._factories.get(full_name)

    def registered_names(self) -> list[str]:
        return list(self._factories)

    def lookup(self, full_name: str) -> Any:
        """Return the instance registered under ``full_name``, constructing it once.

        Service factories are constructed through their ``create`` hook, which
        receives the registry as owner; other callables are called with no
        arguments.

        Raises:
            KeyError: If nothing is registered under ``full_name``.
        """
        if full_name in self._instances:
            return self._instances[full_name]

        factory = self._factories.get(full_name)
        if factory is None:
            raise KeyError(full_name)

        if getattr(factory.cls, "is_service_factory", False):
            instance = factory.cls.create(make_props(self, factory))
        else:
            instance = factory.cls()

        self._instances[full_name] = instance
        return instance
