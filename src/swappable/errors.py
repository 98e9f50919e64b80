__all__ = ["SwappableError", "ContractViolation", "ConstructionError", "ConfigurationError"]


class SwappableError(Exception):
    """Base class for errors raised while resolving swappable services."""

    pass


class ContractViolation(SwappableError):
    """Raised when a caller or container breaks the resolution contract."""

    pass


class ConfigurationError(SwappableError):
    """Raised when user-supplied configuration is malformed."""

    pass


class ConstructionError(SwappableError):
    """Raised when no implementation is available for an abstract service.

    Attributes:
        full_name: The logical name of the service, e.g. ``service:foo``.
        candidates: The exact candidate list that was tried.
    """

    def __init__(self, full_name: str, candidates: list[str]):
        super().__init__(
            f"No available implementation for '{full_name}', "
            f"tried {', '.join(candidates)}"
        )
        self.full_name = full_name
        self.candidates = list(candidates)
