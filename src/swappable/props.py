"""Construction props passed from a container to a service factory.

Containers hand ``create`` an opaque mapping of construction props. The owner
and the originating factory are stored under the private ``OWNER`` and
``INIT_FACTORY`` keys defined here.
"""

from collections.abc import Mapping
from typing import Any

from swappable.domain import Factory, is_service_name
from swappable.errors import ContractViolation

__all__ = ["OWNER", "INIT_FACTORY", "make_props", "owner_from_props", "service_full_name"]


class _Marker:
    def __init__(self, name: str):
        self._name = name

    def __repr__(self):
        return f"<{self._name}>"


OWNER = _Marker("OWNER")
INIT_FACTORY = _Marker("INIT_FACTORY")


def make_props(owner: Any, factory: Factory) -> dict:
    return {OWNER: owner, INIT_FACTORY: factory}


def owner_from_props(props: Any) -> Any:
    _validate_props(props)
    if OWNER not in props:
        raise ContractViolation("expected props to include an owner")
    return props[OWNER]


def service_full_name(props: Any) -> str:
    """Extract the logical name of the service being constructed.

    Args:
        props: The construction props received by ``create``.

    Returns:
        The full name of the originating factory, e.g. ``service:bar/baz``.

    Raises:
        ContractViolation: If the props do not carry a well-formed factory marker.
    """
    _validate_props(props)

    if INIT_FACTORY not in props:
        raise ContractViolation("expected props to include INIT_FACTORY")

    init_factory = props[INIT_FACTORY]
    if init_factory is None:
        raise ContractViolation("expected INIT_FACTORY to be an object")

    if not hasattr(init_factory, "full_name"):
        raise ContractViolation("expected INIT_FACTORY to have a full_name attribute")

    full_name = init_factory.full_name
    if not isinstance(full_name, str):
        raise ContractViolation(f"expected full_name to be a string, was {full_name!r}")

    if not is_service_name(full_name):
        raise ContractViolation(
            f'expected full_name to start with "service:", was {full_name}'
        )

    return full_name


def _validate_props(props: Any):
    if not isinstance(props, Mapping):
        raise ContractViolation(f"expected props to be a mapping, got {props!r}")
