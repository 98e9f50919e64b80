import pytest

from swappable.domain import Factory
from swappable.errors import ContractViolation
from swappable.registry import ServiceRegistry
from swappable.service import Service


@pytest.fixture
def registry() -> ServiceRegistry:
    return ServiceRegistry()


def test_provides_registers_class(registry):
    @registry.provides("service:greeter")
    class Greeter(Service):
        pass

    assert registry.has_registration("service:greeter")
    assert registry.factory_for("service:greeter") == Factory("service:greeter", Greeter)
    assert registry.registered_names() == ["service:greeter"]


def test_unknown_names_have_no_factory(registry):
    assert not registry.has_registration("service:missing")
    assert registry.factory_for("service:missing") is None


def test_lookup_returns_singleton(registry):
    registry.register("service:greeter", Service)

    assert registry.lookup("service:greeter") is registry.lookup("service:greeter")


def test_lookup_calls_plain_callables_without_owner(registry):
    registry.register("config:greeting", lambda: "Hello")

    assert registry.lookup("config:greeting") == "Hello"


def test_lookup_of_unregistered_name_raises(registry):
    with pytest.raises(KeyError):
        registry.lookup("service:missing")


def test_duplicate_registration_raises(registry):
    registry.register("service:greeter", Service)

    with pytest.raises(ContractViolation, match="Duplicate registration 'service:greeter'"):
        registry.register("service:greeter", Service)


def test_non_callable_registration_raises(registry):
    with pytest.raises(ContractViolation, match="is not callable"):
        registry.register("service:greeter", "Greeter")
