import pytest

from swappable.domain import Factory
from swappable.errors import ContractViolation
from swappable.props import INIT_FACTORY, OWNER, make_props, owner_from_props, service_full_name
from swappable.registry import ServiceRegistry


class NameRecorder:
    is_service_factory = True

    @classmethod
    def create(cls, props):
        return {"full_name": service_full_name(props), "owner": owner_from_props(props)}


def test_full_name_is_passed_by_the_registry():
    registry = ServiceRegistry()
    registry.register("service:foo", NameRecorder)
    registry.register("service:bar/baz", NameRecorder)

    assert registry.lookup("service:foo") == {"full_name": "service:foo", "owner": registry}
    assert registry.lookup("service:bar/baz") == {"full_name": "service:bar/baz", "owner": registry}


def test_props_must_be_a_mapping():
    with pytest.raises(ContractViolation, match="expected props to be a mapping"):
        service_full_name(None)


def test_marker_must_be_present():
    with pytest.raises(ContractViolation, match="expected props to include INIT_FACTORY"):
        service_full_name({OWNER: object(), "INIT_FACTORY": Factory("service:foo", object)})


def test_marker_must_have_full_name():
    with pytest.raises(ContractViolation, match="to have a full_name attribute"):
        service_full_name({INIT_FACTORY: object()})


def test_full_name_must_be_a_string():
    with pytest.raises(ContractViolation, match="expected full_name to be a string"):
        service_full_name({INIT_FACTORY: Factory(42, object)})


def test_full_name_must_be_a_service_name():
    with pytest.raises(ContractViolation, match='expected full_name to start with "service:", was model:foo'):
        service_full_name(make_props(object(), Factory("model:foo", object)))


def test_owner_must_be_present():
    with pytest.raises(ContractViolation, match="expected props to include an owner"):
        owner_from_props({INIT_FACTORY: Factory("service:foo", object)})
