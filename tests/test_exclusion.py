import pytest

from swappable.config import Settings
from swappable.errors import ConfigurationError
from swappable.exclusion import excluded_patterns, is_excluded
from swappable.registry import ServiceRegistry
from swappable.service import Service


def test_nothing_builtin_is_excluded_for_matching_flags():
    settings = Settings(env="test", debug=True, testing=True)

    assert excluded_patterns(settings) == ["**/-development", "**/-production"]


def test_production_build_excludes_debug_and_testing_variants():
    settings = Settings(env="production", debug=False, testing=False)

    assert excluded_patterns(settings, ["wow/-ignored"]) == [
        "**/-debug",
        "**/-testing",
        "**/-development",
        "**/-test",
        "wow/-ignored",
    ]


def test_custom_environment_excludes_all_builtin_environments():
    settings = Settings(env="staging", debug=True, testing=True)

    assert excluded_patterns(settings) == ["**/-development", "**/-test", "**/-production"]


@pytest.mark.parametrize("user_excludes", ["wow/-ignored", [1], None])
def test_user_excludes_must_be_list_of_globs(user_excludes):
    settings = Settings(env="test", debug=True, testing=True)

    with pytest.raises(ConfigurationError, match="exclude must be a list of glob patterns"):
        excluded_patterns(settings, user_excludes)


def test_is_excluded_matches_service_paths():
    patterns = ["**/-debug", "wow/-ignored"]

    assert is_excluded("service:foo/-debug", patterns)
    assert is_excluded("service:nested/foo/-debug", patterns)
    assert is_excluded("service:wow/-ignored", patterns)
    assert not is_excluded("service:foo/-debugger", patterns)
    assert not is_excluded("service:foo", patterns)
    assert not is_excluded("model:foo/-debug", patterns)


def test_excluded_variants_are_not_registered():
    settings = Settings(env="production", debug=False, testing=False)
    registry = ServiceRegistry.for_settings(settings, ["wow/-ignored"])

    @registry.provides("service:wow")
    class Wow(Service):
        candidates = ["ignored", "not-ignored"]
        name = "main"

    @registry.provides("service:wow/-ignored")
    class Ignored(Wow):
        name = "ignored"

    @registry.provides("service:wow/-not-ignored")
    class NotIgnored(Wow):
        name = "not-ignored"

    @registry.provides("service:wow/-debug")
    class Debug(Wow):
        name = "debug"

    assert not registry.has_registration("service:wow/-ignored")
    assert not registry.has_registration("service:wow/-debug")
    assert registry.has_registration("service:wow/-not-ignored")
    assert registry.lookup("service:wow").name == "not-ignored"


def test_single_star_stays_within_a_segment():
    assert is_excluded("service:a/-ignored", ["*/-ignored"])
    assert not is_excluded("service:a/b/-ignored", ["*/-ignored"])
    assert is_excluded("service:a/b/-ignored", ["a/*/-ignored"])
    assert is_excluded("service:a/b/-ignored", ["**/-ignored"])


def test_nested_variant_survives_single_segment_exclude():
    registry = ServiceRegistry(exclude=["*/-ignored"])

    registry.register("service:a/-ignored", Service)
    registry.register("service:a/b/-ignored", Service)

    assert registry.registered_names() == ["service:a/b/-ignored"]
