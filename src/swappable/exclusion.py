"""Exclusion of variants that can never apply in the current environment.

Variants tagged for another environment, for debug builds when this is not one,
or for testing when not under test, are dropped before they are registered.
Users may add glob patterns of their own, matched against the path part of the
service name, e.g. ``wow/-ignored`` for ``service:wow/-ignored``.
"""

from fnmatch import fnmatchcase
from typing import Any, Sequence

from swappable.config import Settings
from swappable.domain import SERVICE_PREFIX, is_service_name
from swappable.errors import ConfigurationError

__all__ = ["ENVIRONMENTS", "excluded_patterns", "is_excluded"]

ENVIRONMENTS = ("development", "test", "production")


def excluded_patterns(settings: Settings, user_excludes: Any = ()) -> list[str]:
    """Compute the glob patterns of variants to leave out.

    Args:
        settings: The flags of the current environment.
        user_excludes: Additional glob patterns supplied by the user.

    Returns:
        Patterns for the built-in variants that do not apply, followed by the
        user's patterns.

    Raises:
        ConfigurationError: If ``user_excludes`` is not a list of strings.
    """
    if not isinstance(user_excludes, (list, tuple)) or not all(
        isinstance(glob, str) for glob in user_excludes
    ):
        raise ConfigurationError(
            "Invalid config: exclude must be a list of glob patterns. "
            f"Found {user_excludes!r} instead."
        )

    patterns = []

    if not settings.debug:
        patterns.append("**/-debug")

    if not settings.testing:
        patterns.append("**/-testing")

    patterns.extend(f"**/-{env}" for env in ENVIRONMENTS if env != settings.env)

    return patterns + list(user_excludes)


def is_excluded(full_name: str, patterns: Sequence[str]) -> bool:
    """Check whether a service name matches any of the exclusion ``patterns``.

    Patterns are matched one path segment at a time, so ``*`` stays within a
    segment, while a ``**`` segment matches any number of segments.
    """
    if not is_service_name(full_name):
        return False
    segments = full_name[len(SERVICE_PREFIX):].split("/")
    return any(_match_segments(segments, pattern.split("/")) for pattern in patterns)


def _match_segments(segments: list[str], pattern: list[str]) -> bool:
    if not pattern:
        return not segments

    head, rest = pattern[0], pattern[1:]
    if head == "**":
        return any(_match_segments(segments[i:], rest) for i in range(len(segments) + 1))

    return (
        len(segments) > 0
        and fnmatchcase(segments[0], head)
        and _match_segments(segments[1:], rest)
    )
