# SPDX-License-Identifier: MIT
"""Version comparison and sorting over strings or Version objects.

Build metadata is ignored in comparisons per SemVer 2.0.0.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Iterable, Optional, Union

from .config import CompareConfig
from .semver import Version, parse_version

VersionLike = Union[str, Version]


def _coerce(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(
    version1: VersionLike,
    version2: VersionLike,
    *,
    config: Optional[CompareConfig] = None,
) -> int:
    """Compare two semantic versions by SemVer precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)
        config: Comparison options (defaults to DEFAULT_CONFIG)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionStringError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-alpha", "1.0.0-alpha.1")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0+build.2")
        0
    """
    return _coerce(version1).compare(_coerce(version2), config)


def version_key(config: Optional[CompareConfig] = None) -> Callable[[VersionLike], object]:
    """Return a sort key function ordering versions by precedence.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key())
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    wrapped = cmp_to_key(lambda a, b: compare_versions(a, b, config=config))

    def key(version: VersionLike) -> object:
        # Each element is parsed once, then wrapped for comparison
        return wrapped(_coerce(version))

    return key


def sort_versions(
    versions: Iterable[VersionLike],
    *,
    config: Optional[CompareConfig] = None,
) -> list[Version]:
    """Return the versions as Version objects in ascending precedence order.

    Strings are parsed first. The input is not modified; equal-precedence
    versions keep no guaranteed relative order.

    Raises:
        InvalidVersionStringError: If any version string is invalid

    Examples:
        >>> [str(v) for v in sort_versions(["1.0.0", "2.0.0", "1.0.0-alpha"])]
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return Version.sort([_coerce(v) for v in versions], config)
