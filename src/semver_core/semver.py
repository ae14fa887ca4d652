# SPDX-License-Identifier: MIT
"""Semantic version parsing, rendering and precedence.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta.11, -rc.1, -0.3.7
- Build metadata: +build, +build.123, +20240101, +exp.sha.5114f85
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Iterable, Optional

from .config import DEFAULT_CONFIG, CompareConfig
from .errors import (
    InvalidBuildError,
    InvalidPreReleaseError,
    InvalidVersionNumberError,
    InvalidVersionStringError,
)
from .identifiers import compare_prerelease, is_valid_identifiers

# Anchored over the whole input. Leading zeros in the numeric core are
# accepted; pre-release and build use the plain identifier grammar.
SEMVER_PATTERN = re.compile(
    r"(?P<major>[0-9]+)"
    r"\.(?P<minor>[0-9]+)"
    r"\.(?P<patch>[0-9]+)"
    r"(?:-(?P<prerelease>(?:[0-9A-Za-z-]+\.)*[0-9A-Za-z-]+))?"
    r"(?:\+(?P<build>(?:[0-9A-Za-z-]+\.)*[0-9A-Za-z-]+))?"
)


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a validated semantic version.

    Equality (``==``) and hashing use all five fields. Ordering operators
    use SemVer precedence, which ignores build metadata, so two versions can
    have equal precedence without being equal. Use :meth:`equals` for
    precedence equality.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers (e.g., "alpha.1", "rc.2"), "" if none
        build: Build metadata (e.g., "build.123", "20240101"), "" if none

    Raises:
        InvalidVersionNumberError: If major, minor or patch is not a
            non-negative integer
        InvalidPreReleaseError: If prerelease is not a valid identifier list
        InvalidBuildError: If build is not a valid identifier list
    """

    major: int
    minor: int
    patch: int
    prerelease: str = ""
    build: str = ""

    def __post_init__(self) -> None:
        """Validate fields after initialization."""
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidVersionNumberError(name, value)

        if not isinstance(self.prerelease, str) or (
            self.prerelease and not is_valid_identifiers(self.prerelease)
        ):
            raise InvalidPreReleaseError(self.prerelease)

        if not isinstance(self.build, str) or (
            self.build and not is_valid_identifiers(self.build)
        ):
            raise InvalidBuildError(self.build)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.build:
            version += f"+{self.build}"
        return version

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease != ""

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @classmethod
    def parse(cls, version_string: str) -> "Version":
        """Parse a semantic version string. See :func:`parse_version`."""
        return parse_version(version_string)

    @staticmethod
    def sort(
        versions: Iterable["Version"], config: Optional[CompareConfig] = None
    ) -> list["Version"]:
        """Return a new list of versions in ascending precedence order.

        Versions of equal precedence (differing only in build metadata) may
        appear in any relative order. The input is not modified.
        """
        return sorted(versions, key=cmp_to_key(lambda a, b: a.compare(b, config)))

    def compare(self, other: "Version", config: Optional[CompareConfig] = None) -> int:
        """Compare precedence with another version.

        Args:
            other: Version to compare against
            config: Comparison options (defaults to DEFAULT_CONFIG)

        Returns:
            -1 if self < other
            0 if self and other have equal precedence
            1 if self > other

        Note:
            Build metadata is ignored in comparisons per SemVer.
        """
        if config is None:
            config = DEFAULT_CONFIG

        for attr in ("major", "minor", "patch"):
            val1 = getattr(self, attr)
            val2 = getattr(other, attr)
            if val1 != val2:
                return -1 if val1 < val2 else 1

        return compare_prerelease(
            self.prerelease, other.prerelease, config.numeric_identifiers
        )

    def equals(self, other: "Version", config: Optional[CompareConfig] = None) -> bool:
        """Return True if both versions have equal precedence."""
        return self.compare(other, config) == 0

    def greater_than(self, other: "Version", config: Optional[CompareConfig] = None) -> bool:
        """Return True if this version has higher precedence."""
        return self.compare(other, config) == 1

    def greater_than_or_equal(
        self, other: "Version", config: Optional[CompareConfig] = None
    ) -> bool:
        """Return True unless this version has lower precedence."""
        return self.compare(other, config) >= 0

    def less_than(self, other: "Version", config: Optional[CompareConfig] = None) -> bool:
        """Return True if this version has lower precedence."""
        return self.compare(other, config) == -1

    def less_than_or_equal(
        self, other: "Version", config: Optional[CompareConfig] = None
    ) -> bool:
        """Return True unless this version has higher precedence."""
        return self.compare(other, config) <= 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    The whole string must match; surrounding whitespace is not accepted.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionStringError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease='', build='')

        >>> parse_version("1.0.0-alpha.1")
        Version(major=1, minor=0, patch=0, prerelease='alpha.1', build='')

        >>> parse_version("2.0.0-rc.1+build.456")
        Version(major=2, minor=0, patch=0, prerelease='rc.1', build='build.456')
    """
    if not isinstance(version_string, str):
        raise InvalidVersionStringError(
            version_string,
            f"Version must be a string, got {type(version_string).__name__}",
        )

    if not version_string:
        raise InvalidVersionStringError(version_string, "Version string cannot be empty")

    match = SEMVER_PATTERN.fullmatch(version_string)
    if not match:
        raise InvalidVersionStringError(version_string)

    try:
        major, minor, patch = (int(match.group(g)) for g in ("major", "minor", "patch"))
    except ValueError as e:
        # int() refuses digit strings beyond the interpreter's conversion limit
        raise InvalidVersionStringError(
            version_string, f"Version number out of range: {version_string!r}"
        ) from e

    return Version(
        major=major,
        minor=minor,
        patch=patch,
        prerelease=match.group("prerelease") or "",
        build=match.group("build") or "",
    )


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    try:
        parse_version(version_string)
    except InvalidVersionStringError:
        return False
    return True
