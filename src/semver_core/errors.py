# SPDX-License-Identifier: MIT
"""Exceptions raised for malformed versions and invalid configuration."""

from __future__ import annotations

from typing import Any


class VersionError(ValueError):
    """Base class for all version validation failures.

    Attributes:
        value: The offending input, kept verbatim for diagnostics
        message: Human readable description of the failure
    """

    default_message = "Invalid version: {value!r}"

    def __init__(self, value: Any, message: str = ""):
        self.value = value
        self.message = message or self.default_message.format(value=value)
        super().__init__(self.message)


class InvalidPreReleaseError(VersionError):
    """Raised when a pre-release string is not a dot-separated identifier list."""

    default_message = (
        "Invalid pre-release {value!r}: expected dot-separated identifiers "
        "made of [0-9A-Za-z-]"
    )


class InvalidBuildError(VersionError):
    """Raised when build metadata is not a dot-separated identifier list."""

    default_message = (
        "Invalid build metadata {value!r}: expected dot-separated identifiers "
        "made of [0-9A-Za-z-]"
    )


class InvalidVersionStringError(VersionError):
    """Raised when text does not look like a semantic version."""

    default_message = "Invalid semantic version: {value!r}"


class InvalidVersionNumberError(VersionError):
    """Raised when major, minor or patch is not a non-negative integer."""

    def __init__(self, field: str, value: Any, message: str = ""):
        self.field = field
        super().__init__(
            value,
            message or f"{field} must be a non-negative integer, got {value!r}",
        )


class ConfigError(Exception):
    """Raised when the comparison configuration is invalid."""

    pass
