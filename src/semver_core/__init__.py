# SPDX-License-Identifier: MIT
"""Semantic Versioning 2.0.0 parsing, formatting and precedence.

Example:
    >>> from semver_core import Version, parse_version, compare_versions
    >>> version = parse_version("1.2.3-beta.1+build.5")
    >>> version.major
    1
    >>> version.prerelease
    'beta.1'
    >>> str(version)
    '1.2.3-beta.1+build.5'
    >>> Version(1, 0, 0, "alpha").compare(Version(1, 0, 0))
    -1
    >>> compare_versions("1.0.0-2", "1.0.0-11")
    -1
"""

import logging

__version__ = "0.1.0"

from .config import (
    CompareConfig,
    NumericIdentifierRule,
    DEFAULT_CONFIG,
)
from .errors import (
    VersionError,
    InvalidPreReleaseError,
    InvalidBuildError,
    InvalidVersionStringError,
    InvalidVersionNumberError,
    ConfigError,
)
from .identifiers import (
    is_numeric_identifier,
    is_valid_identifiers,
)
from .semver import (
    Version,
    parse_version,
    is_valid_semver,
    SEMVER_PATTERN,
)
from .compare import (
    compare_versions,
    sort_versions,
    version_key,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_semver",
    "SEMVER_PATTERN",
    # Version comparison
    "compare_versions",
    "sort_versions",
    "version_key",
    # Identifiers
    "is_numeric_identifier",
    "is_valid_identifiers",
    # Configuration
    "CompareConfig",
    "NumericIdentifierRule",
    "DEFAULT_CONFIG",
    # Errors
    "VersionError",
    "InvalidPreReleaseError",
    "InvalidBuildError",
    "InvalidVersionStringError",
    "InvalidVersionNumberError",
    "ConfigError",
]
