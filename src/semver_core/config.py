# SPDX-License-Identifier: MIT
"""Comparison configuration for semver-core.

Settings live in the ``[tool.semver-core]`` table of a pyproject.toml:

    [tool.semver-core]
    numeric-identifiers = "strict"
"""

from __future__ import annotations

import enum
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .errors import ConfigError

logger = logging.getLogger(__name__)

TOOL_TABLE = "semver-core"


class NumericIdentifierRule(str, enum.Enum):
    """How a pre-release identifier is classified as numeric.

    REFERENCE: all digits and not starting with "00" ("01" is numeric).
    STRICT: all digits and no leading zero unless the identifier is "0".
    """

    REFERENCE = "reference"
    STRICT = "strict"


@dataclass(frozen=True, slots=True)
class CompareConfig:
    """Options that influence version precedence.

    Attributes:
        numeric_identifiers: Rule deciding which pre-release identifiers
            compare as integers
    """

    numeric_identifiers: NumericIdentifierRule = NumericIdentifierRule.REFERENCE

    def __post_init__(self) -> None:
        """Coerce the rule from its string spelling."""
        rule = self.numeric_identifiers
        if not isinstance(rule, NumericIdentifierRule):
            object.__setattr__(self, "numeric_identifiers", _parse_rule(rule))

    @classmethod
    def from_pyproject(cls, pyproject_path: str | Path) -> "CompareConfig":
        """Create a CompareConfig from a pyproject.toml file.

        Args:
            pyproject_path: Path to pyproject.toml

        Returns:
            CompareConfig instance (defaults when the table is absent)

        Raises:
            ConfigError: If the TOML is invalid or the table has bad values
            FileNotFoundError: If the file does not exist
        """
        path = Path(pyproject_path)
        if not path.exists():
            raise FileNotFoundError(f"pyproject.toml not found: {path}")

        try:
            with open(path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        logger.debug("Loading [tool.%s] from %s", TOOL_TABLE, path)
        return cls.from_pyproject_dict(pyproject)

    @classmethod
    def from_pyproject_dict(cls, pyproject: dict[str, Any]) -> "CompareConfig":
        """Create a CompareConfig from a parsed pyproject.toml dictionary.

        Raises:
            ConfigError: On malformed tables or unknown options
        """
        tool = pyproject.get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigError("[tool] must be a table")

        table = tool.get(TOOL_TABLE, {})
        if not isinstance(table, dict):
            raise ConfigError(f"[tool.{TOOL_TABLE}] must be a table")

        options: dict[str, Any] = {}
        for key, value in table.items():
            normalized = key.replace("-", "_")
            if normalized != "numeric_identifiers":
                raise ConfigError(f"Unknown option in [tool.{TOOL_TABLE}]: {key!r}")
            options[normalized] = _parse_rule(value)

        config = cls(**options)
        logger.debug(
            "Using numeric identifier rule %r", config.numeric_identifiers.value
        )
        return config


def _parse_rule(value: Any) -> NumericIdentifierRule:
    if isinstance(value, NumericIdentifierRule):
        return value
    if isinstance(value, str):
        try:
            return NumericIdentifierRule(value.lower())
        except ValueError:
            pass
    choices = ", ".join(repr(r.value) for r in NumericIdentifierRule)
    raise ConfigError(f"Invalid numeric-identifiers rule {value!r}; expected one of {choices}")


DEFAULT_CONFIG = CompareConfig()
