# SPDX-License-Identifier: MIT
"""Property-based tests for version parsing and precedence.

These tests verify that:
- Canonical version strings survive parse and str unchanged
- compare is a total order (unit results, antisymmetry, transitivity)
- Build metadata never affects precedence
- Sorting returns an ordered permutation of its input
"""

from __future__ import annotations

from collections import Counter

from hypothesis import given, settings, strategies as st

from semver_core import (
    CompareConfig,
    NumericIdentifierRule,
    Version,
    parse_version,
    sort_versions,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

numbers = st.integers(min_value=0, max_value=10**20)

# Canonical numbers without leading zeros, small enough to collide often
core_parts = st.integers(min_value=0, max_value=3).map(str)

identifiers = st.one_of(
    st.from_regex(r"[0-9]{1,3}", fullmatch=True),
    st.from_regex(r"[0-9A-Za-z-]{1,6}", fullmatch=True),
    st.sampled_from(["alpha", "beta", "rc", "0", "1", "2", "11", "01", "00"]),
)

identifier_lists = st.lists(identifiers, min_size=1, max_size=4).map(".".join)

configs = st.sampled_from(
    [CompareConfig(), CompareConfig(numeric_identifiers=NumericIdentifierRule.STRICT)]
)


@st.composite
def versions(draw):
    """Generate a valid Version."""
    return Version(
        major=draw(st.integers(min_value=0, max_value=2)),
        minor=draw(st.integers(min_value=0, max_value=2)),
        patch=draw(st.integers(min_value=0, max_value=2)),
        prerelease=draw(st.one_of(st.just(""), identifier_lists)),
        build=draw(st.one_of(st.just(""), identifier_lists)),
    )


@st.composite
def version_strings(draw):
    """Generate a canonical version string."""
    text = ".".join(draw(core_parts) for _ in range(3))
    if draw(st.booleans()):
        text += "-" + draw(identifier_lists)
    if draw(st.booleans()):
        text += "+" + draw(identifier_lists)
    return text


# =============================================================================
# Property-Based Tests
# =============================================================================


class TestRoundTrip:
    """Parsing and rendering are inverses."""

    @given(text=version_strings())
    @settings(max_examples=200)
    def test_parse_then_str(self, text):
        assert str(parse_version(text)) == text

    @given(v=versions())
    @settings(max_examples=200)
    def test_str_then_parse(self, v):
        assert parse_version(str(v)) == v

    @given(major=numbers, minor=numbers, patch=numbers)
    def test_large_numbers(self, major, minor, patch):
        v = parse_version(f"{major}.{minor}.{patch}")
        assert (v.major, v.minor, v.patch) == (major, minor, patch)


class TestTotalOrder:
    """compare defines a total order over versions."""

    @given(a=versions(), b=versions(), config=configs)
    @settings(max_examples=300)
    def test_unit_and_antisymmetric(self, a, b, config):
        result = a.compare(b, config)
        assert result in (-1, 0, 1)
        assert b.compare(a, config) == -result

    @given(a=versions(), config=configs)
    def test_reflexive(self, a, config):
        assert a.compare(a, config) == 0

    @given(a=versions(), b=versions(), c=versions(), config=configs)
    @settings(max_examples=300)
    def test_transitive(self, a, b, c, config):
        x, y, z = Version.sort([a, b, c], config)
        assert x.compare(y, config) <= 0
        assert y.compare(z, config) <= 0
        assert x.compare(z, config) <= 0

    @given(a=versions(), b=versions())
    def test_predicates_agree(self, a, b):
        result = a.compare(b)
        assert a.equals(b) == (result == 0)
        assert a.less_than(b) == (result == -1)
        assert a.greater_than(b) == (result == 1)
        assert a.less_than_or_equal(b) == (result <= 0)
        assert a.greater_than_or_equal(b) == (result >= 0)
        assert (a < b) == a.less_than(b)


class TestBuildMetadata:
    """Build metadata never influences precedence."""

    @given(v=versions(), build=st.one_of(st.just(""), identifier_lists))
    def test_build_ignored(self, v, build):
        other = Version(v.major, v.minor, v.patch, v.prerelease, build)
        assert v.compare(other) == 0
        assert v.equals(other)


class TestSort:
    """Sorting yields an ordered permutation."""

    @given(items=st.lists(versions(), max_size=12), config=configs)
    def test_sorted_permutation(self, items, config):
        original = list(items)
        result = Version.sort(items, config)
        assert items == original
        assert Counter(result) == Counter(items)
        for left, right in zip(result, result[1:]):
            assert left.compare(right, config) <= 0

    @given(items=st.lists(version_strings(), max_size=12))
    def test_sort_versions_strings(self, items):
        result = sort_versions(items)
        assert sorted(str(v) for v in result) == sorted(items)
        for left, right in zip(result, result[1:]):
            assert left <= right
