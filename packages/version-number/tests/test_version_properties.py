# SPDX-License-Identifier: MIT
"""Property-based tests for version parsing and ordering.

These tests verify that:
- Any string parses into a version
- The ordering is reflexive, antisymmetric and transitive
- Trailing zeros never change a version
- A wildcard is an upper bound within its prefix
- Release and class file versions round trip through Java specification versions
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from version_number import JavaSpecificationVersion, VersionNumber
from version_number.java import CLASS_TO_RELEASE, RELEASE_TO_CLASS


# =============================================================================
# Strategies for generating test data
# =============================================================================

numeric_components = st.lists(st.integers(min_value=0, max_value=50), min_size=1, max_size=5)

snapshot_suffixes = st.sampled_from(
    [
        "",
        "-SNAPSHOT",
        "-SNAPSHOT (private-build)",
        "-20170207.105042-1",
        "-20170207.105042-13",
        "-20180101.000000-2",
    ]
)

qualifier_tokens = st.sampled_from(
    ["alpha", "beta", "milestone", "rc", "ga", "final", "sp", "ea", "a", "b", "m", "foo"]
)

delimiters = st.sampled_from([".", "-"])


def _dotted(components: list[int]) -> str:
    return ".".join(str(c) for c in components)


# A literal snapshot ties with every timestamped one, so each family is ordered on its own
literal_suffixes = st.sampled_from(["", "-SNAPSHOT", "-SNAPSHOT (private-build)"])
timestamped_suffixes = st.sampled_from(
    ["", "-20170207.105042-1", "-20170207.105042-13", "-20180101.000000-2"]
)


@st.composite
def numeric_versions(draw, suffixes=snapshot_suffixes):
    """Generate dotted numeric versions with an optional snapshot suffix."""
    return _dotted(draw(numeric_components)) + draw(suffixes)


@st.composite
def mixed_versions(draw):
    """Generate versions mixing numbers, qualifiers and both delimiters, without wildcards."""
    tokens = draw(
        st.lists(
            st.one_of(st.integers(min_value=0, max_value=20).map(str), qualifier_tokens),
            min_size=1,
            max_size=6,
        )
    )
    text = tokens[0]
    for token in tokens[1:]:
        text += draw(delimiters) + token
    return text + draw(snapshot_suffixes)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


# =============================================================================
# Property-Based Tests
# =============================================================================


class TestParsingTotality:
    """Property 1: Parsing Totality"""

    @given(raw=st.text(max_size=40))
    @settings(max_examples=200)
    def test_any_string_parses(self, raw):
        """
        *For any* string, constructing a VersionNumber SHALL succeed and keep
        the raw string.
        """
        version = VersionNumber(raw)

        assert str(version) == raw
        assert version.canonical.startswith("(")
        assert version.is_snapshot() != version.is_release()


class TestOrderingLaws:
    """Property 2: Ordering Laws"""

    @given(raw=st.text(max_size=40))
    @settings(max_examples=100)
    def test_reflexive(self, raw):
        """
        *For any* string, a version SHALL compare equal to a fresh parse of itself.
        """
        version = VersionNumber(raw)
        again = VersionNumber(raw)

        assert version.compare_to(again) == 0
        assert version == again
        assert hash(version) == hash(again)

    @given(left=mixed_versions(), right=mixed_versions())
    @settings(max_examples=200)
    def test_antisymmetric(self, left, right):
        """
        *For any* two wildcard-free versions, comparing in either direction
        SHALL give opposite signs.
        """
        a, b = VersionNumber(left), VersionNumber(right)

        assert _sign(a.compare_to(b)) == -_sign(b.compare_to(a)), f"{left!r} vs {right!r}"

    @given(
        versions=st.one_of(
            st.lists(numeric_versions(literal_suffixes), min_size=3, max_size=3),
            st.lists(numeric_versions(timestamped_suffixes), min_size=3, max_size=3),
        )
    )
    @settings(max_examples=200)
    def test_transitive(self, versions):
        """
        *For any* three numeric versions with a <= b and b <= c, a <= c SHALL hold.
        """
        a, b, c = sorted(VersionNumber(v) for v in versions)

        assert a <= b
        assert b <= c
        assert a <= c

    @given(left=numeric_versions(), right=numeric_versions())
    @settings(max_examples=100)
    def test_equality_implies_equal_hash(self, left, right):
        """
        *For any* two equal versions, their hashes SHALL be equal.
        """
        a, b = VersionNumber(left), VersionNumber(right)

        if a == b:
            assert hash(a) == hash(b)
            assert a.compare_to(b) == 0


class TestNormalization:
    """Property 3: Trailing Zero Normalization"""

    @given(components=numeric_components, zeros=st.integers(min_value=1, max_value=4))
    @settings(max_examples=100)
    def test_trailing_zeros_are_insignificant(self, components, zeros):
        """
        *For any* numeric version, appending zero components SHALL yield an
        equal version.
        """
        base = VersionNumber(_dotted(components))
        padded = VersionNumber(_dotted(components + [0] * zeros))

        assert base == padded
        assert base.compare_to(padded) == 0
        assert base.canonical == padded.canonical


class TestWildcardUpperBound:
    """Property 4: Wildcard Upper Bound"""

    @given(prefix=numeric_components, suffix=numeric_components)
    @settings(max_examples=100)
    def test_wildcard_is_newer_than_prefix_extensions(self, prefix, suffix):
        """
        *For any* numeric prefix P and components S, "P.*" SHALL be newer than
        "P.S" and newer than "P".
        """
        wildcard = VersionNumber(_dotted(prefix) + ".*")

        assert wildcard.is_newer_than(VersionNumber(_dotted(prefix + suffix)))
        assert wildcard.is_newer_than(VersionNumber(_dotted(prefix)))


class TestJavaRoundTrip:
    """Property 5: Release and Class Version Round Trip"""

    @given(release=st.sampled_from(sorted(RELEASE_TO_CLASS)))
    def test_release_round_trip(self, release):
        """
        *For any* known release R with class version C,
        from_release_version(R) SHALL map to C and back to R.
        """
        spec = JavaSpecificationVersion.from_release_version(release)

        assert spec.to_release_version() == release
        assert spec.to_class_version() == RELEASE_TO_CLASS[release]

    @given(class_version=st.sampled_from(sorted(CLASS_TO_RELEASE)))
    def test_class_round_trip(self, class_version):
        """
        *For any* known class version C, from_class_version(C) SHALL map back to C.
        """
        spec = JavaSpecificationVersion.from_class_version(class_version)

        assert spec.to_class_version() == class_version
        assert spec.to_release_version() == CLASS_TO_RELEASE[class_version]
