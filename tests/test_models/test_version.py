"""Unit tests for semverkit.models.version.

Test Coverage:
- Construction from integers and raw metadata text
- Parsing, including defaults for missing components
- Equality vs ordering (build metadata)
- Rich comparison operators, hashing, immutability
- Round-tripping through the canonical string, repr and pickle
"""

from __future__ import annotations

import copy
import pickle
from typing import Callable

import pytest

from semverkit.core.identifier import AlphanumericIdentifier, NumericIdentifier
from semverkit.exceptions import (
    EmptyBuildError,
    EmptyPreReleaseError,
    InvalidBuildIdentifiersError,
    InvalidCoreFormatError,
    InvalidPreReleaseIdentifiersError,
    VersionParsingError,
)
from semverkit.models.version import Version, parse, try_parse


@pytest.mark.unit
class TestConstruction:
    """Tests for building versions directly."""

    def test_defaults(self) -> None:
        """Test missing components default to 0 with no metadata."""
        version = Version(1)

        assert version.core == (1, 0, 0)
        assert version.prerelease is None
        assert version.build is None
        assert version.is_prerelease is False

    def test_metadata_text_is_parsed(self) -> None:
        """Test metadata strings are split into identifiers."""
        version = Version(1, 0, 0, prerelease="ABC.123", build="123.ABC")

        assert version.prerelease == (AlphanumericIdentifier("ABC"), NumericIdentifier(123))
        assert version.build == (NumericIdentifier(123), AlphanumericIdentifier("ABC"))
        assert version.prerelease_text == "ABC.123"
        assert version.build_text == "123.ABC"

    def test_identifier_sequences_are_stored_as_tuples(self) -> None:
        """Test list metadata is frozen into a tuple."""
        version = Version(1, prerelease=[AlphanumericIdentifier("rc")])
        assert version.prerelease == (AlphanumericIdentifier("rc"),)

    @pytest.mark.parametrize(
        "kwargs, expected",
        [
            ({"build": ""}, EmptyBuildError()),
            ({"prerelease": "", "build": ""}, EmptyBuildError()),
            ({"prerelease": ""}, EmptyPreReleaseError()),
            ({"prerelease": ()}, EmptyPreReleaseError()),
            ({"build": []}, EmptyBuildError()),
            ({"prerelease": "a.~"}, InvalidPreReleaseIdentifiersError(["~"])),
            ({"prerelease": "~", "build": "~"}, InvalidBuildIdentifiersError(["~"])),
            (
                {"build": [AlphanumericIdentifier("ok"), AlphanumericIdentifier("no way")]},
                InvalidBuildIdentifiersError(["no way"]),
            ),
        ],
    )
    def test_invalid_metadata(self, kwargs: dict, expected: VersionParsingError) -> None:
        """Test bad metadata raises the same errors as parsing."""
        with pytest.raises(type(expected)) as exc_info:
            Version(1, 0, 0, **kwargs)

        assert exc_info.value == expected

    def test_negative_component(self) -> None:
        """Test a negative core component is reported as a bad core."""
        with pytest.raises(InvalidCoreFormatError) as exc_info:
            Version(1, -1, 0)

        assert exc_info.value.text == "1.-1.0"

    @pytest.mark.parametrize("bad", [1.0, "1", True, None])
    def test_non_int_component(self, bad: object) -> None:
        """Test core components must be real integers."""
        with pytest.raises(TypeError):
            Version(bad)  # type: ignore[arg-type]

    def test_non_identifier_in_sequence(self) -> None:
        """Test metadata sequences may only hold identifiers."""
        with pytest.raises(TypeError, match="identifiers must be"):
            Version(1, prerelease=["rc"])  # type: ignore[list-item]


@pytest.mark.unit
class TestParse:
    """Tests for parse() and try_parse()."""

    @pytest.mark.parametrize(
        "text, factory",
        [
            ("1", lambda: Version(1, 0, 0)),
            ("1.0", lambda: Version(1, 0, 0)),
            ("1.0.0", lambda: Version(1, 0, 0)),
            ("1.0.0+ABC", lambda: Version(1, 0, 0, build="ABC")),
            ("1.0.0+123", lambda: Version(1, 0, 0, build="123")),
            ("1.0.0+ABC.123", lambda: Version(1, 0, 0, build="ABC.123")),
            ("1.0.0+123.ABC", lambda: Version(1, 0, 0, build="123.ABC")),
            ("1.0.0+ABC.-", lambda: Version(1, 0, 0, build="ABC.-")),
            ("1.0.0-ABC", lambda: Version(1, 0, 0, prerelease="ABC")),
            ("1.0.0-123", lambda: Version(1, 0, 0, prerelease="123")),
            ("1.0.0-ABC.123", lambda: Version(1, 0, 0, prerelease="ABC.123")),
            ("1.0.0-123.ABC", lambda: Version(1, 0, 0, prerelease="123.ABC")),
            ("1.0.0-ABC.-", lambda: Version(1, 0, 0, prerelease="ABC.-")),
            ("1.0.0-ABC+ABC", lambda: Version(1, 0, 0, prerelease="ABC", build="ABC")),
            ("1.0.0-123+123", lambda: Version(1, 0, 0, prerelease="123", build="123")),
            (
                "1.0.0-ABC.123+ABC.123",
                lambda: Version(1, 0, 0, prerelease="ABC.123", build="ABC.123"),
            ),
            (
                "1.0.0-123.ABC+123.ABC",
                lambda: Version(1, 0, 0, prerelease="123.ABC", build="123.ABC"),
            ),
            (
                "1.0.0-ABC.-+ABC.-",
                lambda: Version(1, 0, 0, prerelease="ABC.-", build="ABC.-"),
            ),
        ],
    )
    def test_parsed_equals_constructed(self, text: str, factory: Callable[[], Version]) -> None:
        """Test parsing and constructing give equal versions."""
        assert parse(text) == factory()

    def test_missing_components_default_to_zero(self) -> None:
        """Test short cores are padded with zeros."""
        assert parse("1") == parse("1.0.0")
        assert parse("1.2") == parse("1.2.0")

    def test_classmethod_matches_function(self) -> None:
        """Test Version.parse() and parse() agree."""
        assert Version.parse("2.1-rc") == parse("2.1-rc")

    def test_errors_propagate(self) -> None:
        """Test parse() raises instead of returning None."""
        with pytest.raises(InvalidCoreFormatError):
            parse("")

    def test_try_parse(self) -> None:
        """Test try_parse() returns None for anything unparsable."""
        assert try_parse("1.2.3") == Version(1, 2, 3)
        assert try_parse("1.0.0+") is None
        assert try_parse(None) is None
        assert try_parse(42) is None  # type: ignore[arg-type]


@pytest.mark.unit
class TestEqualityAndOrdering:
    """Tests for ==, <, <=, >, >= and hashing."""

    def test_example(self) -> None:
        """Test a prerelease of a higher core is greater."""
        assert parse("2.0.0-alpha") > parse("1.0.0")

    def test_ascending_chain_operators(self) -> None:
        """Test every operator agrees with the precedence chain."""
        chain = [
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-alpha.beta",
            "1.0.0-beta",
            "1.0.0-beta.2",
            "1.0.0-beta.11",
            "1.0.0-rc.1",
            "1.0.0",
        ]
        versions = [parse(v) for v in chain]
        for lower, higher in zip(versions, versions[1:]):
            assert lower < higher
            assert lower <= higher
            assert not lower >= higher
            assert lower != higher

        for higher, lower in zip(versions[::-1], versions[::-1][1:]):
            assert higher > lower

    def test_build_affects_equality_not_ordering(self) -> None:
        """Test differing builds are unequal yet neither is smaller."""
        lhs = parse("1.0.0+a")
        rhs = parse("1.0.0+b")

        assert lhs != rhs
        assert not lhs < rhs
        assert not lhs > rhs
        assert lhs <= rhs
        assert lhs >= rhs

    def test_build_order_matters_for_equality(self) -> None:
        """Test build identifiers are compared in order."""
        assert parse("1.0.0+a.b") != parse("1.0.0+b.a")

    def test_leading_zeros_normalize(self) -> None:
        """Test numeric identifiers equal by value."""
        assert parse("1.0.0-rc.01") == parse("1.0.0-rc.1")
        assert parse("1.0.0-rc.-0") == parse("1.0.0-rc.0")

    def test_negative_prerelease_number_sorts_first(self) -> None:
        """Test ``rc.-1`` is numeric and precedes ``rc.0``."""
        version = parse("1.0.0-rc.-1")

        assert version.prerelease == (AlphanumericIdentifier("rc"), NumericIdentifier(-1))
        assert version < parse("1.0.0-rc.0")
        assert Version(1, prerelease="rc.-1") == version

    def test_hash_consistent_with_equality(self) -> None:
        """Test equal versions hash alike."""
        assert hash(parse("1.0")) == hash(Version(1, 0, 0))
        assert len({parse("1"), parse("1.0.0"), parse("1.0.0+x")}) == 2

    def test_comparison_with_other_types(self) -> None:
        """Test strings are never equal and cannot be ordered."""
        version = parse("1.0.0")

        assert version != "1.0.0"
        with pytest.raises(TypeError):
            version < "2.0.0"  # noqa: B015

    def test_sorted_uses_precedence(self) -> None:
        """Test sorted() orders by precedence, not text."""
        result = sorted([parse("1.10.0"), parse("1.2.0"), parse("1.2.0-rc")])
        assert [str(v) for v in result] == ["1.2.0-rc", "1.2.0", "1.10.0"]


@pytest.mark.unit
class TestImmutabilityAndRendering:
    """Tests for immutability, str/repr, and round-trips."""

    def test_frozen(self) -> None:
        """Test fields cannot be reassigned."""
        version = parse("1.0.0")
        with pytest.raises(AttributeError):
            version.major = 2  # type: ignore[misc]

    def test_str_and_repr(self) -> None:
        """Test str() is canonical and repr() wraps it."""
        version = parse("1.2-beta")

        assert str(version) == "1.2.0-beta"
        assert repr(version) == "Version('1.2.0-beta')"

    @pytest.mark.parametrize(
        "version",
        [
            Version(0),
            Version(1, 2, 3, prerelease="alpha.1"),
            Version(1, 2, 3, build="-.0"),
            Version(10, 0, 7, prerelease="0.a-b", build="exp.sha.5114f85"),
            Version(1, prerelease=(NumericIdentifier(0),)),
            Version(1, prerelease=(NumericIdentifier(-1),)),
        ],
        ids=str,
    )
    def test_round_trip(self, version: Version) -> None:
        """Test the canonical string parses back to an equal version."""
        restored = parse(str(version))

        assert restored == version
        assert restored.build == version.build

    def test_pickle_and_copy(self) -> None:
        """Test pickling and deep copies preserve the version."""
        version = parse("1.0.0-rc.1+build.5")

        assert pickle.loads(pickle.dumps(version)) == version
        assert copy.deepcopy(version) == version
