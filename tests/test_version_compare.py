"""Tests for the loose version comparator."""

from itertools import product

import pytest

from release_checker.models import Ordering
from release_checker.utils.version_compare import (
    classify_update,
    compare_versions,
    has_version_digits,
    is_newer,
    version_segments,
)

SAMPLE_VERSIONS = ["", "0", "0.9", "1", "1.0.0", "1.0.1", "v1.2.0", "1.2.0-beta", "1.10", "2.0", "10.0.0.1"]


@pytest.mark.parametrize(
    ("current", "latest", "ordering", "update_available"),
    [
        ("1.0.0", "1.0.1", Ordering.LESS, True),
        ("2.0", "1.9.9", Ordering.GREATER, False),
        ("v1.2.0", "1.2.0", Ordering.EQUAL, False),
        ("1.2.0-beta", "1.2.0", Ordering.EQUAL, False),
        ("", "1.0.0", Ordering.LESS, True),
        ("1.2", "1.2.0.0", Ordering.EQUAL, False),
        ("1.9", "1.10", Ordering.LESS, True),
        ("1.2.3+build.7", "1.2.3", Ordering.EQUAL, False),
    ],
)
def test_compare_versions_examples(current: str, latest: str, ordering: Ordering, update_available: bool) -> None:
    result = compare_versions(current, latest)
    assert result.ordering == ordering
    assert result.update_available is update_available


@pytest.mark.parametrize(
    ("version", "segments"),
    [
        ("", ["0"]),
        ("latest", ["0"]),
        ("v1.2.3", ["1", "2", "3"]),
        ("release-4.5", ["4", "5"]),
        ("1.2.0-beta.3", ["1", "2", "0"]),
        ("1..2", ["1", "0", "2"]),
        ("1.x.3", ["1", "0", "3"]),
        ("3.1rc1", ["3", "1"]),
        ("  2.0  ", ["2", "0"]),
        ("01.007", ["1", "7"]),
    ],
)
def test_version_segments(version: str, segments: list[str]) -> None:
    assert version_segments(version) == segments


def test_very_long_segments_compare_without_error() -> None:
    huge = "9" * 5000
    assert compare_versions("1." + huge, "1.0").ordering == Ordering.GREATER
    assert compare_versions("1.0", "1." + huge).update_available
    assert compare_versions(huge, "0" + huge).ordering == Ordering.EQUAL
    assert compare_versions(huge, "1" + huge).ordering == Ordering.LESS
    assert classify_update("1." + huge, "2.0") == "major"


def test_leading_zeros_are_ignored() -> None:
    assert compare_versions("1.02", "1.2").ordering == Ordering.EQUAL
    assert compare_versions("1.09", "1.10").ordering == Ordering.LESS


def test_has_version_digits() -> None:
    assert has_version_digits("v1")
    assert not has_version_digits("nightly")
    assert not has_version_digits("")


def test_arbitrary_text_never_raises() -> None:
    for text in ["not a version", "-", "+", "...", "v", "🙂", "\n"]:
        result = compare_versions(text, "0")
        assert result.ordering == Ordering.EQUAL


def test_reflexive() -> None:
    for v in SAMPLE_VERSIONS:
        assert compare_versions(v, v).ordering == Ordering.EQUAL


def test_antisymmetric() -> None:
    opposite = {Ordering.LESS: Ordering.GREATER, Ordering.GREATER: Ordering.LESS, Ordering.EQUAL: Ordering.EQUAL}
    for a, b in product(SAMPLE_VERSIONS, repeat=2):
        assert compare_versions(b, a).ordering == opposite[compare_versions(a, b).ordering]


def test_transitive() -> None:
    for a, b, c in product(SAMPLE_VERSIONS, repeat=3):
        if (
            compare_versions(a, b).ordering == Ordering.LESS
            and compare_versions(b, c).ordering == Ordering.LESS
        ):
            assert compare_versions(a, c).ordering == Ordering.LESS


@pytest.mark.parametrize(
    ("current", "latest", "expected"),
    [
        ("1.0.0", "2.0.0", "major"),
        ("1.0.0", "1.1.0", "minor"),
        ("1.0.0", "1.0.1", "patch"),
        ("1.0.0.1", "1.0.0.2", "patch"),
        ("1.0.0", "1.0.0", "up-to-date"),
        ("2.0.0", "1.0.0", "up-to-date"),
        ("v1.0", "1.0.0-rc1", "up-to-date"),
    ],
)
def test_classify_update(current: str, latest: str, expected: str) -> None:
    assert classify_update(current, latest) == expected


def test_is_newer() -> None:
    assert is_newer("1.0.0", "v1.0.1")
    assert not is_newer("1.0.1", "1.0.0")
    assert not is_newer("1.0.0", "1.0.0-beta")
