"""Tests for naming case predicates and classification."""

import pytest

from naming_clt.case_predicates import (
    is_camel,
    is_kebab,
    is_pascal,
    is_screaming_snake,
    is_snake,
)
from naming_clt.naming_case import CaseKind, NamingCase
from naming_clt.which_case import from_hungarian_notation, which_case

ALL_PREDICATES = [is_screaming_snake, is_snake, is_kebab, is_camel, is_pascal]


def test_screaming_snake() -> None:
    """Verify upper-case words with underscores are screaming snake."""
    assert is_screaming_snake("SCREAMING_SNAKE")
    assert is_screaming_snake("HTTP2")
    assert is_screaming_snake("A")
    assert not is_screaming_snake("123_456")
    assert not is_screaming_snake("Screaming_Snake")


def test_snake_and_kebab() -> None:
    """Verify separator alphabets for snake and kebab case."""
    assert is_snake("snake_case")
    assert is_snake("a1_b2")
    assert not is_snake("kebab-case")
    assert is_kebab("kebab-case")
    assert not is_kebab("snake_case")
    assert not is_kebab("Kebab-Case")


def test_camel_and_pascal() -> None:
    """Verify camel and pascal differ only by the first letter."""
    assert is_camel("camelCase")
    assert is_camel("word")
    assert not is_camel("PascalCase")
    assert not is_camel("camel_case")
    assert is_pascal("PascalCase")
    assert is_pascal("HTTPServer")
    assert not is_pascal("camelCase")
    assert not is_pascal("Pascal-Case")


@pytest.mark.parametrize("word", ["", "-invalid_", "with space", "ünïcode", "a.b"])
def test_predicates_reject_without_raising(word: str) -> None:
    """Verify empty and out-of-alphabet words are rejected by every predicate."""
    assert not any(f(word) for f in ALL_PREDICATES)


@pytest.mark.parametrize("word", ["a_b", "a-b", "A_B", "a__b", "x-y-z"])
def test_separator_classes_are_disjoint(word: str) -> None:
    """Verify at most one separator-based predicate holds."""
    matches = [f(word) for f in (is_screaming_snake, is_snake, is_kebab)]
    assert matches.count(True) <= 1


def test_which_case_each_variant() -> None:
    """Verify every case shape is tagged with its own variant."""
    assert which_case("SCREAMING_SNAKE") == NamingCase(
        CaseKind.SCREAMING_SNAKE, "SCREAMING_SNAKE"
    )
    assert which_case("snake_case") == NamingCase(CaseKind.SNAKE, "snake_case")
    assert which_case("kebab-case") == NamingCase(CaseKind.KEBAB, "kebab-case")
    assert which_case("camelCase") == NamingCase(CaseKind.CAMEL, "camelCase")
    assert which_case("PascalCase") == NamingCase(CaseKind.PASCAL, "PascalCase")


def test_which_case_precedence() -> None:
    """Verify ambiguous words take the first matching case."""
    # snake, kebab and camel all accept a single lower-case word
    assert which_case("word").kind is CaseKind.SNAKE
    # screaming snake and pascal both accept a single upper-case letter
    assert which_case("A").kind is CaseKind.SCREAMING_SNAKE
    assert which_case("Word").kind is CaseKind.PASCAL


def test_which_case_keeps_origin() -> None:
    """Verify the payload is the word as captured."""
    case = which_case("myHTTPServer")
    assert case.kind is CaseKind.CAMEL
    assert str(case) == "myHTTPServer"


def test_which_case_rejects_unclassifiable() -> None:
    """Verify a word matching no case is a caller error."""
    with pytest.raises(ValueError, match="invalid"):
        which_case("-invalid_")


def test_from_hungarian_notation() -> None:
    """Verify the type prefix is stripped and the rest is pascal case."""
    assert from_hungarian_notation("intPageSize") == NamingCase(
        CaseKind.PASCAL, "PageSize"
    )
    assert from_hungarian_notation("i2Count") == NamingCase(CaseKind.PASCAL, "Count")


def test_from_hungarian_notation_without_prefix() -> None:
    """Verify a word without an upper-case letter is classified as is."""
    assert from_hungarian_notation("count") == NamingCase(CaseKind.SNAKE, "count")
