"""Classification of raw words into exactly one naming case."""

import re
from collections.abc import Callable

from naming_clt.case_predicates import (
    is_camel,
    is_kebab,
    is_pascal,
    is_screaming_snake,
    is_snake,
)
from naming_clt.naming_case import CaseKind, NamingCase

# Declaration order is the tie-break: "abc" is snake, kebab and camel at once.
CASE_PREDICATES: list[tuple[CaseKind, Callable[[str], bool]]] = [
    (CaseKind.SCREAMING_SNAKE, is_screaming_snake),
    (CaseKind.SNAKE, is_snake),
    (CaseKind.KEBAB, is_kebab),
    (CaseKind.CAMEL, is_camel),
    (CaseKind.PASCAL, is_pascal),
]

HUNGARIAN_PREFIX_RE = re.compile(r"^[^A-Z]+(?=[A-Z])")


def which_case(word: str) -> NamingCase:
    """Tag a word with the first naming case whose predicate it satisfies."""
    for kind, predicate in CASE_PREDICATES:
        if predicate(word):
            return NamingCase(kind, word)
    msg = f"Word does not match any naming case: {word!r}"
    raise ValueError(msg)


def from_hungarian_notation(word: str) -> NamingCase:
    """Strip the type prefix of a camel word and tag the rest as pascal case.

    ``intPageSize`` becomes ``PageSize``. A word without an upper-case letter
    has no prefix to strip and is classified as it is.
    """
    stripped = HUNGARIAN_PREFIX_RE.sub("", word, count=1)
    if stripped == word:
        return which_case(word)
    return NamingCase(CaseKind.PASCAL, stripped)
