"""Filtering captured words by the naming cases the user asked for."""

import logging
from collections.abc import Callable

from naming_clt.case_predicates import (
    is_camel,
    is_kebab,
    is_pascal,
    is_screaming_snake,
    is_snake,
)
from naming_clt.errors import ConflictingOptionsError
from naming_clt.naming_case import NamingCase
from naming_clt.style_tag import StyleTag
from naming_clt.which_case import from_hungarian_notation, which_case

logger = logging.getLogger(__name__)

FILTER_PREDICATES: list[tuple[str, Callable[[str], bool]]] = [
    (StyleTag.SCREAMING_SNAKE.value, is_screaming_snake),
    (StyleTag.SNAKE.value, is_snake),
    (StyleTag.KEBAB.value, is_kebab),
    (StyleTag.CAMEL.value, is_camel),
    (StyleTag.HUNGARIAN.value, is_camel),
    (StyleTag.PASCAL.value, is_pascal),
]


def has_hungarian_camel_conflict(options: list[str]) -> bool:
    """Check whether both hungarian notation and camel case were requested."""
    return StyleTag.HUNGARIAN.value in options and StyleTag.CAMEL.value in options


class Filter:
    """Answers the ``--filter`` option.

    Drops captured words whose format was not requested and turns the rest
    into ``NamingCase`` values.
    """

    def __init__(self, options: list[str]) -> None:
        """Validate the filter options."""
        if has_hungarian_camel_conflict(options):
            raise ConflictingOptionsError
        self.options = list(options)
        self.predicates = [f for opt, f in FILTER_PREDICATES if opt in self.options]

    def filter_words(self, words: list[str]) -> list[str]:
        """Keep the words matching at least one selected naming case."""
        kept = [w for w in words if any(f(w) for f in self.predicates)]
        logger.debug("Filter kept %d of %d words", len(kept), len(words))
        return kept

    def to_naming_cases(self, words: list[str]) -> list[NamingCase]:
        """Filter the words, then classify every survivor."""
        hungarian = StyleTag.HUNGARIAN.value in self.options
        cases = []
        for word in self.filter_words(words):
            if hungarian and is_camel(word):
                cases.append(from_hungarian_notation(word))
            else:
                cases.append(which_case(word))
        return cases
