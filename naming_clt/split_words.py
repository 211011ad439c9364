"""Decomposition of a classified word into its lower-case parts."""

import re

from naming_clt.naming_case import CaseKind, NamingCase

UPPER_BOUNDARY_RE = re.compile(r"(?=[A-Z])")

SEPARATORS = {
    CaseKind.SCREAMING_SNAKE: "_",
    CaseKind.SNAKE: "_",
    CaseKind.KEBAB: "-",
}


def split_words(case: NamingCase) -> list[str]:
    """Split a word using the convention of its own naming case.

    Camel and pascal words break before every upper-case letter, so acronyms
    come apart letter by letter (``myHTTP`` -> ``my h t t p``).
    """
    separator = SEPARATORS.get(case.kind)
    if separator is not None:
        parts = case.origin.split(separator)
    else:
        parts = UPPER_BOUNDARY_RE.split(case.origin)
    # Leading, trailing or doubled separators leave empty parts behind.
    return [p.lower() for p in parts if p]
