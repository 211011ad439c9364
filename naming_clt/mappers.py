"""Renderer tables mapping output options to conversion functions."""

import json
from collections.abc import Callable

from naming_clt.naming_case import CaseKind, NamingCase
from naming_clt.render_case import JOINERS
from naming_clt.split_words import split_words
from naming_clt.style_tag import StyleTag

Mapper = Callable[[NamingCase], str]

TARGET_KINDS: dict[str, CaseKind] = {
    StyleTag.SCREAMING_SNAKE.value: CaseKind.SCREAMING_SNAKE,
    StyleTag.SNAKE.value: CaseKind.SNAKE,
    StyleTag.KEBAB.value: CaseKind.KEBAB,
    StyleTag.CAMEL.value: CaseKind.CAMEL,
    StyleTag.PASCAL.value: CaseKind.PASCAL,
}


def convert(case: NamingCase, target: CaseKind) -> str:
    """Respell a classified word in the target naming case."""
    return JOINERS[target](split_words(case))


def _direct_mapper(target: CaseKind) -> Mapper:
    def mapper(case: NamingCase) -> str:
        return convert(case, target)

    return mapper


def _json_mapper(target: CaseKind) -> Mapper:
    def mapper(case: NamingCase) -> str:
        return f"{json.dumps(target.value)}:{json.dumps(convert(case, target))}"

    return mapper


# value only, for line and regex output
DIRECT_MAPPERS: dict[str, Mapper] = {
    tag: _direct_mapper(kind) for tag, kind in TARGET_KINDS.items()
}

# "field":"value" fragments, for json output
JSON_MAPPERS: dict[str, Mapper] = {
    tag: _json_mapper(kind) for tag, kind in TARGET_KINDS.items()
}
