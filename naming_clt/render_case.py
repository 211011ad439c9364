"""Joining lower-case words into a target naming case."""

from collections.abc import Callable

from naming_clt.naming_case import CaseKind


def capitalize(word: str) -> str:
    """Upper-case the first letter of an already lower-case word."""
    return word[:1].upper() + word[1:]


def join_screaming_snake(words: list[str]) -> str:
    """Join words as SCREAMING_SNAKE_CASE."""
    return "_".join(words).upper()


def join_snake(words: list[str]) -> str:
    """Join words as snake_case."""
    return "_".join(words)


def join_kebab(words: list[str]) -> str:
    """Join words as kebab-case."""
    return "-".join(words)


def join_camel(words: list[str]) -> str:
    """Join words as camelCase."""
    if not words:
        return ""
    return words[0] + "".join(capitalize(w) for w in words[1:])


def join_pascal(words: list[str]) -> str:
    """Join words as PascalCase."""
    return "".join(capitalize(w) for w in words)


JOINERS: dict[CaseKind, Callable[[list[str]], str]] = {
    CaseKind.SCREAMING_SNAKE: join_screaming_snake,
    CaseKind.SNAKE: join_snake,
    CaseKind.KEBAB: join_kebab,
    CaseKind.CAMEL: join_camel,
    CaseKind.PASCAL: join_pascal,
}
