"""Predicates for recognizing the naming case of a raw word."""

import re

SCREAMING_SNAKE_RE = re.compile(r"[A-Z0-9_]*[A-Z][A-Z0-9_]*")
SNAKE_RE = re.compile(r"[a-z0-9_]+")
KEBAB_RE = re.compile(r"[a-z0-9-]+")
CAMEL_RE = re.compile(r"[a-z][A-Za-z0-9]*")
PASCAL_RE = re.compile(r"[A-Z][A-Za-z0-9]*")


def is_screaming_snake(word: str) -> bool:
    """Check for upper-case letters, digits and underscores with a letter."""
    return SCREAMING_SNAKE_RE.fullmatch(word) is not None


def is_snake(word: str) -> bool:
    """Check for lower-case letters, digits and underscores only."""
    return SNAKE_RE.fullmatch(word) is not None


def is_kebab(word: str) -> bool:
    """Check for lower-case letters, digits and hyphens only."""
    return KEBAB_RE.fullmatch(word) is not None


def is_camel(word: str) -> bool:
    """Check for a lower-case first letter followed by letters and digits."""
    return CAMEL_RE.fullmatch(word) is not None


def is_pascal(word: str) -> bool:
    """Check for an upper-case first letter followed by letters and digits."""
    return PASCAL_RE.fullmatch(word) is not None
