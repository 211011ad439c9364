"""Data model for a word tagged with its naming case."""

from dataclasses import dataclass
from enum import Enum


class CaseKind(Enum):
    """The closed set of naming cases a word can be classified as.

    Values are the field names used in JSON output.
    """

    SCREAMING_SNAKE = "screaming_snake"
    SNAKE = "snake"
    KEBAB = "kebab"
    CAMEL = "camel"
    PASCAL = "pascal"


@dataclass(frozen=True)
class NamingCase:
    """A captured word together with the naming case it was classified as."""

    kind: CaseKind
    origin: str  # word as captured, never normalized

    def __str__(self) -> str:
        """Return the original word."""
        return self.origin
