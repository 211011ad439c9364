"""Single-character option codes selecting a naming case."""

from enum import Enum


class StyleTag(str, Enum):
    """Option code for filtering input words or choosing output formats."""

    SCREAMING_SNAKE = "S"
    SNAKE = "s"
    KEBAB = "k"
    CAMEL = "c"
    HUNGARIAN = "h"
    PASCAL = "p"


FILTER_TAGS = [tag.value for tag in StyleTag]

# Hungarian notation only changes how camel words are read, it is never rendered.
OUTPUT_TAGS = [tag.value for tag in StyleTag if tag is not StyleTag.HUNGARIAN]
