"""Capturing identifier-shaped words out of free text."""

import logging
import re

from naming_clt.errors import InvalidLocatorError

logger = logging.getLogger(__name__)

DEFAULT_LOCATOR = r"\s{}\s"
PLACEHOLDER = "{}"
WORD_PATTERN = r"(?P<word>[A-Za-z0-9_\-]+)"


def compile_locator(locator: str) -> re.Pattern[str]:
    """Build the capture regex for a ``<prefix>{}<suffix>`` locator.

    The prefix is consumed and the suffix only looked ahead at, so two words
    separated by a single delimiter are both captured.
    """
    if locator.count(PLACEHOLDER) != 1:
        raise InvalidLocatorError(locator, 'expected exactly one "{}"')
    prefix, suffix = locator.split(PLACEHOLDER)
    try:
        return re.compile(f"(?:{prefix}){WORD_PATTERN}(?={suffix})")
    except re.error as exc:
        raise InvalidLocatorError(locator, str(exc)) from exc


class Captor:
    """Answers the ``--locator`` option."""

    def __init__(self, locators: list[str] | None = None) -> None:
        """Compile every locator, falling back to whitespace delimiters."""
        self.patterns = [compile_locator(loc) for loc in locators or [DEFAULT_LOCATOR]]

    def capture_words(self, texts: list[str]) -> list[str]:
        """Return unique captured words in first-seen order."""
        seen: dict[str, None] = {}
        for text in texts:
            padded = f" {text} "
            for pattern in self.patterns:
                for match in pattern.finditer(padded):
                    seen.setdefault(match.group("word"), None)
        logger.debug("Captured %d unique words", len(seen))
        return list(seen)
