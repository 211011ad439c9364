"""Reading input text from files or stdin."""

import logging
import sys
from pathlib import Path

from naming_clt.errors import NoInputError

logger = logging.getLogger(__name__)


def cut_at_eof(text: str, eof: str | None) -> str:
    """Drop everything from the first occurrence of the logical EOF string."""
    if not eof:
        return text
    index = text.find(eof)
    return text if index < 0 else text[:index]


def read_texts(files: list[Path] | None, eof: str | None = None) -> list[str]:
    """Read one text per file, or a single text from stdin when no file is given."""
    if not files:
        if sys.stdin.isatty():
            raise NoInputError
        logger.debug("Reading from stdin")
        return [cut_at_eof(sys.stdin.read(), eof)]

    texts = []
    for path in files:
        logger.debug("Reading %s", path)
        texts.append(cut_at_eof(path.read_text(encoding="utf-8"), eof))
    return texts
