"""Rendering classified words into the four output formats."""

import json
import logging

from naming_clt.errors import UnsupportedOutputOptionError
from naming_clt.mappers import DIRECT_MAPPERS, JSON_MAPPERS, Mapper
from naming_clt.naming_case import NamingCase

logger = logging.getLogger(__name__)


class Convertor:
    """Answers the ``--output`` option for a list of classified words.

    Target formats always appear in the order the options were given,
    repeats included.
    """

    def __init__(self, options: list[str], cases: list[NamingCase]) -> None:
        """Store the output options and the words to render."""
        for option in options:
            if option not in DIRECT_MAPPERS:
                raise UnsupportedOutputOptionError(option)
        self.options = list(options)
        self.cases = list(cases)
        logger.debug(
            "Rendering %d words into %d formats", len(self.cases), len(self.options)
        )

    def _select_mappers(self, mappers: dict[str, Mapper]) -> list[Mapper]:
        return [mappers[option] for option in self.options]

    def _render(self, case: NamingCase, mappers: list[Mapper], sep: str) -> str:
        return sep.join(f(case) for f in mappers)

    def to_lines(self) -> str:
        """Render one line per word.

        Output looks like::

            <origin1> <first target format> <second target format> ...
            <origin2> <first target format> <second target format> ...
        """
        mappers = self._select_mappers(DIRECT_MAPPERS)
        return "\n".join(
            f"{case} {self._render(case, mappers, ' ')}" for case in self.cases
        )

    def to_json(self) -> str:
        """Render all words as one JSON document.

        Output looks like::

            {"result":[{"origin":"a_a","camel":"aA",...},...]}
        """
        mappers = self._select_mappers(JSON_MAPPERS)
        items = []
        for case in self.cases:
            fields = [f'"origin":{json.dumps(case.origin)}']
            fields.extend(f(case) for f in mappers)
            items.append("{" + ",".join(fields) + "}")
        return '{"result":[' + ",".join(items) + "]}"

    def to_regex(self) -> str:
        """Render one line per word with the formats as an OR regex.

        Output looks like::

            <origin1> aA|a_a|a-a
        """
        mappers = self._select_mappers(DIRECT_MAPPERS)
        return "\n".join(
            f"{case} {self._render(case, mappers, '|')}" for case in self.cases
        )

    def to_regex_json(self) -> str:
        """Render all words as one JSON document holding OR regexes.

        Output looks like::

            {"result":[{"origin":"a_a","regex":"aA|a_a|AA"},...]}
        """
        mappers = self._select_mappers(DIRECT_MAPPERS)
        items = [
            "{"
            f'"origin":{json.dumps(case.origin)},'
            f'"regex":{json.dumps(self._render(case, mappers, "|"))}'
            "}"
            for case in self.cases
        ]
        return '{"result":[' + ",".join(items) + "]}"
