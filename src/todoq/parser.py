"""Query parser for todoq input lines.

Grammar (``SP`` is one or more spaces or tabs, ``SP*`` zero or more)::

    query       ::= add | done | search
    add         ::= "add" SP description SP* tags
    description ::= '"' *( lowercase | '-' | whitespace ) '"'
    tags        ::= [ tag *( SP tag ) ]
    tag         ::= "#" word
    word        ::= 1*( lowercase | '-' )
    done        ::= "done" SP 1*digit
    search      ::= "search" [ SP token *( SP token ) ]
    token       ::= tag | word

Matching is anchored at the start of the line and takes the longest prefix
that fits the grammar; whatever follows that prefix is ignored. Lists stop
at the first element that does not fit.
"""

from __future__ import annotations

import re

from todoq.models import MAX_INDEX, Description, Index, SearchWord, Tag
from todoq.query import Add, Done, Query, QuerySyntaxError, Search, SearchParams


class QueryParser:
    """Parse single lines into ``Add``, ``Done`` or ``Search`` queries.

    Parsing is pure: the same line always yields an equal query, and no
    state is kept between calls.
    """

    # Separators: spaces and tabs only
    _SEP = re.compile(r"[ \t]+")
    _OPT_SEP = re.compile(r"[ \t]*")

    # add "description" #tag #tag
    _ADD = re.compile(r'add[ \t]+"([a-z\s-]*)"')
    _TAG = re.compile(r"#([a-z-]+)")

    # done 42
    _DONE = re.compile(r"done[ \t]+([0-9]+)")

    # search word #tag ...
    _SEARCH = re.compile(r"search")
    _TOKEN = re.compile(r"#?[a-z-]+")

    def parse(self, line: str) -> Query:
        """Parse one line.

        Args:
            line: A single input line without its trailing newline.

        Returns:
            The parsed query.

        Raises:
            QuerySyntaxError: If the line matches none of the queries, or a
                ``done`` index does not fit in 64 bits.
        """
        for parse in (self._parse_add, self._parse_done, self._parse_search):
            query = parse(line)
            if query is not None:
                return query
        raise QuerySyntaxError(line)

    def _parse_add(self, line: str) -> Add | None:
        match = self._ADD.match(line)
        if not match:
            return None

        pos = self._OPT_SEP.match(line, match.end()).end()
        raw_tags = self._separated(self._TAG, line, pos)
        return Add(
            description=Description(match.group(1)),
            tags=[Tag(raw[1:]) for raw in raw_tags],
        )

    def _parse_done(self, line: str) -> Done | None:
        match = self._DONE.match(line)
        if not match:
            return None

        value = int(match.group(1))
        if value > MAX_INDEX:
            raise QuerySyntaxError(line, reason="index out of range")
        return Done(Index(value))

    def _parse_search(self, line: str) -> Search | None:
        match = self._SEARCH.match(line)
        if not match:
            return None

        tokens: list[str] = []
        sep = self._SEP.match(line, match.end())
        if sep:
            tokens = self._separated(self._TOKEN, line, sep.end())

        # Words and tags go into separate buckets, each keeping its own order
        words = [SearchWord(token) for token in tokens if not token.startswith("#")]
        tags = [Tag(token[1:]) for token in tokens if token.startswith("#")]
        return Search(SearchParams(words=words, tags=tags))

    def _separated(self, element: re.Pattern[str], line: str, pos: int) -> list[str]:
        """Collect ``element`` matches separated by ``SP``, starting at ``pos``."""
        match = element.match(line, pos)
        if not match:
            return []

        found = [match.group(0)]
        while True:
            sep = self._SEP.match(line, match.end())
            if not sep:
                break
            match = element.match(line, sep.end())
            if not match:
                break
            found.append(match.group(0))
        return found


_parser = QueryParser()


def parse_query(line: str) -> Query:
    """Parse one line with the default parser."""
    return _parser.parse(line)
