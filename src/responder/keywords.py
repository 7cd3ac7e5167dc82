"""Keyword to response table parsed from block-format text."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional

from .sources import LineSource, SourceUnavailable

logger = logging.getLogger(__name__)

KEY_SEPARATOR = ", "


def _is_blank(line: str) -> bool:
    return not line.strip()


def parse_keyed_blocks(lines: Iterable[str]) -> Dict[str, str]:
    """
    Parse blocks of the form::

        sorry, sad
        It is ok.
        Really.

    A header line lists keywords separated by ``", "``; the following lines up
    to a blank line (or end of input) are joined with single spaces into the
    response. Later blocks overwrite earlier keywords.
    """
    table: Dict[str, str] = {}
    it = iter(lines)
    for line in it:
        if _is_blank(line):
            continue
        keys = line.split(KEY_SEPARATOR)
        # Trailing empty segments are not keywords; leading and inner ones are.
        while keys and keys[-1] == "":
            keys.pop()
        body = []
        # Shares the iterator, so the blank separator is consumed here.
        for body_line in it:
            if _is_blank(body_line):
                break
            body.append(body_line)
        response = " ".join(body)
        for key in keys:
            table[key.strip()] = response
    return table


class KeyedResponseTable:
    def __init__(self, entries: Mapping[str, str], diagnostic: Optional[str] = None) -> None:
        self._entries = MappingProxyType(dict(entries))
        self.diagnostic = diagnostic

    @classmethod
    def load(cls, source: LineSource) -> "KeyedResponseTable":
        try:
            lines = source.read_lines()
        except SourceUnavailable as exc:
            logger.error("Error reading keyword responses %s: %s", source.name, exc)
            return cls({}, diagnostic=str(exc))
        table = cls(parse_keyed_blocks(lines))
        logger.info("Loaded %d keywords from %s", len(table), source.name)
        return table

    def lookup(self, word: str) -> Optional[str]:
        return self._entries.get(word)

    def keywords(self) -> frozenset:
        return frozenset(self._entries)

    def entries(self) -> Dict[str, str]:
        return dict(self._entries)

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def __len__(self) -> int:
        return len(self._entries)
