"""Fallback replies parsed from paragraph-format text."""

from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional, Sequence, Tuple

from .sources import LineSource, SourceUnavailable

logger = logging.getLogger(__name__)

FALLBACK_RESPONSE = "Could you elaborate on that?"


def parse_paragraphs(lines: Iterable[str]) -> List[str]:
    """Join each run of non-blank lines with single spaces, one reply per run."""
    responses: List[str] = []
    current: List[str] = []
    for line in lines:
        if line.strip():
            current.append(line)
        elif current:
            responses.append(" ".join(current))
            current = []
    if current:
        responses.append(" ".join(current))
    return responses


class DefaultResponseList:
    """Ordered fallback replies. Never empty."""

    def __init__(self, responses: Sequence[str], diagnostic: Optional[str] = None) -> None:
        self._responses: Tuple[str, ...] = tuple(responses) or (FALLBACK_RESPONSE,)
        self.diagnostic = diagnostic

    @classmethod
    def load(cls, source: LineSource) -> "DefaultResponseList":
        try:
            lines = source.read_lines()
        except SourceUnavailable as exc:
            logger.error("Error reading default responses %s: %s", source.name, exc)
            return cls([], diagnostic=str(exc))
        responses = parse_paragraphs(lines)
        if not responses:
            logger.info("No default responses in %s, using fallback", source.name)
        return cls(responses)

    def pick(self, rng: random.Random) -> Tuple[int, str]:
        index = rng.randrange(len(self._responses))
        return index, self._responses[index]

    def responses(self) -> Tuple[str, ...]:
        return self._responses

    def __getitem__(self, index: int) -> str:
        return self._responses[index]

    def __len__(self) -> int:
        return len(self._responses)
