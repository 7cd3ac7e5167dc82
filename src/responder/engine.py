"""
Response engine: keyword lookup with a random default reply.

Input words are scanned in whatever order the caller's collection iterates.
For a ``set`` that order is unspecified, so when several words are mapped to
different responses the one returned is not fixed. No ordering is imposed
here; callers that need a stable tie-break should pass an ordered sequence.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, Iterable, Optional

from .config import ResponderConfig
from .defaults import DefaultResponseList
from .keywords import KeyedResponseTable
from .observability import PATH_FALLBACK, PATH_KEYWORD, ResponseRecord
from .sources import SourceLike, as_source

logger = logging.getLogger(__name__)

RESPONSES_FILE = "responses.txt"
DEFAULTS_FILE = "default.txt"


class ResponseEngine:
    """
    Owns the keyword table, the default list and one random source.

    Both tables are loaded once here and never change. Unreadable sources
    leave an empty keyword table or the single built-in default; construction
    does not raise for them.
    """

    def __init__(
        self,
        responses_source: SourceLike = RESPONSES_FILE,
        defaults_source: SourceLike = DEFAULTS_FILE,
        rng: Optional[random.Random] = None,
        encoding: str = "utf-8",
        url_timeout: float = 5.0,
    ) -> None:
        self._keywords = KeyedResponseTable.load(
            as_source(responses_source, encoding=encoding, timeout=url_timeout)
        )
        self._defaults = DefaultResponseList.load(
            as_source(defaults_source, encoding=encoding, timeout=url_timeout)
        )
        self._rng = rng if rng is not None else random.Random()

    @classmethod
    def from_config(cls, config: ResponderConfig, rng: Optional[random.Random] = None) -> "ResponseEngine":
        if rng is None and config.seed is not None:
            rng = random.Random(config.seed)
        return cls(
            config.responses_path,
            config.defaults_path,
            rng=rng,
            encoding=config.encoding,
            url_timeout=config.url_timeout_sec,
        )

    @property
    def keyword_table(self) -> KeyedResponseTable:
        return self._keywords

    @property
    def default_responses(self) -> DefaultResponseList:
        return self._defaults

    @property
    def diagnostics(self) -> Dict[str, str]:
        found = {}
        if self._keywords.diagnostic:
            found["responses"] = self._keywords.diagnostic
        if self._defaults.diagnostic:
            found["defaults"] = self._defaults.diagnostic
        return found

    def respond(self, words: Iterable[str]) -> ResponseRecord:
        """Pick a reply for ``words`` and describe how it was chosen."""
        words_scanned = 0
        for word in words:
            words_scanned += 1
            response = self._keywords.lookup(word)
            if response is not None:
                logger.debug("keyword hit %r", word)
                return ResponseRecord(
                    path=PATH_KEYWORD,
                    response=response,
                    words_scanned=words_scanned,
                    keyword_hit=word,
                )

        index, response = self._defaults.pick(self._rng)
        logger.debug("no keyword in %d words scanned, default #%d", words_scanned, index)
        return ResponseRecord(
            path=PATH_FALLBACK,
            response=response,
            words_scanned=words_scanned,
            default_index=index,
        )

    def generate_response(self, words: Iterable[str]) -> str:
        return self.respond(words).response
