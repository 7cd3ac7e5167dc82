"""
Responder
Keyword table lookup with a random default reply when nothing matches.
"""

from .defaults import DefaultResponseList, FALLBACK_RESPONSE
from .engine import ResponseEngine
from .keywords import KeyedResponseTable
from .sources import FileSource, SourceUnavailable, TextSource, UrlSource

__all__ = [
    'DefaultResponseList',
    'FALLBACK_RESPONSE',
    'FileSource',
    'KeyedResponseTable',
    'ResponseEngine',
    'SourceUnavailable',
    'TextSource',
    'UrlSource',
]
