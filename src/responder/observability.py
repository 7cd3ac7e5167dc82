"""Reply record schema enforcement."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from jsonschema import Draft7Validator

PATH_KEYWORD = "keyword"
PATH_FALLBACK = "fallback"

RECORD_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": [
        "path",
        "response",
        "keyword_hit",
        "default_index",
        "words_scanned",
        "generated_at",
    ],
    "properties": {
        "path": {"type": "string", "enum": [PATH_KEYWORD, PATH_FALLBACK]},
        "response": {"type": "string"},
        "keyword_hit": {"type": ["string", "null"]},
        "default_index": {"type": ["integer", "null"], "minimum": 0},
        "words_scanned": {"type": "integer", "minimum": 0},
        "generated_at": {"type": "string", "format": "date-time"},
    },
    "allOf": [
        {
            "if": {"properties": {"path": {"const": PATH_KEYWORD}}},
            "then": {
                "properties": {
                    "keyword_hit": {"type": "string"},
                    "default_index": {"type": "null"},
                }
            },
        },
        {
            "if": {"properties": {"path": {"const": PATH_FALLBACK}}},
            "then": {
                "properties": {
                    "keyword_hit": {"type": "null"},
                    "default_index": {"type": "integer"},
                }
            },
        },
    ],
}

_validator = Draft7Validator(RECORD_SCHEMA)


def validate_record(payload: Dict[str, Any]) -> None:
    errors = sorted(_validator.iter_errors(payload), key=lambda e: list(e.path))
    if errors:
        messages = ", ".join(error.message for error in errors)
        raise ValueError(f"response record validation failed: {messages}")


@dataclass
class ResponseRecord:
    path: str
    response: str
    words_scanned: int
    keyword_hit: Optional[str] = None
    default_index: Optional[int] = None
    generated_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def to_dict(self) -> Dict[str, Any]:
        payload = {
            "path": self.path,
            "response": self.response,
            "keyword_hit": self.keyword_hit,
            "default_index": self.default_index,
            "words_scanned": self.words_scanned,
            "generated_at": self.generated_at,
        }
        validate_record(payload)
        return payload
