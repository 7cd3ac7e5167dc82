"""Configuration loader for the response engine."""

from __future__ import annotations

import codecs
import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


@dataclass(frozen=True)
class ResponderConfig:
    responses_path: str
    defaults_path: str
    encoding: str
    seed: Optional[int]
    url_timeout_sec: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResponderConfig":
        seed = data.get("seed")
        encoding = data.get("encoding", "utf-8")
        try:
            codecs.lookup(encoding)
        except (LookupError, TypeError) as exc:
            raise ValueError(f"Unknown encoding in config: {encoding!r}") from exc
        return cls(
            responses_path=str(data.get("responses_path", "responses.txt")),
            defaults_path=str(data.get("defaults_path", "default.txt")),
            encoding=encoding,
            seed=int(seed) if seed is not None else None,
            url_timeout_sec=float(data.get("url_timeout_sec", 5.0)),
        )


ENV_MAP = {
    "responses_path": "RESPONDER_RESPONSES_PATH",
    "defaults_path": "RESPONDER_DEFAULTS_PATH",
    "encoding": "RESPONDER_ENCODING",
    "seed": "RESPONDER_SEED",
    "url_timeout_sec": "RESPONDER_URL_TIMEOUT_SEC",
}


def load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def merge_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
    merged = json.loads(json.dumps(config_data))  # deep copy via json

    for key, env_name in ENV_MAP.items():
        if env_name not in os.environ:
            continue
        value: Any = os.environ[env_name]
        if key == "seed":
            value = int(value)
        elif key == "url_timeout_sec":
            value = float(value)
        merged[key] = value

    return merged


def load_config(config_path: str | Path = "config/responder.defaults.yml") -> ResponderConfig:
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    data = load_yaml(path)
    data = merge_env_overrides(data)
    return ResponderConfig.from_dict(data)
