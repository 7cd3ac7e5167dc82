"""Line sources backing the response tables."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Protocol, Union

import requests


class SourceUnavailable(Exception):
    """A source could not produce its lines."""


class LineSource(Protocol):
    name: str

    def read_lines(self) -> List[str]:
        ...


def split_lines(text: str) -> List[str]:
    """Split text the way a buffered line reader would.

    ``\\n``, ``\\r\\n`` and ``\\r`` all terminate a line, and a terminator at
    the very end does not produce an extra empty line.
    """
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


@dataclass(frozen=True)
class FileSource:
    path: Path
    encoding: str = "utf-8"

    @property
    def name(self) -> str:
        return str(self.path)

    def read_lines(self) -> List[str]:
        try:
            with Path(self.path).open("r", encoding=self.encoding) as handle:
                text = handle.read()
        except (OSError, ValueError, LookupError) as exc:
            raise SourceUnavailable(f"{self.path}: {exc}") from exc
        return split_lines(text)


@dataclass(frozen=True)
class TextSource:
    text: str
    name: str = "<memory>"

    def read_lines(self) -> List[str]:
        return split_lines(self.text)


@dataclass(frozen=True)
class UrlSource:
    url: str
    timeout: float = 5.0

    @property
    def name(self) -> str:
        return self.url

    def read_lines(self) -> List[str]:
        try:
            resp = requests.get(self.url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise SourceUnavailable(f"{self.url}: {exc}") from exc
        return split_lines(resp.text)


SourceLike = Union[str, Path, LineSource]


def as_source(value: SourceLike, encoding: str = "utf-8", timeout: float = 5.0) -> LineSource:
    if isinstance(value, Path):
        return FileSource(value, encoding=encoding)
    if isinstance(value, str):
        if value.startswith(("http://", "https://")):
            return UrlSource(value, timeout=timeout)
        return FileSource(Path(value), encoding=encoding)
    return value
