"""Parsing helpers for raw HTTP headers and cookie-jar lines."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from dataclasses import dataclass, field
from datetime import timedelta
from enum import IntEnum

from cprkit.cookies import EPOCH, Cookie, Cookies

_TRAILING_WS = "\t\n\r "
_LEADING_WS = "\t "
_STATUS_PREFIX = re.compile(r"[^\t ]*[\t ][^\t ]*[\t ]")
_INTEGER_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_TIME_T_MIN = -(2**63)
_TIME_T_MAX = 2**63 - 1


class Header(MutableMapping[str, str]):
    """A case-insensitive header map, iterated in case-insensitive key order."""

    def __init__(self, data: Mapping[str, str] | Iterable[tuple[str, str]] | None = None, /, **kwargs: str) -> None:
        self._items: dict[str, tuple[str, str]] = {}
        if data is not None:
            self.update(data)
        if kwargs:
            self.update(kwargs)

    @staticmethod
    def _fold(key: object) -> str:
        if not isinstance(key, str):
            raise KeyError(key)
        return key.lower()

    def __getitem__(self, key: str) -> str:
        return self._items[self._fold(key)][1]

    def __setitem__(self, key: str, value: str) -> None:
        folded = self._fold(key)
        existing = self._items.get(folded)
        self._items[folded] = (existing[0] if existing else key, value)

    def __delitem__(self, key: str) -> None:
        folded = self._fold(key)
        if folded not in self._items:
            raise KeyError(key)
        self._items.pop(folded)

    def __iter__(self) -> Iterator[str]:
        for folded in sorted(self._items):
            yield self._items[folded][0]

    def __len__(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def __repr__(self) -> str:
        return f"Header({dict(self.items())!r})"


@dataclass
class ParsedHeader:
    """Headers of the last response block, with its status line and reason phrase."""

    header: Header = field(default_factory=Header)
    status_line: str = ""
    reason: str = ""


class _CookieField(IntEnum):
    DOMAIN = 0
    INCLUDE_SUBDOMAINS = 1
    PATH = 2
    HTTPS_ONLY = 3
    EXPIRES = 4
    NAME = 5
    VALUE = 6


def split(to_split: str, delimiter: str) -> list[str]:
    """Split on a single-character delimiter, dropping one trailing empty field."""
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    tokens = to_split.split(delimiter)
    if tokens[-1] == "":
        tokens.pop()
    return tokens


def is_true(s: str) -> bool:
    """Return whether the string equals "true", ignoring case."""
    return s.lower() == "true"


def timestamp_to_t(st: str) -> int:
    """Parse a leading decimal integer as a Unix timestamp."""
    match = _INTEGER_PREFIX.match(st)
    if match is None:
        raise ValueError(f"invalid timestamp: {st!r}")
    value = int(match.group(1))
    if not _TIME_T_MIN <= value <= _TIME_T_MAX:
        raise OverflowError(f"timestamp out of range: {st!r}")
    return value


def parse_cookies(raw_cookies: Iterable[str]) -> Cookies:
    """Build cookies from tab-separated cookie-jar lines."""
    cookies = Cookies()
    size = len(_CookieField)
    for line in raw_cookies:
        tokens = split(line, "\t")
        tokens.extend([""] * (size - len(tokens)))
        expires = timestamp_to_t(tokens[_CookieField.EXPIRES])
        cookies.append(
            Cookie(
                name=tokens[_CookieField.NAME],
                value=tokens[_CookieField.VALUE],
                domain=tokens[_CookieField.DOMAIN],
                include_subdomains=is_true(tokens[_CookieField.INCLUDE_SUBDOMAINS]),
                path=tokens[_CookieField.PATH],
                https_only=is_true(tokens[_CookieField.HTTPS_ONLY]),
                expires=EPOCH + timedelta(seconds=expires),
            )
        )
    return cookies


def parse_header(headers: str) -> ParsedHeader:
    """Parse raw response headers; each status line starts a fresh header map."""
    result = ParsedHeader()
    for line in headers.split("\n"):
        if line.startswith("HTTP/"):
            line = line.rstrip(_TRAILING_WS)
            result.status_line = line
            prefix = _STATUS_PREFIX.match(line)
            if prefix is not None:
                line = line[prefix.end():]
                result.reason = line
            result.header.clear()

        if line:
            name, colon, value = line.partition(":")
            if colon:
                result.header[name] = value.lstrip(_LEADING_WS).rstrip(_TRAILING_WS)
    return result


def secure_clear(buffer: bytearray) -> None:
    """Overwrite a mutable buffer with zeros, then empty it."""
    if not isinstance(buffer, bytearray):
        raise TypeError("secure_clear needs a bytearray")
    if not buffer:
        return
    buffer[:] = bytes(len(buffer))
    del buffer[:]