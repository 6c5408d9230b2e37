"""Cookie values and an ordered cookie collection."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Iterator, overload

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class Cookie:
    """A single HTTP cookie."""

    name: str = ""
    value: str = ""
    domain: str = ""
    include_subdomains: bool = False
    path: str = "/"
    https_only: bool = False
    expires: datetime = field(default=EPOCH)


class Cookies:
    """An ordered list of cookies plus whether they are URL-encoded when sent."""

    def __init__(self, cookies: Cookie | Iterable[Cookie] = (), encode: bool = True) -> None:
        self.encode = encode
        if isinstance(cookies, Cookie):
            self._cookies = [cookies]
        else:
            self._cookies = list(cookies)

    def append(self, cookie: Cookie) -> None:
        """Add a cookie to the end."""
        self._cookies.append(cookie)

    def pop(self) -> Cookie:
        """Remove and return the last cookie."""
        if not self._cookies:
            raise IndexError("pop from empty Cookies")
        return self._cookies.pop()

    @overload
    def __getitem__(self, index: int) -> Cookie: ...

    @overload
    def __getitem__(self, index: slice) -> list[Cookie]: ...

    def __getitem__(self, index):
        return self._cookies[index]

    def __setitem__(self, index: int, cookie: Cookie) -> None:
        self._cookies[index] = cookie

    def __iter__(self) -> Iterator[Cookie]:
        return iter(self._cookies)

    def __len__(self) -> int:
        return len(self._cookies)

    def __bool__(self) -> bool:
        return bool(self._cookies)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cookies):
            return NotImplemented
        return self.encode == other.encode and self._cookies == other._cookies

    def __repr__(self) -> str:
        return f"Cookies({self._cookies!r}, encode={self.encode!r})"