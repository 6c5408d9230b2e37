"""Small value types used to configure a request."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import IntEnum

_UINT16_MAX = 0xFFFF


@dataclass(init=False)
class Range:
    """A byte range; a missing start means 0 and a missing end means open-ended."""

    resume_from: int
    finish_at: int

    def __init__(self, resume_from: int | None = None, finish_at: int | None = None) -> None:
        self.resume_from = 0 if resume_from is None else resume_from
        self.finish_at = -1 if finish_at is None else finish_at

    def str(self) -> str:
        """Render as ``start-end``, leaving out negative bounds."""
        start = "" if self.resume_from < 0 else f"{self.resume_from}"
        end = "" if self.finish_at < 0 else f"{self.finish_at}"
        return f"{start}-{end}"

    def __str__(self) -> str:
        return self.str()


class MultiRange:
    """Several byte ranges sent in one request."""

    def __init__(self, ranges: Iterable[Range]) -> None:
        self.ranges = tuple(ranges)

    def str(self) -> str:
        """Render the ranges separated by a comma and a space."""
        return ", ".join(r.str() for r in self.ranges)

    def __str__(self) -> str:
        return self.str()

    def __iter__(self) -> Iterator[Range]:
        return iter(self.ranges)

    def __len__(self) -> int:
        return len(self.ranges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MultiRange):
            return NotImplemented
        return self.ranges == other.ranges

    def __repr__(self) -> str:
        return f"MultiRange({list(self.ranges)!r})"


class HttpVersionCode(IntEnum):
    """HTTP protocol versions a request may ask for."""

    VERSION_NONE = 0
    VERSION_1_0 = 1
    VERSION_1_1 = 2
    VERSION_2_0 = 3
    VERSION_2_0_TLS = 4
    VERSION_2_0_PRIOR_KNOWLEDGE = 5
    VERSION_3_0 = 6


@dataclass
class HttpVersion:
    """The HTTP version to use; by default the transport decides."""

    code: HttpVersionCode = HttpVersionCode.VERSION_NONE


@dataclass
class File:
    """A file to upload, optionally sent under another file name."""

    filepath: str
    overriden_filename: str = ""

    def __post_init__(self) -> None:
        self.filepath = os.fspath(self.filepath)

    def has_overriden_filename(self) -> bool:
        return bool(self.overriden_filename)


def _as_file(item: File | str | os.PathLike) -> File:
    return item if isinstance(item, File) else File(item)


class Files:
    """An ordered list of files to upload."""

    def __init__(self, files: File | str | Iterable[File | str] = ()) -> None:
        if isinstance(files, (File, str, os.PathLike)):
            files = [files]
        self._files = [_as_file(f) for f in files]

    def append(self, file: File | str) -> None:
        self._files.append(_as_file(file))

    def pop(self) -> File:
        if not self._files:
            raise IndexError("pop from empty Files")
        return self._files.pop()

    def __getitem__(self, index: int) -> File:
        return self._files[index]

    def __iter__(self) -> Iterator[File]:
        return iter(self._files)

    def __len__(self) -> int:
        return len(self._files)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Files):
            return NotImplemented
        return self._files == other._files

    def __repr__(self) -> str:
        return f"Files({self._files!r})"


@dataclass(frozen=True)
class Bearer:
    """A bearer token for the Authorization header."""

    token: str


@dataclass(frozen=True)
class LocalPortRange:
    """How many local ports to try, starting at the requested local port."""

    value: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _UINT16_MAX:
            raise ValueError(f"local port range must be within 0..{_UINT16_MAX}, got {self.value}")

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value


@dataclass(frozen=True)
class ReserveSize:
    """Bytes to reserve up front for the response body."""

    size: int = 0

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError(f"reserve size must not be negative, got {self.size}")


@dataclass
class Verbose:
    """Whether the transport prints verbose diagnostics."""

    verbose: bool = True


class CertInfo:
    """The text entries describing one certificate."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries = list(entries)

    def append(self, entry: str) -> None:
        self._entries.append(entry)

    def pop(self) -> str:
        if not self._entries:
            raise IndexError("pop from empty CertInfo")
        return self._entries.pop()

    def __getitem__(self, index: int) -> str:
        return self._entries[index]

    def __setitem__(self, index: int, entry: str) -> None:
        self._entries[index] = entry

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CertInfo):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"CertInfo({self._entries!r})"