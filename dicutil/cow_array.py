"""Copy-on-write arrays of little-endian integers backed by dictionary bytes."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Iterator, Sequence
from typing import overload

_CODECS = {
    "i16": struct.Struct("<h"),
    "u32": struct.Struct("<I"),
}


def _codec(kind: str) -> struct.Struct:
    try:
        return _CODECS[kind]
    except KeyError:
        raise ValueError(
            f"unsupported element kind {kind!r}, expected one of {sorted(_CODECS)}"
        ) from None


def is_aligned(offset: int, alignment: int) -> bool:
    """Return True if ``offset`` is a multiple of the power-of-two ``alignment``."""
    if alignment <= 0 or alignment & (alignment - 1):
        raise ValueError(f"alignment must be a power of two, got {alignment}")
    return offset % alignment == 0


class CowArray(Sequence):
    """Integer array that reads from shared bytes until it is first modified."""

    __slots__ = ("_kind", "_codec", "_view", "_storage")

    def __init__(self, data: Iterable[int] = (), kind: str = "i16") -> None:
        self._kind = kind
        self._codec = _codec(kind)
        self._view: memoryview | None = None
        self._storage: list[int] | None = [self._checked(v) for v in data]

    @classmethod
    def from_owned(cls, data: Iterable[int], kind: str) -> CowArray:
        """Create an array that owns a copy of ``data``."""
        return cls(data, kind)

    @classmethod
    def from_bytes(cls, data: bytes, offset: int, size: int, kind: str) -> CowArray:
        """Create an array of ``size`` elements read from ``data`` at ``offset``.

        Aligned data is read in place; unaligned data is decoded into a copy.
        """
        codec = _codec(kind)
        if offset < 0 or size < 0:
            raise ValueError("offset and size must not be negative")
        end = offset + size * codec.size
        view = memoryview(data).cast("B")[offset:end]
        if len(view) != end - offset:
            raise ValueError(
                f"range {offset}..{end} is out of bounds for {len(data)} bytes"
            )
        array = cls.__new__(cls)
        array._kind = kind
        array._codec = codec
        if is_aligned(offset, codec.size):
            array._view = view
            array._storage = None
        else:
            array._view = None
            array._storage = [v for (v,) in codec.iter_unpack(view)]
        return array

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def is_owned(self) -> bool:
        """True once the array holds its own copy of the data."""
        return self._storage is not None

    def _checked(self, value: int) -> int:
        try:
            self._codec.pack(value)
        except struct.error as exc:
            raise ValueError(f"{value!r} does not fit in {self._kind}: {exc}") from None
        return value

    def set(self, offset: int, value: int) -> None:
        """Replace the element at ``offset``, copying the data first if shared."""
        value = self._checked(value)
        if offset < 0 or offset >= len(self):
            raise IndexError(f"index {offset} out of range for length {len(self)}")
        if self._storage is None:
            self._storage = [v for (v,) in self._codec.iter_unpack(self._view)]
            self._view = None
        self._storage[offset] = value

    def __len__(self) -> int:
        if self._storage is not None:
            return len(self._storage)
        return len(self._view) // self._codec.size

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> list[int]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]
        if self._storage is not None:
            return self._storage[index]
        length = len(self)
        if index < 0:
            index += length
        if not 0 <= index < length:
            raise IndexError("CowArray index out of range")
        return self._codec.unpack_from(self._view, index * self._codec.size)[0]

    def __iter__(self) -> Iterator[int]:
        if self._storage is not None:
            return iter(list(self._storage))
        return (v for (v,) in self._codec.iter_unpack(self._view))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (CowArray, list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"CowArray({list(self)!r}, kind={self._kind!r})"