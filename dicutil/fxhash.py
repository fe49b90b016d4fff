"""Fx hash: a fast, non-cryptographic 64-bit hash working a word at a time.

Byte input is read as little-endian words.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

ROTATE = 5
SEED64 = 0x517CC1B727220A95
_MASK64 = (1 << 64) - 1
_WORDS = struct.Struct("<Q")


def _require(value: int, bits: int, name: str) -> int:
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{name} must be an unsigned {bits}-bit integer, got {value}")
    return value


def _rotate_left(value: int, amount: int) -> int:
    return ((value << amount) | (value >> (64 - amount))) & _MASK64


def hash_word(hash_value: int, word: int) -> int:
    """Mix one 64-bit ``word`` into ``hash_value`` and return the new state."""
    _require(hash_value, 64, "hash_value")
    _require(word, 64, "word")
    return ((_rotate_left(hash_value, ROTATE) ^ word) * SEED64) & _MASK64


def write64(hash_value: int, data: bytes) -> int:
    """Mix ``data`` into ``hash_value``: 8-byte words, then a 4, 2 and 1 byte tail."""
    data = bytes(data)
    full = len(data) - len(data) % 8
    for (word,) in _WORDS.iter_unpack(data[:full]):
        hash_value = hash_word(hash_value, word)
    rest = data[full:]
    for width in (4, 2, 1):
        if len(rest) >= width:
            hash_value = hash_word(hash_value, int.from_bytes(rest[:width], "little"))
            rest = rest[width:]
    return hash_value


@dataclass
class FxHasher64:
    """Streaming Fx hasher; starts from a zero state."""

    state: int = 0

    def finish(self) -> int:
        return self.state

    def write(self, data: bytes) -> None:
        self.state = write64(self.state, data)

    def write_u8(self, value: int) -> None:
        self.state = hash_word(self.state, _require(value, 8, "value"))

    def write_u16(self, value: int) -> None:
        self.state = hash_word(self.state, _require(value, 16, "value"))

    def write_u32(self, value: int) -> None:
        self.state = hash_word(self.state, _require(value, 32, "value"))

    def write_u64(self, value: int) -> None:
        self.state = hash_word(self.state, _require(value, 64, "value"))

    def write_usize(self, value: int) -> None:
        self.state = hash_word(self.state, _require(value, 64, "value"))