"""Text hashers used to pick badge colors.

Every hasher maps text to an unsigned 32-bit integer computed over the UTF-8
encoding of the text, so results are stable across processes and platforms.
"""

from __future__ import annotations

import hashlib
from typing import Callable, Protocol

from .errors import InvalidArgumentError

UINT32_MASK = 0xFFFFFFFF
DEFAULT_HASHER_NAME = "default"

_C1 = 0xCC9E2D51
_C2 = 0x1B873593


class Hasher(Protocol):
    def hash(self, text: str) -> int: ...


def _rotl32(value: int, count: int) -> int:
    return ((value << count) | (value >> (32 - count))) & UINT32_MASK


def _scramble(k: int) -> int:
    k = (k * _C1) & UINT32_MASK
    k = _rotl32(k, 15)
    return (k * _C2) & UINT32_MASK


def _fmix32(h: int) -> int:
    h ^= h >> 16
    h = (h * 0x85EBCA6B) & UINT32_MASK
    h ^= h >> 13
    h = (h * 0xC2B2AE35) & UINT32_MASK
    h ^= h >> 16
    return h


def murmur3_32(data: bytes, seed: int = 0) -> int:
    """MurmurHash3 x86_32 digest of ``data`` as an unsigned integer."""
    length = len(data)
    h = seed & UINT32_MASK
    body = length - (length % 4)

    for i in range(0, body, 4):
        h ^= _scramble(int.from_bytes(data[i : i + 4], "little"))
        h = _rotl32(h, 13)
        h = (h * 5 + 0xE6546B64) & UINT32_MASK

    tail = data[body:]
    if tail:
        h ^= _scramble(int.from_bytes(tail, "little"))

    h ^= length
    return _fmix32(h)


class DefaultHasher:
    """Cheap stable hash: a 4-byte BLAKE2b digest."""

    name = DEFAULT_HASHER_NAME

    def hash(self, text: str) -> int:
        digest = hashlib.blake2b(text.encode("utf-8"), digest_size=4).digest()
        return int.from_bytes(digest, "little")

    def __repr__(self) -> str:
        return "DefaultHasher()"


class Murmur3Hasher:
    name = "murmur3"

    def __init__(self, seed: int = 0) -> None:
        self.seed = seed & UINT32_MASK

    def hash(self, text: str) -> int:
        return murmur3_32(text.encode("utf-8"), self.seed)

    def __repr__(self) -> str:
        return f"Murmur3Hasher(seed={self.seed:#010x})"


HASHERS: dict[str, Callable[[int], Hasher]] = {
    DEFAULT_HASHER_NAME: lambda _seed: DefaultHasher(),
    Murmur3Hasher.name: Murmur3Hasher,
}


def list_hashers() -> list[str]:
    return sorted(HASHERS.keys())


def get_hasher(name: str | None = None, seed: int = 0) -> Hasher:
    if not name:
        name = DEFAULT_HASHER_NAME
    try:
        factory = HASHERS[name]
    except KeyError:
        raise InvalidArgumentError(f"Unknown hasher {name!r}; expected one of {list_hashers()}") from None
    return factory(seed)
