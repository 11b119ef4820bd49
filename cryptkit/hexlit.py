"""Decode hex-encoded strings into bytes, tolerating whitespace."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import chain

__all__ = ["decode", "length"]

_WHITESPACE = frozenset(b" \r\n\t")


def _nibbles(data: bytes) -> Iterator[int]:
    """Yield the value of every hex digit in ``data``, skipping whitespace."""
    for raw in data:
        if raw in _WHITESPACE:
            continue
        if 0x30 <= raw <= 0x39:
            yield raw - 0x30
        elif 0x41 <= raw <= 0x46:
            yield raw - 0x37
        elif 0x61 <= raw <= 0x66:
            yield raw - 0x57
        elif raw < 0x80:
            raise ValueError("Encountered invalid ASCII character")
        else:
            raise ValueError("Encountered non-ASCII character")


def _as_bytes(string: str | bytes | bytearray) -> bytes:
    if isinstance(string, str):
        return string.encode("utf-8")
    return bytes(string)


def _decode_one(string: str | bytes | bytearray) -> Iterator[int]:
    """Yield the bytes encoded by a single hex string."""
    nibbles = _nibbles(_as_bytes(string))
    for high in nibbles:
        low = next(nibbles, None)
        if low is None:
            raise ValueError("Odd number of hex characters")
        yield (high << 4) | low


def _decode_all(strings: Iterable[str | bytes | bytearray]) -> Iterator[int]:
    return chain.from_iterable(_decode_one(s) for s in strings)


def length(*args: str | bytes | bytearray) -> int:
    """Return the number of bytes that ``decode(*args)`` would produce."""
    return sum(1 for _ in _decode_all(args))


def decode(*args: str | bytes | bytearray) -> bytes:
    """Decode a sequence of hex strings into one ``bytes`` value.

    Spaces, tabs, carriage returns and newlines are ignored.  Each string
    must hold an even number of hex digits.
    """
    return bytes(_decode_all(args))