"""Polynomial hashes over rotated sequences and strings."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

HASH_BASE = 31
HASH_MODULUS = 1_000_000_009

_WORD = 1 << 64
_HALF_WORD = 1 << 63


def _wrap64(value: int) -> int:
    """Reduce ``value`` to a signed 64-bit integer with two's-complement wrap."""
    return (value + _HALF_WORD) % _WORD - _HALF_WORD


def _trunc_mod(value: int, modulus: int) -> int:
    """Remainder whose sign follows the dividend."""
    remainder = abs(value) % modulus
    return remainder if value >= 0 else -remainder


def _as_integer(value: Any) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return ord(value)
    return int(value)


def hash_sequence(values: Sequence[Any]) -> int:
    """Hash a sequence of numbers or characters.

    The sequence is rotated left by half its length, each element is
    truncated to an integer (characters by their code) and folded in with
    ``h = (h * 31 + value) mod 1000000009``.
    """
    k = len(values) // 2
    rotated = list(values[k:]) + list(values[:k])
    hash_value = 0
    for item in rotated:
        step = _wrap64(_wrap64(hash_value * HASH_BASE) + _as_integer(item))
        hash_value = _trunc_mod(step, HASH_MODULUS)
    return hash_value


def hash_string(text: str | bytes) -> int:
    """Hash a string byte by byte.

    The bytes are rotated right by half the length; each signed byte code is
    added as ``h += (h * 31 + code) mod 1000000009`` in 64-bit arithmetic.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    n = len(data)
    k = n // 2
    rotated = data[n - k:] + data[:n - k]
    hash_value = 0
    for byte in rotated:
        code = byte - 256 if byte > 127 else byte
        step = _wrap64(_wrap64(hash_value * HASH_BASE) + code)
        hash_value = _wrap64(hash_value + _trunc_mod(step, HASH_MODULUS))
    return hash_value