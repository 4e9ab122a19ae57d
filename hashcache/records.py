"""Validation, hashing and generation of ``key value`` text records."""

from __future__ import annotations

import random
import string

MAX_LENGTH = 10
_HASH_MODULUS = 10**9 + 7
_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits


def is_valid_record(line: str, max_length: int = MAX_LENGTH) -> bool:
    """Check that ``line`` is ``key value``: one space, both parts non-empty and short."""
    if not line or line.count(" ") != 1:
        return False
    key, value = line.split(" ")
    if not key or not value:
        return False
    return len(key) <= max_length and len(value) <= max_length


def is_valid_key(key: str) -> bool:
    """Check that ``key`` has at most ten characters and no spaces."""
    return len(key) <= MAX_LENGTH and " " not in key


def string_hash(text: str) -> int:
    """Sum of the UTF-16 code units of ``text`` modulo 10**9 + 7."""
    data = text.encode("utf-16-le", "surrogatepass")
    total = 0
    for unit in memoryview(data).cast("H"):
        total = (total + unit) % _HASH_MODULUS
    return total


def random_token(length: int = MAX_LENGTH, rng: random.Random | None = None) -> str:
    """Return ``length`` random characters drawn from the first 61 alphanumerics."""
    if length < 0:
        raise ValueError("length must not be negative")
    generator = rng if rng is not None else random.Random()
    return "".join(_ALPHABET[generator.randrange(61)] for _ in range(length))