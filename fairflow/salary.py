"""Salary obfuscation and the program's unit constants."""

from __future__ import annotations

LAMPORTS_PER_SOL = 1_000_000_000
ANCHOR_DISCRIMINATOR = 8
U16_MAX = 0xFFFF


def encrypt_decrypt_salary(key: int, salary: int) -> int:
    """XOR a 16-bit salary with a 16-bit key; applying it twice restores the salary."""
    for name, value in (("key", key), ("salary", salary)):
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= U16_MAX:
            raise ValueError(f"{name} must be an unsigned 16-bit integer, got {value!r}")
    return salary ^ key