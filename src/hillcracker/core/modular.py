from __future__ import annotations

import math

from .errors import NoModularInverseError


def normalize(x: int, m: int) -> int:
    """Canonical residue of x in [0, m), negative inputs included."""
    if m <= 0:
        raise ValueError(f"Modulus must be positive, got {m}.")
    return ((x % m) + m) % m


def is_unit(x: int, m: int) -> bool:
    return math.gcd(normalize(x, m), m) == 1


def inverse_by_scan(x: int, m: int) -> int:
    """
    Modular inverse of x under mod m, found by scanning [0, m).
    Raises NoModularInverseError if gcd(x, m) != 1.
    """
    x = normalize(x, m)
    for inv in range(m):
        if normalize(x * inv, m) == 1:
            return inv
    raise NoModularInverseError(f"No modular inverse for {x} mod {m}.")
