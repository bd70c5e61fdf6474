from __future__ import annotations

from hillcracker.core.matrix import KeyMatrix

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
A_ORD = ord("A")
Z_ORD = ord("Z")


def is_az(ch: str) -> bool:
    o = ord(ch)
    return A_ORD <= o <= Z_ORD


def parse_four_ints(key: str) -> tuple[int, int, int, int]:
    """
    Parse keys like: "3,3,2,5" or "3 3 2 5" or "3,3;2,5" or "[3, 3; 2, 5]".
    Returns (a, b, c, d) in row-major order.
    """
    raw = key.strip().strip("[]")
    for sep in (";", ":", " "):
        raw = raw.replace(sep, ",")
    parts = [p for p in raw.split(",") if p]
    if len(parts) != 4:
        raise ValueError("Expected key format like 'a,b,c,d' (e.g., '3,3,2,5').")
    try:
        a, b, c, d = (int(p) for p in parts)
    except ValueError as e:
        raise ValueError(f"Key entries must be integers, got '{key}'.") from e
    return a, b, c, d


def parse_key_matrix(key: str, modulus: int = 26) -> KeyMatrix:
    """Parse a key string into a KeyMatrix with entries reduced mod modulus."""
    km = KeyMatrix(*parse_four_ints(key), modulus=modulus)
    km.reduce_modulo(modulus)
    return km
