from __future__ import annotations

from collections import Counter

from hillcracker.classical.common import is_az
from hillcracker.core.errors import InvalidCiphertextError

from .codec import BLOCK_SIZE


def _check_text(text: str) -> None:
    if len(text) % BLOCK_SIZE != 0:
        raise InvalidCiphertextError(
            f"Ciphertext length {len(text)} is odd; digram analysis needs whole blocks."
        )
    bad = sorted({ch for ch in text if not is_az(ch)})
    if bad:
        raise InvalidCiphertextError(f"Ciphertext contains non A-Z characters: {''.join(bad)!r}")


def count_digrams(text: str) -> Counter[str]:
    """Count digrams at offsets 0, 2, 4, ... (non-overlapping)."""
    _check_text(text)
    return Counter(text[i:i + BLOCK_SIZE] for i in range(0, len(text), BLOCK_SIZE))


def rank_digrams(text: str) -> list[tuple[str, int]]:
    """
    Digrams ordered by count, most frequent first.
    Equal counts fall back to alphabetical order so the ranking is stable.
    """
    counts = count_digrams(text)
    return sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))


def top_digrams(text: str, k: int) -> list[tuple[str, int]]:
    if k < 1:
        raise ValueError("k must be at least 1.")
    return rank_digrams(text)[:k]
