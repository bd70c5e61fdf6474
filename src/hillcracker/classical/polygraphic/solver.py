from __future__ import annotations

import concurrent.futures
import logging
import time
from typing import Callable, Optional, Sequence

from hillcracker.core.errors import KeyNotFoundError, SearchTimeoutError
from hillcracker.core.matrix import KeyMatrix, RowVector

logger = logging.getLogger(__name__)


def encrypt_block(block: RowVector, key: KeyMatrix, modulus: int) -> RowVector:
    """Row vector times key, reduced mod modulus."""
    out = block.multiply(key)
    out.reduce_modulo(modulus)
    return out


def _search_slice(
    a_values: Sequence[int],
    plaintext_blocks: Sequence[RowVector],
    targets: frozenset[tuple[int, ...]],
    modulus: int,
    invertible_only: bool,
    time_limit: Optional[float],
    progress: Optional[Callable[[int], None]] = None,
) -> Optional[tuple[int, int, int, int]]:
    """
    Try every (a, b, c, d) with a drawn from a_values, in row-major order.
    Returns the first satisfying tuple, or None.
    """
    deadline = None if time_limit is None else time.monotonic() + time_limit
    # One key is mutated across all trials; each trial finishes before the next update.
    key = KeyMatrix(0, 0, 0, 0, modulus)
    span = range(modulus)

    for a in a_values:
        for b in span:
            if deadline is not None and time.monotonic() > deadline:
                raise SearchTimeoutError(f"Key search exceeded {time_limit:.1f}s (stopped at a={a}, b={b}).")
            for c in span:
                for d in span:
                    key.update(a, b, c, d)
                    if invertible_only and not key.is_invertible():
                        continue
                    if all(encrypt_block(pb, key, modulus).as_tuple() in targets for pb in plaintext_blocks):
                        return key.as_tuple()
        if progress is not None:
            progress(1)
    return None


def _partition(modulus: int, workers: int) -> list[list[int]]:
    n = min(workers, modulus)
    return [list(range(modulus * i // n, modulus * (i + 1) // n)) for i in range(n)]


def solve_key(
    plaintext_blocks: Sequence[RowVector],
    ciphertext_blocks: Sequence[RowVector],
    modulus: int = 26,
    *,
    invertible_only: bool = False,
    workers: int = 1,
    time_limit: Optional[float] = None,
    progress: Optional[Callable[[int], None]] = None,
) -> KeyMatrix:
    """
    Brute-force the 2x2 key: the first (a, b, c, d) in row-major order for
    which every plaintext block encrypts into the ciphertext block set.

    Matching is by set membership, not by position, so any key mapping the
    plaintext guesses into the observed digrams is accepted.

    Raises KeyNotFoundError when all modulus**4 candidates fail.
    """
    if not plaintext_blocks:
        raise ValueError("At least one plaintext block is required.")
    targets = frozenset(block.as_tuple() for block in ciphertext_blocks)
    blocks = list(plaintext_blocks)

    logger.info(
        "Searching %d candidate keys: %d plaintext blocks, %d ciphertext targets, workers=%d",
        modulus ** 4, len(blocks), len(targets), workers,
    )
    started = time.perf_counter()

    if workers <= 1:
        found = _search_slice(range(modulus), blocks, targets, modulus, invertible_only, time_limit, progress)
    else:
        found = _solve_parallel(blocks, targets, modulus, invertible_only, workers, time_limit)

    elapsed = time.perf_counter() - started
    if found is None:
        logger.info("Key search exhausted after %.2fs", elapsed)
        raise KeyNotFoundError(
            f"No key in the {modulus ** 4} candidates maps every plaintext block into the ciphertext set."
        )

    logger.info("Key %s found after %.2fs", found, elapsed)
    return KeyMatrix(*found, modulus=modulus)


def _solve_parallel(
    blocks: list[RowVector],
    targets: frozenset[tuple[int, ...]],
    modulus: int,
    invertible_only: bool,
    workers: int,
    time_limit: Optional[float],
) -> Optional[tuple[int, int, int, int]]:
    slices = _partition(modulus, workers)
    logger.debug("Partitioned a-range into %d slices", len(slices))

    with concurrent.futures.ProcessPoolExecutor(max_workers=len(slices)) as executor:
        futures = [
            executor.submit(_search_slice, s, blocks, targets, modulus, invertible_only, time_limit)
            for s in slices
        ]
        # Slices are contiguous and ordered, so the smallest match equals the sequential answer.
        matches = [f.result() for f in futures]

    found = [m for m in matches if m is not None]
    return min(found) if found else None
