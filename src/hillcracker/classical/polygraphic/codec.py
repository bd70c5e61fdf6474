from __future__ import annotations

from typing import Iterable, Sequence

from hillcracker.classical.common import A_ORD, is_az
from hillcracker.core.errors import InvalidCiphertextError
from hillcracker.core.matrix import RowVector
from hillcracker.core.utils import chunked

BLOCK_SIZE = 2


def letter_to_digit(ch: str) -> int:
    if len(ch) != 1 or not is_az(ch):
        raise InvalidCiphertextError(f"Expected a single letter A-Z, got {ch!r}.")
    return ord(ch) - A_ORD


def digit_to_letter(d: int) -> str:
    if not 0 <= d < 26:
        raise InvalidCiphertextError(f"Digit {d} has no letter in A-Z.")
    return chr(d + A_ORD)


def text_to_digits(text: str) -> list[int]:
    return [letter_to_digit(ch) for ch in text]


def digits_to_text(digits: Iterable[int]) -> str:
    return "".join(digit_to_letter(d) for d in digits)


def block_view(text: str, size: int = BLOCK_SIZE) -> list[RowVector]:
    """Split A-Z text into consecutive row vectors of `size` digits."""
    if len(text) % size != 0:
        raise InvalidCiphertextError(
            f"Text length {len(text)} is not a multiple of the block size {size}."
        )
    return [RowVector(block) for block in chunked(text_to_digits(text), size)]


def string_view(blocks: Sequence[RowVector]) -> str:
    return "".join(digits_to_text(block) for block in blocks)
