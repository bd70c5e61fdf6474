from __future__ import annotations

from dataclasses import dataclass
from string import ascii_uppercase as ALPHABET
from typing import Optional

DEFAULT_MODULUS = 26
DEFAULT_TOP_DIGRAMS = 10

# Most frequent English digrams: TH HE IN ER AN
DEFAULT_GUESS = "THHEINERAN"


@dataclass(frozen=True)
class AttackConfig:
    modulus: int = DEFAULT_MODULUS
    top_digrams: int = DEFAULT_TOP_DIGRAMS
    guess: str = DEFAULT_GUESS
    workers: int = 1
    time_limit: Optional[float] = None
    invertible_only: bool = False

    def __post_init__(self) -> None:
        if not 2 <= self.modulus <= len(ALPHABET):
            raise ValueError(f"Modulus must be between 2 and {len(ALPHABET)}, got {self.modulus}.")
        if self.top_digrams < 1:
            raise ValueError("top_digrams must be at least 1.")
        if self.workers < 1:
            raise ValueError("workers must be at least 1.")
        if self.time_limit is not None and self.time_limit <= 0:
            raise ValueError("time_limit must be positive when given.")

        guess = self.guess.strip().upper()
        if not guess or len(guess) % 2 != 0:
            raise ValueError("Plaintext guess must be a non-empty, even-length string of digrams.")
        allowed = ALPHABET[: self.modulus]
        bad = sorted({ch for ch in guess if ch not in allowed})
        if bad:
            raise ValueError(f"Plaintext guess has letters outside the alphabet {allowed}: {''.join(bad)}")
        object.__setattr__(self, "guess", guess)
