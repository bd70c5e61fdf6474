from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .matrix import KeyMatrix


@dataclass(frozen=True)
class SolveResult:
    cipher_name: str
    plaintext: str
    key: KeyMatrix
    decryption_key: KeyMatrix

    # Ranked (digram, count) pairs the ciphertext hypotheses were taken from
    digrams: list[tuple[str, int]] = field(default_factory=list)
    guess: str = ""

    # Chi-squared distance from English letter frequencies; lower is better
    score: float = 0.0

    # For transparency / debugging (why this was chosen)
    notes: str = ""

    meta: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "cipher_name": self.cipher_name,
            "plaintext": self.plaintext,
            "key": repr(self.key),
            "decryption_key": repr(self.decryption_key),
            "digrams": list(self.digrams),
            "guess": self.guess,
            "score": self.score,
            "notes": self.notes,
            "meta": dict(self.meta),
        }
