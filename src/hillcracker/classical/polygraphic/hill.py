from __future__ import annotations

import logging
from typing import Callable, Optional

from hillcracker.classical.common import ALPHABET, parse_key_matrix
from hillcracker.core.config import AttackConfig
from hillcracker.core.errors import InvalidCiphertextError
from hillcracker.core.matrix import KeyMatrix
from hillcracker.core.registry import register_plugin
from hillcracker.core.results import SolveResult
from hillcracker.core.scoring import chi_squared_english, index_of_coincidence_az
from hillcracker.core.utils import normalize_az, normalize_ciphertext

from .codec import block_view, string_view
from .digrams import rank_digrams
from .solver import encrypt_block, solve_key

logger = logging.getLogger(__name__)

PAD_CHAR = "X"


def apply_key(text: str, key: KeyMatrix) -> str:
    """Multiply every digram of `text` by `key`. Encrypts or decrypts depending on the key."""
    blocks = block_view(text)
    return string_view([encrypt_block(b, key, key.modulus) for b in blocks])


def _check_alphabet(text: str, modulus: int) -> None:
    allowed = ALPHABET[:modulus]
    bad = sorted({ch for ch in text if ch not in allowed})
    if bad:
        raise InvalidCiphertextError(
            f"Ciphertext has characters outside the alphabet {allowed}: {''.join(bad)!r}"
        )


class HillCipher:
    name = "hill"

    def encrypt(self, plaintext: str, key: str) -> str:
        k = parse_key_matrix(key)
        pt = normalize_az(plaintext)
        if len(pt) % 2:
            pt += PAD_CHAR
        return apply_key(pt, k)

    def decrypt(self, ciphertext: str, key: str) -> str:
        k = parse_key_matrix(key)
        # Fails with NoModularInverseError when the key cannot be undone
        return apply_key(normalize_az(ciphertext), k.inverse())

    def crack(
        self,
        ciphertext: str,
        config: Optional[AttackConfig] = None,
        *,
        progress: Optional[Callable[[int], None]] = None,
    ) -> SolveResult:
        """
        Frequency attack: assume the top ciphertext digrams are encryptions of
        the digrams in config.guess, brute-force a key consistent with that,
        then decrypt everything with its inverse.
        """
        config = config or AttackConfig()
        m = config.modulus

        ct = normalize_ciphertext(ciphertext)
        ranked = rank_digrams(ct)
        _check_alphabet(ct, m)
        logger.info("Ranked %d distinct digrams over %d letters", len(ranked), len(ct))

        top = ranked[: config.top_digrams]
        cipher_blocks = [block_view(dg)[0] for dg, _ in top]
        plain_blocks = block_view(config.guess)
        logger.debug("Ciphertext hypotheses: %s", [dg for dg, _ in top])

        enc_key = solve_key(
            plain_blocks,
            cipher_blocks,
            m,
            invertible_only=config.invertible_only,
            workers=config.workers,
            time_limit=config.time_limit,
            progress=progress,
        )
        dec_key = enc_key.inverse()
        logger.info("Encryption key %r, decryption key %r", enc_key, dec_key)

        plaintext = apply_key(ct, dec_key)

        return SolveResult(
            cipher_name=self.name,
            plaintext=plaintext,
            key=enc_key,
            decryption_key=dec_key,
            digrams=top,
            guess=config.guess,
            score=chi_squared_english(plaintext),
            notes=f"Hill 2x2 mod {m}, guess={config.guess}, top {len(top)} digrams",
            meta={
                "modulus": m,
                "ioc": index_of_coincidence_az(plaintext),
                "distinct_digrams": len(ranked),
            },
        )


register_plugin(HillCipher())
