from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Union

from .errors import CiphertextReadError

_AZ_ONLY_RE = re.compile(r"[^A-Z]+")


def normalize_ciphertext(s: str) -> str:
    """Drop line breaks and uppercase. Anything else is left for validation."""
    return s.replace("\r", "").replace("\n", "").upper()


def normalize_az(s: str) -> str:
    """Keep only A-Z, uppercase."""
    if s is None:
        return ""
    return _AZ_ONLY_RE.sub("", f"{s}".upper())


def chunked(seq: Iterable, size: int):
    buf = []
    for x in seq:
        buf.append(x)
        if len(buf) == size:
            yield buf
            buf = []
    if buf:
        yield buf


def read_ciphertext(path: Union[str, Path]) -> str:
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CiphertextReadError(f"Could not read ciphertext from {path}: {e}") from e
    return normalize_ciphertext(raw)


def write_plaintext(path: Union[str, Path], text: str) -> None:
    Path(path).write_text(text, encoding="utf-8")
