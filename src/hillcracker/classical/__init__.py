from __future__ import annotations

def register_all() -> None:
    from .polygraphic import hill  # noqa: F401
