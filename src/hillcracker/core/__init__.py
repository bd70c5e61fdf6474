from .config import AttackConfig
from .matrix import KeyMatrix, Matrix, RowVector
from .modular import normalize
from .results import SolveResult
from .registry import register_plugin, decrypt_known, encrypt_known, get_plugin

__all__ = [
    "AttackConfig",
    "KeyMatrix",
    "Matrix",
    "RowVector",
    "normalize",
    "SolveResult",
    "register_plugin",
    "decrypt_known",
    "encrypt_known",
    "get_plugin",
]
