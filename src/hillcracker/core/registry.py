from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from .config import AttackConfig
from .results import SolveResult


class CipherPlugin(Protocol):
    name: str

    def encrypt(self, plaintext: str, key: str) -> str:
        ...

    def decrypt(self, ciphertext: str, key: str) -> str:
        ...

    def crack(
        self,
        ciphertext: str,
        config: Optional[AttackConfig] = None,
        *,
        progress: Optional[Callable[[int], None]] = None,
    ) -> SolveResult:
        ...


@dataclass
class _PluginEntry:
    plugin: CipherPlugin


_PLUGINS: dict[str, _PluginEntry] = {}


def register_plugin(plugin: CipherPlugin) -> None:
    key = plugin.name.lower().strip()
    if not key:
        raise ValueError("Plugin must have a non-empty name.")
    _PLUGINS[key] = _PluginEntry(plugin=plugin)


def list_plugins() -> list[str]:
    return sorted(_PLUGINS.keys())


def get_plugin(cipher_name: str) -> CipherPlugin:
    name = cipher_name.lower().strip()
    if name not in _PLUGINS:
        raise ValueError(f"Unknown cipher '{cipher_name}'. Available: {', '.join(list_plugins())}")
    return _PLUGINS[name].plugin


def decrypt_known(cipher_name: str, ciphertext: str, key: Optional[str]) -> str:
    if key is None:
        raise ValueError("This decrypt operation requires --key.")
    return get_plugin(cipher_name).decrypt(ciphertext, key)


def encrypt_known(cipher_name: str, plaintext: str, key: Optional[str]) -> str:
    if key is None:
        raise ValueError("This encrypt operation requires --key.")
    return get_plugin(cipher_name).encrypt(plaintext, key)
