from __future__ import annotations


class HillCrackerError(Exception):
    """Base class for every failure raised by hillcracker."""


class CiphertextReadError(HillCrackerError, OSError):
    pass


class InvalidCiphertextError(HillCrackerError, ValueError):
    pass


class DimensionMismatchError(HillCrackerError, ValueError):
    pass


class UnsupportedOperationError(HillCrackerError, TypeError):
    pass


class InvalidIndexError(HillCrackerError, IndexError):
    pass


class NoModularInverseError(HillCrackerError, ValueError):
    """The determinant shares a factor with the modulus."""


class KeyNotFoundError(HillCrackerError, LookupError):
    """The key search exhausted its space without a satisfying candidate."""


class SearchTimeoutError(HillCrackerError, TimeoutError):
    pass
